"""Tests for the IDNA codec adapter."""

from __future__ import annotations

import warnings

import idna
import pytest

from dnsname.domain.codec import DEFAULT_CODEC, CodecOptions, IdnaCodec


class TestCodecOptions:
    def test_defaults_disable_every_check(self) -> None:
        opts = CodecOptions()
        assert opts.check_hyphens is False
        assert opts.transitional is False
        assert opts.use_std3_ascii_rules is False
        assert opts.verify_dns_length is False

    def test_frozen(self) -> None:
        opts = CodecOptions()
        with pytest.raises(Exception):
            opts.check_hyphens = True  # type: ignore[misc]

    def test_default_codec_uses_defaults(self) -> None:
        assert DEFAULT_CODEC.options == CodecOptions()


class TestToAscii:
    def test_ascii_passthrough(self, codec: IdnaCodec) -> None:
        assert codec.to_ascii("www.example.com.") == "www.example.com."

    def test_lowercases(self, codec: IdnaCodec) -> None:
        assert codec.to_ascii("WWW.Example.COM") == "www.example.com"

    def test_unicode_label_to_punycode(self, codec: IdnaCodec) -> None:
        assert codec.to_ascii("bücher.example") == "xn--bcher-kva.example"

    def test_ideographic_full_stop_is_a_separator(self, codec: IdnaCodec) -> None:
        assert codec.to_ascii("bücher。example") == "xn--bcher-kva.example"

    def test_nontransitional_keeps_sharp_s(self, codec: IdnaCodec) -> None:
        assert codec.to_ascii("faß.de") == "xn--fa-hia.de"

    def test_transitional_flag_is_not_forwarded(self) -> None:
        codec = IdnaCodec(CodecOptions(transitional=True))
        with warnings.catch_warnings():
            warnings.simplefilter("error", DeprecationWarning)
            assert codec.to_ascii("faß.de") == "xn--fa-hia.de"

    def test_std3_off_passes_underscore(self, codec: IdnaCodec) -> None:
        assert codec.to_ascii("_dmarc.example") == "_dmarc.example"

    def test_std3_on_rejects_underscore(self) -> None:
        codec = IdnaCodec(CodecOptions(use_std3_ascii_rules=True))
        with pytest.raises(idna.IDNAError):
            codec.to_ascii("_dmarc.example")

    def test_hyphens_unchecked_by_default(self, codec: IdnaCodec) -> None:
        assert codec.to_ascii("-a-.example") == "-a-.example"

    def test_hyphens_checked_when_enabled(self) -> None:
        codec = IdnaCodec(CodecOptions(check_hyphens=True))
        with pytest.raises(idna.IDNAError):
            codec.to_ascii("-a-.example")

    def test_length_not_checked_by_default(self, codec: IdnaCodec) -> None:
        label = "x" * 100
        assert codec.to_ascii(label) == label

    def test_length_checked_when_enabled(self) -> None:
        codec = IdnaCodec(CodecOptions(verify_dns_length=True))
        with pytest.raises(idna.IDNAError):
            codec.to_ascii("x" * 64 + ".com")

    def test_length_check_allows_trailing_dot(self) -> None:
        codec = IdnaCodec(CodecOptions(verify_dns_length=True))
        assert codec.to_ascii("example.com.") == "example.com."

    def test_disallowed_symbol(self, codec: IdnaCodec) -> None:
        with pytest.raises(idna.IDNAError):
            codec.to_ascii("☃.example")

    def test_initial_combining_mark(self, codec: IdnaCodec) -> None:
        with pytest.raises(idna.IDNAError):
            codec.to_ascii("\u0301a.example")

    def test_valid_a_label_is_kept(self, codec: IdnaCodec) -> None:
        assert codec.to_ascii("xn--bcher-kva.example") == "xn--bcher-kva.example"

    def test_broken_a_label(self, codec: IdnaCodec) -> None:
        with pytest.raises(idna.IDNAError):
            codec.to_ascii("xn--abc-!.example")

    @pytest.mark.parametrize(
        "text",
        [
            "xn--.example",
            "xn--abc-.example",
            "xn--BCHER-KVA-.example",
            "xn---bbk.example",
        ],
    )
    def test_malformed_a_labels(self, codec: IdnaCodec, text: str) -> None:
        with pytest.raises(idna.IDNAError):
            codec.to_ascii(text)

    def test_uppercase_a_label_is_lowercased(self, codec: IdnaCodec) -> None:
        assert codec.to_ascii("XN--BCHER-KVA.example") == "xn--bcher-kva.example"

    def test_empty_labels_left_to_validation(self, codec: IdnaCodec) -> None:
        assert codec.to_ascii("a..b") == "a..b"
        assert codec.to_ascii("") == ""


class TestToUnicode:
    def test_ascii(self, codec: IdnaCodec) -> None:
        assert codec.to_unicode(b"www.example.com.") == "www.example.com."

    def test_decodes_a_labels(self, codec: IdnaCodec) -> None:
        assert codec.to_unicode(b"xn--bcher-kva.example") == "bücher.example"

    def test_undecodable_a_label_rendered_as_is(self, codec: IdnaCodec) -> None:
        assert codec.to_unicode(b"xn--abc-!.example") == "xn--abc-!.example"

    def test_empty_punycode_payload_rendered_as_is(self, codec: IdnaCodec) -> None:
        assert codec.to_unicode(b"xn--.example") == "xn--.example"

    def test_non_ascii_bytes_never_raise(self, codec: IdnaCodec) -> None:
        assert codec.to_unicode(b"a\xffb.example") == "a\ufffdb.example"
