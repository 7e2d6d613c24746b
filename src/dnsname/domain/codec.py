"""Unicode codec adapter — IDNA mapping between Unicode text and ASCII.

The heavy lifting (UTS #46 mapping tables, IDNA 2008 code point classes,
bidi and contextual rules) belongs to the ``idna`` distribution.  This
module only decides which of its checks run:

- hyphen placement checks are off unless ``check_hyphens`` is set,
- transitional mapping is never requested (UTS #46 dropped it, and
  current ``idna`` releases ignore the flag),
- STD3 ASCII rules are off, so ``_`` and friends pass through,
- length verification is off: the 63/255 byte limits are enforced by
  :mod:`dnsname.domain.validation` and nowhere else.
"""

from __future__ import annotations

import logging

import idna
from idna import idnadata
from idna.intranges import intranges_contain
from pydantic import BaseModel

logger = logging.getLogger(__name__)

ACE_PREFIX = "xn--"


class CodecOptions(BaseModel):
    """Switches for the IDNA mapping.

    ``transitional`` is accepted so existing config files keep loading, but
    it is not forwarded: deviation characters such as ``ß`` are always kept.
    """

    model_config = {"frozen": True}

    check_hyphens: bool = False
    transitional: bool = False
    use_std3_ascii_rules: bool = False
    verify_dns_length: bool = False


class IdnaCodec:
    """Converts between Unicode domain text and its ASCII-compatible form.

    Instances are immutable and can be shared freely between threads.
    """

    def __init__(self, options: CodecOptions | None = None) -> None:
        self._options = options or CodecOptions()

    @property
    def options(self) -> CodecOptions:
        return self._options

    def to_ascii(self, text: str) -> str:
        """Map *text* to its ASCII-compatible encoding.

        Raises:
            idna.IDNAError: The text contains disallowed code points, an
                invalid ``xn--`` label, or a label that breaks the IDNA 2008
                contextual or bidi rules.
        """
        opts = self._options
        mapped = idna.uts46_remap(
            text,
            std3_rules=opts.use_std3_ascii_rules,
        )

        labels: list[str] = []
        for label in mapped.split("."):
            if label.isascii():
                if label[:4].lower() == ACE_PREFIX:
                    self._check_u_label(_decode_a_label(label))
                elif opts.check_hyphens and label:
                    idna.check_hyphen_ok(label)
                labels.append(label)
            else:
                self._check_u_label(label)
                labels.append(ACE_PREFIX + label.encode("punycode").decode("ascii"))

        result = ".".join(labels)
        if opts.verify_dns_length:
            _verify_lengths(labels, result)
        return result

    def to_unicode(self, data: bytes) -> str:
        """Render stored ASCII bytes for humans.

        Never raises: labels that cannot be decoded are shown in their
        ASCII form.
        """
        text = data.decode("ascii", errors="replace")
        labels: list[str] = []
        for label in text.split("."):
            if label[:4].lower() == ACE_PREFIX:
                try:
                    label = _decode_a_label(label)
                except idna.IDNAError:
                    logger.debug("Rendering undecodable A-label as-is: %r", label)
            labels.append(label)
        return ".".join(labels)

    def _check_u_label(self, label: str) -> None:
        """Run the IDNA 2008 U-label checks on a single label."""
        if not label:
            return
        idna.check_nfc(label)
        if self._options.check_hyphens:
            idna.check_hyphen_ok(label)
        idna.check_initial_combiner(label)

        classes = idnadata.codepoint_classes
        for pos, char in enumerate(label):
            cp = ord(char)
            if intranges_contain(cp, classes["PVALID"]):
                continue
            if intranges_contain(cp, classes["CONTEXTJ"]):
                try:
                    valid = idna.valid_contextj(label, pos)
                except ValueError as exc:
                    msg = f"Unknown codepoint adjacent to joiner U+{cp:04X} at position {pos + 1}"
                    raise idna.IDNAError(msg) from exc
                if not valid:
                    msg = f"Joiner U+{cp:04X} not allowed at position {pos + 1} in {label!r}"
                    raise idna.InvalidCodepointContext(msg)
            elif intranges_contain(cp, classes["CONTEXTO"]):
                if not idna.valid_contexto(label, pos):
                    msg = f"Codepoint U+{cp:04X} not allowed at position {pos + 1} in {label!r}"
                    raise idna.InvalidCodepointContext(msg)
            else:
                msg = f"Codepoint U+{cp:04X} at position {pos + 1} of {label!r} not allowed"
                raise idna.InvalidCodepoint(msg)

        idna.check_bidi(label)


def _decode_a_label(label: str) -> str:
    """Decode an ``xn--`` label, accepting only canonical A-labels.

    Hyphen placement inside the decoded label is left to ``check_hyphens``.
    """
    payload = label[len(ACE_PREFIX) :].lower()
    if not payload:
        raise idna.IDNAError(f"Malformed A-label {label!r}: no Punycode content")
    if payload.endswith("-"):
        raise idna.IDNAError(f"A-label {label!r} must not end with a hyphen")
    try:
        encoded = payload.encode("ascii")
        decoded = encoded.decode("punycode")
        canonical = decoded.encode("punycode") == encoded
    except UnicodeError as exc:
        raise idna.IDNAError(f"Invalid A-label {label!r}") from exc
    if decoded.isascii():
        raise idna.IDNAError(f"A-label {label!r} decodes to plain ASCII")
    if not canonical:
        raise idna.IDNAError(f"A-label {label!r} is not the canonical encoding of its U-label")
    return decoded


def _verify_lengths(labels: list[str], result: str) -> None:
    trailing_dot = result.endswith(".")
    for label in labels[:-1] if trailing_dot else labels:
        if not idna.valid_label_length(label):
            raise idna.IDNAError(f"Label too long: {label!r}")
    if not idna.valid_string_length(result, trailing_dot):
        raise idna.IDNAError("Domain too long")


DEFAULT_CODEC = IdnaCodec()
