"""Tests for the NameParseError taxonomy."""

from __future__ import annotations

import pytest

from dnsname.domain.errors import (
    EmptyLabel,
    IDNAError,
    LabelTooLong,
    NameParseError,
    NameTooLarge,
    Utf8Error,
)


class TestMessages:
    def test_name_too_large(self) -> None:
        assert str(NameTooLarge("abc")) == "Name 'abc' is larger than 255 characters"

    def test_label_too_long(self) -> None:
        assert str(LabelTooLong("abc")) == "Label 'abc' is larger than 63 characters"

    def test_empty_label(self) -> None:
        assert str(EmptyLabel(3)) == "EmptyLabel at position '3'"

    def test_idna(self) -> None:
        assert str(IDNAError("☃", "Codepoint not allowed")) == "IDNAError: Codepoint not allowed"

    def test_utf8(self) -> None:
        assert str(Utf8Error(b"\xff", "invalid start byte")) == "Utf8Error: invalid start byte"


class TestCodes:
    @pytest.mark.parametrize(
        "error,code",
        [
            (IDNAError("x", "r"), "IDNA_ERROR"),
            (Utf8Error(b"x", "r"), "UTF8_ERROR"),
            (NameTooLarge("x"), "NAME_TOO_LARGE"),
            (LabelTooLong("x"), "LABEL_TOO_LONG"),
            (EmptyLabel(0), "EMPTY_LABEL"),
        ],
    )
    def test_codes_are_stable(self, error: NameParseError, code: str) -> None:
        assert error.code == code
        assert isinstance(error, NameParseError)
        assert isinstance(error, ValueError)


class TestDetail:
    def test_empty_label(self) -> None:
        assert EmptyLabel(2).detail() == {"position": 2}

    def test_label_too_long(self) -> None:
        assert LabelTooLong("y" * 64).detail() == {"label": "y" * 64, "length": 64}

    def test_utf8_hex_encodes_data(self) -> None:
        assert Utf8Error(b"\xff", "bad").detail() == {"data": "ff", "reason": "bad"}

    def test_base_is_empty(self) -> None:
        assert NameParseError("boom").detail() == {}
