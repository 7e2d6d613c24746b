"""NameParseError — the closed set of failures a name parse can report.

Every failure is deterministic: the same input always fails the same way,
so none of these are retryable.  Each class carries a stable ``code`` that
the service layer copies into ``ServiceError.code``.
"""

from __future__ import annotations

from typing import Any, ClassVar


class NameParseError(ValueError):
    """Base class for all name parsing failures."""

    code: ClassVar[str] = "NAME_PARSE_ERROR"

    def detail(self) -> dict[str, Any]:
        """Structured payload for machine-readable output."""
        return {}


class IDNAError(NameParseError):
    """The Unicode-to-ASCII mapping rejected the input.

    The codec's own exception is kept as ``__cause__``.
    """

    code = "IDNA_ERROR"

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f"IDNAError: {reason}")
        self.text = text
        self.reason = reason

    def detail(self) -> dict[str, Any]:
        return {"text": self.text, "reason": self.reason}


class Utf8Error(NameParseError):
    """Byte input was not valid UTF-8 text."""

    code = "UTF8_ERROR"

    def __init__(self, data: bytes, reason: str) -> None:
        super().__init__(f"Utf8Error: {reason}")
        self.data = data
        self.reason = reason

    def detail(self) -> dict[str, Any]:
        return {"data": self.data.hex(), "reason": self.reason}


class NameTooLarge(NameParseError):
    """Total encoded length exceeded 255 bytes."""

    code = "NAME_TOO_LARGE"

    def __init__(self, name: str) -> None:
        super().__init__(f"Name '{name}' is larger than 255 characters")
        self.name = name

    def detail(self) -> dict[str, Any]:
        return {"name": self.name, "length": len(self.name)}


class LabelTooLong(NameParseError):
    """A single label exceeded 63 bytes."""

    code = "LABEL_TOO_LONG"

    def __init__(self, label: str) -> None:
        super().__init__(f"Label '{label}' is larger than 63 characters")
        self.label = label

    def detail(self) -> dict[str, Any]:
        return {"label": self.label, "length": len(self.label)}


class EmptyLabel(NameParseError):
    """A non-final label was empty.  ``position`` is the zero-based label index."""

    code = "EMPTY_LABEL"

    def __init__(self, position: int) -> None:
        super().__init__(f"EmptyLabel at position '{position}'")
        self.position = position

    def detail(self) -> dict[str, Any]:
        return {"position": self.position}
