"""Structural validation of ASCII name bytes.

The single authority for the RFC 1035 size limits.  Every checked
construction path ends here; the codec is configured not to duplicate
these checks.

INVARIANT: a name that passes has total length <= 255, every label
<= 63 bytes, and no empty label except a trailing one (absolute name).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dnsname.domain.errors import EmptyLabel, LabelTooLong, NameTooLarge

if TYPE_CHECKING:
    from dnsname.domain.name import Name

MAX_NAME_LENGTH = 255
MAX_LABEL_LENGTH = 63
LABEL_SEPARATOR = b"."


def _as_text(data: bytes) -> str:
    # Callers guarantee ASCII; replacement only shows up when they don't.
    return data.decode("ascii", errors="replace")


def validate_name_bytes(data: bytes) -> None:
    """Check the size and emptiness rules for *data*.

    Fails fast on the first offending label, scanning left to right.
    The lone separator ``b"."`` is the root name and always passes.

    Raises:
        NameTooLarge: ``len(data) > 255``.
        LabelTooLong: A label is longer than 63 bytes.
        EmptyLabel: A label other than the last one is empty.
    """
    if len(data) > MAX_NAME_LENGTH:
        raise NameTooLarge(_as_text(data))
    if data == LABEL_SEPARATOR:
        # Root name, accepted on purpose even though it splits into two empty labels.
        return

    segments = data.split(LABEL_SEPARATOR)
    last = len(segments) - 1
    for position, segment in enumerate(segments):
        if len(segment) > MAX_LABEL_LENGTH:
            raise LabelTooLong(_as_text(segment))
        if not segment and position < last:
            raise EmptyLabel(position)


def validate_and_wrap(data: bytes) -> Name:
    """Validate *data* and wrap it, unchanged, as a :class:`Name`."""
    from dnsname.domain.name import Name

    validate_name_bytes(data)
    return Name.from_bytes_raw(data)
