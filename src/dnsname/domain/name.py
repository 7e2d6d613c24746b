"""Name and Label — the validated domain-name value types.

A :class:`Name` owns an immutable byte string holding the ASCII-compatible
form of a domain name.  Built through a checked path it is guaranteed to
be ASCII, at most 255 bytes, made of labels of at most 63 bytes, with no
empty label other than a trailing one marking an absolute name.

Equality and ordering are raw byte comparisons.  ``Name(b"Example.com")``
and ``Name(b"example.com")`` are different values; DNS-style
case-insensitive comparison is not provided here.

The module-level ``ROOT`` and ``EMPTY`` constants are built lazily, once,
on first access.
"""

from __future__ import annotations

import functools
import logging
import threading
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, overload

import idna

from dnsname.domain.codec import DEFAULT_CODEC, IdnaCodec
from dnsname.domain.errors import IDNAError, Utf8Error
from dnsname.domain.validation import LABEL_SEPARATOR, validate_name_bytes

logger = logging.getLogger(__name__)

BytesLike = bytes | bytearray | memoryview


@dataclass(frozen=True, order=True)
class Name:
    """An immutable, validated domain name.

    Construct through :meth:`from_text`, :meth:`from_bytes` or
    :meth:`parse`.  Calling ``Name(...)`` directly is the same as
    :meth:`from_bytes_raw` and performs no validation.
    """

    value: bytes

    # --- Checked construction ---

    @classmethod
    def from_text(cls, text: str, *, codec: IdnaCodec | None = None) -> Name:
        """Parse Unicode *text* into a name.

        The text is mapped to ASCII by the IDNA codec, then checked by the
        validation engine.

        Raises:
            IDNAError: The codec rejected the text.
            NameTooLarge, LabelTooLong, EmptyLabel: Structural failures.
        """
        codec = codec or DEFAULT_CODEC
        try:
            ascii_text = codec.to_ascii(text)
        except idna.IDNAError as exc:
            logger.debug("IDNA mapping rejected %r: %s", text, exc)
            raise IDNAError(text, str(exc)) from exc
        # The codec only ever returns ASCII.
        return cls.from_text_ascii(ascii_text)

    @classmethod
    def from_bytes(cls, data: BytesLike, *, codec: IdnaCodec | None = None) -> Name:
        """Parse UTF-8 encoded *data* into a name.

        Byte input still goes through the IDNA mapping; it is not assumed
        to be ASCII already.

        Raises:
            Utf8Error: *data* is not valid UTF-8.
        """
        raw = bytes(data)
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise Utf8Error(raw, str(exc)) from exc
        return cls.from_text(text, codec=codec)

    @classmethod
    def parse(cls, value: str | BytesLike, *, codec: IdnaCodec | None = None) -> Name:
        """Parse a ``str`` or bytes-like *value* through the checked path."""
        if isinstance(value, str):
            return cls.from_text(value, codec=codec)
        if isinstance(value, (bytes, bytearray, memoryview)):
            return cls.from_bytes(value, codec=codec)
        msg = f"Cannot parse a Name from {type(value).__name__}"
        raise TypeError(msg)

    # --- Precondition-trusting construction ---
    #
    # These exist for callers re-wrapping input they have already
    # validated.  Passing anything else yields a Name whose invariants do
    # not hold; that is a logic error in the caller, and display or any
    # other consumer assuming ASCII bytes may render garbage.

    @classmethod
    def from_text_ascii(cls, text: str) -> Name:
        """Build a name from *text* the caller guarantees is ASCII.

        Size and empty-label rules are still enforced.
        """
        return cls.from_bytes_ascii(text.encode("utf-8"))

    @classmethod
    def from_bytes_ascii(cls, data: BytesLike) -> Name:
        """Build a name from *data* the caller guarantees is ASCII.

        Size and empty-label rules are still enforced.
        """
        raw = bytes(data)
        validate_name_bytes(raw)
        return cls.from_bytes_raw(raw)

    @classmethod
    def from_bytes_raw(cls, data: BytesLike) -> Name:
        """Wrap *data* without any check.

        The caller guarantees that *data* is ASCII (or empty), at most 255
        bytes, has labels of at most 63 bytes, and has no empty label other
        than a trailing one.
        """
        return cls(bytes(data))

    # --- Accessors ---

    def labels(self) -> list[Label]:
        """Split into labels, left to right.

        Absolute names end with an empty label.  A fresh list is built on
        every call.
        """
        value = self.value
        result: list[Label] = []
        start = 0
        while (stop := value.find(LABEL_SEPARATOR, start)) != -1:
            result.append(Label(self, start, stop))
            start = stop + 1
        result.append(Label(self, start, len(value)))
        return result

    def is_absolute(self) -> bool:
        """True if the name ends with the label separator."""
        return self.value.endswith(LABEL_SEPARATOR)

    def to_text(self) -> str:
        """The stored ASCII form as ``str``."""
        return self.value.decode("ascii", errors="replace")

    def __str__(self) -> str:
        return DEFAULT_CODEC.to_unicode(self.value)

    def __bytes__(self) -> bytes:
        return self.value

    def __len__(self) -> int:
        return len(self.value)

    def __iter__(self) -> Iterator[int]:
        return iter(self.value)

    @overload
    def __getitem__(self, index: int) -> int: ...

    @overload
    def __getitem__(self, index: slice) -> bytes: ...

    def __getitem__(self, index: int | slice) -> int | bytes:
        return self.value[index]


@functools.total_ordering
class Label:
    """A view of one label inside a :class:`Name`.

    Holds a reference to its owner, so the owner's bytes stay alive as long
    as the view does.  Only :meth:`Name.labels` creates labels.
    """

    __slots__ = ("_owner", "_start", "_stop")

    def __init__(self, owner: Name, start: int, stop: int) -> None:
        self._owner = owner
        self._start = start
        self._stop = stop

    @property
    def owner(self) -> Name:
        return self._owner

    @property
    def value(self) -> bytes:
        return self._owner.value[self._start : self._stop]

    def __bytes__(self) -> bytes:
        return self.value

    def __len__(self) -> int:
        return self._stop - self._start

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Label):
            return NotImplemented
        return self.value == other.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Label):
            return NotImplemented
        return self.value < other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"Label(value={self.value!r})"

    def __str__(self) -> str:
        return f"Label({DEFAULT_CODEC.to_unicode(self.value)})"


# --- Lazily built process-wide constants ---

_CONSTANT_VALUES: dict[str, bytes] = {"ROOT": b".", "EMPTY": b""}
_constants: dict[str, Name] = {}
_constants_lock = threading.Lock()

if TYPE_CHECKING:
    ROOT: Name
    EMPTY: Name


def _constant(attr: str) -> Name:
    name = _constants.get(attr)
    if name is None:
        with _constants_lock:
            name = _constants.get(attr)
            if name is None:
                # b"." and b"" meet every from_bytes_raw precondition.
                name = Name.from_bytes_raw(_CONSTANT_VALUES[attr])
                _constants[attr] = name
    return name


def __getattr__(attr: str) -> Name:
    if attr in _CONSTANT_VALUES:
        return _constant(attr)
    msg = f"module {__name__!r} has no attribute {attr!r}"
    raise AttributeError(msg)
