"""BaseService — shared foundation for dnsname services.

Every service receives the :class:`IdnaCodec` it parses with, so one
process can serve differently configured codecs side by side.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from dnsname.domain.codec import DEFAULT_CODEC
from dnsname.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from dnsname.domain.codec import IdnaCodec
    from dnsname.domain.errors import NameParseError

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class NameService(BaseService):
            def parse(self, text: str) -> ServiceResult:
                try:
                    name = Name.from_text(text, codec=self._codec)
                except NameParseError as exc:
                    return self._failure("parse", exc, text)
                ...
    """

    def __init__(self, codec: IdnaCodec | None = None) -> None:
        self._codec = codec or DEFAULT_CODEC

    @property
    def codec(self) -> IdnaCodec:
        return self._codec

    def _failure(self, op: str, exc: NameParseError, text: str) -> ServiceResult:
        """Convert a parse failure into an error result."""
        logger.debug("%s failed for %r: %s", op, text, exc)
        return ServiceResult(
            ok=False,
            op=op,
            error=self._error(exc, text),
        )

    @staticmethod
    def _error(exc: NameParseError, text: str) -> ServiceError:
        detail: dict[str, Any] = {"input": text, **exc.detail()}
        return ServiceError(code=exc.code, message=str(exc), detail=detail)
