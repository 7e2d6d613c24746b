"""NameService — parse, inspect, compare and batch-check domain names."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from dnsname.domain.errors import NameParseError
from dnsname.domain.name import Name
from dnsname.services.base import BaseService
from dnsname.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


def _describe(name: Name) -> dict[str, Any]:
    return {
        "ascii": name.to_text(),
        "unicode": str(name),
        "absolute": name.is_absolute(),
        "length": len(name),
        "labels": [label.value.decode("ascii", errors="replace") for label in name.labels()],
    }


class NameService(BaseService):
    """Operations over :class:`Name` values for the CLI."""

    def parse(self, text: str) -> ServiceResult:
        """Validate *text* and describe the resulting name."""
        try:
            name = Name.from_text(text, codec=self._codec)
        except NameParseError as exc:
            return self._failure("parse", exc, text)
        return ServiceResult(ok=True, op="parse", data={"input": text, **_describe(name)})

    def labels(self, text: str) -> ServiceResult:
        """List the labels of *text* with their positions."""
        try:
            name = Name.from_text(text, codec=self._codec)
        except NameParseError as exc:
            return self._failure("labels", exc, text)

        items = [
            {
                "position": position,
                "label": label.value.decode("ascii", errors="replace"),
                "unicode": self._codec.to_unicode(label.value),
                "length": len(label),
            }
            for position, label in enumerate(name.labels())
        ]
        return ServiceResult(
            ok=True,
            op="labels",
            data={"name": name.to_text(), "items": items, "count": len(items)},
        )

    def compare(self, left: str, right: str) -> ServiceResult:
        """Compare two names byte-wise after parsing both."""
        names: list[Name] = []
        for text in (left, right):
            try:
                names.append(Name.from_text(text, codec=self._codec))
            except NameParseError as exc:
                return self._failure("compare", exc, text)

        a, b = names
        if a == b:
            order = "equal"
        elif a < b:
            order = "less"
        else:
            order = "greater"
        return ServiceResult(
            ok=True,
            op="compare",
            data={
                "left": a.to_text(),
                "right": b.to_text(),
                "equal": a == b,
                "order": order,
            },
        )

    def check(
        self,
        lines: Iterable[str | bytes],
        *,
        comment_prefix: str = "#",
        skip_blank: bool = True,
        fail_fast: bool = False,
    ) -> ServiceResult:
        """Validate one name per line.

        Lines may be text or raw bytes.  Byte lines are decoded one at a
        time, so a line that is not UTF-8 is reported as ``UTF8_ERROR``
        rather than ending the batch.  Blank lines and lines starting with
        *comment_prefix* are skipped.

        The result is not ok when any line fails; ``data`` lists every
        failure seen (only the first when *fail_fast*).
        """
        checked = 0
        invalid: list[dict[str, Any]] = []
        warnings: list[str] = []
        prefix = comment_prefix.encode("utf-8")

        for lineno, raw in enumerate(lines, start=1):
            line = (raw if isinstance(raw, bytes) else raw.encode("utf-8")).rstrip(b"\r\n")
            stripped = line.strip()
            if skip_blank and not stripped:
                continue
            if prefix and stripped.startswith(prefix):
                continue
            if stripped != line:
                warnings.append(f"line {lineno}: surrounding whitespace stripped")

            checked += 1
            try:
                Name.from_bytes(stripped, codec=self._codec)
            except NameParseError as exc:
                logger.debug("check: line %d rejected: %s", lineno, exc)
                invalid.append(
                    {
                        "line": lineno,
                        "input": stripped.decode("utf-8", errors="replace"),
                        "code": exc.code,
                        "message": str(exc),
                    }
                )
                if fail_fast:
                    break

        data = {
            "count": checked,
            "valid_count": checked - len(invalid),
            "invalid_count": len(invalid),
            "invalid": invalid,
        }
        if not invalid:
            return ServiceResult(ok=True, op="check", data=data, warnings=warnings)
        return ServiceResult(
            ok=False,
            op="check",
            data=data,
            warnings=warnings,
            error=ServiceError(
                code="INVALID_NAMES",
                message=f"{len(invalid)} invalid name(s) out of {checked}",
                detail={"lines": [item["line"] for item in invalid]},
            ),
        )
