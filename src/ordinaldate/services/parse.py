"""ParseService — parse single date strings and line batches.

Wraps the domain pipeline so that malformed input becomes a failed
ServiceResult instead of an exception. One string per ``parse`` call,
one string per line for ``check``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from ordinaldate.config.models import BatchConfig
from ordinaldate.domain.errors import DateParseError
from ordinaldate.domain.parser import parse
from ordinaldate.domain.types import Date
from ordinaldate.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


def _date_fields(date: Date) -> dict[str, Any]:
    return {
        "day": date.day,
        "month": date.month,
        "year": date.year,
        "month_name": date.month_name,
    }


class ParseService:
    """Stateless adapter from the parsing pipeline to ServiceResult.

    Usage::

        svc = ParseService()
        result = svc.parse("24th of May 1990")
        result.data["month"]  # 5
    """

    def __init__(self, batch: BatchConfig | None = None) -> None:
        self._batch = batch or BatchConfig()

    def parse(self, text: str) -> ServiceResult:
        """Parse one date string."""
        op = "parse"
        try:
            date = parse(text)
        except DateParseError as exc:
            logger.debug("Rejected %r: %s", text, exc.kind)
            return ServiceResult(
                ok=False,
                op=op,
                data={"input": text},
                error=ServiceError(
                    code=str(exc.kind),
                    message=exc.error.message,
                    detail=exc.error.detail(),
                ),
            )
        return ServiceResult(ok=True, op=op, data={"input": text, **_date_fields(date)})

    def check(
        self,
        lines: Iterable[str],
        *,
        source: str | None = None,
        fail_fast: bool | None = None,
    ) -> ServiceResult:
        """Parse every line of a batch and report per-line outcomes.

        Args:
            lines: Input lines; trailing newlines are removed.
            source: Name of the input (file path or ``"-"``), echoed in meta.
            fail_fast: Stop at the first invalid line. Defaults to the
                ``[batch] fail_fast`` setting.
        """
        op = "check"
        stop_early = self._batch.fail_fast if fail_fast is None else fail_fast
        items: list[dict[str, Any]] = []
        invalid = 0

        for lineno, raw in enumerate(lines, start=1):
            text = raw.rstrip("\r\n")
            if self._skip(text):
                continue
            item: dict[str, Any] = {"line": lineno, "input": text}
            try:
                date = parse(text)
            except DateParseError as exc:
                invalid += 1
                item.update(ok=False, code=str(exc.kind), message=exc.error.message)
                items.append(item)
                logger.debug("Line %d rejected: %s", lineno, exc.kind)
                if stop_early:
                    break
                continue
            item.update(ok=True, **_date_fields(date))
            items.append(item)

        data = {
            "count": len(items),
            "valid_count": len(items) - invalid,
            "invalid_count": invalid,
            "items": items,
        }
        meta = {"source": source} if source else None
        logger.debug("Checked %d lines, %d invalid", len(items), invalid)

        if invalid:
            return ServiceResult(
                ok=False,
                op=op,
                data=data,
                meta=meta,
                error=ServiceError(
                    code="INVALID_DATES",
                    message=f"{invalid} of {len(items)} lines failed to parse",
                    detail={"invalid_lines": [i["line"] for i in items if not i["ok"]]},
                ),
            )
        warnings = [] if items else ["No dates found in input"]
        return ServiceResult(ok=True, op=op, data=data, meta=meta, warnings=warnings)

    def _skip(self, text: str) -> bool:
        stripped = text.strip()
        if not stripped:
            return self._batch.skip_blank
        prefix = self._batch.comment_prefix
        return bool(prefix) and stripped.startswith(prefix)
