"""Top-level parse: compose the pipeline stages into a Date.

Order of stages is tokenize, year, preposition, month, day. The first
failing stage wins; errors are never accumulated.
"""

from __future__ import annotations

from ordinaldate.domain.day import parse_day
from ordinaldate.domain.errors import DateParseError, ParseError
from ordinaldate.domain.tokens import parse_month, parse_preposition, parse_year, tokenize
from ordinaldate.domain.types import Date


def parse(text: str) -> Date:
    """Parse ``"<day><suffix> of <Month> <year>"``.

    Raises:
        DateParseError: wrapping the first failure encountered.
    """
    day_token, preposition, month_token, year_token = tokenize(text)
    year = parse_year(year_token)
    parse_preposition(preposition)
    month = parse_month(month_token)
    day = parse_day(day_token, month, year)
    return Date(day=day, month=month, year=year)


def try_parse(text: str) -> Date | ParseError:
    """Like :func:`parse`, but return the failure variant instead of raising."""
    try:
        return parse(text)
    except DateParseError as exc:
        return exc.error
