"""Tokenizer and the leaf parsers for the year, preposition and month tokens."""

from __future__ import annotations

import re

from ordinaldate.domain.calendar import MONTH_NUMBERS
from ordinaldate.domain.errors import (
    DateParseError,
    MalformedDateString,
    MalformedYear,
    UnknownMonth,
    UnknownPreposition,
)

PREPOSITION = "of"

# Signed 32-bit bounds; anything wider is reported as an overflow.
YEAR_MIN = -(2**31)
YEAR_MAX = 2**31 - 1

_YEAR_RE = re.compile(r"[+-]?[0-9]+")

# Unicode White_Space. Unlike str.split() and \s, excludes U+001C..U+001F.
_WHITESPACE_RE = re.compile(r"[\t\n\v\f\r \x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000]+")


def tokenize(text: str) -> tuple[str, str, str, str]:
    """Split *text* into (day, preposition, month, year) tokens.

    Runs of whitespace separate tokens; leading and trailing whitespace
    is ignored.

    Examples:
        >>> tokenize("24th of  May 1990")
        ('24th', 'of', 'May', '1990')
    """
    tokens = [token for token in _WHITESPACE_RE.split(text) if token]
    if len(tokens) != 4:
        raise DateParseError(MalformedDateString(input=text))
    day, preposition, month, year = tokens
    return day, preposition, month, year


def parse_year(token: str) -> int:
    """Parse a base-10 year with an optional leading sign."""
    if not _YEAR_RE.fullmatch(token):
        raise DateParseError(MalformedYear(token=token))
    if len(token.lstrip("+-").lstrip("0")) > 10:
        raise DateParseError(MalformedYear(token=token))
    year = int(token)
    if not YEAR_MIN <= year <= YEAR_MAX:
        raise DateParseError(MalformedYear(token=token))
    return year


def parse_preposition(token: str) -> None:
    """Accept only the literal connective ``of`` (case-sensitive)."""
    if token != PREPOSITION:
        raise DateParseError(UnknownPreposition(token=token))


def parse_month(token: str) -> int:
    """Map a full English month name, in any casing, to 1..12."""
    month = MONTH_NUMBERS.get(token.lower())
    if month is None:
        raise DateParseError(UnknownMonth(token=token))
    return month
