"""Day-token parsing: numeric prefix, month bounds, ordinal suffix, Feb 29.

Checks run in a fixed order so a multiply-invalid token always reports
the same error: month bounds, then suffix, then leap year.
"""

from __future__ import annotations

from ordinaldate.domain.calendar import FEBRUARY, is_leap_year, max_day_for_month
from ordinaldate.domain.errors import (
    DateParseError,
    DayDoesNotFitInMonth,
    InvalidDayPostfix,
    MalformedDay,
    NonLeapYear,
)

# Numeric prefix must fit an unsigned byte; 32..255 still parse here.
DAY_NUMBER_MAX = 255

_DIGITS = frozenset("0123456789")

# (suffix, allowed day ranges), inclusive bounds.
_SUFFIX_RANGES: dict[str, tuple[tuple[int, int], ...]] = {
    "st": ((1, 1), (21, 21), (31, 31)),
    "nd": ((2, 2), (22, 22)),
    "rd": ((3, 3), (23, 23)),
    "th": ((4, 20), (24, 30)),
}


def split_day_token(token: str) -> tuple[str, str]:
    """Split *token* into its leading ASCII digits and the remainder.

    Examples:
        >>> split_day_token("24th")
        ('24', 'th')
        >>> split_day_token("-2nd")
        ('', '-2nd')
    """
    end = 0
    while end < len(token) and token[end] in _DIGITS:
        end += 1
    return token[:end], token[end:]


def validate_day_month(day: int, month: int) -> None:
    if not 1 <= month <= 12 or not 1 <= day <= max_day_for_month(month):
        raise DateParseError(DayDoesNotFitInMonth(day=day, month=month))


def ordinal_suffix(day: int) -> str:
    """The English ordinal suffix accepted for *day* (1..31)."""
    for suffix, ranges in _SUFFIX_RANGES.items():
        if any(lo <= day <= hi for lo, hi in ranges):
            return suffix
    msg = f"day must be in 1..31, got {day}"
    raise ValueError(msg)


def validate_day_postfix(day: int, suffix: str) -> None:
    ranges = _SUFFIX_RANGES.get(suffix, ())
    if not any(lo <= day <= hi for lo, hi in ranges):
        raise DateParseError(InvalidDayPostfix(day=day, suffix=suffix))


def validate_leap_year(day: int, month: int, year: int) -> None:
    if month == FEBRUARY and day == 29 and not is_leap_year(year):
        raise DateParseError(NonLeapYear(year=year))


def parse_day(token: str, month: int, year: int) -> int:
    """Parse and validate a day token such as ``"24th"`` for *month*/*year*."""
    numeric_part, suffix_part = split_day_token(token)
    significant = numeric_part.lstrip("0") or "0"
    if not numeric_part or len(significant) > 3 or int(significant) > DAY_NUMBER_MAX:
        raise DateParseError(MalformedDay(token=token))
    day = int(significant)

    validate_day_month(day, month)
    validate_day_postfix(day, suffix_part)
    validate_leap_year(day, month, year)
    return day
