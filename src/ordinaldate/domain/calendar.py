"""Fixed Gregorian calendar tables and leap-year rules.

The tables are process-wide constants and are never mutated.
"""

from __future__ import annotations

MONTH_NAMES: tuple[str, ...] = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)

MONTH_NUMBERS: dict[str, int] = {name: i for i, name in enumerate(MONTH_NAMES, start=1)}

MONTHS_WITH_31: frozenset[int] = frozenset({1, 3, 5, 7, 8, 10, 12})
MONTHS_WITH_30: frozenset[int] = frozenset({4, 6, 9, 11})
FEBRUARY = 2


def is_leap_year(year: int) -> bool:
    """Gregorian leap rule: divisible by 4 and not by 100, or divisible by 400.

    Examples:
        >>> is_leap_year(2016), is_leap_year(1900), is_leap_year(2000)
        (True, False, True)
    """
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def max_day_for_month(month: int) -> int:
    """Upper day bound for *month* before the leap-year check (February is 29)."""
    if month in MONTHS_WITH_31:
        return 31
    if month in MONTHS_WITH_30:
        return 30
    if month == FEBRUARY:
        return 29
    msg = f"month must be in 1..12, got {month}"
    raise ValueError(msg)


def days_in_month(month: int, year: int) -> int:
    """Number of days in *month* of *year*, accounting for leap years."""
    if month == FEBRUARY and not is_leap_year(year):
        return 28
    return max_day_for_month(month)


def month_name(month: int) -> str:
    """Capitalized English name for a month number 1..12."""
    if not 1 <= month <= 12:
        msg = f"month must be in 1..12, got {month}"
        raise ValueError(msg)
    return MONTH_NAMES[month - 1].capitalize()
