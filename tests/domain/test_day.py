"""Tests for day-token parsing and its validation order."""

from __future__ import annotations

import pytest

from ordinaldate.domain.day import (
    ordinal_suffix,
    parse_day,
    split_day_token,
    validate_day_month,
    validate_day_postfix,
    validate_leap_year,
)
from ordinaldate.domain.errors import (
    DateParseError,
    DayDoesNotFitInMonth,
    InvalidDayPostfix,
    MalformedDay,
    NonLeapYear,
)


def _error(token: str, month: int, year: int):  # noqa: ANN202
    with pytest.raises(DateParseError) as exc_info:
        parse_day(token, month, year)
    return exc_info.value.error


class TestSplitDayToken:
    @pytest.mark.parametrize(
        "token,expected",
        [
            ("24th", ("24", "th")),
            ("1st", ("1", "st")),
            ("-2nd", ("", "-2nd")),
            ("some-trash", ("", "some-trash")),
            ("12", ("12", "")),
            ("3rd4", ("3", "rd4")),
        ],
    )
    def test_split(self, token: str, expected: tuple[str, str]) -> None:
        assert split_day_token(token) == expected


class TestParseDay:
    def test_31st_january(self) -> None:
        assert parse_day("31st", 1, 2018) == 31

    def test_leading_zero(self) -> None:
        assert parse_day("07th", 3, 2018) == 7

    def test_31_in_april(self) -> None:
        assert _error("31st", 4, 2018) == DayDoesNotFitInMonth(day=31, month=4)

    def test_negative_day(self) -> None:
        assert _error("-2nd", 1, 2018) == MalformedDay(token="-2nd")

    def test_day_over_31(self) -> None:
        assert _error("32nd", 1, 2018) == DayDoesNotFitInMonth(day=32, month=1)

    def test_day_255_still_parses_as_number(self) -> None:
        assert _error("255th", 1, 2018) == DayDoesNotFitInMonth(day=255, month=1)

    def test_day_over_255_is_malformed(self) -> None:
        assert _error("256th", 1, 2018) == MalformedDay(token="256th")

    def test_huge_digit_run_is_malformed(self) -> None:
        token = "9" * 5000 + "th"
        assert _error(token, 1, 2018) == MalformedDay(token=token)

    def test_day_zero(self) -> None:
        assert _error("0th", 1, 2018) == DayDoesNotFitInMonth(day=0, month=1)

    def test_unparseable(self) -> None:
        assert _error("some-trash", 1, 2018) == MalformedDay(token="some-trash")

    def test_wrong_postfix(self) -> None:
        assert _error("22rd", 1, 2018) == InvalidDayPostfix(day=22, suffix="rd")

    def test_missing_postfix(self) -> None:
        assert _error("22", 1, 2018) == InvalidDayPostfix(day=22, suffix="")

    def test_postfix_is_case_sensitive(self) -> None:
        assert _error("1ST", 1, 2018) == InvalidDayPostfix(day=1, suffix="ST")

    def test_february_29_leap_year(self) -> None:
        assert parse_day("29th", 2, 2016) == 29

    def test_february_29_non_leap_year(self) -> None:
        assert _error("29th", 2, 2017) == NonLeapYear(year=2017)

    def test_february_30(self) -> None:
        assert _error("30th", 2, 2016) == DayDoesNotFitInMonth(day=30, month=2)


class TestValidationOrder:
    def test_range_before_suffix(self) -> None:
        """Out-of-range day with a wrong suffix reports the range."""
        assert _error("31th", 4, 2018) == DayDoesNotFitInMonth(day=31, month=4)

    def test_suffix_before_leap_year(self) -> None:
        """Feb 29 on a non-leap year with a wrong suffix reports the suffix."""
        assert _error("29st", 2, 2017) == InvalidDayPostfix(day=29, suffix="st")


class TestThSuffixUpperRange:
    """29th and 30th take "th"; 31 only takes "st"."""

    @pytest.mark.parametrize("token,day", [("29th", 29), ("30th", 30)])
    def test_29th_30th_accepted(self, token: str, day: int) -> None:
        assert parse_day(token, 1, 2018) == day

    def test_31th_rejected(self) -> None:
        assert _error("31th", 1, 2018) == InvalidDayPostfix(day=31, suffix="th")


class TestOrdinalSuffix:
    @pytest.mark.parametrize(
        "day,expected",
        [
            (1, "st"),
            (2, "nd"),
            (3, "rd"),
            (4, "th"),
            (11, "th"),
            (12, "th"),
            (13, "th"),
            (20, "th"),
            (21, "st"),
            (22, "nd"),
            (23, "rd"),
            (24, "th"),
            (30, "th"),
            (31, "st"),
        ],
    )
    def test_suffix(self, day: int, expected: str) -> None:
        assert ordinal_suffix(day) == expected

    @pytest.mark.parametrize("day", [0, 32])
    def test_out_of_range(self, day: int) -> None:
        with pytest.raises(ValueError):
            ordinal_suffix(day)

    def test_every_day_accepts_its_own_suffix_only(self) -> None:
        for day in range(1, 32):
            validate_day_postfix(day, ordinal_suffix(day))
            for other in {"st", "nd", "rd", "th"} - {ordinal_suffix(day)}:
                with pytest.raises(DateParseError):
                    validate_day_postfix(day, other)


class TestValidators:
    @pytest.mark.parametrize("month", [1, 3, 5, 7, 8, 10, 12])
    def test_31_day_months(self, month: int) -> None:
        validate_day_month(31, month)

    @pytest.mark.parametrize("month", [4, 6, 9, 11])
    def test_30_day_months(self, month: int) -> None:
        validate_day_month(30, month)
        with pytest.raises(DateParseError):
            validate_day_month(31, month)

    def test_month_out_of_range(self) -> None:
        with pytest.raises(DateParseError) as exc_info:
            validate_day_month(1, 13)
        assert exc_info.value.error == DayDoesNotFitInMonth(day=1, month=13)

    def test_leap_year_only_checks_february_29(self) -> None:
        validate_leap_year(28, 2, 2017)
        validate_leap_year(29, 3, 2017)

    @pytest.mark.parametrize("year", [1900, 2100, -1])
    def test_century_and_negative_non_leap(self, year: int) -> None:
        with pytest.raises(DateParseError):
            validate_leap_year(29, 2, year)

    @pytest.mark.parametrize("year", [2000, 2400, -4, 0, -400])
    def test_leap_years(self, year: int) -> None:
        validate_leap_year(29, 2, year)
