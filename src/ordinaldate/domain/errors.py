"""Parse-failure variants and the exception that carries them.

ParseError is a closed sum type: a discriminated union over ``kind``.
Callers match on the variant classes::

    match err:
        case DayDoesNotFitInMonth(day=day, month=month):
            ...
        case NonLeapYear(year=year):
            ...

INVARIANT: Pipeline stages raise DateParseError wrapping exactly one
variant. The variant is never modified on its way to the caller.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, TypeAdapter

from ordinaldate.domain.calendar import month_name
from ordinaldate.domain.types import ErrorKind


class _ParseErrorBase(BaseModel):
    model_config = {"frozen": True}

    kind: str

    def detail(self) -> dict[str, Any]:
        """Diagnostic payload without the discriminator."""
        return self.model_dump(exclude={"kind"})


class MalformedDateString(_ParseErrorBase):
    """Input did not split into exactly four tokens."""

    __match_args__ = ("input",)

    kind: Literal["MALFORMED_DATE_STRING"] = "MALFORMED_DATE_STRING"
    input: str

    @property
    def message(self) -> str:
        return f"Expected '<day> of <month> <year>', got {self.input!r}"


class MalformedYear(_ParseErrorBase):
    """Year token is not a base-10 integer in range."""

    __match_args__ = ("token",)

    kind: Literal["MALFORMED_YEAR"] = "MALFORMED_YEAR"
    token: str

    @property
    def message(self) -> str:
        return f"Malformed year: {self.token!r}"


class UnknownPreposition(_ParseErrorBase):
    __match_args__ = ("token",)

    kind: Literal["UNKNOWN_PREPOSITION"] = "UNKNOWN_PREPOSITION"
    token: str

    @property
    def message(self) -> str:
        return f"Unknown preposition: {self.token!r} (expected 'of')"


class UnknownMonth(_ParseErrorBase):
    __match_args__ = ("token",)

    kind: Literal["UNKNOWN_MONTH"] = "UNKNOWN_MONTH"
    token: str

    @property
    def message(self) -> str:
        return f"Unknown month: {self.token!r}"


class MalformedDay(_ParseErrorBase):
    """Day token has no parseable numeric prefix."""

    __match_args__ = ("token",)

    kind: Literal["MALFORMED_DAY"] = "MALFORMED_DAY"
    token: str

    @property
    def message(self) -> str:
        return f"Malformed day: {self.token!r}"


class DayDoesNotFitInMonth(_ParseErrorBase):
    __match_args__ = ("day", "month")

    kind: Literal["DAY_DOES_NOT_FIT_IN_MONTH"] = "DAY_DOES_NOT_FIT_IN_MONTH"
    day: int
    month: int

    @property
    def message(self) -> str:
        if 1 <= self.month <= 12:
            return f"Day {self.day} does not fit in {month_name(self.month)}"
        return f"Day {self.day} does not fit in month {self.month}"


class InvalidDayPostfix(_ParseErrorBase):
    """Ordinal suffix disagrees with the day number."""

    __match_args__ = ("day", "suffix")

    kind: Literal["INVALID_DAY_POSTFIX"] = "INVALID_DAY_POSTFIX"
    day: int
    suffix: str

    @property
    def message(self) -> str:
        return f"Invalid ordinal suffix {self.suffix!r} for day {self.day}"


class NonLeapYear(_ParseErrorBase):
    __match_args__ = ("year",)

    kind: Literal["NON_LEAP_YEAR"] = "NON_LEAP_YEAR"
    year: int

    @property
    def message(self) -> str:
        return f"February 29 does not exist in {self.year} (not a leap year)"


ParseError = Annotated[
    MalformedDateString
    | MalformedYear
    | UnknownPreposition
    | UnknownMonth
    | MalformedDay
    | DayDoesNotFitInMonth
    | InvalidDayPostfix
    | NonLeapYear,
    Field(discriminator="kind"),
]

PARSE_ERROR_ADAPTER: TypeAdapter[ParseError] = TypeAdapter(ParseError)

PARSE_ERROR_TYPES: tuple[type[_ParseErrorBase], ...] = (
    MalformedDateString,
    MalformedYear,
    UnknownPreposition,
    UnknownMonth,
    MalformedDay,
    DayDoesNotFitInMonth,
    InvalidDayPostfix,
    NonLeapYear,
)


class DateParseError(ValueError):
    """Raised by the parsing pipeline; ``.error`` holds the failure variant."""

    def __init__(self, error: ParseError) -> None:
        super().__init__(error.message)
        self.error = error

    @property
    def kind(self) -> ErrorKind:
        return ErrorKind(self.error.kind)
