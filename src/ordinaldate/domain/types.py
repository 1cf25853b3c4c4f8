"""Date value object and parse-failure categories.

INVARIANT: A constructed Date is always calendar-valid for its own
month and year. Validation runs on every construction, not only inside
the parse pipeline.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Self

from pydantic import BaseModel, Field, model_validator

from ordinaldate.domain.calendar import days_in_month, month_name


class ErrorKind(StrEnum):
    """One category per way a date string can fail to parse."""

    MALFORMED_DATE_STRING = "MALFORMED_DATE_STRING"
    MALFORMED_YEAR = "MALFORMED_YEAR"
    UNKNOWN_PREPOSITION = "UNKNOWN_PREPOSITION"
    UNKNOWN_MONTH = "UNKNOWN_MONTH"
    MALFORMED_DAY = "MALFORMED_DAY"
    DAY_DOES_NOT_FIT_IN_MONTH = "DAY_DOES_NOT_FIT_IN_MONTH"
    INVALID_DAY_POSTFIX = "INVALID_DAY_POSTFIX"
    NON_LEAP_YEAR = "NON_LEAP_YEAR"


class Date(BaseModel):
    """A calendar date with a signed, unbounded-sign year.

    Attributes:
        day: Day of month, 1..31.
        month: Month number, 1..12.
        year: Signed year; negative values are BCE-style proleptic years.
    """

    model_config = {"frozen": True}

    day: int = Field(ge=1, le=31)
    month: int = Field(ge=1, le=12)
    year: int

    @model_validator(mode="after")
    def check_calendar(self) -> Self:
        limit = days_in_month(self.month, self.year)
        if self.day > limit:
            msg = f"day {self.day} is out of range for {month_name(self.month)} {self.year}"
            raise ValueError(msg)
        return self

    @classmethod
    def parse(cls, text: str) -> Date:
        """Parse ``"<day><suffix> of <Month> <year>"`` into a Date.

        Raises:
            DateParseError: carrying the first failure encountered.
        """
        from ordinaldate.domain.parser import parse

        return parse(text)

    @property
    def month_name(self) -> str:
        return month_name(self.month)
