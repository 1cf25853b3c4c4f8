"""ordinaldate — parse "24th of May 1990" style dates into validated values."""

from ordinaldate.domain.errors import (
    DateParseError,
    DayDoesNotFitInMonth,
    InvalidDayPostfix,
    MalformedDateString,
    MalformedDay,
    MalformedYear,
    NonLeapYear,
    ParseError,
    UnknownMonth,
    UnknownPreposition,
)
from ordinaldate.domain.parser import parse, try_parse
from ordinaldate.domain.types import Date, ErrorKind

__version__ = "0.1.0"

__all__ = [
    "Date",
    "DateParseError",
    "DayDoesNotFitInMonth",
    "ErrorKind",
    "InvalidDayPostfix",
    "MalformedDateString",
    "MalformedDay",
    "MalformedYear",
    "NonLeapYear",
    "ParseError",
    "UnknownMonth",
    "UnknownPreposition",
    "__version__",
    "parse",
    "try_parse",
]
