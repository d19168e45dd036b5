"""
HolidayPack Resolver

Date expressions and their resolution to concrete dates.
"""
from __future__ import annotations

from .easter import easter_sunday
from .expressions import (
    LAST,
    DateExpression,
    Direction,
    EasterOffset,
    FixedDate,
    NthWeekday,
    Weekday,
    WeekdayRelative,
    as_expression,
    parse_expression,
)
from .resolution import (
    MAX_YEAR,
    MIN_YEAR,
    at_midnight,
    get_zone,
    resolve,
    resolve_date,
    validate_year,
)

__all__ = [
    "LAST",
    "DateExpression",
    "Direction",
    "EasterOffset",
    "FixedDate",
    "NthWeekday",
    "Weekday",
    "WeekdayRelative",
    "as_expression",
    "parse_expression",
    "easter_sunday",
    "MAX_YEAR",
    "MIN_YEAR",
    "at_midnight",
    "get_zone",
    "resolve",
    "resolve_date",
    "validate_year",
]
