"""
HolidayPack Date Expression Resolver

Turns a symbolic date expression plus a year and timezone into a concrete,
timezone-aware date (local midnight). Resolution is a pure function of its
inputs: no wall-clock time is consulted.
"""
from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta, tzinfo
from functools import lru_cache
from typing import Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..exceptions import (
    InvalidTimezoneError,
    InvalidYearError,
    OutOfRangeError,
    UnsupportedExpressionError,
)
from .easter import easter_sunday
from .expressions import (
    LAST,
    DateExpression,
    Direction,
    EasterOffset,
    FixedDate,
    NthWeekday,
    WeekdayRelative,
    as_expression,
)

MIN_YEAR = 1
MAX_YEAR = 9999


# =============================================================================
# Input Validation
# =============================================================================

def validate_year(year: int) -> int:
    """
    Check that year is a usable Gregorian year.

    Raises:
        InvalidYearError: If year is not an int in MIN_YEAR..MAX_YEAR
    """
    if isinstance(year, bool) or not isinstance(year, int):
        raise InvalidYearError(
            message=f"Year must be an integer, got {type(year).__name__}",
            details={"year": repr(year)},
        )
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise InvalidYearError(
            message=f"Year {year} outside supported range {MIN_YEAR}..{MAX_YEAR}",
            details={"year": year},
        )
    return year


def get_zone(timezone: str) -> ZoneInfo:
    """
    Look up an IANA timezone.

    Raises:
        InvalidTimezoneError: If the zone identifier is unknown or malformed
    """
    if not isinstance(timezone, str) or not timezone:
        raise InvalidTimezoneError(
            message=f"Timezone must be a non-empty string, got {timezone!r}",
            details={"timezone": repr(timezone)},
        )
    return _load_zone(timezone)


@lru_cache(maxsize=128)
def _load_zone(timezone: str) -> ZoneInfo:
    try:
        return ZoneInfo(timezone)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise InvalidTimezoneError(
            message=f"Unknown timezone: {timezone}",
            details={"timezone": timezone, "error": str(e)},
        ) from e


# =============================================================================
# Date Arithmetic
# =============================================================================

def _fixed(expr: FixedDate, year: int) -> date:
    try:
        return date(year, expr.month, expr.day)
    except ValueError as e:
        raise OutOfRangeError(
            message=f"{expr} does not exist in {year}",
            details={"expression": str(expr), "year": year},
        ) from e


def _nth_weekday(expr: NthWeekday, year: int) -> date:
    """Scan the month in ascending order, counting matching weekdays."""
    days_in_month = calendar.monthrange(year, expr.month)[1]
    matches = [
        date(year, expr.month, day)
        for day in range(1, days_in_month + 1)
        if date(year, expr.month, day).weekday() == expr.weekday
    ]
    if expr.n == LAST:
        return matches[-1]
    if expr.n > len(matches):
        raise OutOfRangeError(
            message=f"{expr}: {year} has only {len(matches)} occurrences",
            details={"expression": str(expr), "year": year, "occurrences": len(matches)},
        )
    return matches[expr.n - 1]


def _weekday_relative(expr: WeekdayRelative, year: int) -> date:
    """Step one day at a time from the anchor, anchor included."""
    current = _fixed(FixedDate(expr.month, expr.day), year)
    step = timedelta(days=-1 if expr.direction is Direction.ON_OR_BEFORE else 1)
    try:
        while current.weekday() != expr.weekday:
            current += step
    except OverflowError as e:
        raise OutOfRangeError(
            message=f"{expr} falls outside the supported calendar in {year}",
            details={"expression": str(expr), "year": year},
        ) from e
    return current


def _easter(expr: EasterOffset, year: int) -> date:
    try:
        return easter_sunday(year) + timedelta(days=expr.days)
    except OverflowError as e:
        raise OutOfRangeError(
            message=f"{expr} falls outside the supported calendar in {year}",
            details={"expression": str(expr), "year": year},
        ) from e


def resolve_date(expression: Union[str, DateExpression], year: int) -> date:
    """
    Resolve an expression to a naive calendar date.

    Raises:
        UnsupportedExpressionError: If the expression is outside the grammar
        OutOfRangeError: If the requested day does not exist that year
        InvalidYearError: If year is invalid
    """
    expr = as_expression(expression)
    validate_year(year)

    if isinstance(expr, FixedDate):
        return _fixed(expr, year)
    if isinstance(expr, NthWeekday):
        return _nth_weekday(expr, year)
    if isinstance(expr, WeekdayRelative):
        return _weekday_relative(expr, year)
    if isinstance(expr, EasterOffset):
        return _easter(expr, year)

    raise UnsupportedExpressionError(
        message=f"Unsupported expression type: {type(expr).__name__}",
        details={"expression": repr(expr)},
    )


def at_midnight(day: date, zone: tzinfo) -> datetime:
    """Local midnight of a calendar date in the given zone."""
    return datetime(day.year, day.month, day.day, tzinfo=zone)


def resolve(
    expression: Union[str, DateExpression],
    year: int,
    timezone: str,
) -> datetime:
    """
    Resolve a date expression for a year in a timezone.

    Args:
        expression: Expression object or its text form
        year: Gregorian year to resolve for
        timezone: IANA zone identifier (e.g. "America/Toronto")

    Returns:
        Timezone-aware datetime at local midnight

    Raises:
        UnsupportedExpressionError, OutOfRangeError, InvalidYearError,
        InvalidTimezoneError
    """
    zone = get_zone(timezone)
    return at_midnight(resolve_date(expression, year), zone)
