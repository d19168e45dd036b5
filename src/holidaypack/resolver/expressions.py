"""
HolidayPack Date Expressions

Symbolic date expressions used by holiday rules, plus a parser for the
small text vocabulary that holiday data is written in:

- "december 26"                      -> FixedDate
- "first monday of september"        -> NthWeekday
- "monday on or before may 24"       -> WeekdayRelative
- "easter", "easter +1", "easter -2" -> EasterOffset

Expressions are frozen dataclasses. They carry no year; the resolver
binds them to a year and timezone.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from enum import Enum, IntEnum
from typing import Union

from ..exceptions import UnsupportedExpressionError


# =============================================================================
# Vocabulary
# =============================================================================

class Weekday(IntEnum):
    """Day of week, numbered like date.weekday() (0=Monday, 6=Sunday)."""
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


class Direction(str, Enum):
    """Which way to step from an anchor date."""
    ON_OR_BEFORE = "on_or_before"
    ON_OR_AFTER = "on_or_after"


MONTHS: dict[str, int] = {
    "january": 1, "february": 2, "march": 3, "april": 4,
    "may": 5, "june": 6, "july": 7, "august": 8,
    "september": 9, "october": 10, "november": 11, "december": 12,
}

WEEKDAYS: dict[str, Weekday] = {w.name.lower(): w for w in Weekday}

ORDINALS: dict[str, int] = {
    "first": 1, "second": 2, "third": 3, "fourth": 4, "fifth": 5, "last": -1,
}

LAST = -1

# Leap year used to validate month/day literals, so Feb 29 is accepted.
_LEAP_YEAR = 2000


def _as_weekday(value) -> Weekday:
    try:
        return Weekday(value)
    except ValueError:
        raise UnsupportedExpressionError(
            message=f"Invalid weekday: {value!r}",
            details={"weekday": repr(value)},
        ) from None


def _check_month_day(month: int, day: int) -> None:
    try:
        date(_LEAP_YEAR, month, day)
    except (TypeError, ValueError) as e:
        raise UnsupportedExpressionError(
            message=f"Invalid month/day: {month}/{day}",
            details={"month": month, "day": day, "error": str(e)},
        ) from e


# =============================================================================
# Expression Types
# =============================================================================

@dataclass(frozen=True)
class FixedDate:
    """A month/day literal, e.g. December 26."""
    month: int
    day: int

    def __post_init__(self) -> None:
        _check_month_day(self.month, self.day)

    def __str__(self) -> str:
        return f"{_month_name(self.month)} {self.day}"


@dataclass(frozen=True)
class NthWeekday:
    """
    The nth occurrence of a weekday in a month.

    n is 1..5, or LAST (-1) for the final occurrence.
    """
    n: int
    weekday: Weekday
    month: int

    def __post_init__(self) -> None:
        if self.n not in (1, 2, 3, 4, 5, LAST):
            raise UnsupportedExpressionError(
                message=f"Unsupported weekday occurrence: {self.n}",
                details={"n": self.n},
            )
        if self.month not in range(1, 13):
            raise UnsupportedExpressionError(
                message=f"Invalid month: {self.month}",
                details={"month": self.month},
            )
        object.__setattr__(self, "weekday", _as_weekday(self.weekday))

    def __str__(self) -> str:
        ordinal = next(k for k, v in ORDINALS.items() if v == self.n)
        return f"{ordinal} {self.weekday.name.lower()} of {_month_name(self.month)}"


@dataclass(frozen=True)
class WeekdayRelative:
    """A weekday on or before / on or after a fixed month/day."""
    weekday: Weekday
    month: int
    day: int
    direction: Direction = Direction.ON_OR_BEFORE

    def __post_init__(self) -> None:
        _check_month_day(self.month, self.day)
        object.__setattr__(self, "weekday", _as_weekday(self.weekday))
        object.__setattr__(self, "direction", Direction(self.direction))

    def __str__(self) -> str:
        how = "on or before" if self.direction is Direction.ON_OR_BEFORE else "on or after"
        return f"{self.weekday.name.lower()} {how} {_month_name(self.month)} {self.day}"


@dataclass(frozen=True)
class EasterOffset:
    """Western Easter Sunday shifted by a signed number of days."""
    days: int = 0

    def __str__(self) -> str:
        if self.days == 0:
            return "easter"
        return f"easter {self.days:+d}"


DateExpression = Union[FixedDate, NthWeekday, WeekdayRelative, EasterOffset]

EXPRESSION_TYPES = (FixedDate, NthWeekday, WeekdayRelative, EasterOffset)


def _month_name(month: int) -> str:
    return next(k for k, v in MONTHS.items() if v == month)


# =============================================================================
# Parser
# =============================================================================

_MONTH = "(?P<month>[a-z]+)"
_WEEKDAY = "(?P<weekday>[a-z]+)"

_FIXED_RE = re.compile(rf"^{_MONTH} (?P<day>\d{{1,2}})$")
_NTH_RE = re.compile(rf"^(?P<ordinal>[a-z]+) {_WEEKDAY} of {_MONTH}$")
_RELATIVE_RE = re.compile(
    rf"^{_WEEKDAY} on or (?P<direction>before|after) {_MONTH} (?P<day>\d{{1,2}})$"
)
_EASTER_RE = re.compile(r"^easter(?: ?(?P<sign>[+-]) ?(?P<days>\d+))?$")


def _lookup(table: dict, key: str, kind: str, text: str):
    try:
        return table[key]
    except KeyError:
        raise UnsupportedExpressionError(
            message=f"Unknown {kind} '{key}' in date expression '{text}'",
            details={"expression": text, kind: key},
        ) from None


def parse_expression(text: str) -> DateExpression:
    """
    Parse a date expression from its text form.

    Args:
        text: Expression such as "second monday of october"

    Returns:
        The matching expression object

    Raises:
        UnsupportedExpressionError: If the text is outside the vocabulary
    """
    if not isinstance(text, str):
        raise UnsupportedExpressionError(
            message=f"Date expression must be text, got {type(text).__name__}",
            details={"expression": repr(text)},
        )
    normalized = " ".join(text.lower().split())

    match = _EASTER_RE.match(normalized)
    if match:
        days = int(match.group("days") or 0)
        if match.group("sign") == "-":
            days = -days
        return EasterOffset(days)

    match = _NTH_RE.match(normalized)
    if match:
        return NthWeekday(
            n=_lookup(ORDINALS, match.group("ordinal"), "ordinal", text),
            weekday=_lookup(WEEKDAYS, match.group("weekday"), "weekday", text),
            month=_lookup(MONTHS, match.group("month"), "month", text),
        )

    match = _RELATIVE_RE.match(normalized)
    if match:
        direction = (
            Direction.ON_OR_BEFORE if match.group("direction") == "before"
            else Direction.ON_OR_AFTER
        )
        return WeekdayRelative(
            weekday=_lookup(WEEKDAYS, match.group("weekday"), "weekday", text),
            month=_lookup(MONTHS, match.group("month"), "month", text),
            day=int(match.group("day")),
            direction=direction,
        )

    match = _FIXED_RE.match(normalized)
    if match:
        return FixedDate(
            month=_lookup(MONTHS, match.group("month"), "month", text),
            day=int(match.group("day")),
        )

    raise UnsupportedExpressionError(
        message=f"Unsupported date expression: '{text}'",
        details={"expression": text},
    )


def as_expression(value: Union[str, DateExpression]) -> DateExpression:
    """Coerce text or an expression object into an expression object."""
    if isinstance(value, EXPRESSION_TYPES):
        return value
    return parse_expression(value)
