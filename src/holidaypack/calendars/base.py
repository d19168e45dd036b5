"""
HolidayPack Business Day Calendar Base

Protocol and shared business-day arithmetic for calendars backed by
holiday providers. Subclasses decide what a holiday is; weekends and
stepping logic live here.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Protocol, runtime_checkable

from ..engine import DEFAULT_WEEKEND_DAYS

# Longest run of non-business days tolerated before giving up
MAX_SCAN_DAYS = 366


@runtime_checkable
class HolidayCalendar(Protocol):
    """Anything that can answer holiday and business-day questions."""

    def is_holiday(self, d: date) -> bool:
        ...

    def is_business_day(self, d: date) -> bool:
        ...

    def get_holidays_in_range(self, start: date, end: date) -> list[date]:
        ...


@dataclass
class BaseCalendar(ABC):
    """
    Abstract base class for business day calendars.

    Subclasses must implement `is_holiday()`.
    """

    # Weekend days (0=Monday, 6=Sunday)
    weekend_days: frozenset[int] = field(default_factory=lambda: DEFAULT_WEEKEND_DAYS)

    def __post_init__(self) -> None:
        if len(self.weekend_days) >= 7:
            raise ValueError("A calendar needs at least one non-weekend day")

    @abstractmethod
    def is_holiday(self, d: date) -> bool:
        """Check if a date is a holiday."""
        ...

    def is_weekend(self, d: date) -> bool:
        return d.weekday() in self.weekend_days

    def is_business_day(self, d: date) -> bool:
        """A business day is a non-weekend day that is not a holiday."""
        if self.is_weekend(d):
            return False
        return not self.is_holiday(d)

    def get_holidays_in_range(self, start: date, end: date) -> list[date]:
        """Holiday dates within [start, end]."""
        holidays = []
        current = start
        while current <= end:
            if self.is_holiday(current):
                holidays.append(current)
            current += timedelta(days=1)
        return holidays

    def _step(self, start: date, direction: int) -> date:
        """Move one day at a time until a business day is reached."""
        current = start
        for _ in range(MAX_SCAN_DAYS):
            current += timedelta(days=direction)
            if self.is_business_day(current):
                return current
        raise ValueError(f"No business day within {MAX_SCAN_DAYS} days of {start}")

    def add_business_days(self, start: date, days: int) -> date:
        """Add (or, for negative days, subtract) business days."""
        direction = 1 if days > 0 else -1
        current = start
        for _ in range(abs(days)):
            current = self._step(current, direction)
        return current

    def subtract_business_days(self, start: date, days: int) -> date:
        return self.add_business_days(start, -days)

    def business_days_between(self, start: date, end: date) -> int:
        """Count business days between two dates (start exclusive, end inclusive)."""
        if start >= end:
            return 0

        count = 0
        current = start + timedelta(days=1)
        while current <= end:
            if self.is_business_day(current):
                count += 1
            current += timedelta(days=1)
        return count

    def next_business_day(self, d: date) -> date:
        """The given date if it is a business day, else the next one."""
        if self.is_business_day(d):
            return d
        return self._step(d, 1)

    def previous_business_day(self, d: date) -> date:
        """The given date if it is a business day, else the previous one."""
        if self.is_business_day(d):
            return d
        return self._step(d, -1)
