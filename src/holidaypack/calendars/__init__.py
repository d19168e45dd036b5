"""
HolidayPack Calendars

Business day calculations over jurisdiction holidays.

Usage:
    from holidaypack.calendars import ProviderCalendar
    from holidaypack.providers import CANADA

    calendar = ProviderCalendar.for_definition(CANADA)
    calendar.next_business_day(date(2023, 12, 25))
"""
from __future__ import annotations

from .base import MAX_SCAN_DAYS, BaseCalendar, HolidayCalendar
from .provider_calendar import ProviderCalendar

__all__ = [
    "MAX_SCAN_DAYS",
    "BaseCalendar",
    "HolidayCalendar",
    "ProviderCalendar",
]
