"""
HolidayPack Models

Holiday records, localized names and the per-year holiday collection.
"""
from __future__ import annotations

from .collection import HolidayCollection
from .holiday import HolidayRecord
from .names import DEFAULT_LOCALE, LocalizedNames, language_of

__all__ = [
    "DEFAULT_LOCALE",
    "HolidayCollection",
    "HolidayRecord",
    "LocalizedNames",
    "language_of",
]
