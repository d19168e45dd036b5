"""
HolidayPack Holiday Record

One resolved holiday: id, localized names, a timezone-aware date at local
midnight, and the locale requested by the caller.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

from .names import LocalizedNames


@dataclass(frozen=True)
class HolidayRecord:
    """
    A dated, named holiday for one provider and year.

    Attributes:
        id: Short stable identifier, unique within a provider+year (e.g. "canadaDay")
        names: Locale tag -> display name
        date: Timezone-aware datetime at local midnight
        locale: Locale requested by the caller
        cross_year: True if the rule deliberately dates this outside the bound year
    """
    id: str
    names: LocalizedNames
    date: datetime
    locale: str
    cross_year: bool = False

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Holiday id must be non-empty")
        if self.date.tzinfo is None:
            raise ValueError(f"Holiday '{self.id}' date must be timezone-aware")
        if not isinstance(self.names, LocalizedNames):
            object.__setattr__(self, "names", LocalizedNames(self.names))

    @property
    def name(self) -> str:
        """Display name for the record's locale, falling back to the id."""
        return self.names.lookup(self.locale) or self.id

    @property
    def day(self) -> date:
        """Calendar date without time or zone."""
        return self.date.date()

    @property
    def timezone(self) -> str:
        return str(self.date.tzinfo)

    @property
    def sort_key(self) -> tuple[date, str]:
        return (self.day, self.id)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON/API output."""
        return {
            "id": self.id,
            "name": self.name,
            "names": dict(self.names),
            "date": self.day.isoformat(),
            "timezone": self.timezone,
            "locale": self.locale,
            "cross_year": self.cross_year,
        }
