"""
HolidayPack Provider Calendar

Business day calendar over a jurisdiction's holidays, spanning any number
of years. One JurisdictionProvider is built lazily per year and cached.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..engine import GroupRegistry, JurisdictionProvider, ProviderDefinition
from ..resolver import MAX_YEAR, MIN_YEAR
from .base import BaseCalendar


@dataclass
class ProviderCalendar(BaseCalendar):
    """
    Business days for one jurisdiction.

    Usage:
        calendar = ProviderCalendar.for_definition(CANADA)
        calendar.add_business_days(date(2023, 9, 1), 1)  # 2023-09-05, after Labour Day
    """

    definition: Optional[ProviderDefinition] = None
    locale: Optional[str] = None
    groups: Optional[GroupRegistry] = None
    _providers: dict[int, JurisdictionProvider] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        if self.definition is None:
            raise ValueError("ProviderCalendar requires a provider definition")
        super().__post_init__()

    @classmethod
    def for_definition(
        cls,
        definition: ProviderDefinition,
        locale: Optional[str] = None,
        groups: Optional[GroupRegistry] = None,
    ) -> ProviderCalendar:
        """Calendar using the definition's own weekend days."""
        return cls(
            weekend_days=definition.weekend_days,
            definition=definition,
            locale=locale,
            groups=groups,
        )

    def provider_for(self, year: int) -> JurisdictionProvider:
        if year not in self._providers:
            self._providers[year] = JurisdictionProvider(
                self.definition,
                year,
                locale=self.locale,
                registry=self.groups,
            )
        return self._providers[year]

    def _providers_around(self, d: date) -> list[JurisdictionProvider]:
        # Cross-year records live in the neighbouring year's provider.
        return [
            self.provider_for(year)
            for year in (d.year, d.year - 1, d.year + 1)
            if MIN_YEAR <= year <= MAX_YEAR
        ]

    def is_holiday(self, d: date) -> bool:
        return any(p.is_holiday(d) for p in self._providers_around(d))

    def get_holiday_name(self, d: date) -> Optional[str]:
        """Display name of the first holiday on a date, if any."""
        for provider in self._providers_around(d):
            holidays = provider.collection.on(d)
            if holidays:
                return holidays[0].name
        return None
