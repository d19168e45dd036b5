"""
HolidayPack Calendar Tests

Business day arithmetic over jurisdiction holidays.
"""
from __future__ import annotations

from datetime import date

import pytest

from holidaypack import CANADA, HolidayCalendar, ProviderCalendar
from tests.conftest import make_definition, make_rule


@pytest.fixture
def calendar() -> ProviderCalendar:
    return ProviderCalendar.for_definition(CANADA)


class TestProviderCalendar:

    def test_satisfies_protocol(self, calendar: ProviderCalendar) -> None:
        assert isinstance(calendar, HolidayCalendar)

    def test_requires_definition(self) -> None:
        with pytest.raises(ValueError):
            ProviderCalendar()

    def test_rejects_all_weekend(self) -> None:
        with pytest.raises(ValueError):
            ProviderCalendar(weekend_days=frozenset(range(7)), definition=CANADA)

    def test_is_holiday(self, calendar: ProviderCalendar) -> None:
        assert calendar.is_holiday(date(2023, 7, 1))
        assert calendar.is_holiday(date(1999, 12, 26))
        assert not calendar.is_holiday(date(2023, 7, 2))

    def test_is_business_day(self, calendar: ProviderCalendar) -> None:
        assert not calendar.is_business_day(date(2023, 9, 4))  # Labour Day
        assert not calendar.is_business_day(date(2023, 9, 9))  # Saturday
        assert calendar.is_business_day(date(2023, 9, 5))

    def test_providers_cached_per_year(self, calendar: ProviderCalendar) -> None:
        assert calendar.provider_for(2023) is calendar.provider_for(2023)
        assert calendar.provider_for(2024).year == 2024

    def test_holidays_in_range(self, calendar: ProviderCalendar) -> None:
        assert calendar.get_holidays_in_range(date(2023, 12, 1), date(2023, 12, 31)) == [
            date(2023, 12, 25),
            date(2023, 12, 26),
        ]

    def test_holiday_name(self, calendar: ProviderCalendar) -> None:
        assert calendar.get_holiday_name(date(2023, 7, 1)) == "Canada Day"
        assert calendar.get_holiday_name(date(2023, 7, 2)) is None

    def test_holiday_name_localized(self) -> None:
        calendar = ProviderCalendar.for_definition(CANADA, locale="fr_CA")
        assert calendar.get_holiday_name(date(2023, 11, 11)) == "Jour du Souvenir"


class TestBusinessDayArithmetic:

    def test_add_skips_weekend(self, calendar: ProviderCalendar) -> None:
        # Canada Day 2023 falls on a Saturday; no observed day is added
        assert calendar.add_business_days(date(2023, 6, 30), 1) == date(2023, 7, 3)

    def test_add_skips_holiday(self, calendar: ProviderCalendar) -> None:
        assert calendar.add_business_days(date(2023, 9, 1), 1) == date(2023, 9, 5)

    def test_add_zero(self, calendar: ProviderCalendar) -> None:
        assert calendar.add_business_days(date(2023, 9, 4), 0) == date(2023, 9, 4)

    def test_subtract(self, calendar: ProviderCalendar) -> None:
        assert calendar.subtract_business_days(date(2023, 12, 27), 1) == date(2023, 12, 22)

    def test_between_spans_years(self, calendar: ProviderCalendar) -> None:
        assert calendar.business_days_between(date(2023, 12, 22), date(2024, 1, 2)) == 4
        assert calendar.business_days_between(date(2024, 1, 2), date(2023, 12, 22)) == 0

    def test_next_and_previous(self, calendar: ProviderCalendar) -> None:
        assert calendar.next_business_day(date(2023, 12, 25)) == date(2023, 12, 27)
        assert calendar.next_business_day(date(2023, 12, 27)) == date(2023, 12, 27)
        assert calendar.previous_business_day(date(2024, 1, 1)) == date(2023, 12, 29)

    def test_custom_weekend(self) -> None:
        definition = make_definition(weekend_days={4, 5})
        calendar = ProviderCalendar.for_definition(definition)
        assert calendar.is_weekend(date(2023, 9, 1))  # Friday
        assert calendar.is_business_day(date(2023, 9, 3))  # Sunday

    def test_cross_year_holiday(self) -> None:
        eve = make_rule("previousNewYearsEve", "december 31", year_offset=-1, cross_year=True)
        calendar = ProviderCalendar.for_definition(make_definition(rules=[eve]))
        assert calendar.is_holiday(date(2023, 12, 31))
        assert not calendar.is_holiday(date(2023, 12, 30))
        assert calendar.get_holiday_name(date(2023, 12, 31)) == "previousNewYearsEve"
        assert calendar.get_holiday_name(date(2023, 12, 30)) is None
