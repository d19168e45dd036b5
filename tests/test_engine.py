"""
HolidayPack Engine Tests

Tests for holiday rules, activation predicates, holiday groups and the
provider initialization algorithm.
"""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import date

import pytest

from holidaypack import (
    CHRISTIAN_HOLIDAYS,
    COMMON_HOLIDAYS,
    Activation,
    DuplicateIdError,
    GroupRef,
    GroupRegistry,
    HolidayGroup,
    InvalidTimezoneError,
    InvalidYearError,
    JurisdictionProvider,
    OutOfRangeError,
    ProviderStateError,
    RuleDefinitionError,
    UnknownGroupError,
    YearMismatchError,
    active_from,
    rule,
)
from tests.conftest import make_definition, make_rule


# =============================================================================
# Activation
# =============================================================================

class TestActivation:

    def test_since(self) -> None:
        predicate = Activation(since=1919)
        assert not predicate(1918)
        assert predicate(1919)
        assert predicate(2000)

    def test_until(self) -> None:
        predicate = Activation(until=1981)
        assert predicate(1981)
        assert not predicate(1982)

    def test_window(self) -> None:
        predicate = Activation(since=1990, until=1999)
        assert [y for y in range(1985, 2005) if predicate(y)] == list(range(1990, 2000))

    def test_empty_window_rejected(self) -> None:
        with pytest.raises(RuleDefinitionError):
            Activation(since=2000, until=1999)

    def test_str(self) -> None:
        assert str(active_from(1919)) == "year >= 1919"
        assert str(Activation()) == "always"

    def test_overlaps(self) -> None:
        assert Activation(since=1867, until=1981).overlaps(Activation(since=1981))
        assert not Activation(since=1867, until=1981).overlaps(Activation(since=1982))
        assert Activation().overlaps(Activation(until=1))
        assert not Activation(until=1999).overlaps(Activation(since=2000, until=2010))


# =============================================================================
# HolidayRule
# =============================================================================

class TestHolidayRule:

    def test_resolves_to_record(self) -> None:
        boxing = rule("boxingDay", {"en_US": "Boxing Day"}, "december 26")
        record = boxing(2024, "America/Toronto", "en_US")
        assert record.id == "boxingDay"
        assert record.day == date(2024, 12, 26)
        assert record.name == "Boxing Day"
        assert record.timezone == "America/Toronto"

    def test_text_expression_parsed_at_definition(self) -> None:
        from holidaypack import UnsupportedExpressionError

        with pytest.raises(UnsupportedExpressionError):
            rule("thanksgiving", {"en_US": "Thanksgiving"}, "second monday of ocotober")

    def test_is_active(self) -> None:
        remembrance = rule("remembranceDay", {"en_US": "Remembrance Day"}, "november 11", since=1919)
        assert not remembrance.is_active(1900)
        assert remembrance.is_active(1919)
        assert make_rule("always").is_active(1)

    def test_year_offset_requires_cross_year(self) -> None:
        with pytest.raises(RuleDefinitionError):
            make_rule("eve", "december 31", year_offset=-1)

    def test_cross_year_offset(self) -> None:
        eve = make_rule("previousNewYearsEve", "december 31", year_offset=-1, cross_year=True)
        record = eve(2024, "UTC", "en_US")
        assert record.day == date(2023, 12, 31)
        assert record.cross_year

    def test_empty_id_rejected(self) -> None:
        with pytest.raises(RuleDefinitionError):
            make_rule("")


# =============================================================================
# Groups
# =============================================================================

class TestHolidayGroup:

    def test_builtin_groups_are_registered(self, groups: GroupRegistry) -> None:
        assert set(groups.names()) == {"CommonHolidays", "ChristianHolidays"}
        assert groups.get("ChristianHolidays") is CHRISTIAN_HOLIDAYS

    def test_duplicate_member_rejected(self) -> None:
        with pytest.raises(DuplicateIdError):
            HolidayGroup(name="Broken", rules=(make_rule("a"), make_rule("a", "may 1")))

    def test_duplicate_member_in_overlapping_windows_rejected(self) -> None:
        with pytest.raises(DuplicateIdError):
            HolidayGroup(name="Broken", rules=(
                make_rule("a", since=1900, until=1950),
                make_rule("a", "may 1", since=1950),
            ))

    def test_renamed_member_in_disjoint_windows(self) -> None:
        group = HolidayGroup(name="NationalDays", rules=(
            rule("nationalDay", {"en_US": "Dominion Day"}, "july 1", since=1867, until=1981),
            rule("nationalDay", {"en_US": "Canada Day"}, "july 1", since=1982),
        ))
        registry = GroupRegistry([group])
        definition = make_definition(groups=["NationalDays"])
        assert JurisdictionProvider(definition, 1981, registry=registry).get("nationalDay").name == "Dominion Day"
        assert JurisdictionProvider(definition, 1982, registry=registry).get("nationalDay").name == "Canada Day"
        assert len(group.select(["nationalDay"])) == 2

    def test_select_keeps_group_order(self) -> None:
        selected = CHRISTIAN_HOLIDAYS.select(["christmasDay", "goodFriday"])
        assert [r.id for r in selected] == ["goodFriday", "christmasDay"]

    def test_select_unknown_member(self) -> None:
        with pytest.raises(UnknownGroupError):
            CHRISTIAN_HOLIDAYS.select(["easter", "diwali"])

    def test_unknown_group(self, groups: GroupRegistry) -> None:
        with pytest.raises(UnknownGroupError):
            groups.get("HinduHolidays")

    def test_duplicate_group_name(self, groups: GroupRegistry) -> None:
        with pytest.raises(DuplicateIdError):
            groups.register(HolidayGroup(name="CommonHolidays", rules=()))

    def test_members_resolve_for_any_year(self) -> None:
        for year in (1950, 2023, 2024):
            for member in COMMON_HOLIDAYS.members() + CHRISTIAN_HOLIDAYS.members():
                if member.is_active(year):
                    assert member(year, "UTC", "en_US").day.year == year

    def test_christian_dates_2023(self) -> None:
        days = {r.id: r(2023, "UTC", "en_US").day for r in CHRISTIAN_HOLIDAYS.members()}
        assert days["ashWednesday"] == date(2023, 2, 22)
        assert days["goodFriday"] == date(2023, 4, 7)
        assert days["easter"] == date(2023, 4, 9)
        assert days["easterMonday"] == date(2023, 4, 10)
        assert days["ascensionDay"] == date(2023, 5, 18)
        assert days["pentecost"] == date(2023, 5, 28)
        assert days["corpusChristi"] == date(2023, 6, 8)


# =============================================================================
# Provider Initialization
# =============================================================================

class TestProviderInitialization:

    def test_own_rules_and_groups(self, groups: GroupRegistry) -> None:
        definition = make_definition(
            rules=[make_rule("foundingDay", "march 3")],
            groups=["CommonHolidays", GroupRef("ChristianHolidays", only=("easter",))],
        )
        provider = JurisdictionProvider(definition, 2023, registry=groups)
        assert "foundingDay" in provider.collection
        assert "newYearsEve" in provider.collection
        assert "easter" in provider.collection
        assert "christmasDay" not in provider.collection

    def test_activation_threshold(self) -> None:
        definition = make_definition(rules=[
            rule("remembranceDay", {"en_US": "Remembrance Day"}, "november 11", since=1919),
        ])
        for year in (1800, 1900, 1918):
            assert JurisdictionProvider(definition, year).get("remembranceDay") is None
        for year in (1919, 1950, 2000):
            assert JurisdictionProvider(definition, year).get("remembranceDay").day == date(year, 11, 11)

    def test_group_member_keeps_own_predicate(self) -> None:
        definition = make_definition(groups=[GroupRef("CommonHolidays", only=("victoryInEuropeDay",))])
        assert len(JurisdictionProvider(definition, 1944)) == 0
        assert len(JurisdictionProvider(definition, 1945)) == 1

    def test_duplicate_between_own_rule_and_group(self) -> None:
        definition = make_definition(
            rules=[make_rule("christmasDay", "december 25")],
            groups=["ChristianHolidays"],
        )
        with pytest.raises(DuplicateIdError) as exc_info:
            JurisdictionProvider(definition, 2023)
        error = exc_info.value
        assert error.provider_id == "XX"
        assert error.details["first_source"] == "own rules"
        assert error.details["second_source"] == "group 'ChristianHolidays'"

    def test_duplicate_between_two_groups(self, groups: GroupRegistry, extra_group: HolidayGroup) -> None:
        groups.register(extra_group)
        definition = make_definition(groups=["ChristianHolidays", "ExtraHolidays"])
        with pytest.raises(DuplicateIdError) as exc_info:
            JurisdictionProvider(definition, 2023, registry=groups)
        assert exc_info.value.details["holiday_id"] == "easter"
        assert exc_info.value.details["first_source"] == "group 'ChristianHolidays'"

    def test_duplicate_detection_follows_declaration_order(
        self, groups: GroupRegistry, extra_group: HolidayGroup
    ) -> None:
        groups.register(extra_group)
        definition = make_definition(groups=["ExtraHolidays", "ChristianHolidays"])
        with pytest.raises(DuplicateIdError) as exc_info:
            JurisdictionProvider(definition, 2023, registry=groups)
        assert exc_info.value.details["first_source"] == "group 'ExtraHolidays'"

    def test_same_id_in_disjoint_windows_is_fine(self) -> None:
        definition = make_definition(rules=[
            rule("nationalDay", {"en_US": "Dominion Day"}, "july 1", since=1867, until=1981),
            rule("nationalDay", {"en_US": "Canada Day"}, "july 1", since=1982),
        ])
        assert JurisdictionProvider(definition, 1980).get("nationalDay").name == "Dominion Day"
        assert JurisdictionProvider(definition, 1982).get("nationalDay").name == "Canada Day"

    def test_unknown_group_at_construction(self) -> None:
        definition = make_definition(groups=["HinduHolidays"])
        with pytest.raises(UnknownGroupError) as exc_info:
            JurisdictionProvider(definition, 2023)
        assert exc_info.value.provider_id == "XX"

    def test_invalid_inputs(self) -> None:
        definition = make_definition(rules=[make_rule("a")])
        with pytest.raises(InvalidYearError):
            JurisdictionProvider(definition, 0)
        with pytest.raises(InvalidTimezoneError):
            JurisdictionProvider(definition, 2023, timezone="Nowhere/Special")
        with pytest.raises(InvalidTimezoneError):
            JurisdictionProvider(definition, 2023, timezone="")

    def test_invalid_definition_timezone(self) -> None:
        with pytest.raises(InvalidTimezoneError):
            make_definition(timezone="Nowhere/Special")

    def test_out_of_range_is_fatal(self) -> None:
        definition = make_definition(rules=[make_rule("leapDay", "february 29")])
        assert JurisdictionProvider(definition, 2024).get("leapDay").day == date(2024, 2, 29)
        with pytest.raises(OutOfRangeError) as exc_info:
            JurisdictionProvider(definition, 2023)
        assert exc_info.value.provider_id == "XX"
        assert exc_info.value.details["holiday_id"] == "leapDay"

    def test_year_mismatch_without_opt_in(self) -> None:
        definition = make_definition(rules=[make_rule("earlyMonday", "monday on or before january 3")])
        with pytest.raises(YearMismatchError):
            JurisdictionProvider(definition, 2021)
        # January 3, 2022 is a Monday
        assert JurisdictionProvider(definition, 2022).get("earlyMonday").day == date(2022, 1, 3)

    def test_cross_year_opt_in(self) -> None:
        definition = make_definition(rules=[
            make_rule("earlyMonday", "monday on or before january 3", cross_year=True),
        ])
        record = JurisdictionProvider(definition, 2021).get("earlyMonday")
        assert record.day == date(2020, 12, 28)
        assert record.cross_year

    def test_initialize_runs_once(self) -> None:
        provider = JurisdictionProvider(make_definition(rules=[make_rule("a")]), 2023)
        with pytest.raises(ProviderStateError):
            provider.initialize()
        assert len(provider) == 1

    def test_idempotent_construction(self, canada) -> None:
        first = JurisdictionProvider(canada, 2023, locale="fr_CA")
        second = JurisdictionProvider(canada, 2023, locale="fr_CA")
        assert first.collection == second.collection
        assert first.all() == second.all()

    def test_groups_shared_without_coupling(self, groups: GroupRegistry) -> None:
        a = JurisdictionProvider(make_definition(groups=["CommonHolidays"], provider_id="AA"), 2023, registry=groups)
        b = JurisdictionProvider(make_definition(groups=["CommonHolidays"], provider_id="BB"), 1900, registry=groups)
        assert a.get("newYearsDay").day == date(2023, 1, 1)
        assert b.get("newYearsDay").day == date(1900, 1, 1)
        assert a.get("victoryInEuropeDay") is not None
        assert b.get("victoryInEuropeDay") is None
        assert len(groups.get("CommonHolidays").members()) == 8

    def test_collection_ordering(self, canada) -> None:
        dates = [r.day for r in JurisdictionProvider(canada, 2023).all()]
        assert dates == sorted(dates)

    def test_skipped_rules_are_logged(self, caplog) -> None:
        caplog.set_level(logging.DEBUG, logger="holidaypack.engine.provider")
        definition = make_definition(rules=[make_rule("late", "may 1", since=2000)])
        JurisdictionProvider(definition, 1999)
        assert any("Skipping late" in message for message in caplog.messages)


class TestConcurrentEvaluation:

    def test_parallel_providers_match_sequential(self, canada) -> None:
        years = list(range(1900, 2040, 3))
        sequential = [JurisdictionProvider(canada, y).collection for y in years]
        with ThreadPoolExecutor(max_workers=4) as pool:
            parallel = list(pool.map(lambda y: JurisdictionProvider(canada, y).collection, years))
        assert parallel == sequential

    def test_failure_does_not_affect_other_providers(self) -> None:
        leap = make_definition(rules=[make_rule("leapDay", "february 29")])

        def build(year: int):
            try:
                return JurisdictionProvider(leap, year).get("leapDay").day
            except OutOfRangeError:
                return None

        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(build, [2023, 2024, 2025, 2028]))
        assert results == [None, date(2024, 2, 29), None, date(2028, 2, 29)]
