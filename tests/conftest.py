"""
Pytest configuration and fixtures for HolidayPack tests.

Provides helper factories for rules, groups and provider definitions.
"""
import pytest

from holidaypack import (
    GroupRegistry,
    HolidayGroup,
    ProviderDefinition,
    default_group_registry,
    rule,
)
from holidaypack.providers import CANADA


# =============================================================================
# Factory Helpers
# =============================================================================

def make_rule(holiday_id: str, expression: str = "january 1", **kwargs):
    """Create a HolidayRule with an English name derived from its id."""
    return rule(holiday_id, {"en_US": holiday_id}, expression, **kwargs)


def make_definition(
    rules=(),
    groups=(),
    provider_id: str = "XX",
    timezone: str = "UTC",
    **kwargs,
) -> ProviderDefinition:
    """Create a ProviderDefinition with test defaults."""
    return ProviderDefinition(
        id=provider_id,
        name=f"Test jurisdiction {provider_id}",
        timezone=timezone,
        rules=tuple(rules),
        groups=tuple(groups),
        **kwargs,
    )


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def groups() -> GroupRegistry:
    """Fresh registry with the built-in groups."""
    return default_group_registry()


@pytest.fixture
def extra_group() -> HolidayGroup:
    """Small custom group overlapping the built-in Christian group on 'easter'."""
    return HolidayGroup(
        name="ExtraHolidays",
        rules=(
            make_rule("easter", "easter"),
            make_rule("midsummer", "june 24"),
        ),
    )


@pytest.fixture
def canada() -> ProviderDefinition:
    return CANADA
