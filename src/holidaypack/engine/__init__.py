"""
HolidayPack Engine

Holiday rules, shared holiday groups, and jurisdiction providers that
combine them into a per-year holiday collection.
"""
from __future__ import annotations

from .groups import (
    BUILTIN_GROUPS,
    CHRISTIAN_HOLIDAYS,
    COMMON_HOLIDAYS,
    GroupRef,
    GroupRegistry,
    HolidayGroup,
    as_group_ref,
    default_group_registry,
)
from .provider import (
    DEFAULT_WEEKEND_DAYS,
    JurisdictionProvider,
    ProviderDefinition,
    ProviderRegistry,
)
from .rules import Activation, HolidayRule, active_from, rule

__all__ = [
    # Rules
    "Activation",
    "HolidayRule",
    "active_from",
    "rule",
    # Groups
    "BUILTIN_GROUPS",
    "CHRISTIAN_HOLIDAYS",
    "COMMON_HOLIDAYS",
    "GroupRef",
    "GroupRegistry",
    "HolidayGroup",
    "as_group_ref",
    "default_group_registry",
    # Providers
    "DEFAULT_WEEKEND_DAYS",
    "JurisdictionProvider",
    "ProviderDefinition",
    "ProviderRegistry",
]
