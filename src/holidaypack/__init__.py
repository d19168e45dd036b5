"""
HolidayPack - Holiday Rule Evaluation Engine

HolidayPack computes the holidays of a jurisdiction for one calendar year.
Jurisdictions are declared as data: their own holiday rules plus references
to shared holiday groups (common holidays, Christian feasts, ...). Each rule
carries a date expression and an optional activation window, and resolves
to an immutable, timezone-aware HolidayRecord.

Key Features:
- Date expressions: fixed dates, nth weekday of month, weekday on or
  before/after a date, Easter-relative offsets
- Explicit activation predicates ("since 1919") instead of ad hoc conditionals
- Composition over named holiday groups, shared safely across providers
- Duplicate holiday ids are data errors, never silently overwritten
- YAML/JSON provider packs validated with pydantic
- Business day calendars over any provider

Quick Start:
    from holidaypack import create

    provider = create("CA", 2023, locale="fr_CA")
    provider.get("labourDay").day      # date(2023, 9, 4)
    provider.get("canadaDay").name     # "Fête du Canada"

    for holiday in provider.all():
        print(holiday.day, holiday.name)

Version: 0.1.0
"""
from __future__ import annotations

__version__ = "0.1.0"
__author__ = "HolidayPack Team"

# =============================================================================
# Exceptions
# =============================================================================
from .exceptions import (
    DuplicateIdError,
    HolidayPackError,
    InvalidNamesError,
    InvalidTimezoneError,
    InvalidYearError,
    OutOfRangeError,
    PackLoadError,
    PackValidationError,
    PackVersionMismatch,
    ProviderStateError,
    RuleDefinitionError,
    UnknownGroupError,
    UnknownProviderError,
    UnsupportedExpressionError,
    YearMismatchError,
)

# =============================================================================
# Resolver
# =============================================================================
from .resolver import (
    LAST,
    DateExpression,
    Direction,
    EasterOffset,
    FixedDate,
    NthWeekday,
    Weekday,
    WeekdayRelative,
    easter_sunday,
    parse_expression,
    resolve,
    resolve_date,
)

# =============================================================================
# Models
# =============================================================================
from .models import (
    DEFAULT_LOCALE,
    HolidayCollection,
    HolidayRecord,
    LocalizedNames,
)

# =============================================================================
# Engine
# =============================================================================
from .engine import (
    CHRISTIAN_HOLIDAYS,
    COMMON_HOLIDAYS,
    Activation,
    GroupRef,
    GroupRegistry,
    HolidayGroup,
    HolidayRule,
    JurisdictionProvider,
    ProviderDefinition,
    ProviderRegistry,
    active_from,
    default_group_registry,
    rule,
)

# =============================================================================
# Packs, Providers, Calendars, Config
# =============================================================================
from .packs import (
    ProviderPackLoader,
    load_provider_pack,
    load_provider_pack_from_string,
)
from .providers import CANADA, build_registry, create, default_registry
from .calendars import BaseCalendar, HolidayCalendar, ProviderCalendar
from .config import JSONFormatter, Settings, configure_logging

__all__ = [
    "__version__",
    # Exceptions
    "DuplicateIdError",
    "HolidayPackError",
    "InvalidNamesError",
    "InvalidTimezoneError",
    "InvalidYearError",
    "OutOfRangeError",
    "PackLoadError",
    "PackValidationError",
    "PackVersionMismatch",
    "ProviderStateError",
    "RuleDefinitionError",
    "UnknownGroupError",
    "UnknownProviderError",
    "UnsupportedExpressionError",
    "YearMismatchError",
    # Resolver
    "LAST",
    "DateExpression",
    "Direction",
    "EasterOffset",
    "FixedDate",
    "NthWeekday",
    "Weekday",
    "WeekdayRelative",
    "easter_sunday",
    "parse_expression",
    "resolve",
    "resolve_date",
    # Models
    "DEFAULT_LOCALE",
    "HolidayCollection",
    "HolidayRecord",
    "LocalizedNames",
    # Engine
    "CHRISTIAN_HOLIDAYS",
    "COMMON_HOLIDAYS",
    "Activation",
    "GroupRef",
    "GroupRegistry",
    "HolidayGroup",
    "HolidayRule",
    "JurisdictionProvider",
    "ProviderDefinition",
    "ProviderRegistry",
    "active_from",
    "default_group_registry",
    "rule",
    # Packs
    "ProviderPackLoader",
    "load_provider_pack",
    "load_provider_pack_from_string",
    # Providers
    "CANADA",
    "build_registry",
    "create",
    "default_registry",
    # Calendars
    "BaseCalendar",
    "HolidayCalendar",
    "ProviderCalendar",
    # Config
    "JSONFormatter",
    "Settings",
    "configure_logging",
]
