"""
HolidayPack Jurisdiction Providers

A ProviderDefinition is immutable jurisdiction data: its own holiday rules
plus references to shared holiday groups. A JurisdictionProvider binds a
definition to one year, timezone and locale and evaluates it exactly once.

Evaluation order (which decides the order duplicates are detected in):
1. Own rules, in declaration order
2. Group references, in declaration order, members in group order

A rule whose activation predicate is false for the bound year is skipped.
Two active rules producing the same id abort construction.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Iterable, Iterator, Optional, Union

from ..exceptions import (
    DuplicateIdError,
    HolidayPackError,
    ProviderStateError,
    UnknownProviderError,
)
from ..models import DEFAULT_LOCALE, HolidayCollection, HolidayRecord
from ..resolver import get_zone, validate_year
from .groups import GroupRef, GroupRegistry, as_group_ref, default_group_registry
from .rules import HolidayRule

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime]

# Weekend days (0=Monday, 6=Sunday)
DEFAULT_WEEKEND_DAYS = frozenset({5, 6})


# =============================================================================
# Definition
# =============================================================================

@dataclass(frozen=True)
class ProviderDefinition:
    """
    Holiday data for one jurisdiction.

    Attributes:
        id: Jurisdiction code, typically ISO 3166 (e.g. "CA", "CA-ON")
        name: Human-readable jurisdiction name
        timezone: IANA zone anchoring all resolved dates
        rules: Jurisdiction-specific holiday rules
        groups: Shared holiday groups this jurisdiction composes
        weekend_days: Non-working weekdays
    """
    id: str
    name: str
    timezone: str
    rules: tuple[HolidayRule, ...] = ()
    groups: tuple[GroupRef, ...] = ()
    weekend_days: frozenset[int] = field(default_factory=lambda: DEFAULT_WEEKEND_DAYS)
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Provider id must be non-empty")
        get_zone(self.timezone)
        object.__setattr__(self, "rules", tuple(self.rules))
        object.__setattr__(self, "groups", tuple(as_group_ref(g) for g in self.groups))
        object.__setattr__(self, "weekend_days", frozenset(self.weekend_days))

    @property
    def group_names(self) -> list[str]:
        return [g.name for g in self.groups]


# =============================================================================
# Provider
# =============================================================================

@dataclass(frozen=True)
class _Source:
    """Where an included rule came from, for error reporting."""
    rule: HolidayRule
    origin: str

    def __str__(self) -> str:
        return self.origin


class JurisdictionProvider:
    """
    Holidays of one jurisdiction for one year.

    Year, timezone and locale are fixed at construction; the collection is
    built once and read-only afterwards.

    Usage:
        provider = JurisdictionProvider(CANADA, 2023, locale="fr_CA")
        provider.get("canadaDay").name  # "Fête du Canada"

    Raises (at construction):
        InvalidYearError, InvalidTimezoneError: Bad inputs
        UnknownGroupError: A referenced group does not exist
        DuplicateIdError, YearMismatchError: Data authoring defects
        UnsupportedExpressionError, OutOfRangeError: Rule resolution failures
    """

    def __init__(
        self,
        definition: ProviderDefinition,
        year: int,
        locale: Optional[str] = None,
        timezone: Optional[str] = None,
        registry: Optional[GroupRegistry] = None,
    ):
        self.definition = definition
        self.year = validate_year(year)
        self.timezone = timezone if timezone is not None else definition.timezone
        get_zone(self.timezone)
        self.locale = locale or DEFAULT_LOCALE

        registry = registry if registry is not None else default_group_registry()
        self._sources = self._collect_sources(registry)
        self._collection: Optional[HolidayCollection] = None
        self.initialize()

    @property
    def id(self) -> str:
        return self.definition.id

    @property
    def collection(self) -> HolidayCollection:
        if self._collection is None:
            raise ProviderStateError(
                message="Provider has not been initialized",
                provider_id=self.id,
            )
        return self._collection

    def _collect_sources(self, registry: GroupRegistry) -> list[_Source]:
        sources = [_Source(r, "own rules") for r in self.definition.rules]
        for ref in self.definition.groups:
            try:
                members = registry.resolve(ref)
            except HolidayPackError as e:
                e.provider_id = self.id
                raise
            sources.extend(_Source(r, f"group '{ref.name}'") for r in members)
        return sources

    def initialize(self) -> None:
        """
        Evaluate every active rule and populate the collection.

        Runs once, from the constructor. The collection is only published
        if every rule succeeds.

        Raises:
            ProviderStateError: If already initialized
        """
        if self._collection is not None:
            raise ProviderStateError(
                message="Provider is already initialized",
                details={"year": self.year},
                provider_id=self.id,
            )

        collection = HolidayCollection(year=self.year, provider_id=self.id)
        origins: dict[str, _Source] = {}
        log_extra = {"provider_id": self.id, "year": self.year}

        for source in self._sources:
            holiday_rule = source.rule
            if not holiday_rule.is_active(self.year):
                logger.debug(
                    "Skipping %s from %s: %s",
                    holiday_rule.id, source, holiday_rule.activation,
                    extra={**log_extra, "holiday_id": holiday_rule.id},
                )
                continue

            if holiday_rule.id in origins:
                raise DuplicateIdError(
                    message=f"Holiday id '{holiday_rule.id}' produced by both "
                            f"{origins[holiday_rule.id]} and {source}",
                    details={
                        "holiday_id": holiday_rule.id,
                        "year": self.year,
                        "first_source": str(origins[holiday_rule.id]),
                        "second_source": str(source),
                    },
                    provider_id=self.id,
                )

            try:
                record = holiday_rule(self.year, self.timezone, self.locale)
            except HolidayPackError as e:
                e.provider_id = self.id
                e.details.setdefault("holiday_id", holiday_rule.id)
                raise

            origins[holiday_rule.id] = source
            collection.insert(record)

        self._collection = collection
        logger.debug(
            "Initialized %s for %d with %d holidays",
            self.id, self.year, len(collection),
            extra=log_extra,
        )

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get(self, holiday_id: str) -> Optional[HolidayRecord]:
        return self.collection.get(holiday_id)

    def all(self) -> list[HolidayRecord]:
        return self.collection.all()

    def is_holiday(self, day: DateLike) -> bool:
        return self.collection.contains(day)

    def is_weekend_day(self, day: DateLike) -> bool:
        return day.weekday() in self.definition.weekend_days

    def is_working_day(self, day: DateLike) -> bool:
        """A working day is neither a weekend day nor a holiday."""
        return not self.is_weekend_day(day) and not self.is_holiday(day)

    def between(self, start: DateLike, end: DateLike, inclusive: bool = True) -> list[HolidayRecord]:
        return self.collection.between(start, end, inclusive=inclusive)

    def holiday_names(self) -> dict[str, str]:
        return self.collection.names()

    def holiday_dates(self) -> list[date]:
        return self.collection.dates()

    def __iter__(self) -> Iterator[HolidayRecord]:
        return iter(self.collection)

    def __len__(self) -> int:
        return len(self.collection)

    def __repr__(self) -> str:
        return (
            f"JurisdictionProvider(id={self.id!r}, year={self.year}, "
            f"timezone={self.timezone!r}, locale={self.locale!r})"
        )


# =============================================================================
# Registry
# =============================================================================

class ProviderRegistry:
    """
    Jurisdiction id -> ProviderDefinition lookup, plus provider bootstrap.

    Usage:
        registry = ProviderRegistry([CANADA])
        provider = registry.create("CA", 2023, locale="fr_CA")
    """

    def __init__(
        self,
        definitions: Iterable[ProviderDefinition] = (),
        groups: Optional[GroupRegistry] = None,
    ):
        self.groups = groups if groups is not None else default_group_registry()
        self._definitions: dict[str, ProviderDefinition] = {}
        for definition in definitions:
            self.register(definition)

    def register(self, definition: ProviderDefinition) -> None:
        if definition.id in self._definitions:
            raise DuplicateIdError(
                message=f"Provider '{definition.id}' is already registered",
                details={"provider": definition.id},
            )
        self._definitions[definition.id] = definition

    def get(self, provider_id: str) -> ProviderDefinition:
        """
        Raises:
            UnknownProviderError: If no provider has that id
        """
        try:
            return self._definitions[provider_id]
        except KeyError:
            raise UnknownProviderError(
                message=f"Unknown holiday provider '{provider_id}'",
                details={"known": sorted(self._definitions)},
                provider_id=provider_id,
            ) from None

    def create(
        self,
        provider_id: str,
        year: int,
        locale: Optional[str] = None,
        timezone: Optional[str] = None,
    ) -> JurisdictionProvider:
        """Build and initialize a provider for one year."""
        return JurisdictionProvider(
            self.get(provider_id),
            year,
            locale=locale,
            timezone=timezone,
            registry=self.groups,
        )

    def ids(self) -> list[str]:
        return sorted(self._definitions)

    def __contains__(self, provider_id: object) -> bool:
        return provider_id in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)
