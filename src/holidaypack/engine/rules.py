"""
HolidayPack Holiday Rules

A holiday rule maps (year, timezone, locale) to a HolidayRecord. Whether a
rule contributes at all for a given year is decided by an explicit
Activation predicate attached to the rule, never by conditionals inside
provider code.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional, Union

from ..exceptions import RuleDefinitionError
from ..models import HolidayRecord, LocalizedNames
from ..resolver import MAX_YEAR, MIN_YEAR, DateExpression, as_expression, resolve


# =============================================================================
# Activation Predicate
# =============================================================================

@dataclass(frozen=True)
class Activation:
    """
    Inclusive year bounds for a rule.

    Activation(since=1919) models "year >= 1919".
    """
    since: Optional[int] = None
    until: Optional[int] = None

    def __post_init__(self) -> None:
        if self.since is not None and self.until is not None and self.since > self.until:
            raise RuleDefinitionError(
                message=f"Activation window is empty: {self.since}..{self.until}",
                details={"since": self.since, "until": self.until},
            )

    def __call__(self, year: int) -> bool:
        if self.since is not None and year < self.since:
            return False
        if self.until is not None and year > self.until:
            return False
        return True

    def overlaps(self, other: Activation) -> bool:
        """True if some year satisfies both windows."""
        low = max(self.since if self.since is not None else MIN_YEAR,
                  other.since if other.since is not None else MIN_YEAR)
        high = min(self.until if self.until is not None else MAX_YEAR,
                   other.until if other.until is not None else MAX_YEAR)
        return low <= high

    def __str__(self) -> str:
        if self.since is not None and self.until is not None:
            return f"{self.since} <= year <= {self.until}"
        if self.since is not None:
            return f"year >= {self.since}"
        if self.until is not None:
            return f"year <= {self.until}"
        return "always"


def active_from(year: int) -> Activation:
    """Shorthand for Activation(since=year)."""
    return Activation(since=year)


# =============================================================================
# Holiday Rule
# =============================================================================

@dataclass(frozen=True)
class HolidayRule:
    """
    Declarative holiday rule.

    Attributes:
        id: Holiday id the rule produces
        names: Locale tag -> display name
        expression: When the holiday falls (object or text form)
        activation: Years in which the rule applies (None = every year)
        year_offset: Resolve against year + offset (requires cross_year)
        cross_year: The produced date may lie outside the bound year
    """
    id: str
    names: LocalizedNames
    expression: DateExpression
    activation: Optional[Activation] = None
    year_offset: int = 0
    cross_year: bool = False

    def __post_init__(self) -> None:
        if not self.id or not isinstance(self.id, str):
            raise RuleDefinitionError(
                message="Holiday rule id must be a non-empty string",
                details={"id": repr(self.id)},
            )
        object.__setattr__(self, "names", LocalizedNames(self.names))
        object.__setattr__(self, "expression", as_expression(self.expression))
        if self.year_offset and not self.cross_year:
            raise RuleDefinitionError(
                message=f"Rule '{self.id}' shifts the year by {self.year_offset} "
                        f"but is not marked cross_year",
                details={"id": self.id, "year_offset": self.year_offset},
            )

    def is_active(self, year: int) -> bool:
        return self.activation is None or self.activation(year)

    def __call__(self, year: int, timezone: str, locale: str) -> HolidayRecord:
        """Resolve this rule for a year into a HolidayRecord."""
        return HolidayRecord(
            id=self.id,
            names=self.names,
            date=resolve(self.expression, year + self.year_offset, timezone),
            locale=locale,
            cross_year=self.cross_year,
        )


def rule(
    id: str,
    names: Mapping[str, str],
    expression: Union[str, DateExpression],
    since: Optional[int] = None,
    until: Optional[int] = None,
    **kwargs,
) -> HolidayRule:
    """
    Build a HolidayRule with an optional since/until activation.

    Usage:
        rule("remembranceDay", {"en_US": "Remembrance Day"}, "november 11", since=1919)
    """
    activation = None
    if since is not None or until is not None:
        activation = Activation(since=since, until=until)
    return HolidayRule(
        id=id,
        names=names,
        expression=expression,
        activation=activation,
        **kwargs,
    )

