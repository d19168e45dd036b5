"""
HolidayPack Holiday Groups

A holiday group is a named, jurisdiction-agnostic bundle of holiday rules
(e.g. "ChristianHolidays"). Providers compose groups by name through a
GroupRegistry instead of inheriting from them, so any number of providers
can share a group without sharing state.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Union

from ..exceptions import DuplicateIdError, UnknownGroupError
from .rules import Activation, HolidayRule, rule


# =============================================================================
# Group
# =============================================================================

@dataclass(frozen=True)
class HolidayGroup:
    """
    Named, ordered bundle of holiday rules.

    Attributes:
        name: Group name used for references (e.g. "CommonHolidays")
        rules: Member rules in declaration order
        description: Human-readable description
    """
    name: str
    rules: tuple[HolidayRule, ...]
    description: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "rules", tuple(self.rules))
        # Same id is allowed only for disjoint activation windows.
        seen: dict[str, list[Activation]] = {}
        for member in self.rules:
            window = member.activation or Activation()
            for earlier in seen.get(member.id, ()):
                if window.overlaps(earlier):
                    raise DuplicateIdError(
                        message=f"Group '{self.name}' defines '{member.id}' twice "
                                f"for overlapping years ({earlier} and {window})",
                        details={"group": self.name, "holiday_id": member.id},
                    )
            seen.setdefault(member.id, []).append(window)

    def members(self) -> tuple[HolidayRule, ...]:
        return self.rules

    def member_ids(self) -> list[str]:
        return [r.id for r in self.rules]

    def select(self, only: Optional[Iterable[str]] = None) -> tuple[HolidayRule, ...]:
        """
        Member rules, optionally restricted to the given ids.

        Selected rules keep the group's declaration order.

        Raises:
            UnknownGroupError: If a requested id is not a member
        """
        if only is None:
            return self.rules
        wanted = set(only)
        missing = wanted - set(self.member_ids())
        if missing:
            raise UnknownGroupError(
                message=f"Group '{self.name}' has no member(s): {', '.join(sorted(missing))}",
                details={"group": self.name, "missing": sorted(missing)},
            )
        return tuple(r for r in self.rules if r.id in wanted)


@dataclass(frozen=True)
class GroupRef:
    """Reference to a group by name, optionally to a subset of its members."""
    name: str
    only: Optional[tuple[str, ...]] = None

    def __post_init__(self) -> None:
        if self.only is not None:
            object.__setattr__(self, "only", tuple(self.only))


GroupRefLike = Union[str, GroupRef]


def as_group_ref(value: GroupRefLike) -> GroupRef:
    if isinstance(value, GroupRef):
        return value
    return GroupRef(name=value)


# =============================================================================
# Registry
# =============================================================================

class GroupRegistry:
    """
    Name -> HolidayGroup lookup.

    Usage:
        registry = GroupRegistry([COMMON_HOLIDAYS, CHRISTIAN_HOLIDAYS])
        registry.get("ChristianHolidays")
    """

    def __init__(self, groups: Iterable[HolidayGroup] = ()):
        self._groups: dict[str, HolidayGroup] = {}
        for group in groups:
            self.register(group)

    def register(self, group: HolidayGroup) -> None:
        if group.name in self._groups:
            raise DuplicateIdError(
                message=f"Holiday group '{group.name}' is already registered",
                details={"group": group.name},
            )
        self._groups[group.name] = group

    def get(self, name: str) -> HolidayGroup:
        """
        Raises:
            UnknownGroupError: If no group has that name
        """
        try:
            return self._groups[name]
        except KeyError:
            raise UnknownGroupError(
                message=f"Unknown holiday group '{name}'",
                details={"group": name, "known": sorted(self._groups)},
            ) from None

    def resolve(self, ref: GroupRefLike) -> tuple[HolidayRule, ...]:
        """Member rules selected by a reference."""
        ref = as_group_ref(ref)
        return self.get(ref.name).select(ref.only)

    def names(self) -> list[str]:
        return list(self._groups)

    def copy(self) -> GroupRegistry:
        return GroupRegistry(self._groups.values())

    def __contains__(self, name: object) -> bool:
        return name in self._groups

    def __len__(self) -> int:
        return len(self._groups)


# =============================================================================
# Built-in Groups
# =============================================================================

COMMON_HOLIDAYS = HolidayGroup(
    name="CommonHolidays",
    description="Secular holidays and observances shared by many jurisdictions",
    rules=(
        rule("newYearsDay", {"en_US": "New Year's Day", "fr_FR": "Jour de l'An"}, "january 1"),
        rule("valentinesDay", {"en_US": "Valentine's Day", "fr_FR": "Saint-Valentin"}, "february 14"),
        rule(
            "internationalWorkersDay",
            {"en_US": "International Workers' Day", "fr_FR": "Fête du Travail"},
            "may 1",
        ),
        rule(
            "victoryInEuropeDay",
            {"en_US": "Victory in Europe Day", "fr_FR": "Victoire 1945"},
            "may 8",
            since=1945,
        ),
        rule("worldAnimalDay", {"en_US": "World Animal Day", "fr_FR": "Journée mondiale des animaux"}, "october 4"),
        rule("stMartinsDay", {"en_US": "St. Martin's Day", "fr_FR": "Saint-Martin"}, "november 11"),
        rule("armisticeDay", {"en_US": "Armistice Day", "fr_FR": "Armistice 1918"}, "november 11", since=1918),
        rule("newYearsEve", {"en_US": "New Year's Eve", "fr_FR": "Saint-Sylvestre"}, "december 31"),
    ),
)

CHRISTIAN_HOLIDAYS = HolidayGroup(
    name="ChristianHolidays",
    description="Western Christian feasts, fixed and Easter-relative",
    rules=(
        rule("epiphany", {"en_US": "Epiphany", "fr_FR": "Épiphanie"}, "january 6"),
        rule("ashWednesday", {"en_US": "Ash Wednesday", "fr_FR": "Mercredi des Cendres"}, "easter -46"),
        rule("maundyThursday", {"en_US": "Maundy Thursday", "fr_FR": "Jeudi saint"}, "easter -3"),
        rule("goodFriday", {"en_US": "Good Friday", "fr_FR": "Vendredi saint"}, "easter -2"),
        rule("easter", {"en_US": "Easter Sunday", "fr_FR": "Pâques"}, "easter"),
        rule("easterMonday", {"en_US": "Easter Monday", "fr_FR": "Lundi de Pâques"}, "easter +1"),
        rule("ascensionDay", {"en_US": "Ascension Day", "fr_FR": "Ascension"}, "easter +39"),
        rule("pentecost", {"en_US": "Whitsunday", "fr_FR": "Pentecôte"}, "easter +49"),
        rule("pentecostMonday", {"en_US": "Whitmonday", "fr_FR": "Lundi de Pentecôte"}, "easter +50"),
        rule("corpusChristi", {"en_US": "Corpus Christi", "fr_FR": "Fête-Dieu"}, "easter +60"),
        rule("assumptionOfMary", {"en_US": "Assumption of Mary", "fr_FR": "Assomption"}, "august 15"),
        rule("allSaintsDay", {"en_US": "All Saints' Day", "fr_FR": "Toussaint"}, "november 1"),
        rule("christmasEve", {"en_US": "Christmas Eve", "fr_FR": "Veille de Noël"}, "december 24"),
        rule("christmasDay", {"en_US": "Christmas", "fr_FR": "Noël"}, "december 25"),
        rule("secondChristmasDay", {"en_US": "Second Christmas Day", "fr_FR": "Lendemain de Noël"}, "december 26"),
    ),
)

BUILTIN_GROUPS = (COMMON_HOLIDAYS, CHRISTIAN_HOLIDAYS)


def default_group_registry() -> GroupRegistry:
    """Fresh registry holding the built-in groups."""
    return GroupRegistry(BUILTIN_GROUPS)
