"""
HolidayPack Localized Names

Validated, immutable mapping of locale tag to display name.

Fallback order used by lookup():
1. Exact locale tag (e.g. "fr_CA")
2. First entry with the same language (e.g. "fr_FR" or "fr" for "fr_CA")
3. The default locale ("en_US")
"""
from __future__ import annotations

import re
from collections.abc import Mapping
from types import MappingProxyType
from typing import Iterator, Optional

from ..exceptions import InvalidNamesError

DEFAULT_LOCALE = "en_US"

LOCALE_PATTERN = re.compile(r"^[a-z]{2,3}(_[A-Z]{2})?$")


def language_of(locale: str) -> str:
    """Language part of a locale tag ("fr_CA" -> "fr")."""
    return locale.split("_", 1)[0]


class LocalizedNames(Mapping):
    """Immutable locale -> name mapping with at least one entry."""

    __slots__ = ("_names",)

    def __init__(self, names: Mapping[str, str]):
        if isinstance(names, LocalizedNames):
            self._names = names._names
            return
        if not isinstance(names, Mapping) or not names:
            raise InvalidNamesError(
                message="Holiday names must be a non-empty mapping of locale to name",
                details={"names": repr(names)},
            )
        errors = []
        for locale, name in names.items():
            if not isinstance(locale, str) or not LOCALE_PATTERN.match(locale):
                errors.append(f"invalid locale tag {locale!r}")
            if not isinstance(name, str) or not name.strip():
                errors.append(f"empty name for locale {locale!r}")
        if errors:
            raise InvalidNamesError(
                message="Invalid holiday names: " + "; ".join(errors),
                details={"errors": errors},
            )
        self._names = MappingProxyType(dict(names))

    def __getitem__(self, locale: str) -> str:
        return self._names[locale]

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __hash__(self) -> int:
        return hash(frozenset(self._names.items()))

    def __repr__(self) -> str:
        return f"LocalizedNames({dict(self._names)!r})"

    def lookup(self, locale: Optional[str]) -> Optional[str]:
        """Best display name for a locale, or None if nothing applies."""
        if locale:
            if locale in self._names:
                return self._names[locale]
            language = language_of(locale)
            for tag, name in self._names.items():
                if language_of(tag) == language:
                    return name
        return self._names.get(DEFAULT_LOCALE)
