"""
HolidayPack Providers

Built-in jurisdiction definitions and the default provider registry.

Built-in jurisdictions:
- CA: Canada (federal), defined in Python
- CA-ON: Ontario, from the bundled provider pack
- US: United States federal, from the bundled provider pack

Extra packs are picked up from HOLIDAYPACK_PACKS_DIR when it is set.

Usage:
    from holidaypack.providers import create

    provider = create("CA", 2023, locale="fr_CA")
    for holiday in provider.all():
        print(holiday.day, holiday.name)
"""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from ..config import Settings
from ..engine import JurisdictionProvider, ProviderRegistry
from ..packs import ProviderPackLoader, load_builtin_packs
from .canada import CANADA

logger = logging.getLogger(__name__)

BUILTIN_DEFINITIONS = (CANADA,)


def build_registry(settings: Optional[Settings] = None) -> ProviderRegistry:
    """Fresh registry with built-in definitions plus any configured packs."""
    settings = settings or Settings.from_env()
    registry = ProviderRegistry(BUILTIN_DEFINITIONS)
    for definition in load_builtin_packs():
        registry.register(definition)
    if settings.packs_dir is not None:
        for definition in ProviderPackLoader().load_directory(settings.packs_dir):
            registry.register(definition)
        logger.debug("Loaded extra provider packs from %s", settings.packs_dir)
    return registry


@lru_cache(maxsize=1)
def default_registry() -> ProviderRegistry:
    """Process-wide registry, built on first use."""
    return build_registry()


def create(
    provider_id: str,
    year: int,
    locale: Optional[str] = None,
    timezone: Optional[str] = None,
) -> JurisdictionProvider:
    """
    Build the holidays of a registered jurisdiction for one year.

    Raises:
        UnknownProviderError: If provider_id is not registered
    """
    if locale is None:
        locale = Settings.from_env().default_locale
    return default_registry().create(provider_id, year, locale=locale, timezone=timezone)


__all__ = [
    "BUILTIN_DEFINITIONS",
    "CANADA",
    "build_registry",
    "create",
    "default_registry",
]
