"""
HolidayPack Provider Packs

YAML/JSON jurisdiction definitions, validated with pydantic and converted
to ProviderDefinitions.

Usage:
    from holidaypack.packs import load_provider_pack

    definition = load_provider_pack("packs/ca_on.yaml")
"""
from __future__ import annotations

from .loader import (
    BUILTIN_PACKS_DIR,
    ProviderPackLoader,
    load_builtin_packs,
    load_provider_pack,
    load_provider_pack_from_string,
)
from .schema import (
    SCHEMA_VERSION,
    GroupRefSchema,
    HolidaySchema,
    ProviderPackSchema,
    check_schema_version,
    validate_provider_pack,
)

__all__ = [
    "BUILTIN_PACKS_DIR",
    "ProviderPackLoader",
    "load_builtin_packs",
    "load_provider_pack",
    "load_provider_pack_from_string",
    "SCHEMA_VERSION",
    "GroupRefSchema",
    "HolidaySchema",
    "ProviderPackSchema",
    "check_schema_version",
    "validate_provider_pack",
]
