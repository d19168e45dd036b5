"""
HolidayPack Provider Pack Loader

Loads and validates provider packs from YAML or JSON files and converts
them into ProviderDefinitions.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import ValidationError

from ..engine import GroupRef, HolidayRule, ProviderDefinition, rule
from ..exceptions import (
    HolidayPackError,
    PackLoadError,
    PackValidationError,
    PackVersionMismatch,
)
from .schema import (
    SCHEMA_VERSION,
    WEEKDAY_NUMBERS,
    GroupRefSchema,
    HolidaySchema,
    ProviderPackSchema,
    check_schema_version,
    validate_provider_pack,
)

logger = logging.getLogger(__name__)

PACK_SUFFIXES = {".yaml", ".yml", ".json"}

# Packs shipped with the library
BUILTIN_PACKS_DIR = Path(__file__).parent / "data"


# =============================================================================
# Schema to Model Converters
# =============================================================================

def _convert_group_ref(schema: Union[str, GroupRefSchema]) -> GroupRef:
    if isinstance(schema, str):
        return GroupRef(name=schema)
    return GroupRef(name=schema.name, only=schema.only)


def _convert_holiday(schema: HolidaySchema) -> HolidayRule:
    return rule(
        schema.id,
        schema.names,
        schema.date,
        since=schema.since,
        until=schema.until,
        year_offset=schema.year_offset,
        cross_year=schema.cross_year,
    )


def _convert_provider_pack(schema: ProviderPackSchema) -> ProviderDefinition:
    return ProviderDefinition(
        id=schema.id,
        name=schema.name,
        timezone=schema.timezone,
        description=schema.description,
        weekend_days=frozenset(WEEKDAY_NUMBERS[d] for d in schema.weekend_days),
        groups=tuple(_convert_group_ref(g) for g in schema.groups),
        rules=tuple(_convert_holiday(h) for h in schema.holidays),
    )


# =============================================================================
# Provider Pack Loader
# =============================================================================

class ProviderPackLoader:
    """
    Loads provider packs from YAML or JSON files.

    Usage:
        loader = ProviderPackLoader()
        definition = loader.load("path/to/ca_on.yaml")
    """

    def __init__(self, strict_version: bool = True):
        """
        Args:
            strict_version: If True, reject packs with incompatible schema versions
        """
        self.strict_version = strict_version
        self._definitions: dict[str, ProviderDefinition] = {}

    def load(self, path: Union[str, Path]) -> ProviderDefinition:
        """
        Load a provider pack from a file.

        Raises:
            PackLoadError: If file cannot be read or parsed
            PackValidationError: If validation fails
            PackVersionMismatch: If schema version incompatible
        """
        path = Path(path)
        try:
            data = self._load_file(path)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise PackLoadError(
                message=f"Failed to load provider pack: {e}",
                details={"path": str(path), "error": str(e)},
            ) from e

        definition = self.load_data(data, source=str(path))
        logger.debug(
            "Loaded provider pack %s from %s", definition.id, path,
            extra={"provider_id": definition.id, "pack_path": str(path)},
        )
        return definition

    def load_data(self, data: Any, source: str = "<data>") -> ProviderDefinition:
        """Validate and convert an already-parsed pack."""
        if not isinstance(data, dict):
            raise PackValidationError(
                message="Provider pack must be a mapping",
                details={"path": source, "type": type(data).__name__},
            )

        if self.strict_version and not check_schema_version(data):
            pack_version = data.get("schema_version", "unknown")
            raise PackVersionMismatch(
                message=f"Schema version mismatch: pack has {pack_version}, expected {SCHEMA_VERSION}",
                details={
                    "path": source,
                    "pack_version": pack_version,
                    "expected_version": SCHEMA_VERSION,
                },
            )

        try:
            schema = validate_provider_pack(data)
        except ValidationError as e:
            raise PackValidationError(
                message=f"Provider pack validation failed: {e.error_count()} errors",
                details={"errors": e.errors(include_url=False), "path": source},
            ) from e

        try:
            definition = _convert_provider_pack(schema)
        except HolidayPackError as e:
            raise PackValidationError(
                message=f"Provider pack '{schema.id}' has an invalid definition: {e.message}",
                details={"path": source, "error": e.to_dict()},
                provider_id=schema.id,
            ) from e

        self._definitions[definition.id] = definition
        return definition

    def load_directory(self, directory: Union[str, Path]) -> list[ProviderDefinition]:
        """Load every pack file in a directory, sorted by file name."""
        directory = Path(directory)
        if not directory.is_dir():
            raise PackLoadError(
                message=f"Provider pack directory not found: {directory}",
                details={"path": str(directory)},
            )
        return [
            self.load(path)
            for path in sorted(directory.iterdir())
            if path.suffix.lower() in PACK_SUFFIXES
        ]

    def _load_file(self, path: Path) -> Any:
        """Load data from YAML or JSON file."""
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() == ".json":
                return json.load(f)
            return yaml.safe_load(f)

    def get_definition(self, provider_id: str) -> Optional[ProviderDefinition]:
        """Get a previously loaded definition by id."""
        return self._definitions.get(provider_id)

    def list_definitions(self) -> list[str]:
        return list(self._definitions.keys())


# =============================================================================
# Convenience Functions
# =============================================================================

def load_provider_pack(path: Union[str, Path]) -> ProviderDefinition:
    """Load a provider pack from a file with a temporary loader."""
    return ProviderPackLoader().load(path)


def load_provider_pack_from_string(content: str, format: str = "yaml") -> ProviderDefinition:
    """
    Load a provider pack from a YAML or JSON string.

    Raises:
        PackLoadError: If the content cannot be parsed
    """
    try:
        if format.lower() == "json":
            data = json.loads(content)
        else:
            data = yaml.safe_load(content)
    except (ValueError, yaml.YAMLError) as e:
        raise PackLoadError(
            message=f"Failed to parse provider pack: {e}",
            details={"format": format, "error": str(e)},
        ) from e
    return ProviderPackLoader().load_data(data, source=f"<{format} string>")


def load_builtin_packs() -> list[ProviderDefinition]:
    """Provider packs shipped with the library."""
    return ProviderPackLoader().load_directory(BUILTIN_PACKS_DIR)
