"""
HolidayPack Provider Pack Schemas

Pydantic models for validating provider pack YAML/JSON files.

A provider pack describes one jurisdiction: its timezone, weekend days,
the shared holiday groups it composes and its own holiday rules. Date
expressions are written in the resolver's text vocabulary
("second monday of october", "easter -2", ...).

Schema versioning:
- schema_version field tracks breaking changes
- Loaders should check version compatibility
"""
from __future__ import annotations

from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator


# =============================================================================
# Schema Version
# =============================================================================

SCHEMA_VERSION = "1.0.0"


# =============================================================================
# Enums as Literals (for YAML validation)
# =============================================================================

WeekdayValue = Literal[
    "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"
]

WEEKDAY_NUMBERS: dict[str, int] = {
    "monday": 0, "tuesday": 1, "wednesday": 2, "thursday": 3,
    "friday": 4, "saturday": 5, "sunday": 6,
}


# =============================================================================
# Component Schemas
# =============================================================================

class GroupRefSchema(BaseModel):
    """Schema for a reference to a shared holiday group."""
    name: str = Field(..., description="Registered group name (e.g. 'ChristianHolidays')")
    only: Optional[list[str]] = Field(
        None, description="Member ids to include (omit for the whole group)"
    )

    model_config = {"extra": "forbid"}


class HolidaySchema(BaseModel):
    """Schema for one jurisdiction-specific holiday rule."""
    id: str = Field(..., min_length=1, description="Holiday id (e.g. 'canadaDay')")
    names: dict[str, str] = Field(..., description="Locale tag -> display name")
    date: str = Field(..., description="Date expression (e.g. 'first monday of september')")
    since: Optional[int] = Field(None, description="First year the holiday applies")
    until: Optional[int] = Field(None, description="Last year the holiday applies")
    year_offset: int = Field(0, description="Resolve against year + offset")
    cross_year: bool = Field(False, description="Date may fall outside the bound year")
    description: Optional[str] = Field(None, description="Human-readable description")

    model_config = {"extra": "forbid"}

    @field_validator("names")
    @classmethod
    def validate_names(cls, v: dict[str, str]) -> dict[str, str]:
        if not v:
            raise ValueError("names must contain at least one locale")
        return v

    @model_validator(mode="after")
    def validate_window(self) -> "HolidaySchema":
        if self.since is not None and self.until is not None and self.since > self.until:
            raise ValueError(f"since ({self.since}) is after until ({self.until})")
        if self.year_offset and not self.cross_year:
            raise ValueError("year_offset requires cross_year: true")
        return self


class ProviderPackSchema(BaseModel):
    """Root schema for a provider pack."""
    schema_version: str = Field(SCHEMA_VERSION, description="Pack schema version")
    id: str = Field(..., min_length=1, description="Jurisdiction code (e.g. 'CA-ON')")
    name: str = Field(..., description="Jurisdiction name")
    timezone: str = Field(..., description="IANA timezone")
    description: str = Field("", description="Human-readable description")
    weekend_days: list[WeekdayValue] = Field(
        default_factory=lambda: ["saturday", "sunday"],
        description="Non-working weekdays",
    )
    groups: list[Union[str, GroupRefSchema]] = Field(
        default_factory=list,
        description="Shared holiday groups to compose",
    )
    holidays: list[HolidaySchema] = Field(
        default_factory=list,
        description="Jurisdiction-specific holiday rules",
    )

    @field_validator("id")
    @classmethod
    def validate_id(cls, v: str) -> str:
        return v.upper()

    model_config = {
        "extra": "forbid",  # Reject unknown fields
    }


# =============================================================================
# Validation Helpers
# =============================================================================

def validate_provider_pack(data: dict[str, Any]) -> ProviderPackSchema:
    """
    Validate a provider pack dictionary against the schema.

    Raises:
        pydantic.ValidationError: If validation fails
    """
    return ProviderPackSchema.model_validate(data)


def check_schema_version(data: dict[str, Any]) -> bool:
    """True if the pack's major schema version matches ours."""
    pack_version = str(data.get("schema_version", SCHEMA_VERSION))
    pack_major = pack_version.split(".")[0]
    current_major = SCHEMA_VERSION.split(".")[0]
    return pack_major == current_major
