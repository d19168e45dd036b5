"""
HolidayPack Exception Hierarchy

Domain-specific exceptions for holiday rule evaluation.
All exceptions include error codes for tracking and logging.

Exception codes follow the pattern: HP_<CATEGORY>_<SPECIFIC>

Every failure raised while building a provider is fatal to that single
(provider, year) computation; no partial collection is ever returned.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class HolidayPackError(Exception):
    """
    Base exception for all HolidayPack errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code (HP_*)
        details: Additional context about the error
        provider_id: Jurisdiction the error relates to, if any
    """
    message: str
    code: str = "HP_INTERNAL_ERROR"
    details: dict[str, Any] = field(default_factory=dict)
    provider_id: Optional[str] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        parts = [f"[{self.code}] {self.message}"]
        if self.provider_id:
            parts.append(f"(provider: {self.provider_id})")
        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Serialize exception for logging/API responses."""
        result: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.provider_id:
            result["provider_id"] = self.provider_id
        return result


# =============================================================================
# Date Expression Errors
# =============================================================================

@dataclass
class UnsupportedExpressionError(HolidayPackError):
    """Date expression is outside the resolver's grammar."""
    code: str = "HP_UNSUPPORTED_EXPRESSION"


@dataclass
class OutOfRangeError(HolidayPackError):
    """Expression asks for a day that does not exist in the target month/year."""
    code: str = "HP_OUT_OF_RANGE"


# =============================================================================
# Input Validation Errors
# =============================================================================

@dataclass
class InvalidYearError(HolidayPackError):
    """Year is not a valid Gregorian year."""
    code: str = "HP_INVALID_YEAR"


@dataclass
class InvalidTimezoneError(HolidayPackError):
    """Timezone is not a known IANA zone identifier."""
    code: str = "HP_INVALID_TIMEZONE"


@dataclass
class InvalidNamesError(HolidayPackError):
    """Localized name map is empty or malformed."""
    code: str = "HP_INVALID_NAMES"


# =============================================================================
# Data Authoring Errors
# =============================================================================

@dataclass
class RuleDefinitionError(HolidayPackError):
    """Holiday rule is internally inconsistent."""
    code: str = "HP_RULE_DEFINITION"


@dataclass
class DuplicateIdError(HolidayPackError):
    """Two active rules (or two definitions) share the same id."""
    code: str = "HP_DUPLICATE_ID"


@dataclass
class YearMismatchError(HolidayPackError):
    """Rule produced a date outside the bound year without opting in."""
    code: str = "HP_YEAR_MISMATCH"


@dataclass
class UnknownGroupError(HolidayPackError):
    """Referenced holiday group (or group member) is not defined."""
    code: str = "HP_UNKNOWN_GROUP"


@dataclass
class UnknownProviderError(HolidayPackError):
    """Requested jurisdiction provider is not registered."""
    code: str = "HP_UNKNOWN_PROVIDER"


@dataclass
class ProviderStateError(HolidayPackError):
    """Provider lifecycle violated (e.g. initialized twice)."""
    code: str = "HP_PROVIDER_STATE"


# =============================================================================
# Pack Errors
# =============================================================================

@dataclass
class PackLoadError(HolidayPackError):
    """Failed to read or parse a provider pack file."""
    code: str = "HP_PACK_LOAD_ERROR"


@dataclass
class PackValidationError(HolidayPackError):
    """Provider pack schema validation failed."""
    code: str = "HP_PACK_VALIDATION_ERROR"


@dataclass
class PackVersionMismatch(HolidayPackError):
    """Provider pack schema version is not supported."""
    code: str = "HP_PACK_VERSION_MISMATCH"
