"""
Working Days Exception Hierarchy

Domain-specific exceptions for the Colombian working-time calculator.
All exceptions carry a machine-readable code for logging, plus the
error name and HTTP status used at the service boundary.

Exception codes follow the pattern: WD_<CATEGORY>_<SPECIFIC>
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class WorkingDaysError(Exception):
    """
    Base exception for all working-days errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code (WD_*)
        details: Additional context about the error
        error_name: Error identifier exposed in API responses
        status_code: HTTP status used by the API layer
    """
    message: str
    code: str = "WD_INTERNAL_ERROR"
    details: dict[str, Any] = field(default_factory=dict)
    error_name: str = "ServiceUnavailable"
    status_code: int = 503

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Serialize exception for logging."""
        result: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result

    def to_response(self) -> dict[str, str]:
        """Body returned to API clients."""
        return {"error": self.error_name, "message": self.message}


# =============================================================================
# Input Errors
# =============================================================================

@dataclass
class InvalidParametersError(WorkingDaysError):
    """Days, hours or date argument is malformed. Never retried."""
    code: str = "WD_INVALID_PARAMETERS"
    error_name: str = "InvalidParameters"
    status_code: int = 400


# =============================================================================
# Availability Errors
# =============================================================================

@dataclass
class ServiceUnavailableError(WorkingDaysError):
    """A dependency of the calculation is not available."""
    code: str = "WD_SERVICE_UNAVAILABLE"


@dataclass
class HolidaySourceError(ServiceUnavailableError):
    """Holiday list could not be fetched or parsed."""
    code: str = "WD_HOLIDAY_SOURCE_UNAVAILABLE"


# =============================================================================
# Consistency Errors
# =============================================================================

@dataclass
class CalendarWalkError(WorkingDaysError):
    """Day walk exceeded the plausible number of consecutive non-working days."""
    code: str = "WD_CALENDAR_WALK_EXCEEDED"
