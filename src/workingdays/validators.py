"""
Working Days Input Validation

Parses the raw query values of a working-days request. All validation
happens at the entry point, before any calendar computation starts.

Rules:
- days / hours: positive integer written as plain digits ("1", "24");
  no sign, no leading zeros, no decimals; at most MAX_WORKING_DAYS days
  and MAX_WORKING_HOURS hours
- at least one of days / hours must be present
- date: ISO 8601 in UTC with a literal Z suffix,
  YYYY-MM-DDTHH:MM:SSZ or YYYY-MM-DDTHH:MM:SS.sssZ

All validation failures raise InvalidParametersError.
"""
from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Optional

from .exceptions import InvalidParametersError
from .models import CalculationRequest

__all__ = [
    'POSITIVE_INTEGER_PATTERN',
    'ISO8601_UTC_PATTERN',
    'MAX_INTEGER_DIGITS',
    'parse_positive_integer',
    'parse_iso8601_utc',
    'parse_working_days_query',
]

# =============================================================================
# PRE-COMPILED REGEX PATTERNS
# =============================================================================

POSITIVE_INTEGER_PATTERN = re.compile(r'^[1-9][0-9]*$')

# Longer digit strings exceed every count limit
MAX_INTEGER_DIGITS = 9

ISO8601_UTC_PATTERN = re.compile(
    r'^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d{3})?Z$',
    re.ASCII,
)


# =============================================================================
# VALIDATION FUNCTIONS
# =============================================================================

def parse_positive_integer(value: str, field_name: str) -> int:
    """
    Parse a strictly positive integer.

    Raises:
        InvalidParametersError: If value is not plain digits greater than zero
    """
    if not POSITIVE_INTEGER_PATTERN.fullmatch(value):
        raise InvalidParametersError(
            message=f"Parameter '{field_name}' must be a positive integer",
            details={
                "field": field_name,
                "value": value[:50],
                "pattern": POSITIVE_INTEGER_PATTERN.pattern,
            },
        )
    if len(value) > MAX_INTEGER_DIGITS:
        raise InvalidParametersError(
            message=f"Parameter '{field_name}' is too large",
            details={"field": field_name, "value": value[:50]},
        )
    return int(value)


def parse_iso8601_utc(value: str, field_name: str = "date") -> datetime:
    """
    Parse a Z-suffixed ISO 8601 timestamp into an aware UTC datetime.

    Raises:
        InvalidParametersError: If the format or the calendar date is invalid
    """
    if not ISO8601_UTC_PATTERN.fullmatch(value):
        raise InvalidParametersError(
            message=f"Parameter '{field_name}' must be an ISO 8601 date in UTC with a Z suffix",
            details={
                "field": field_name,
                "value": value[:50],
                "pattern": ISO8601_UTC_PATTERN.pattern,
            },
        )

    fmt = "%Y-%m-%dT%H:%M:%S.%fZ" if "." in value else "%Y-%m-%dT%H:%M:%SZ"
    try:
        parsed = datetime.strptime(value, fmt)
    except ValueError as e:
        raise InvalidParametersError(
            message=f"Parameter '{field_name}' is not a valid date: {e}",
            details={"field": field_name, "value": value[:50]},
        ) from e

    return parsed.replace(tzinfo=timezone.utc)


def parse_working_days_query(
    days: Optional[str],
    hours: Optional[str],
    date: Optional[str],
    now: datetime,
) -> CalculationRequest:
    """
    Build a CalculationRequest from raw query values.

    Empty strings count as absent. A missing date means `now`.
    """
    if not days and not hours:
        raise InvalidParametersError(
            message="At least one of the parameters 'days' or 'hours' must be provided",
            details={"fields": ["days", "hours"]},
        )

    parsed_days = parse_positive_integer(days, "days") if days else 0
    parsed_hours = parse_positive_integer(hours, "hours") if hours else 0
    start = parse_iso8601_utc(date) if date else now

    return CalculationRequest(start=start, days=parsed_days, hours=parsed_hours)
