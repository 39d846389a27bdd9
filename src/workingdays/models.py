"""
Working Days Models

Schedule constants and the small value types shared by the clock,
the calendars and the engine.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Union

from .exceptions import InvalidParametersError


# =============================================================================
# Work Schedule (America/Bogota)
# =============================================================================

# Saturday and Sunday (date.weekday numbering)
WEEKEND_DAYS = frozenset({5, 6})

WORK_START_HOUR = 8
WORK_END_HOUR = 17
LUNCH_START_HOUR = 12
LUNCH_END_HOUR = 13

# Same boundaries as minutes since local midnight
WORK_START_MINUTES = WORK_START_HOUR * 60    # 480
WORK_END_MINUTES = WORK_END_HOUR * 60        # 1020
LUNCH_START_MINUTES = LUNCH_START_HOUR * 60  # 720
LUNCH_END_MINUTES = LUNCH_END_HOUR * 60      # 780

MINUTES_PER_DAY = 24 * 60

# Longest run of consecutive non-working days a day walk may cross
MAX_CALENDAR_WALK = 366

# Upper bounds on a single request (about 38 years of working time)
MAX_WORKING_DAYS = 10_000
MAX_WORKING_HOURS = MAX_WORKING_DAYS * 8


def is_within_working_hours(minutes_of_day: int) -> bool:
    """08:00 <= t < 17:00 and not 12:00 <= t < 13:00."""
    if minutes_of_day < WORK_START_MINUTES or minutes_of_day >= WORK_END_MINUTES:
        return False
    return not LUNCH_START_MINUTES <= minutes_of_day < LUNCH_END_MINUTES


# =============================================================================
# Value Types
# =============================================================================

@dataclass(frozen=True)
class LocalClockReading:
    """Colombia-local wall clock fields for an instant."""
    year: int
    month: int
    day: int
    hour: int
    minute: int

    @property
    def date(self) -> date:
        return date(self.year, self.month, self.day)

    @property
    def minutes_of_day(self) -> int:
        return self.hour * 60 + self.minute


Hours = Union[int, float]


@dataclass(frozen=True)
class CalculationRequest:
    """
    Start instant plus the working days and hours to add.

    Both counts default to zero, are never negative and are capped at
    MAX_WORKING_DAYS / MAX_WORKING_HOURS.
    """
    start: datetime
    days: int = 0
    hours: Hours = 0

    def __post_init__(self) -> None:
        if self.start.tzinfo is None:
            raise InvalidParametersError(
                message="Start instant must be timezone-aware",
                details={"field": "date", "value": self.start.isoformat()},
            )
        if isinstance(self.days, bool) or not isinstance(self.days, int) or self.days < 0:
            raise InvalidParametersError(
                message="Days must be a non-negative integer",
                details={"field": "days", "value": self.days},
            )
        if self.days > MAX_WORKING_DAYS:
            raise InvalidParametersError(
                message=f"Days must not exceed {MAX_WORKING_DAYS}",
                details={"field": "days", "value": self.days, "max": MAX_WORKING_DAYS},
            )
        if isinstance(self.hours, bool) or not isinstance(self.hours, (int, float)) or not self.hours >= 0:
            raise InvalidParametersError(
                message="Hours must be a non-negative number",
                details={"field": "hours", "value": self.hours},
            )
        if self.hours > MAX_WORKING_HOURS:
            raise InvalidParametersError(
                message=f"Hours must not exceed {MAX_WORKING_HOURS}",
                details={"field": "hours", "value": self.hours, "max": MAX_WORKING_HOURS},
            )
