"""
Working Hours Stepper

Advances an instant by working hours, crossing the lunch break and the
end of the working day. The budget is tracked in whole minutes, so the
result always lands on an exact minute.

The input is expected inside working hours (or at 17:00), which the
calculator guarantees by normalizing first.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..calendars import HolidayCalendar
from ..clock import COLOMBIA_CLOCK, ColombiaClock
from ..exceptions import InvalidParametersError
from ..models import (
    LUNCH_END_HOUR,
    LUNCH_END_MINUTES,
    LUNCH_START_HOUR,
    LUNCH_START_MINUTES,
    WORK_END_MINUTES,
)
from .day_stepper import WorkingDaysStepper

logger = logging.getLogger(__name__)


@dataclass
class WorkingHoursStepper:
    """
    Adds working hours on a calendar.

    Usage:
        stepper = WorkingHoursStepper(calendar=WorkCalendar())
        due = stepper.add_working_hours(start, 2.5)
    """

    calendar: HolidayCalendar
    clock: ColombiaClock = field(default_factory=lambda: COLOMBIA_CLOCK)
    day_stepper: Optional[WorkingDaysStepper] = None

    def __post_init__(self) -> None:
        if self.day_stepper is None:
            self.day_stepper = WorkingDaysStepper(calendar=self.calendar, clock=self.clock)

    def add_working_hours(self, instant: datetime, hours: float) -> datetime:
        if hours < 0:
            raise InvalidParametersError(
                message="Working hours to add cannot be negative",
                details={"field": "hours", "value": hours},
            )

        current = self.clock.to_utc(instant)
        remaining = round(hours * 60)

        while remaining > 0:
            minutes = self.clock.to_local(current).minutes_of_day

            # Lunch consumes no budget
            if LUNCH_START_MINUTES <= minutes < LUNCH_END_MINUTES:
                current = self.clock.set_time(current, LUNCH_END_HOUR, 0)
                continue

            if minutes < LUNCH_START_MINUTES:
                limit = min(LUNCH_START_MINUTES - minutes, WORK_END_MINUTES - minutes)
            elif minutes < WORK_END_MINUTES:
                limit = WORK_END_MINUTES - minutes
            else:
                limit = 0

            step = min(remaining, limit)
            if step > 0:
                current = self.clock.add_hours(current, step / 60)
                remaining -= step

                reached = self.clock.to_local(current)
                if remaining > 0 and reached.hour == LUNCH_START_HOUR and reached.minute == 0:
                    current = self.clock.set_time(current, LUNCH_END_HOUR, 0)
                    continue

            if remaining > 0:
                current = self.day_stepper.advance_to_next_working_day(current)
                logger.debug(f"Day exhausted, {remaining} minutes carried to {current.isoformat()}")

        return current


def add_working_hours(
    instant: datetime,
    hours: float,
    calendar: HolidayCalendar,
    clock: ColombiaClock = COLOMBIA_CLOCK,
) -> datetime:
    """Convenience wrapper around WorkingHoursStepper.add_working_hours."""
    return WorkingHoursStepper(calendar=calendar, clock=clock).add_working_hours(instant, hours)
