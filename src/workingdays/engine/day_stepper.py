"""
Working Days Stepper

Advances an instant by whole working days. Each step moves one calendar
day and lands on a target time; only working days count towards the
total, weekends and holidays are stepped over.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..calendars import HolidayCalendar
from ..clock import COLOMBIA_CLOCK, ColombiaClock
from ..exceptions import CalendarWalkError, InvalidParametersError
from ..models import (
    LUNCH_END_MINUTES,
    LUNCH_START_HOUR,
    LUNCH_START_MINUTES,
    MAX_CALENDAR_WALK,
    WORK_END_HOUR,
    WORK_END_MINUTES,
    WORK_START_HOUR,
    is_within_working_hours,
)


def resolve_target_time(
    preserve_hour: Optional[int] = None,
    preserve_minute: Optional[int] = None,
) -> tuple[int, int]:
    """
    Time of day the stepped instant lands on.

    - preserved time inside working hours: kept as is
    - at/after 17:00: 17:00
    - inside lunch: 12:00
    - before 08:00, or nothing preserved: 08:00
    """
    if preserve_hour is None or preserve_minute is None:
        return WORK_START_HOUR, 0

    minutes = preserve_hour * 60 + preserve_minute
    if is_within_working_hours(minutes):
        return preserve_hour, preserve_minute
    if minutes >= WORK_END_MINUTES:
        return WORK_END_HOUR, 0
    if LUNCH_START_MINUTES <= minutes < LUNCH_END_MINUTES:
        return LUNCH_START_HOUR, 0
    return WORK_START_HOUR, 0


@dataclass
class WorkingDaysStepper:
    """
    Adds working days on a calendar.

    Usage:
        stepper = WorkingDaysStepper(calendar=WorkCalendar())
        due = stepper.add_working_days(start, 3)
    """

    calendar: HolidayCalendar
    clock: ColombiaClock = field(default_factory=lambda: COLOMBIA_CLOCK)

    def add_working_days(
        self,
        instant: datetime,
        days: int,
        preserve_hour: Optional[int] = None,
        preserve_minute: Optional[int] = None,
    ) -> datetime:
        """
        Move forward by `days` working days.

        Args:
            instant: Starting instant
            days: Working days to add (zero returns the instant unchanged)
            preserve_hour: Hour of day to land on, if it is valid working time
            preserve_minute: Minute to land on together with preserve_hour

        Returns:
            Instant on the nth working day at the target time
        """
        if days < 0:
            raise InvalidParametersError(
                message="Working days to add cannot be negative",
                details={"field": "days", "value": days},
            )

        current = self.clock.to_utc(instant)
        if days == 0:
            return current

        target_hour, target_minute = resolve_target_time(preserve_hour, preserve_minute)
        remaining = days
        skipped = 0

        while remaining > 0:
            current = self.clock.shift_days(current, 1)
            current = self.clock.set_time(current, target_hour, target_minute)

            if self.calendar.is_working_day(self.clock.to_local(current).date):
                remaining -= 1
                skipped = 0
            else:
                skipped += 1
                self._check_walk(instant, skipped)

        return current

    def advance_to_next_working_day(self, instant: datetime) -> datetime:
        """Next working day after the instant's date, at 08:00."""
        current = self.clock.to_utc(instant)
        skipped = 0

        while True:
            current = self.clock.shift_days(current, 1)
            current = self.clock.set_time(current, WORK_START_HOUR, 0)
            if self.calendar.is_working_day(self.clock.to_local(current).date):
                return current
            skipped += 1
            self._check_walk(instant, skipped)

    def _check_walk(self, start: datetime, skipped: int) -> None:
        if skipped > MAX_CALENDAR_WALK:
            raise CalendarWalkError(
                message=f"No working day within {MAX_CALENDAR_WALK} days after {start.isoformat()}",
                details={"start": start.isoformat(), "skipped": skipped},
            )


def add_working_days(
    instant: datetime,
    days: int,
    calendar: HolidayCalendar,
    preserve_hour: Optional[int] = None,
    preserve_minute: Optional[int] = None,
    clock: ColombiaClock = COLOMBIA_CLOCK,
) -> datetime:
    """Convenience wrapper around WorkingDaysStepper.add_working_days."""
    stepper = WorkingDaysStepper(calendar=calendar, clock=clock)
    return stepper.add_working_days(instant, days, preserve_hour, preserve_minute)
