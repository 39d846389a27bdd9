"""
Working Time Normalizer

Snaps an arbitrary instant backward to the nearest valid working instant:

1. While the local date is not a working day, step back one calendar day
   and set the clock to 17:00.
2. On a working day outside working hours: before 08:00 -> 08:00,
   lunch -> 12:00, at/after 17:00 -> 17:00.

Never moves time forward except as a side effect of landing on an
earlier day.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from ..calendars import HolidayCalendar
from ..clock import COLOMBIA_CLOCK, ColombiaClock
from ..exceptions import CalendarWalkError
from ..models import (
    LUNCH_END_MINUTES,
    LUNCH_START_HOUR,
    LUNCH_START_MINUTES,
    MAX_CALENDAR_WALK,
    WORK_END_HOUR,
    WORK_END_MINUTES,
    WORK_START_HOUR,
    WORK_START_MINUTES,
)


@dataclass
class Normalizer:
    """
    Backward snap to working time.

    Usage:
        normalizer = Normalizer(calendar=WorkCalendar())
        start = normalizer.normalize(instant)
    """

    calendar: HolidayCalendar
    clock: ColombiaClock = field(default_factory=lambda: COLOMBIA_CLOCK)

    def normalize(self, instant: datetime) -> datetime:
        current = self.clock.to_utc(instant)

        walked = 0
        while not self.calendar.is_working_day(self.clock.to_local(current).date):
            walked += 1
            if walked > MAX_CALENDAR_WALK:
                raise CalendarWalkError(
                    message=f"No working day within {MAX_CALENDAR_WALK} days before {instant.isoformat()}",
                    details={"start": instant.isoformat(), "walked": walked},
                )
            current = self.clock.shift_days(current, -1)
            current = self.clock.set_time(current, WORK_END_HOUR, 0)

        reading = self.clock.to_local(current)
        if self.calendar.is_working_hours(reading):
            return current

        minutes = reading.minutes_of_day
        if minutes < WORK_START_MINUTES:
            return self.clock.set_time(current, WORK_START_HOUR, 0)
        if LUNCH_START_MINUTES <= minutes < LUNCH_END_MINUTES:
            return self.clock.set_time(current, LUNCH_START_HOUR, 0)
        if minutes >= WORK_END_MINUTES:
            return self.clock.set_time(current, WORK_END_HOUR, 0)
        return current


def normalize(
    instant: datetime,
    calendar: HolidayCalendar,
    clock: ColombiaClock = COLOMBIA_CLOCK,
) -> datetime:
    """Convenience wrapper around Normalizer.normalize."""
    return Normalizer(calendar=calendar, clock=clock).normalize(instant)
