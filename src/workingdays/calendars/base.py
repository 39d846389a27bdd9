"""
Work Calendar Base

Provides the protocol and default implementation for the calendars the
engine walks over: weekday check, holiday membership, and the
working-hours window.

Holidays are held as Colombia-local "YYYY-MM-DD" strings, the same form
the holiday sources deliver them in.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Protocol, Union, runtime_checkable

from ..models import WEEKEND_DAYS, LocalClockReading, is_within_working_hours


@runtime_checkable
class HolidayCalendar(Protocol):
    """
    Protocol for calendars used by the engine.

    Implementations decide which local dates are working days and which
    local times fall within working hours.
    """

    def is_holiday(self, d: date) -> bool:
        ...

    def is_working_day(self, d: date) -> bool:
        ...

    def is_working_hours(self, reading: LocalClockReading) -> bool:
        ...


@dataclass(frozen=True)
class WorkCalendar:
    """
    Monday-Friday calendar with an explicit holiday set.

    A working day is a weekday that is not a holiday. Working hours are
    08:00-17:00 excluding the 12:00-13:00 lunch break.
    """

    holidays: frozenset[str] = field(default_factory=frozenset)

    def is_weekday(self, d: date) -> bool:
        """Monday to Friday."""
        return d.weekday() not in WEEKEND_DAYS

    def is_holiday(self, d: date) -> bool:
        return d.isoformat() in self.holidays

    def is_working_day(self, d: date) -> bool:
        """A working day is a weekday that is not a holiday."""
        if not self.is_weekday(d):
            return False
        return not self.is_holiday(d)

    def is_working_hours(self, reading: LocalClockReading) -> bool:
        return is_within_working_hours(reading.minutes_of_day)

    @classmethod
    def from_dates(cls, *dates: Union[date, str]) -> WorkCalendar:
        """Create a calendar from holiday dates or YYYY-MM-DD strings."""
        return cls(holidays=_as_date_strings(dates))


def _as_date_strings(dates: Iterable[Union[date, str]]) -> frozenset[str]:
    return frozenset(d.isoformat() if isinstance(d, date) else d for d in dates)
