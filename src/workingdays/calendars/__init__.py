"""
Working Days Calendars

Calendars for working-day and working-hour checks.

Provides:
- HolidayCalendar protocol for custom implementations
- WorkCalendar: Monday-Friday, 08:00-17:00 minus lunch, explicit holiday set
- ColombiaHolidayCalendar: Colombian public holidays computed offline

Usage:
    from workingdays.calendars import WorkCalendar, COLOMBIA_HOLIDAYS

    calendar = WorkCalendar.from_dates("2025-01-06", "2025-03-24")
    calendar.is_working_day(date(2025, 1, 6))  # False

    COLOMBIA_HOLIDAYS.holiday_strings([2025])  # {"2025-01-01", ...}
"""
from __future__ import annotations

from .base import (
    HolidayCalendar,
    WorkCalendar,
)
from .colombia import (
    COLOMBIA_HOLIDAYS,
    ColombiaHolidayCalendar,
    colombian_holidays,
)

__all__ = [
    # Protocols and base classes
    "HolidayCalendar",
    "WorkCalendar",
    # Colombia
    "ColombiaHolidayCalendar",
    "COLOMBIA_HOLIDAYS",
    "colombian_holidays",
]
