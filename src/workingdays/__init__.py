"""
Working Days - Colombian business-calendar date arithmetic

Given a start instant, a number of working days and a number of working
hours, computes the resulting instant under Colombian labor rules:

- Monday to Friday, 08:00-17:00 America/Bogota
- Lunch break 12:00-13:00 excluded
- Public holidays from a holiday source

Quick Start:
    from workingdays import (
        HolidayOracle, RemoteHolidaySource, WorkingTimeCalculator,
    )

    calculator = WorkingTimeCalculator(
        oracle=HolidayOracle(RemoteHolidaySource()),
    )
    due = await calculator.calculate(start, days=1, hours=4)

Version: 1.0.0
"""
from __future__ import annotations

__version__ = "1.0.0"

from .calendars import (
    COLOMBIA_HOLIDAYS,
    ColombiaHolidayCalendar,
    HolidayCalendar,
    WorkCalendar,
    colombian_holidays,
)
from .clock import (
    COLOMBIA_CLOCK,
    COLOMBIA_TIMEZONE,
    ColombiaClock,
    format_utc_iso8601,
)
from .engine import (
    Normalizer,
    WorkingDaysStepper,
    WorkingHoursStepper,
    WorkingTimeCalculator,
    calculate_with_calendar,
)
from .exceptions import (
    CalendarWalkError,
    HolidaySourceError,
    InvalidParametersError,
    ServiceUnavailableError,
    WorkingDaysError,
)
from .holidays import (
    ComputedHolidaySource,
    FileHolidaySource,
    HolidayOracle,
    HolidaySource,
    RemoteHolidaySource,
    StaticHolidaySource,
)
from .models import (
    LUNCH_END_HOUR,
    LUNCH_START_HOUR,
    WORK_END_HOUR,
    WORK_START_HOUR,
    CalculationRequest,
    LocalClockReading,
)

__all__ = [
    "__version__",
    # Calendars
    "HolidayCalendar",
    "WorkCalendar",
    "ColombiaHolidayCalendar",
    "COLOMBIA_HOLIDAYS",
    "colombian_holidays",
    # Clock
    "ColombiaClock",
    "COLOMBIA_CLOCK",
    "COLOMBIA_TIMEZONE",
    "format_utc_iso8601",
    # Engine
    "Normalizer",
    "WorkingDaysStepper",
    "WorkingHoursStepper",
    "WorkingTimeCalculator",
    "calculate_with_calendar",
    # Exceptions
    "WorkingDaysError",
    "InvalidParametersError",
    "ServiceUnavailableError",
    "HolidaySourceError",
    "CalendarWalkError",
    # Holidays
    "HolidaySource",
    "HolidayOracle",
    "RemoteHolidaySource",
    "FileHolidaySource",
    "StaticHolidaySource",
    "ComputedHolidaySource",
    # Models
    "CalculationRequest",
    "LocalClockReading",
    "WORK_START_HOUR",
    "WORK_END_HOUR",
    "LUNCH_START_HOUR",
    "LUNCH_END_HOUR",
]
