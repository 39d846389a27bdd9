"""
Working Time Calculator

Orchestrates a calculation in a fixed order:

1. normalize the start instant backward to working time
2. add working days, preserving the normalized time of day
3. add working hours

Zero counts are no-ops. The holiday set is awaited once; everything
after that is synchronous and pure, and runs in a worker thread so long
walks do not block the event loop.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime

from fastapi.concurrency import run_in_threadpool

from ..calendars import HolidayCalendar
from ..clock import COLOMBIA_CLOCK, ColombiaClock
from ..exceptions import InvalidParametersError
from ..holidays import HolidayOracle
from ..models import CalculationRequest, Hours
from .day_stepper import WorkingDaysStepper
from .hour_stepper import WorkingHoursStepper
from .normalizer import Normalizer

logger = logging.getLogger(__name__)


def calculate_with_calendar(
    calendar: HolidayCalendar,
    start: datetime,
    days: int = 0,
    hours: Hours = 0,
    clock: ColombiaClock = COLOMBIA_CLOCK,
) -> datetime:
    """
    Run normalize -> days -> hours on a given calendar.

    Args:
        calendar: Working-day calendar (holidays already resolved)
        start: Start instant (timezone-aware)
        days: Working days to add
        hours: Working hours to add, fractional allowed

    Returns:
        Resulting instant in UTC

    Raises:
        InvalidParametersError: If the counts are invalid or the result
            does not fit in a datetime
    """
    request = CalculationRequest(start=start, days=days, hours=hours)

    day_stepper = WorkingDaysStepper(calendar=calendar, clock=clock)
    hour_stepper = WorkingHoursStepper(calendar=calendar, clock=clock, day_stepper=day_stepper)

    try:
        normalized = Normalizer(calendar=calendar, clock=clock).normalize(request.start)
        reading = clock.to_local(normalized)

        after_days = normalized
        if request.days > 0:
            after_days = day_stepper.add_working_days(
                normalized, request.days, reading.hour, reading.minute
            )

        result = after_days
        if request.hours > 0:
            result = hour_stepper.add_working_hours(after_days, request.hours)
    except OverflowError as e:
        raise InvalidParametersError(
            message="Result falls outside the supported date range",
            details={"date": start.isoformat(), "days": request.days, "hours": request.hours},
        ) from e

    logger.debug(
        f"start={start.isoformat()} normalized={normalized.isoformat()} "
        f"days={request.days} hours={request.hours} result={result.isoformat()}"
    )
    return clock.to_utc(result)


@dataclass
class WorkingTimeCalculator:
    """
    Calculates working-time deadlines against the holiday oracle.

    Usage:
        calculator = WorkingTimeCalculator(oracle=HolidayOracle(RemoteHolidaySource()))
        due = await calculator.calculate(start, days=2, hours=4)
    """

    oracle: HolidayOracle
    clock: ColombiaClock = field(default_factory=lambda: COLOMBIA_CLOCK)

    async def calculate(
        self,
        start: datetime,
        days: int = 0,
        hours: Hours = 0,
    ) -> datetime:
        return await self.run(CalculationRequest(start=start, days=days, hours=hours))

    async def run(self, request: CalculationRequest) -> datetime:
        """Resolve the holiday calendar, then run the synchronous core in a worker thread."""
        calendar = await self.oracle.calendar()
        return await run_in_threadpool(
            calculate_with_calendar,
            calendar,
            request.start,
            request.days,
            request.hours,
            clock=self.clock,
        )
