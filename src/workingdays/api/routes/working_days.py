"""Working days calculation endpoint."""

import logging
from typing import Optional

from fastapi import APIRouter, Query, Request

from workingdays.api.schemas import ErrorResponse, WorkingDaysResponse
from workingdays.clock import format_utc_iso8601
from workingdays.engine import WorkingTimeCalculator
from workingdays.exceptions import ServiceUnavailableError, WorkingDaysError
from workingdays.validators import parse_working_days_query

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Working Days"])


@router.get(
    "/working-days",
    response_model=WorkingDaysResponse,
    responses={400: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
)
async def working_days(
    request: Request,
    days: Optional[str] = Query(None, description="Working days to add (positive integer)"),
    hours: Optional[str] = Query(None, description="Working hours to add (positive integer)"),
    date: Optional[str] = Query(None, description="Start instant, ISO 8601 UTC with Z suffix"),
):
    """
    Add working days and then working hours to a start instant.

    The start is first moved back to the nearest working time in
    Colombia. Without `date` the current instant is used.
    """
    calculator: WorkingTimeCalculator = request.app.state.calculator

    calculation = parse_working_days_query(
        days=days,
        hours=hours,
        date=date,
        now=calculator.clock.now(),
    )

    try:
        result = await calculator.run(calculation)
    except WorkingDaysError:
        raise
    except Exception as e:
        logger.exception("Unexpected error while calculating working days")
        raise ServiceUnavailableError(message="Internal server error") from e

    return WorkingDaysResponse(date=format_utc_iso8601(result))
