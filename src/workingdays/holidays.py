"""
Holiday Sources and Oracle

The holiday list is the only external input of the calculation. A
HolidaySource fetches "YYYY-MM-DD" strings; the HolidayOracle fetches
once, caches the set for the process lifetime and can be invalidated.

Sources:
- RemoteHolidaySource: JSON list over HTTP (httpx)
- FileHolidaySource: YAML or JSON file
- StaticHolidaySource: fixed in-memory list
- ComputedHolidaySource: Colombian holidays computed offline

Concurrency: two callers that hit an empty cache at the same time may
both fetch. Duplicate loads are tolerated, not deduplicated; the source
is read-only and the cache is replaced with a single assignment.
"""
from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any, Iterable, Optional, Protocol, Union, runtime_checkable

import httpx
import yaml
from pydantic import BaseModel, ValidationError, field_validator

from .calendars import COLOMBIA_HOLIDAYS, ColombiaHolidayCalendar, WorkCalendar
from .exceptions import HolidaySourceError

logger = logging.getLogger(__name__)

DEFAULT_HOLIDAYS_URL = "https://content.capta.co/Recruitment/WorkingDays.json"
DEFAULT_TIMEOUT_SECONDS = 10.0

# Object payloads may wrap the list under one of these keys
PAYLOAD_LIST_KEYS = ("workingDays", "holidays")


# =============================================================================
# Payload Parsing
# =============================================================================

class HolidayPayload(BaseModel):
    """Validated list of holiday dates."""
    dates: list[str]

    @field_validator("dates")
    @classmethod
    def validate_dates(cls, v: list[str]) -> list[str]:
        for item in v:
            if len(item) != 10:
                raise ValueError(f"'{item}' is not a YYYY-MM-DD date")
            try:
                date.fromisoformat(item)
            except ValueError:
                raise ValueError(f"'{item}' is not a valid calendar date")
        return v


def parse_holiday_payload(data: Any, source: str = "") -> frozenset[str]:
    """
    Validate a holiday payload and return the set of date strings.

    Accepts a list of strings, or an object holding the list under
    "workingDays" or "holidays".

    Raises:
        HolidaySourceError: If the payload has any other shape
    """
    items = data
    if isinstance(data, dict):
        for key in PAYLOAD_LIST_KEYS:
            if key in data:
                items = data[key]
                break

    if not isinstance(items, list):
        raise HolidaySourceError(
            message="Malformed holiday payload: expected a list of dates",
            details={"source": source, "type": type(data).__name__},
        )

    try:
        payload = HolidayPayload(dates=items)
    except ValidationError as e:
        raise HolidaySourceError(
            message=f"Malformed holiday payload: {e.error_count()} invalid entries",
            details={"source": source, "errors": e.errors(include_url=False, include_context=False)},
        )

    return frozenset(payload.dates)


# =============================================================================
# Sources
# =============================================================================

@runtime_checkable
class HolidaySource(Protocol):
    """Anything that can fetch Colombia-local holiday date strings."""

    async def fetch(self) -> Iterable[str]:
        ...


class RemoteHolidaySource:
    """
    Fetches the holiday list from an HTTP endpoint.

    Usage:
        source = RemoteHolidaySource()
        holidays = await source.fetch()
    """

    def __init__(
        self,
        url: str = DEFAULT_HOLIDAYS_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Args:
            url: Endpoint returning the JSON holiday list
            timeout: Request timeout in seconds (ignored when client is given)
            client: Pre-built client, mainly for tests
        """
        self.url = url
        self.timeout = timeout
        self._client = client

    async def fetch(self) -> frozenset[str]:
        try:
            if self._client is not None:
                response = await self._client.get(self.url)
            else:
                async with httpx.AsyncClient(timeout=httpx.Timeout(self.timeout)) as client:
                    response = await client.get(self.url)
        except httpx.TimeoutException as e:
            raise HolidaySourceError(
                message=f"Holiday source timed out after {self.timeout}s",
                details={"url": self.url},
            ) from e
        except httpx.HTTPError as e:
            raise HolidaySourceError(
                message=f"Holiday source request failed: {e}",
                details={"url": self.url},
            ) from e

        if not response.is_success:
            raise HolidaySourceError(
                message=f"Holiday source returned {response.status_code} {response.reason_phrase}",
                details={"url": self.url, "status_code": response.status_code},
            )

        try:
            data = response.json()
        except ValueError as e:
            raise HolidaySourceError(
                message="Holiday source returned invalid JSON",
                details={"url": self.url},
            ) from e

        return parse_holiday_payload(data, source=self.url)


class FileHolidaySource:
    """Reads the holiday list from a YAML or JSON file."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    async def fetch(self) -> frozenset[str]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise HolidaySourceError(
                message=f"Failed to read holiday file: {e}",
                details={"path": str(self.path)},
            ) from e

        return parse_holiday_payload(data, source=str(self.path))


class StaticHolidaySource:
    """Fixed list of holidays."""

    def __init__(self, dates: Iterable[Union[date, str]] = ()):
        self._dates = parse_holiday_payload(
            [d.isoformat() if isinstance(d, date) else d for d in dates],
            source="static",
        )
        self.fetch_count = 0

    async def fetch(self) -> frozenset[str]:
        self.fetch_count += 1
        return self._dates


class ComputedHolidaySource:
    """
    Colombian holidays computed for a range of years.

    Defaults to five years either side of the current year.
    """

    def __init__(
        self,
        years: Optional[Iterable[int]] = None,
        calendar: Optional[ColombiaHolidayCalendar] = None,
    ):
        if years is None:
            current = datetime.now(timezone.utc).year
            years = range(current - 5, current + 6)
        self.years = tuple(years)
        self.calendar = calendar or COLOMBIA_HOLIDAYS

    async def fetch(self) -> frozenset[str]:
        return self.calendar.holiday_strings(self.years)


# =============================================================================
# Oracle
# =============================================================================

class HolidayOracle:
    """
    Lazily loaded, process-wide holiday set.

    The first call to get() fetches from the source; later calls reuse
    the cached set until invalidate() is called. A failed fetch leaves
    the cache empty so the next call tries again. A fetch that was already
    in flight when invalidate() ran is returned to its caller but not cached.
    """

    def __init__(self, source: HolidaySource):
        self.source = source
        self._holidays: Optional[frozenset[str]] = None
        self._generation = 0

    @property
    def loaded(self) -> bool:
        """True once a holiday set (possibly empty) is cached."""
        return self._holidays is not None

    async def get(self) -> frozenset[str]:
        """Return the cached holiday set, fetching it on first use."""
        if self._holidays is not None:
            return self._holidays

        generation = self._generation
        holidays = await self._fetch()
        if generation == self._generation:
            self._holidays = holidays
        else:
            logger.info("Holiday set invalidated during fetch; result not cached")
        return holidays

    async def is_holiday(self, local_date: date) -> bool:
        holidays = await self.get()
        return local_date.isoformat() in holidays

    async def calendar(self) -> WorkCalendar:
        """Work calendar over the current holiday set."""
        return WorkCalendar(holidays=await self.get())

    def invalidate(self) -> None:
        """Drop the cached set; the next get() re-fetches."""
        self._holidays = None
        self._generation += 1

    async def _fetch(self) -> frozenset[str]:
        try:
            raw = await self.source.fetch()
        except HolidaySourceError:
            logger.error("Holiday source unavailable", exc_info=True)
            raise
        except Exception as e:
            logger.error("Holiday source failed unexpectedly", exc_info=True)
            raise HolidaySourceError(
                message=f"Holiday source unavailable: {e}",
                details={"source": type(self.source).__name__},
            ) from e

        holidays = frozenset(raw)
        logger.info(
            f"Loaded {len(holidays)} holidays from {type(self.source).__name__}"
        )
        return holidays
