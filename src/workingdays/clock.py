"""
America/Bogota Clock

Single conversion boundary between absolute instants (UTC) and
Colombia-local wall-clock fields. Nothing else in the package derives
local time, and nothing here depends on the host process zone.

Key behaviors:
- to_local: UTC instant -> LocalClockReading
- from_local: Colombia wall clock -> UTC instant
- add_hours: adds through local hour/minute, so results land on
  exact minute boundaries even for fractional hours
"""
from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Callable, Optional
from zoneinfo import ZoneInfo

from .models import MINUTES_PER_DAY, LocalClockReading

COLOMBIA_TIMEZONE = "America/Bogota"

UTC_ISO_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


class ColombiaClock:
    """
    Zone-aware clock for America/Bogota.

    Colombia has no daylight saving time, but conversions still go
    through the IANA zone so the offset never has to be hard-coded.
    """

    def __init__(
        self,
        tz_name: str = COLOMBIA_TIMEZONE,
        now_fn: Optional[Callable[[], datetime]] = None,
    ) -> None:
        """
        Args:
            tz_name: IANA timezone name (default: America/Bogota)
            now_fn: Source of the current UTC instant, for tests
        """
        self._tz_name = tz_name
        self._tz = ZoneInfo(tz_name)
        self._now_fn = now_fn or (lambda: datetime.now(timezone.utc))

    @property
    def tz_name(self) -> str:
        return self._tz_name

    def now(self) -> datetime:
        """Current instant in UTC."""
        return self.to_utc(self._now_fn())

    def to_utc(self, instant: datetime) -> datetime:
        """Convert an aware datetime in any zone to UTC."""
        if instant.tzinfo is None:
            raise ValueError(f"Naive datetime is not an instant: {instant.isoformat()}")
        return instant.astimezone(timezone.utc)

    def to_local(self, instant: datetime) -> LocalClockReading:
        """Project an instant onto the Colombia wall clock."""
        local = self.to_utc(instant).astimezone(self._tz)
        return LocalClockReading(
            year=local.year,
            month=local.month,
            day=local.day,
            hour=local.hour,
            minute=local.minute,
        )

    def from_local(self, local_date: date, hour: int, minute: int) -> datetime:
        """Interpret a Colombia wall-clock time and return the UTC instant."""
        local = datetime(
            local_date.year,
            local_date.month,
            local_date.day,
            hour,
            minute,
            tzinfo=self._tz,
        )
        return local.astimezone(timezone.utc)

    def set_time(self, instant: datetime, hour: int, minute: int) -> datetime:
        """Same local date, new wall-clock time."""
        return self.from_local(self.to_local(instant).date, hour, minute)

    def shift_days(self, instant: datetime, days: int) -> datetime:
        """Same wall-clock time, local date moved by whole calendar days."""
        reading = self.to_local(instant)
        return self.from_local(
            reading.date + timedelta(days=days), reading.hour, reading.minute
        )

    def add_hours(self, instant: datetime, hours: float) -> datetime:
        """
        Add (fractional) hours on the local wall clock.

        The hours are converted to whole minutes, added to the local
        hour/minute and carried into following days; the instant is then
        re-derived through from_local.
        """
        reading = self.to_local(instant)
        total = reading.minutes_of_day + round(hours * 60)
        day_carry, minutes = divmod(total, MINUTES_PER_DAY)
        return self.from_local(
            reading.date + timedelta(days=day_carry), minutes // 60, minutes % 60
        )


def format_utc_iso8601(instant: datetime) -> str:
    """Format as YYYY-MM-DDTHH:MM:SSZ."""
    return instant.astimezone(timezone.utc).strftime(UTC_ISO_FORMAT)


# Default clock instance
COLOMBIA_CLOCK = ColombiaClock()
