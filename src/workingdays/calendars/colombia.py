"""
Colombia Holiday Calendar

Computes Colombian public holidays offline, as an alternative to the
remote holiday list.

Colombian Public Holidays:
- Fixed: New Year's Day (Jan 1), Labour Day (May 1), Independence Day
  (Jul 20), Battle of Boyaca (Aug 7), Immaculate Conception (Dec 8),
  Christmas Day (Dec 25)
- Moved to the following Monday: Epiphany (Jan 6), Saint Joseph (Mar 19),
  Saint Peter and Saint Paul (Jun 29), Assumption (Aug 15),
  Columbus Day (Oct 12), All Saints (Nov 1), Independence of
  Cartagena (Nov 11)
- Easter-relative: Holy Thursday, Good Friday, and the Monday-moved
  Ascension, Corpus Christi and Sacred Heart

Reference: Ley 51 de 1983 ("Ley Emiliani")
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Iterable


def _calculate_easter(year: int) -> date:
    """
    Calculate Easter Sunday using the Anonymous Gregorian algorithm.
    """
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1
    return date(year, month, day)


def _next_monday(d: date) -> date:
    """The date itself if Monday, otherwise the following Monday."""
    return d + timedelta(days=(7 - d.weekday()) % 7)


_FIXED_HOLIDAYS = [
    (1, 1, "New Year's Day"),
    (5, 1, "Labour Day"),
    (7, 20, "Independence Day"),
    (8, 7, "Battle of Boyaca"),
    (12, 8, "Immaculate Conception"),
    (12, 25, "Christmas Day"),
]

_MONDAY_HOLIDAYS = [
    (1, 6, "Epiphany"),
    (3, 19, "Saint Joseph's Day"),
    (6, 29, "Saint Peter and Saint Paul"),
    (8, 15, "Assumption of Mary"),
    (10, 12, "Columbus Day"),
    (11, 1, "All Saints' Day"),
    (11, 11, "Independence of Cartagena"),
]

# Offsets from Easter Sunday
_EASTER_HOLIDAYS = [
    (-3, "Holy Thursday"),
    (-2, "Good Friday"),
]

_EASTER_MONDAY_HOLIDAYS = [
    (39, "Ascension Day"),
    (60, "Corpus Christi"),
    (68, "Sacred Heart"),
]


def colombian_holidays(year: int) -> list[tuple[date, str]]:
    """
    Get all Colombian public holidays for a year.

    Returns list of (date, name) tuples sorted by date. Two holidays can
    share a date once moved to Monday.
    """
    holidays = [(date(year, month, day), name) for month, day, name in _FIXED_HOLIDAYS]

    for month, day, name in _MONDAY_HOLIDAYS:
        holidays.append((_next_monday(date(year, month, day)), name))

    easter = _calculate_easter(year)
    for offset, name in _EASTER_HOLIDAYS:
        holidays.append((easter + timedelta(days=offset), name))
    for offset, name in _EASTER_MONDAY_HOLIDAYS:
        holidays.append((_next_monday(easter + timedelta(days=offset)), name))

    return sorted(holidays, key=lambda h: h[0])


@dataclass
class ColombiaHolidayCalendar:
    """
    Colombian public holiday calendar with per-year caching.
    """

    _holiday_cache: dict[int, frozenset[date]] = field(default_factory=dict, repr=False)

    def _get_holidays_for_year(self, year: int) -> frozenset[date]:
        """Get holidays for a year, using cache."""
        if year not in self._holiday_cache:
            self._holiday_cache[year] = frozenset(d for d, _ in colombian_holidays(year))
        return self._holiday_cache[year]

    def holiday_strings(self, years: Iterable[int]) -> frozenset[str]:
        """All holidays in the given years as YYYY-MM-DD strings."""
        return frozenset(
            d.isoformat()
            for year in years
            for d in self._get_holidays_for_year(year)
        )


# Default calendar instance
COLOMBIA_HOLIDAYS = ColombiaHolidayCalendar()
