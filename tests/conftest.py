"""
Pytest configuration and fixtures for working days tests.

Provides a Colombia-local instant factory and common calendars.
"""
import sys
from datetime import date
from pathlib import Path

import pytest

# Allow ``from workingdays import ...`` without installing the package
_SRC = Path(__file__).resolve().parent.parent / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from workingdays.calendars import WorkCalendar
from workingdays.clock import COLOMBIA_CLOCK


# =============================================================================
# Factory Helpers
# =============================================================================

def bogota(year: int, month: int, day: int, hour: int = 8, minute: int = 0):
    """UTC instant for a Colombia wall-clock time."""
    return COLOMBIA_CLOCK.from_local(date(year, month, day), hour, minute)


# 2025 Colombian holidays as published by the holiday list
HOLIDAYS_2025 = [
    "2025-01-01", "2025-01-06", "2025-03-24", "2025-04-17", "2025-04-18",
    "2025-05-01", "2025-06-02", "2025-06-23", "2025-06-30", "2025-07-20",
    "2025-08-07", "2025-08-18", "2025-10-13", "2025-11-03", "2025-11-17",
    "2025-12-08", "2025-12-25",
]


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def plain_calendar():
    """Weekends only, no holidays."""
    return WorkCalendar()


@pytest.fixture
def calendar_2025():
    """Calendar with the 2025 Colombian holidays."""
    return WorkCalendar.from_dates(*HOLIDAYS_2025)
