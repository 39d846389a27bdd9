"""
Working Days Engine

Core services for Colombian working-time arithmetic.

Services:
- Normalizer: Snap an instant backward to working time
- WorkingDaysStepper: Add whole working days
- WorkingHoursStepper: Add working hours across lunch and day boundaries
- WorkingTimeCalculator: normalize -> days -> hours against the holiday oracle

Usage:
    from workingdays.engine import WorkingTimeCalculator, calculate_with_calendar
"""
from __future__ import annotations

from .calculator import (
    WorkingTimeCalculator,
    calculate_with_calendar,
)
from .day_stepper import (
    WorkingDaysStepper,
    add_working_days,
    resolve_target_time,
)
from .hour_stepper import (
    WorkingHoursStepper,
    add_working_hours,
)
from .normalizer import (
    Normalizer,
    normalize,
)

__all__ = [
    # Normalizer
    "Normalizer",
    "normalize",
    # Day stepper
    "WorkingDaysStepper",
    "add_working_days",
    "resolve_target_time",
    # Hour stepper
    "WorkingHoursStepper",
    "add_working_hours",
    # Calculator
    "WorkingTimeCalculator",
    "calculate_with_calendar",
]
