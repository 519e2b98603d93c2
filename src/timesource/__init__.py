"""timesource — an injectable clock for deterministic time-dependent code.

Depend on the :class:`Clock` protocol, wire in :class:`SystemClock` in
production and a :class:`FixedClock` in tests.
"""

from timesource.calculator import DaysUntilCalculator
from timesource.clock import Clock, FixedClock, SystemClock, today
from timesource.exceptions import (
    ClockConfigError,
    ClockParseError,
    TargetPassedError,
    TimesourceError,
)

__all__ = [
    "Clock",
    "ClockConfigError",
    "ClockParseError",
    "DaysUntilCalculator",
    "FixedClock",
    "SystemClock",
    "TargetPassedError",
    "TimesourceError",
    "today",
]
