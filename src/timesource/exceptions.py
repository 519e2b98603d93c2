"""Custom exceptions for the timesource package."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime


class TimesourceError(Exception):
    """Base exception for all timesource errors."""


class TargetPassedError(TimesourceError):
    """Raised when the clock's current time is already after the target instant."""

    def __init__(self, now: datetime, target: datetime) -> None:
        self.now = now
        self.target = target
        super().__init__(
            f"Target instant {target.isoformat()} already passed (now is {now.isoformat()})"
        )


class ClockParseError(TimesourceError, ValueError):
    """Raised when a human-readable time string cannot be parsed."""

    def __init__(self, text: str, detail: str = "") -> None:
        self.text = text
        msg = f"Cannot parse time from {text!r}"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


class ClockConfigError(TimesourceError):
    """Raised when a clock is misconfigured."""

    def __init__(self, clock_type: str, message: str) -> None:
        self.clock_type = clock_type
        super().__init__(f"Clock '{clock_type}' misconfigured: {message}")
