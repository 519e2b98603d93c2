"""Clock abstraction for testable time-dependent logic.

Code that needs "now" takes a :class:`Clock` in its constructor instead of
calling ``datetime.now()`` itself.  Production wiring passes a
:class:`SystemClock`; tests pass a :class:`FixedClock`.
"""

from __future__ import annotations

import logging
import threading
from datetime import UTC, date, datetime, time, timedelta, tzinfo
from typing import Any, Protocol, runtime_checkable

from timesource._internal.datetimes import is_naive, shift, to_datetime
from timesource.exceptions import ClockParseError

logger = logging.getLogger(__name__)

# Month-name layouts accepted by FixedClock.at, tried in order.
_TEXT_FORMATS = (
    "%b %d, %Y",
    "%B %d, %Y",
    "%b %d %Y",
    "%B %d %Y",
    "%d %b %Y",
    "%d %B %Y",
)


@runtime_checkable
class Clock(Protocol):
    """Protocol for getting the current time.  Inject a fake in tests."""

    def current_time(self) -> datetime: ...


class SystemClock:
    """Default clock backed by the real system time.

    Parameters:
        tz: Zone the returned instants are expressed in.  Defaults to UTC
            regardless of the host's local settings.
    """

    def __init__(self, tz: tzinfo = UTC) -> None:
        self._tz = tz

    @property
    def tz(self) -> tzinfo:
        return self._tz

    def current_time(self) -> datetime:
        return datetime.now(self._tz)

    def __repr__(self) -> str:
        return f"SystemClock(tz={self._tz!r})"


class FixedClock:
    """Clock that returns the same instant on every call.

    The held value only changes through :meth:`set` or :meth:`advance`.
    Both swap the value under a lock that :meth:`current_time` also takes,
    so a reader on another thread sees either the old or the new value.

    Parameters:
        value: The instant to return.  A ``date`` means midnight of that day.
    """

    def __init__(self, value: datetime | date) -> None:
        self._value = to_datetime(value)
        self._lock = threading.Lock()

    # ── named constructors ───────────────────────────────────

    @classmethod
    def at(
        cls,
        text: str,
        *,
        tz: tzinfo | None = None,
        on: date | None = None,
    ) -> FixedClock:
        """Build a clock from a human-readable string.

        Accepts ISO 8601 dates and date-times (``"2016-10-18"``,
        ``"2016-10-18T10:41"``), a bare time of day (``"10:41"``) and a few
        month-name forms (``"Nov 10, 2016"``).

        A bare time is placed on *on*, or on today's date in *tz* when *on*
        is omitted.  *on* is only valid with a bare time.  *tz* is attached
        to naive results; an offset in the text takes precedence.

        Raises:
            TypeError: If *text* is not a string.
            ClockParseError: If *text* matches none of the accepted forms, or
                *on* is given together with a text that carries a date.
        """
        if not isinstance(text, str):
            raise TypeError(f"Expected str, got {type(text).__name__}")
        value = _parse(text.strip(), tz=tz, on=on)
        if tz is not None and is_naive(value):
            value = value.replace(tzinfo=tz)
        return cls(value)

    # ── Clock ────────────────────────────────────────────────

    def current_time(self) -> datetime:
        with self._lock:
            return self._value

    # ── mutation ─────────────────────────────────────────────

    def set(self, value: datetime | date) -> None:
        """Replace the held instant.  May move the clock backwards."""
        new_value = to_datetime(value)
        with self._lock:
            self._value = new_value
        logger.debug("Fixed clock set to %s", new_value.isoformat())

    def advance(self, delta: timedelta | None = None, **kwargs: Any) -> datetime:
        """Move the clock forward and return the new instant.

        Pass either a ``timedelta`` or ``timedelta`` keyword arguments
        (``clock.advance(days=1)``).

        Raises:
            ValueError: If the step is negative.
        """
        if delta is None:
            delta = timedelta(**kwargs)
        elif kwargs:
            raise TypeError("Pass either a timedelta or keyword arguments, not both")
        if delta < timedelta(0):
            raise ValueError(f"Cannot advance a clock by a negative step ({delta})")

        with self._lock:
            self._value = shift(self._value, delta)
            new_value = self._value
        logger.debug("Fixed clock advanced by %s to %s", delta, new_value.isoformat())
        return new_value

    def __repr__(self) -> str:
        return f"FixedClock({self.current_time().isoformat()!r})"


def today(clock: Clock) -> date:
    """Return the calendar date of *clock*'s current time."""
    return clock.current_time().date()


def _parse(text: str, *, tz: tzinfo | None, on: date | None) -> datetime:
    if not text:
        raise ClockParseError(text, "empty string")

    value = _parse_dated(text)
    if value is not None:
        if on is not None:
            raise ClockParseError(text, "'on' only applies to a bare time of day")
        return value

    try:
        time_of_day = time.fromisoformat(text)
    except ValueError:
        raise ClockParseError(
            text, "expected an ISO 8601 date/time or a form like 'Nov 10, 2016'"
        ) from None

    day = on if on is not None else datetime.now(tz).date()
    return datetime.combine(day, time_of_day)


def _parse_dated(text: str) -> datetime | None:
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass

    for fmt in _TEXT_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None
