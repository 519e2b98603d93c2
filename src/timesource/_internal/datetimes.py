"""Helpers for normalising points in time before they are compared."""

from __future__ import annotations

from datetime import UTC, date, datetime, time, timedelta


def is_naive(value: datetime) -> bool:
    return value.tzinfo is None or value.utcoffset() is None


def to_datetime(value: datetime | date) -> datetime:
    """Return *value* as a ``datetime``.  A bare ``date`` means the start of that day."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    raise TypeError(f"Expected datetime or date, got {type(value).__name__}")


def align(now: datetime, target: datetime) -> tuple[datetime, datetime]:
    """Make *now* and *target* comparable on the target's calendar.

    A naive operand is read in the zone of the aware one.  When both are
    aware, *now* is converted into the target's zone.
    """
    now_naive = is_naive(now)
    target_naive = is_naive(target)

    if now_naive and target_naive:
        return now, target
    if target_naive:
        return now, target.replace(tzinfo=now.tzinfo)
    if now_naive:
        return now.replace(tzinfo=target.tzinfo), target
    return now.astimezone(target.tzinfo), target


def is_after(first: datetime, second: datetime) -> bool:
    """Return whether *first* is strictly later than *second*.

    Aware values are compared as absolute instants, so two readings of the
    same wall time in a repeated DST hour are ordered by their offsets.
    """
    if is_naive(first) or is_naive(second):
        return first > second
    return first.astimezone(UTC) > second.astimezone(UTC)


def shift(value: datetime, delta: timedelta) -> datetime:
    """Return *value* moved by *delta* of elapsed time.

    Aware values step in UTC and convert back, so an hour across a DST
    change is still one real hour.
    """
    if is_naive(value):
        return value + delta
    return (value.astimezone(UTC) + delta).astimezone(value.tzinfo)
