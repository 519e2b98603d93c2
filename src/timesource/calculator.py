"""DaysUntilCalculator — whole days between the clock's now and a target."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from timesource._internal.datetimes import align, is_after, to_datetime
from timesource.exceptions import TargetPassedError

if TYPE_CHECKING:
    from datetime import date, datetime

    from timesource.clock import Clock

logger = logging.getLogger(__name__)


class DaysUntilCalculator:
    """Counts the calendar days left until a target instant.

    The calculator only ever talks to the injected :class:`Clock`, so a
    :class:`~timesource.clock.FixedClock` makes it fully deterministic.

    Parameters:
        clock: Source of "now" for every calculation.
    """

    def __init__(self, clock: Clock) -> None:
        self._clock = clock

    @property
    def clock(self) -> Clock:
        return self._clock

    def days_left(self, target: datetime | date) -> int:
        """Return the number of calendar days from now until *target*.

        The count compares calendar dates, so the time of day on either side
        does not matter and DST transitions do not shorten a day.  A ``date``
        target means midnight of that day.  A naive operand is read in the
        zone of the aware one; when both are aware the count uses the
        target's calendar.

        Returns ``0`` when now equals *target*.

        Raises:
            TargetPassedError: If now is strictly after *target*.
        """
        now, when = align(self._clock.current_time(), to_datetime(target))
        if is_after(now, when):
            raise TargetPassedError(now, when)

        days = (when.date() - now.date()).days
        logger.debug("%d day(s) from %s until %s", days, now.isoformat(), when.isoformat())
        return days
