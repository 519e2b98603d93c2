"""Tests for DaysUntilCalculator."""

from datetime import UTC, date, datetime
from zoneinfo import ZoneInfo

import pytest

from timesource import DaysUntilCalculator, FixedClock, SystemClock, TargetPassedError

HELSINKI = ZoneInfo("Europe/Helsinki")


def days_left(now, target):
    return DaysUntilCalculator(FixedClock(now)).days_left(target)


def test_days_until_birthday(calculator, birthday):
    assert calculator.days_left(birthday) == 23


def test_thirty_four_days_out(birthday):
    assert days_left(date(2016, 10, 7), birthday) == 34


def test_same_instant_is_zero(birthday):
    assert days_left(birthday, birthday) == 0


def test_later_same_day_is_zero():
    assert days_left(datetime(2016, 11, 10, 8), datetime(2016, 11, 10, 20)) == 0


def test_passed_target_raises(birthday):
    with pytest.raises(TargetPassedError) as exc_info:
        days_left(date(2016, 11, 11), birthday)

    assert exc_info.value.now == datetime(2016, 11, 11)
    assert exc_info.value.target == datetime(2016, 11, 10)


def test_one_second_past_raises(birthday):
    with pytest.raises(TargetPassedError):
        days_left(datetime(2016, 11, 10, 0, 0, 1), birthday)


def test_deterministic(calculator, birthday):
    results = {calculator.days_left(birthday) for _ in range(5)}
    assert results == {23}


def test_does_not_touch_the_clock(calculator, clock, birthday):
    before = clock.current_time()
    calculator.days_left(birthday)
    assert clock.current_time() is before


def test_clock_property(calculator, clock):
    assert calculator.clock is clock


def test_follows_advanced_clock(calculator, clock, birthday):
    clock.advance(days=20)
    assert calculator.days_left(birthday) == 3


class TestCalendarDays:
    """Counts compare calendar dates, never 24-hour blocks."""

    @pytest.mark.parametrize(
        ("now", "target"),
        [
            (datetime(2016, 10, 18, 0, 0), datetime(2016, 11, 10, 0, 0)),
            (datetime(2016, 10, 18, 23, 59), datetime(2016, 11, 10, 0, 0)),
            (datetime(2016, 10, 18, 8, 0), datetime(2016, 11, 10, 0, 1)),
            (datetime(2016, 10, 18, 0, 0), datetime(2016, 11, 10, 23, 59)),
        ],
    )
    def test_time_of_day_ignored(self, now, target):
        assert days_left(now, target) == 23

    def test_late_evening_to_early_morning_is_one_day(self):
        assert days_left(datetime(2016, 11, 9, 23), datetime(2016, 11, 10, 1)) == 1

    def test_across_dst_change(self):
        # Helsinki leaves summer time on 2016-10-30; that day is 25 hours long.
        now = datetime(2016, 10, 29, 12, tzinfo=HELSINKI)
        target = datetime(2016, 10, 31, 12, tzinfo=HELSINKI)
        assert days_left(now, target) == 2

    def test_across_leap_day(self):
        assert days_left(date(2016, 2, 28), date(2016, 3, 1)) == 2


class TestTimezones:
    def test_naive_target_read_in_clock_zone(self, birthday):
        now = datetime(2016, 10, 18, tzinfo=UTC)
        assert days_left(now, birthday) == 23

    def test_naive_clock_read_in_target_zone(self):
        target = datetime(2016, 11, 10, tzinfo=HELSINKI)
        assert days_left(datetime(2016, 10, 18), target) == 23

    def test_counts_on_target_calendar(self):
        # 23:30 UTC is already 01:30 the next day in Helsinki.
        now = datetime(2016, 11, 9, 23, 30, tzinfo=UTC)
        target = datetime(2016, 11, 10, 12, tzinfo=HELSINKI)
        assert days_left(now, target) == 0

    def test_passed_in_other_zone(self):
        now = datetime(2016, 11, 10, 11, tzinfo=UTC)  # 13:00 in Helsinki
        target = datetime(2016, 11, 10, 12, tzinfo=HELSINKI)
        with pytest.raises(TargetPassedError):
            days_left(now, target)

    # Helsinki leaves summer time at 01:00 UTC on 2016-10-30, so 03:00-03:59
    # happens twice: first at +03:00 (fold=0), then at +02:00 (fold=1).

    def test_repeated_hour_later_reading_has_passed(self):
        now = datetime(2016, 10, 30, 3, 10, fold=1, tzinfo=HELSINKI)  # 01:10 UTC
        target = datetime(2016, 10, 30, 3, 30, fold=0, tzinfo=HELSINKI)  # 00:30 UTC
        with pytest.raises(TargetPassedError):
            days_left(now, target)

    def test_repeated_hour_earlier_reading_is_ahead(self):
        now = datetime(2016, 10, 30, 3, 40, fold=0, tzinfo=HELSINKI)  # 00:40 UTC
        target = datetime(2016, 10, 30, 3, 10, fold=1, tzinfo=HELSINKI)  # 01:10 UTC
        assert days_left(now, target) == 0

    def test_repeated_hour_from_utc_clock(self):
        now = datetime(2016, 10, 30, 0, 40, tzinfo=UTC)
        target = datetime(2016, 10, 30, 3, 10, fold=1, tzinfo=HELSINKI)
        assert days_left(now, target) == 0

    def test_repeated_hour_same_instant_is_zero(self):
        now = datetime(2016, 10, 30, 1, 10, tzinfo=UTC)
        target = datetime(2016, 10, 30, 3, 10, fold=1, tzinfo=HELSINKI)
        assert days_left(now, target) == 0


class TestSubstitutability:
    def test_any_clock_like_object(self, birthday):
        class StaticClock:
            def current_time(self):
                return datetime(2016, 10, 18)

        assert DaysUntilCalculator(StaticClock()).days_left(birthday) == 23

    def test_system_and_fixed_clock_agree(self, monkeypatch):
        instant = datetime(2016, 10, 18, 9, 30, tzinfo=UTC)

        class FrozenDatetime(datetime):
            @classmethod
            def now(cls, tz=None):
                return instant.astimezone(tz) if tz else instant.replace(tzinfo=None)

        monkeypatch.setattr("timesource.clock.datetime", FrozenDatetime)

        system = DaysUntilCalculator(SystemClock())
        fixed = DaysUntilCalculator(FixedClock(instant))
        targets = (date(2016, 10, 19), date(2016, 11, 10), datetime(2017, 1, 1, tzinfo=HELSINKI))
        for target in targets:
            assert system.days_left(target) == fixed.days_left(target)

    def test_system_clock_far_future(self):
        calculator = DaysUntilCalculator(SystemClock())
        assert calculator.days_left(date(9999, 1, 1)) > 0

    def test_system_clock_past_raises(self, birthday):
        with pytest.raises(TargetPassedError):
            DaysUntilCalculator(SystemClock()).days_left(birthday)


def test_rejects_non_datetime_target(calculator):
    with pytest.raises(TypeError):
        calculator.days_left("2016-11-10")  # type: ignore[arg-type]
