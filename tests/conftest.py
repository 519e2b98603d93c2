"""Shared test fixtures."""

from datetime import date, datetime

import pytest

from timesource import DaysUntilCalculator, FixedClock


@pytest.fixture
def birthday():
    return date(2016, 11, 10)


@pytest.fixture
def clock():
    return FixedClock(datetime(2016, 10, 18))


@pytest.fixture
def calculator(clock):
    return DaysUntilCalculator(clock)
