"""
timesource — Days until my birthday

The calculator never calls datetime.now() itself. It asks whatever clock
it was given, so the same code runs against the real time in production
and a fixed time in tests.
"""

from datetime import date

from timesource import DaysUntilCalculator, FixedClock, SystemClock, TargetPassedError
from timesource.config import ClockFactory

MY_BIRTHDAY = date(2016, 11, 10)


def main():
    # ──────────────────────────────────────
    #  1. Real clock — the answer depends on
    #     when you run this
    # ──────────────────────────────────────
    print("=== System clock ===\n")

    calculator = DaysUntilCalculator(SystemClock())
    try:
        print(f"  Days left: {calculator.days_left(MY_BIRTHDAY)}")
    except TargetPassedError as e:
        print(f"  {e}")

    # ──────────────────────────────────────
    #  2. Fixed clock — same answer every run
    # ──────────────────────────────────────
    print("\n=== Fixed clock ===\n")

    clock = FixedClock.at("2016-10-18")
    calculator = DaysUntilCalculator(clock)
    print(f"  On {clock.current_time():%Y-%m-%d}: {calculator.days_left(MY_BIRTHDAY)} days left")

    clock.advance(days=7)
    print(f"  On {clock.current_time():%Y-%m-%d}: {calculator.days_left(MY_BIRTHDAY)} days left")

    # ──────────────────────────────────────
    #  3. Clock from configuration
    # ──────────────────────────────────────
    print("\n=== Configured clock ===\n")

    clock = ClockFactory().create({"type": "fixed", "value": "Oct 7, 2016"})
    print(f"  {DaysUntilCalculator(clock).days_left(MY_BIRTHDAY)} days left")


if __name__ == "__main__":
    main()
