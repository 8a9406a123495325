"""
birthday_greeter — Hello World

The greeter never asks the operating system for the date.  It reads
whatever clock it was given, so the same code runs against the real
time in production and against a frozen instant anywhere else.
"""

from datetime import timedelta

from birthday_greeter import (
    BirthdayGreeter,
    Customer,
    FixedClock,
    Month,
    OffsetClock,
    default_clock,
)

CUSTOMERS = [
    Customer.of("Elvis", 1935, Month.JANUARY, 8),
    Customer.of("Mark Foster", 1984, Month.FEBRUARY, 29),
    Customer.of("Ada", 1815, Month.DECEMBER, 10),
]


def show(title: str, greeter: BirthdayGreeter) -> None:
    print(f"── {title}  (today = {greeter.today()})")
    for line in greeter.greet_all(CUSTOMERS):
        print(f"  {line}")


def main():
    # ──────────────────────────────────────
    #  1. Production wiring: real clock
    # ──────────────────────────────────────
    show("system clock", BirthdayGreeter(default_clock()))

    # ──────────────────────────────────────
    #  2. Frozen instant, projected into two zones
    # ──────────────────────────────────────
    berlin = FixedClock.parse("2025-01-08T09:00:00Z", "Europe/Berlin")
    show("fixed, Berlin", BirthdayGreeter(berlin))

    honolulu = FixedClock.parse("2025-01-09T09:00:00Z", "Pacific/Honolulu")
    show("fixed, Honolulu", BirthdayGreeter(honolulu))

    # ──────────────────────────────────────
    #  3. Leap-day birthday in a non-leap year
    # ──────────────────────────────────────
    show("fixed, 1 March 2025", BirthdayGreeter(FixedClock.parse("2025-03-01T09:00:00Z", "Europe/Berlin")))

    # ──────────────────────────────────────
    #  4. Shift a frozen clock across midnight
    # ──────────────────────────────────────
    late = FixedClock.parse("2025-01-07T22:50:00Z", "Europe/Berlin")
    show("offset +15 min", BirthdayGreeter(OffsetClock.of(late, timedelta(minutes=15))))


if __name__ == "__main__":
    main()
