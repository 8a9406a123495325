"""Birthday greeting — a pure classifier plus a thin clock-reading boundary.

:func:`greet` never looks at a clock.  It is handed "today" as a plain
``date``.  :class:`BirthdayGreeter` is the boundary that owns an injected
:class:`~birthday_greeter.clock.Clock`, reads the reference date once and
passes it inward.
"""

from __future__ import annotations

import calendar
import logging
from datetime import date
from enum import StrEnum
from typing import TYPE_CHECKING

from birthday_greeter.clock import default_clock, zone_name

if TYPE_CHECKING:
    from collections.abc import Iterable

    from birthday_greeter.clock import Clock
    from birthday_greeter.customer import Customer

logger = logging.getLogger(__name__)


class LeapDayRule(StrEnum):
    """Where a February 29 birthday is observed in a non-leap year."""

    MARCH_1 = "mar1"
    FEBRUARY_28 = "feb28"


def observed_birthday(
    birthday: date,
    year: int,
    leap_day: LeapDayRule = LeapDayRule.MARCH_1,
) -> date:
    """Return the date *birthday* is celebrated on in *year*."""
    if birthday.month == 2 and birthday.day == 29 and not calendar.isleap(year):
        if leap_day is LeapDayRule.FEBRUARY_28:
            return date(year, 2, 28)
        return date(year, 3, 1)
    return birthday.replace(year=year)


def is_birthday(
    birthday: date,
    today: date,
    leap_day: LeapDayRule = LeapDayRule.MARCH_1,
) -> bool:
    """``True`` when *today* falls on the birthday, whatever the years."""
    observed = observed_birthday(birthday, today.year, leap_day)
    return (observed.month, observed.day) == (today.month, today.day)


def greet(
    customer: Customer,
    today: date,
    leap_day: LeapDayRule = LeapDayRule.MARCH_1,
) -> str:
    """Return ``"Happy Birthday, <name>!"`` or ``"Hello, <name>!"``."""
    if is_birthday(customer.birthday, today, leap_day):
        return f"Happy Birthday, {customer.name}!"
    return f"Hello, {customer.name}!"


class BirthdayGreeter:
    """Greets customers against the date reported by an injected clock.

    Parameters:
        clock:    Source of "today".  Defaults to :func:`default_clock`
                  when omitted.
        leap_day: Rule for February 29 birthdays in non-leap years.
    """

    def __init__(
        self,
        clock: Clock | None = None,
        leap_day: LeapDayRule = LeapDayRule.MARCH_1,
    ) -> None:
        self._clock: Clock = clock or default_clock()
        self.leap_day = leap_day

    @property
    def clock(self) -> Clock:
        return self._clock

    def today(self) -> date:
        today = self._clock.today()
        logger.debug("Reference date %s in zone %s", today, zone_name(self._clock.zone))
        return today

    def greet(self, customer: Customer) -> str:
        return greet(customer, self.today(), self.leap_day)

    def greet_all(self, customers: Iterable[Customer]) -> list[str]:
        """Greet every customer against one reading of the clock."""
        today = self.today()
        return [greet(c, today, self.leap_day) for c in customers]
