"""Customer — the person being greeted."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import IntEnum


class Month(IntEnum):
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12


@dataclass(frozen=True)
class Customer:
    """Immutable customer record.

    Attributes:
        name:     Display name used in the greeting.
        birthday: Date of birth.  Only month and day-of-month matter when
                  greeting.
    """

    name: str
    birthday: date

    @staticmethod
    def of(name: str, year: int, month: int | Month, day: int) -> Customer:
        """Build a customer from birth year, month and day-of-month.

        Raises ``ValueError`` for dates that do not exist.
        """
        return Customer(name=name, birthday=date(year, int(month), day))
