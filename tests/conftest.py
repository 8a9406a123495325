"""Shared test fixtures."""

import pytest

from birthday_greeter import Customer, FixedClock, Month


@pytest.fixture
def elvis():
    return Customer.of("Elvis", 1935, Month.JANUARY, 8)


@pytest.fixture
def mark_foster():
    return Customer.of("Mark Foster", 1984, Month.FEBRUARY, 29)


@pytest.fixture
def berlin_clock():
    return FixedClock.parse("2025-01-08T09:00:00Z", "Europe/Berlin")


@pytest.fixture
def honolulu_clock():
    return FixedClock.parse("2025-01-09T09:00:00Z", "Pacific/Honolulu")
