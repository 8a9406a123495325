"""birthday_greeter — deterministic, testable date logic through an injected clock.

The classifier is pure: it receives "today" as a value.  Only the greeter
boundary reads a clock, and that clock is always supplied from outside.
"""

from birthday_greeter.clock import (
    Clock,
    FixedClock,
    OffsetClock,
    SystemClock,
    default_clock,
    parse_instant,
    parse_zone,
)
from birthday_greeter.customer import Customer, Month
from birthday_greeter.exceptions import (
    ClockConfigError,
    GreeterError,
    InvalidInstantError,
    InvalidOffsetError,
    InvalidZoneError,
)
from birthday_greeter.greeter import (
    BirthdayGreeter,
    LeapDayRule,
    greet,
    is_birthday,
    observed_birthday,
)

__all__ = [
    "BirthdayGreeter",
    "Clock",
    "ClockConfigError",
    "Customer",
    "FixedClock",
    "GreeterError",
    "InvalidInstantError",
    "InvalidOffsetError",
    "InvalidZoneError",
    "LeapDayRule",
    "Month",
    "OffsetClock",
    "SystemClock",
    "default_clock",
    "greet",
    "is_birthday",
    "observed_birthday",
    "parse_instant",
    "parse_zone",
]
