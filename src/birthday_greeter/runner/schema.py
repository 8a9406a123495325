# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Data transfer objects for runner input/output.

These Pydantic models define the JSON contract of
``python -m birthday_greeter.runner``.
"""

from __future__ import annotations

from datetime import date, timedelta

from pydantic import BaseModel, Field

from birthday_greeter.greeter import LeapDayRule


class ClockConfigSchema(BaseModel):
    """Clock configuration.

    Attributes:
        type: Clock type ("system", "fixed" or "offset")
        zone: Zone identifier; omitted means local for "system", UTC for
              "fixed", and the base clock's zone for "offset"
        instant: ISO-8601 instant with UTC offset (for "fixed")
        offset: Signed shift, seconds or ISO-8601 duration (for "offset")
        base: Clock being shifted (for "offset")
    """

    type: str = "system"
    zone: str | None = None
    instant: str | None = None
    offset: timedelta | None = None
    base: ClockConfigSchema | None = None


class CustomerSchema(BaseModel):
    """Customer to greet.

    Attributes:
        name: Display name
        birthday: Date of birth (YYYY-MM-DD)
    """

    name: str
    birthday: date


class RunnerInput(BaseModel):
    """Complete input via stdin.

    Attributes:
        clock: Clock to read "today" from
        customers: Customers to greet against that date
        leap_day: Rule for February 29 birthdays in non-leap years
    """

    clock: ClockConfigSchema = Field(default_factory=ClockConfigSchema)
    customers: list[CustomerSchema] = Field(default_factory=list)
    leap_day: LeapDayRule = LeapDayRule.MARCH_1


class GreetingSchema(BaseModel):
    """Greeting produced for one customer.

    Attributes:
        name: Customer name
        greeting: Greeting text
        is_birthday: Whether the reference date is the customer's birthday
    """

    name: str
    greeting: str
    is_birthday: bool


class RunnerOutput(BaseModel):
    """Complete output via stdout.

    The runner always outputs valid JSON matching this schema,
    even on errors.

    Attributes:
        success: Whether execution completed successfully
        today: Reference date every customer was greeted against
        zone: Name of the zone the reference date was projected into
        greetings: One entry per input customer, in input order
        error: Error message (on failure)
        error_type: Error class name (on failure)
    """

    success: bool
    today: date | None = None
    zone: str = ""
    greetings: list[GreetingSchema] = Field(default_factory=list)
    error: str = ""
    error_type: str = ""
