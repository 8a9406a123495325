# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Executor for greeting customers against a configured clock.

Orchestrates the full execution flow:
1. Create clock from configuration (or use the injected one)
2. Read the reference date once
3. Greet every customer against that date
4. Return structured result
"""

from __future__ import annotations

import logging

from birthday_greeter.clock import Clock, zone_name
from birthday_greeter.customer import Customer
from birthday_greeter.greeter import BirthdayGreeter, greet, is_birthday

from .factory import ClockFactory, ClockFactoryError
from .schema import GreetingSchema, RunnerInput, RunnerOutput

logger = logging.getLogger(__name__)


class Executor:
    """Greets the input's customers against a clock.

    The executor is designed for dependency injection to support testing.
    Pass a clock to the constructor to override clock creation.

    Example:
        executor = Executor()
        output = executor.execute(input_data)

        # For testing with a fixed clock:
        executor = Executor(clock=FixedClock.parse("2025-01-08T09:00:00Z"))
    """

    def __init__(self, clock: Clock | None = None) -> None:
        """Initialize executor with optional injected clock.

        Args:
            clock: Optional clock to use instead of creating from config.
        """
        self._injected_clock = clock

    def execute(self, input_data: RunnerInput) -> RunnerOutput:
        """Execute the full greeting flow.

        Args:
            input_data: Validated runner input

        Returns:
            RunnerOutput with greetings or error details

        Note:
            This method catches all exceptions and returns them as
            RunnerOutput errors, ensuring valid JSON is always returned.
        """
        try:
            return self._execute_internal(input_data)
        except ClockFactoryError as e:
            logger.warning("Clock configuration rejected: %s", e)
            return RunnerOutput(
                success=False,
                error=str(e),
                error_type="ClockFactoryError",
            )
        except Exception as e:
            logger.exception("Greeting run failed")
            return RunnerOutput(
                success=False,
                error=str(e),
                error_type=type(e).__name__,
            )

    def _execute_internal(self, input_data: RunnerInput) -> RunnerOutput:
        """Internal execution logic.

        Separated from execute() to allow exception propagation
        for testing while execute() catches all errors.
        """
        clock = self._injected_clock or ClockFactory().create(input_data.clock)
        greeter = BirthdayGreeter(clock, leap_day=input_data.leap_day)

        today = greeter.today()
        greetings = []
        for item in input_data.customers:
            customer = Customer(name=item.name, birthday=item.birthday)
            greetings.append(
                GreetingSchema(
                    name=customer.name,
                    greeting=greet(customer, today, greeter.leap_day),
                    is_birthday=is_birthday(customer.birthday, today, greeter.leap_day),
                )
            )

        return RunnerOutput(
            success=True,
            today=today,
            zone=zone_name(clock.zone),
            greetings=greetings,
        )
