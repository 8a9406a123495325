# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Runner submodule for greeting customers from a JSON request.

Usage:
    python -m birthday_greeter.runner < input.json > output.json

Exports:
    Executor: Main orchestrator for a greeting run
    ClockFactory: Creates clock instances from configuration
    RunnerInput: Input schema
    RunnerOutput: Output schema
"""

from .executor import Executor
from .factory import ClockFactory, ClockFactoryError
from .schema import (
    ClockConfigSchema,
    CustomerSchema,
    GreetingSchema,
    RunnerInput,
    RunnerOutput,
)

__all__ = [
    "ClockConfigSchema",
    "ClockFactory",
    "ClockFactoryError",
    "CustomerSchema",
    "Executor",
    "GreetingSchema",
    "RunnerInput",
    "RunnerOutput",
]
