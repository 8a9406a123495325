# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Clock factory for creating clock instances from configuration.

Uses the Registry pattern to map type strings to clock builders,
allowing extensibility without modifying factory code.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import ClassVar

from birthday_greeter.clock import Clock, FixedClock, OffsetClock, SystemClock
from birthday_greeter.exceptions import ClockConfigError

from .schema import ClockConfigSchema

logger = logging.getLogger(__name__)

ClockBuilder = Callable[[ClockConfigSchema], Clock]


class ClockFactoryError(Exception):
    """Raised when clock creation fails."""

    pass


def _build_system(config: ClockConfigSchema) -> Clock:
    return SystemClock.in_zone(config.zone)


def _build_fixed(config: ClockConfigSchema) -> Clock:
    if config.instant is None:
        raise ClockFactoryError("fixed clock requires 'instant'")
    return FixedClock.parse(config.instant, config.zone if config.zone is not None else "UTC")


class ClockFactory:
    """Creates clock instances from configuration.

    Uses Registry pattern for extensibility. Clock types are registered
    at class level and can be extended via the `register` class method.

    The "offset" type is handled specially since it wraps a base clock
    that has to be built first.

    Example:
        factory = ClockFactory()
        clock = factory.create(
            ClockConfigSchema(
                type="offset",
                offset=timedelta(minutes=3),
                base=ClockConfigSchema(type="fixed", instant="2025-01-08T09:00:00Z"),
            )
        )
    """

    # Class-level registry mapping type strings to builders
    _registry: ClassVar[dict[str, ClockBuilder]] = {
        "system": _build_system,
        "fixed": _build_fixed,
    }

    # Composite types need special handling (base resolution)
    _composite_types: ClassVar[set[str]] = {"offset"}

    @classmethod
    def register(cls, type_name: str, builder: ClockBuilder) -> None:
        """Register a custom clock type.

        Args:
            type_name: Type string to use in configuration
            builder: Callable turning a ClockConfigSchema into a Clock

        Raises:
            ValueError: If type_name shadows a composite type

        Example:
            ClockFactory.register("utc", lambda cfg: SystemClock.in_zone("UTC"))
        """
        if type_name in cls._composite_types:
            raise ValueError(f"Clock type '{type_name}' is reserved")
        cls._registry[type_name] = builder

    @classmethod
    def registered_types(cls) -> list[str]:
        """Return list of registered clock type names."""
        return list(cls._registry.keys()) + list(cls._composite_types)

    def create(self, config: ClockConfigSchema) -> Clock:
        """Create a clock from configuration.

        Args:
            config: Clock configuration

        Returns:
            Created clock instance

        Raises:
            ClockFactoryError: If the type is unknown or a value is invalid
        """
        try:
            clock = self._create_one(config)
        except ClockFactoryError:
            raise
        except ClockConfigError as e:
            raise ClockFactoryError(f"Failed to create clock of type '{config.type}': {e}") from e

        logger.debug("Created %s clock: %r", config.type, clock)
        return clock

    def _create_one(self, config: ClockConfigSchema) -> Clock:
        if config.type in self._composite_types:
            return self._create_offset(config)

        builder = self._registry.get(config.type)
        if not builder:
            available = ", ".join(sorted(self.registered_types()))
            raise ClockFactoryError(
                f"Unknown clock type: '{config.type}'. Available types: {available}"
            )
        return builder(config)

    def _create_offset(self, config: ClockConfigSchema) -> Clock:
        """Create offset clock, building its base first.

        Raises:
            ClockFactoryError: If base or offset is missing
        """
        if config.base is None:
            raise ClockFactoryError("offset clock requires 'base' clock")
        if config.offset is None:
            raise ClockFactoryError("offset clock requires 'offset' duration")
        base = self._create_one(config.base)
        return OffsetClock.of(base, config.offset, config.zone)
