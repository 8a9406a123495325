"""Clock abstraction for testable date-dependent logic.

Code that needs "now" takes a :class:`Clock` instead of calling
``datetime.now`` itself.  Production wiring passes a :class:`SystemClock`;
tests pass a :class:`FixedClock`, optionally shifted by an
:class:`OffsetClock`.

Every clock projects its instant into a zone.  ``zone=None`` means the
host's local zone.  The same instant can land on different calendar dates
in different zones, so :meth:`Clock.today` always follows the projection.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import UTC, date, datetime, timedelta, tzinfo
from typing import Protocol
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from birthday_greeter.exceptions import (
    InvalidInstantError,
    InvalidOffsetError,
    InvalidZoneError,
)

logger = logging.getLogger(__name__)

_LOCAL_ALIASES = frozenset({"", "local", "default"})
_UTC_ALIASES = frozenset({"UTC", "Z"})


class Clock(Protocol):
    """Protocol for reading the current moment.  Inject a fixed one in tests."""

    @property
    def zone(self) -> tzinfo | None: ...

    def now(self) -> datetime:
        """Current moment, timezone-aware, projected into :attr:`zone`."""
        ...

    def today(self) -> date:
        """Calendar date of :meth:`now`."""
        ...

    def instant(self) -> datetime:
        """Current moment expressed in UTC."""
        ...

    def with_zone(self, zone: tzinfo | None) -> Clock:
        """Return the same source projected into another zone."""
        ...


# ── parsing ──────────────────────────────────────────────────


def parse_zone(identifier: str | tzinfo | None) -> tzinfo | None:
    """Resolve a zone identifier.

    ``None``, ``""``, ``"local"`` and ``"default"`` select the host's local
    zone and return ``None``.  ``"UTC"`` and ``"Z"`` return :data:`UTC`.
    Anything else must be an IANA key such as ``"Europe/Berlin"``.

    Raises:
        InvalidZoneError: If the identifier cannot be resolved.
    """
    if identifier is None or isinstance(identifier, tzinfo):
        return identifier
    if not isinstance(identifier, str):
        raise InvalidZoneError(identifier)

    key = identifier.strip()
    if key.lower() in _LOCAL_ALIASES:
        return None
    if key.upper() in _UTC_ALIASES:
        return UTC
    try:
        return ZoneInfo(key)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        # keys naming a tzdata directory ("Europe") surface as IsADirectoryError
        raise InvalidZoneError(identifier) from e


def parse_instant(value: str | datetime) -> datetime:
    """Parse an ISO-8601 instant such as ``"2025-01-08T09:00:00Z"``.

    The value must carry a UTC offset (or ``Z``).  An aware ``datetime`` is
    returned unchanged.

    Raises:
        InvalidInstantError: If the value is malformed or naive.
    """
    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, str):
        try:
            moment = datetime.fromisoformat(value.strip())
        except ValueError as e:
            raise InvalidInstantError(value, str(e)) from e
    else:
        raise InvalidInstantError(value, "expected an ISO-8601 string or datetime")

    if moment.tzinfo is None or moment.utcoffset() is None:
        raise InvalidInstantError(value, "missing UTC offset")
    return moment


def _require_zone(zone: object) -> None:
    if zone is not None and not isinstance(zone, tzinfo):
        raise InvalidZoneError(zone)


def _require_aware(moment: object) -> None:
    if not isinstance(moment, datetime):
        raise InvalidInstantError(moment, "expected a timezone-aware datetime")
    if moment.tzinfo is None or moment.utcoffset() is None:
        raise InvalidInstantError(moment, "missing UTC offset")


def zone_name(zone: tzinfo | None) -> str:
    """Human-readable name of *zone*; ``"local"`` for the host zone."""
    if zone is None:
        return "local"
    if isinstance(zone, ZoneInfo):
        return zone.key
    return str(zone)


# ── implementations ──────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class SystemClock:
    """Clock backed by the real system time.

    Every read hits the OS clock, so two reads are never assumed equal.
    """

    zone: tzinfo | None = None

    def __post_init__(self) -> None:
        _require_zone(self.zone)

    @staticmethod
    def in_zone(identifier: str | tzinfo | None = None) -> SystemClock:
        clock = SystemClock(parse_zone(identifier))
        logger.debug("Built system clock in zone %s", zone_name(clock.zone))
        return clock

    def now(self) -> datetime:
        return datetime.now(UTC).astimezone(self.zone)

    def today(self) -> date:
        return self.now().date()

    def instant(self) -> datetime:
        return datetime.now(UTC)

    def with_zone(self, zone: tzinfo | None) -> SystemClock:
        return replace(self, zone=zone)


@dataclass(frozen=True, slots=True)
class FixedClock:
    """Clock that always reports the same instant.

    Attributes:
        fixed_instant: The reported moment.  Must be timezone-aware.
        zone:          Zone used to project ``fixed_instant`` into a
                       calendar date.
    """

    fixed_instant: datetime
    zone: tzinfo | None = UTC

    def __post_init__(self) -> None:
        _require_aware(self.fixed_instant)
        _require_zone(self.zone)

    @staticmethod
    def parse(instant: str | datetime, zone: str | tzinfo | None = "UTC") -> FixedClock:
        """Build a fixed clock from an ISO-8601 instant and a zone identifier.

        Example:
            FixedClock.parse("2025-01-09T09:00:00Z", "Pacific/Honolulu").today()
            # date(2025, 1, 8)
        """
        clock = FixedClock(parse_instant(instant), parse_zone(zone))
        logger.debug(
            "Built fixed clock at %s in zone %s",
            clock.instant().isoformat(),
            zone_name(clock.zone),
        )
        return clock

    def now(self) -> datetime:
        return self.fixed_instant.astimezone(self.zone)

    def today(self) -> date:
        return self.now().date()

    def instant(self) -> datetime:
        return self.fixed_instant.astimezone(UTC)

    def with_zone(self, zone: tzinfo | None) -> FixedClock:
        return replace(self, zone=zone)


@dataclass(frozen=True, slots=True)
class OffsetClock:
    """Clock reporting another clock's instant shifted by a fixed duration.

    The projection zone is always the base clock's; use :meth:`with_zone`
    (or the ``zone`` argument of :meth:`of`) to project elsewhere.
    """

    base: Clock
    offset: timedelta

    def __post_init__(self) -> None:
        if not isinstance(self.offset, timedelta):
            raise InvalidOffsetError(self.offset)

    @staticmethod
    def of(
        base: Clock,
        offset: timedelta,
        zone: str | tzinfo | None = None,
    ) -> OffsetClock:
        """Shift *base* by *offset*.  A non-``None`` *zone* overrides the base's."""
        if zone is not None:
            base = base.with_zone(parse_zone(zone))
        clock = OffsetClock(base, offset)
        logger.debug("Built offset clock %s from %r", offset, base)
        return clock

    @property
    def zone(self) -> tzinfo | None:
        return self.base.zone

    def now(self) -> datetime:
        return self.instant().astimezone(self.zone)

    def today(self) -> date:
        return self.now().date()

    def instant(self) -> datetime:
        return self.base.instant() + self.offset

    def with_zone(self, zone: tzinfo | None) -> OffsetClock:
        return OffsetClock(self.base.with_zone(zone), self.offset)


def default_clock() -> Clock:
    """The production clock: real system time in the host's local zone."""
    return SystemClock.in_zone(None)
