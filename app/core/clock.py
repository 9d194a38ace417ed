"""Injectable clock for status derivation and calendar navigation.

Every timestamp handled by the scheduling engine is a naive wall-clock time in
the clinic's timezone. The clock is the single place where "now" enters the
engine, so tests and scripts can pin it with ``FixedClock``.
"""

from datetime import date, datetime
from typing import Protocol
from zoneinfo import ZoneInfo


class Clock(Protocol):
    """Source of the current time."""

    def now(self) -> datetime:
        """Return the current clinic-local time."""
        ...

    def today(self) -> date:
        """Return the current clinic-local date."""
        ...


class SystemClock:
    """Clock backed by the system time, converted to the clinic timezone."""

    def __init__(self, timezone: str = "UTC"):
        """Initialize clock with an IANA timezone name."""
        self.timezone = ZoneInfo(timezone)

    def now(self) -> datetime:
        return datetime.now(self.timezone).replace(tzinfo=None)

    def today(self) -> date:
        return self.now().date()


class FixedClock:
    """Clock pinned to a single instant."""

    def __init__(self, instant: datetime):
        """Initialize clock with the instant it always reports."""
        self.instant = instant.replace(tzinfo=None)

    def now(self) -> datetime:
        return self.instant

    def today(self) -> date:
        return self.instant.date()
