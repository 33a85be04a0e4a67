"""Clock capability used by every function that reads the current time.

Functions accept ``clock=`` so callers (and tests) can pin the instant
instead of depending on the wall clock.

Example:
    >>> from timehelper import FixedClock, get_today_surplus
    >>> clock = FixedClock(1735689600)  # 2025-01-01 00:00:00 UTC
    >>> get_today_surplus(tz="UTC", clock=clock)
    86399
"""

from abc import ABC, abstractmethod
from datetime import datetime
from time import time as current_time
from typing import Any
from zoneinfo import ZoneInfo

from typing_extensions import override

from timehelper.util import coerce_timestamp


class Clock(ABC):

    @abstractmethod
    def time(self) -> int:
        """Return the current instant as integer Unix seconds."""
        pass

    def now(self, zone: ZoneInfo | None = None) -> datetime:
        """Return the current instant as a datetime in ``zone``.

        A ``None`` zone gives a naive datetime in host local time.
        """
        return datetime.fromtimestamp(self.time(), tz=zone)


class SystemClock(Clock):
    """Reads the host's wall clock."""

    @override
    def time(self) -> int:
        return int(current_time())

    @override
    def __repr__(self) -> str:
        return "SystemClock()"


class FixedClock(Clock):
    """Always reports the same instant."""

    def __init__(self, at: Any):
        self.at: int = coerce_timestamp(at, "at")

    @override
    def time(self) -> int:
        return self.at

    @override
    def __repr__(self) -> str:
        return f"FixedClock({self.at})"


system_clock = SystemClock()


def resolve_clock(clock: Clock | None) -> Clock:
    return system_clock if clock is None else clock
