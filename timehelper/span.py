import re
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime

from timehelper.errors import InvalidArgument

_TIME_OF_DAY = re.compile(r"(\d{2}):(\d{2}):(\d{2})")


@dataclass(frozen=True, kw_only=True)
class Interval:
    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(
                f"Interval start ({self.start}) must be <= end ({self.end})"
            )

    def __iter__(self) -> Iterator[int]:
        """Unpack as an ordered ``(start, end)`` pair."""
        yield self.start
        yield self.end

    @property
    def duration(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        """Human-friendly string showing range and duration."""
        return f"Interval({self.start}→{self.end}, {self.duration}s)"


@dataclass(frozen=True, order=True)
class TimeOfDay:
    """A wall-clock time with second precision, ordered numerically."""

    hour: int
    minute: int = 0
    second: int = 0

    def __post_init__(self) -> None:
        check_hour(self.hour)
        if not (0 <= self.minute <= 59):
            raise InvalidArgument(f"minute must be 0-59, got {self.minute}")
        if not (0 <= self.second <= 59):
            raise InvalidArgument(f"second must be 0-59, got {self.second}")

    @classmethod
    def of(cls, dt: datetime) -> "TimeOfDay":
        return cls(dt.hour, dt.minute, dt.second)

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"


def check_hour(hour: int, name: str = "hour") -> int:
    """Validate an hour-of-day, returning it unchanged."""
    if isinstance(hour, bool) or not isinstance(hour, int):
        raise InvalidArgument(f"{name} must be an int 0-23, got {hour!r}")
    if not (0 <= hour <= 23):
        raise InvalidArgument(f"{name} must be 0-23, got {hour}")
    return hour


def parse_time_of_day(value: "str | TimeOfDay") -> TimeOfDay:
    """Parse a zero-padded 24-hour ``HH:MM:SS`` string.

    Args:
        value: Time string such as ``"20:00:00"``, or an existing TimeOfDay

    Raises:
        InvalidArgument: If the string is not ``HH:MM:SS`` or a field is out
            of range
    """
    if isinstance(value, TimeOfDay):
        return value
    if not isinstance(value, str):
        raise InvalidArgument(
            f"time of day must be an 'HH:MM:SS' string, got {value!r}"
        )
    match = _TIME_OF_DAY.fullmatch(value)
    if match is None:
        raise InvalidArgument(
            f"Invalid time of day '{value}'. Expected format: HH:MM:SS"
        )
    hour, minute, second = (int(part) for part in match.groups())
    return TimeOfDay(hour, minute, second)
