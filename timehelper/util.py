"""Utility constants and helpers for timehelper.

Time unit constants represent durations in seconds.
``tz=None`` everywhere means the host's local timezone.
"""

import logging
import math
from datetime import datetime
from typing import Any
from zoneinfo import ZoneInfo

logger = logging.getLogger(__name__)

# Time unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 604800

DAY_SECONDS = DAY
HOUR_SECONDS = HOUR
WEEK_SECONDS = WEEK


def resolve_zone(tz: str | None) -> ZoneInfo | None:
    """Return the ZoneInfo for an IANA name, or None for host local time."""
    if tz is None:
        return None
    return ZoneInfo(tz)


def at_least_one(remaining: Any) -> int:
    """Floor a remaining-seconds result at 1.

    Daylight-saving jumps and clock skew can push a computed wait to zero or
    below; callers always get a positive int instead.
    """
    if (
        isinstance(remaining, bool)
        or not isinstance(remaining, (int, float))
        or not math.isfinite(remaining)
    ):
        logger.debug("Non-numeric remaining time %r, flooring to 1s", remaining)
        return 1
    if int(remaining) <= 0:
        logger.debug("Non-positive remaining time %ss, flooring to 1s", remaining)
        return 1
    return int(remaining)


def coerce_timestamp(value: Any, name: str = "time") -> int:
    """Convert an int or timezone-aware datetime to integer Unix seconds.

    Raises:
        TypeError: If value is a naive datetime or an unsupported type
    """
    if isinstance(value, bool):
        raise TypeError(f"{name} must be int or datetime, got bool: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, datetime):
        if value.tzinfo is None:
            raise TypeError(
                f"{name} must be a timezone-aware datetime.\n"
                f"Got naive datetime: {value!r}\n"
                f"Hint: Add timezone info:\n"
                f"  from zoneinfo import ZoneInfo\n"
                f"  dt = datetime(..., tzinfo=ZoneInfo('Asia/Shanghai'))"
            )
        return int(value.timestamp())
    raise TypeError(
        f"{name} must be int (Unix seconds) or datetime.\n"
        f"Got {type(value).__name__!r}: {value!r}"
    )
