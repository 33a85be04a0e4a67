"""Calendar-day boundaries and the current time.

All day arithmetic uses local calendar components (year, month, day) in the
requested zone, so boundaries stay correct for offsets that do not align with
UTC midnight.
"""

from datetime import date, datetime
from typing import Any
from zoneinfo import ZoneInfo

from dateutil.relativedelta import relativedelta

from timehelper.clock import Clock, resolve_clock
from timehelper.errors import InvalidArgument
from timehelper.util import at_least_one, coerce_timestamp, resolve_zone

DEFAULT_FORMAT = "%Y-%m-%d %H:%M:%S"


def epoch_at(
    day: date, hour: int, minute: int, second: int, zone: ZoneInfo | None
) -> int:
    """Unix seconds for a wall-clock time on a calendar day in ``zone``."""
    return int(
        datetime(day.year, day.month, day.day, hour, minute, second, tzinfo=zone)
        .timestamp()
    )


def _local_date(time: Any, zone: ZoneInfo | None, clock: Clock | None) -> date:
    if time is None:
        return resolve_clock(clock).now(zone).date()
    return datetime.fromtimestamp(coerce_timestamp(time), tz=zone).date()


def now(
    format: str = DEFAULT_FORMAT,
    *,
    tz: str | None = None,
    clock: Clock | None = None,
) -> str:
    """Return the current time formatted with a strftime pattern."""
    return resolve_clock(clock).now(resolve_zone(tz)).strftime(format)


def get_today_start(
    time: Any = None, *, tz: str | None = None, clock: Clock | None = None
) -> int:
    """
    Return the timestamp of 00:00:00 on the calendar day containing ``time``.

    Args:
        time: Unix seconds or timezone-aware datetime (default: now)
        tz: IANA timezone name (default: host local time)
        clock: Clock to read when ``time`` is omitted

    Example:
        >>> get_today_start(1735732800, tz="UTC")  # 2025-01-01 12:00 UTC
        1735689600
    """
    zone = resolve_zone(tz)
    return epoch_at(_local_date(time, zone, clock), 0, 0, 0, zone)


def get_today_end(
    time: Any = None, *, tz: str | None = None, clock: Clock | None = None
) -> int:
    """Return the timestamp of 23:59:59 on the calendar day containing ``time``."""
    zone = resolve_zone(tz)
    return epoch_at(_local_date(time, zone, clock), 23, 59, 59, zone)


def get_today_surplus(*, tz: str | None = None, clock: Clock | None = None) -> int:
    """Return how many seconds remain until 23:59:59 today (at least 1)."""
    current = resolve_clock(clock).time()
    return at_least_one(get_today_end(current, tz=tz) - current)


def first_and_last_day_of_month(
    months_ago: int, *, tz: str | None = None, clock: Clock | None = None
) -> tuple[str, str]:
    """
    Return the first and last moments of a month as formatted strings.

    Args:
        months_ago: 0 for the current month, 1 for the previous one, etc.
        tz: IANA timezone name (default: host local time)
        clock: Clock supplying the current month

    Returns:
        ``("YYYY-MM-01 00:00:00", "YYYY-MM-DD 23:59:59")``

    Raises:
        InvalidArgument: If months_ago is negative or not an int

    Example:
        >>> first_and_last_day_of_month(1)  # called in October 2018
        ('2018-09-01 00:00:00', '2018-09-30 23:59:59')
    """
    if isinstance(months_ago, bool) or not isinstance(months_ago, int):
        raise InvalidArgument(f"months_ago must be an int, got {months_ago!r}")
    if months_ago < 0:
        raise InvalidArgument(f"months_ago must be >= 0, got {months_ago}")

    today = resolve_clock(clock).now(resolve_zone(tz)).date()
    first = today.replace(day=1) - relativedelta(months=months_ago)
    # day=31 clamps to the month's real length
    last = first + relativedelta(day=31)
    return (
        f"{first:%Y-%m-%d} 00:00:00",
        f"{last:%Y-%m-%d} 23:59:59",
    )
