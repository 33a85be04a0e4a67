"""Daily windows and the waits until their boundaries.

Windows are described by wall-clock times and resolved against the clock's
calendar day in the requested zone.
"""

import logging
from datetime import datetime, timedelta

from timehelper.clock import Clock, resolve_clock
from timehelper.days import epoch_at
from timehelper.span import Interval, TimeOfDay, check_hour, parse_time_of_day
from timehelper.util import HOUR, at_least_one, resolve_zone

logger = logging.getLogger(__name__)


def interval(
    start_time: str | TimeOfDay,
    end_time: str | TimeOfDay,
    current_time: str | TimeOfDay | None = None,
    *,
    tz: str | None = None,
    clock: Clock | None = None,
) -> Interval | None:
    """
    Resolve a recurring daily window to concrete timestamps.

    A window whose start is later than its end crosses midnight. Depending on
    the current time it either opened today and closes tomorrow, or opened
    yesterday and closes today.

    Args:
        start_time: Window open time, ``HH:MM:SS``
        end_time: Window close time, ``HH:MM:SS``
        current_time: Time of day to resolve against (default: the clock's)
        tz: IANA timezone name (default: host local time)
        clock: Clock supplying "today" (and the default current time)

    Returns:
        The window as an Interval, or None when current_time is outside it.
        Being exactly on a boundary counts as outside. A window that a DST
        jump leaves with no positive length also resolves to None.

    Raises:
        InvalidArgument: If any time string is not ``HH:MM:SS``

    Example:
        >>> # At 23:00 on 2017-12-13 (Asia/Shanghai)
        >>> interval("20:00:00", "06:00:00", tz="Asia/Shanghai")
        Interval(start=1513166400, end=1513202400)
    """
    start = parse_time_of_day(start_time)
    end = parse_time_of_day(end_time)
    zone = resolve_zone(tz)
    local_now = resolve_clock(clock).now(zone)
    current = (
        TimeOfDay.of(local_now)
        if current_time is None
        else parse_time_of_day(current_time)
    )

    today = local_now.date()
    if start > end:
        if current > start:
            start_day, end_day = today, today + timedelta(days=1)
        elif current < end:
            start_day, end_day = today - timedelta(days=1), today
        else:
            logger.debug("%s is outside overnight window %s-%s", current, start, end)
            return None
    elif start < current < end:
        start_day = end_day = today
    else:
        logger.debug("%s is outside window %s-%s", current, start, end)
        return None

    opens = epoch_at(start_day, start.hour, start.minute, start.second, zone)
    closes = epoch_at(end_day, end.hour, end.minute, end.second, zone)
    # A wall time skipped by a DST jump can resolve past the other end
    if opens >= closes:
        logger.debug(
            "Window %s-%s collapses across a DST change (%s >= %s)",
            start,
            end,
            opens,
            closes,
        )
        return None
    return Interval(start=opens, end=closes)


def odd_remain_seconds(*, tz: str | None = None, clock: Clock | None = None) -> int:
    """
    Return seconds until the end of the next even-numbered clock hour.

    From an odd hour the target is ``:59:59`` of the following (even) hour;
    from an even hour it is ``:59:59`` of the current one. Never less than 1.
    """
    current = resolve_clock(clock).time()
    local = datetime.fromtimestamp(current, tz=resolve_zone(tz))
    hour_start = int(local.replace(minute=0, second=0, microsecond=0).timestamp())

    target = hour_start + HOUR - 1
    if local.hour % 2 == 1:
        target += HOUR
    return at_least_one(target - current)


def allow_seconds_later(
    allow_start_hour: int,
    allow_end_hour: int,
    *,
    tz: str | None = None,
    clock: Clock | None = None,
) -> int:
    """
    Return seconds until today's allowed window opens.

    The window runs from ``allow_start_hour:00:00`` to
    ``allow_end_hour:59:59``. Once it has closed, the wait rolls over to
    tomorrow's opening. Inside the window the result is 1.

    Args:
        allow_start_hour: Opening hour (0-23)
        allow_end_hour: Last allowed hour (0-23), inclusive
        tz: IANA timezone name (default: host local time)
        clock: Clock supplying the current time

    Raises:
        InvalidArgument: If either hour is outside 0-23

    Example:
        >>> # At 07:30, with the window open 09:00-17:59:59
        >>> allow_seconds_later(9, 17)
        5400
    """
    check_hour(allow_start_hour, "allow_start_hour")
    check_hour(allow_end_hour, "allow_end_hour")

    zone = resolve_zone(tz)
    current = resolve_clock(clock).time()
    today = datetime.fromtimestamp(current, tz=zone).date()
    opens = epoch_at(today, allow_start_hour, 0, 0, zone)
    closes = epoch_at(today, allow_end_hour, 59, 59, zone)

    if current < opens:
        return opens - current
    if current > closes:
        reopens = epoch_at(today + timedelta(days=1), allow_start_hour, 0, 0, zone)
        return at_least_one(reopens - current)
    return 1
