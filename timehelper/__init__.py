from .clock import Clock, FixedClock, SystemClock, system_clock
from .days import (
    first_and_last_day_of_month,
    get_today_end,
    get_today_start,
    get_today_surplus,
    now,
)
from .durations import translate_secs
from .errors import InvalidArgument
from .span import Interval, TimeOfDay, parse_time_of_day
from .util import DAY_SECONDS, HOUR_SECONDS, WEEK_SECONDS
from .windows import allow_seconds_later, interval, odd_remain_seconds

__all__ = [
    "DAY_SECONDS",
    "HOUR_SECONDS",
    "WEEK_SECONDS",
    "Interval",
    "TimeOfDay",
    "parse_time_of_day",
    "InvalidArgument",
    "Clock",
    "SystemClock",
    "FixedClock",
    "system_clock",
    "now",
    "get_today_start",
    "get_today_end",
    "get_today_surplus",
    "translate_secs",
    "interval",
    "odd_remain_seconds",
    "first_and_last_day_of_month",
    "allow_seconds_later",
]
