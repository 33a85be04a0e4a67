"""Tests for the clock capability."""

from datetime import datetime, timezone
from time import time as current_time
from zoneinfo import ZoneInfo

import pytest

from timehelper import Clock, FixedClock, SystemClock, system_clock
from timehelper.clock import resolve_clock


def test_fixed_clock_reports_pinned_instant():
    clock = FixedClock(1735689600)

    assert clock.time() == 1735689600
    assert clock.time() == clock.time()
    assert repr(clock) == "FixedClock(1735689600)"


def test_fixed_clock_accepts_aware_datetime():
    clock = FixedClock(datetime(2025, 1, 1, 8, 0, 0, tzinfo=ZoneInfo("Asia/Shanghai")))

    assert clock.time() == 1735689600


def test_fixed_clock_rejects_naive_datetime():
    with pytest.raises(TypeError, match="timezone-aware"):
        FixedClock(datetime(2025, 1, 1))


def test_clock_now_in_zone():
    """Test that now() converts the instant into the requested zone."""
    clock = FixedClock(1735689600)

    assert clock.now(timezone.utc) == datetime(2025, 1, 1, tzinfo=timezone.utc)
    assert clock.now(ZoneInfo("Asia/Shanghai")).hour == 8
    assert clock.now().tzinfo is None


def test_system_clock_tracks_wall_clock():
    before = int(current_time())
    reading = SystemClock().time()
    after = int(current_time())

    assert before <= reading <= after


def test_resolve_clock_defaults_to_system():
    fixed = FixedClock(0)

    assert resolve_clock(None) is system_clock
    assert resolve_clock(fixed) is fixed


def test_custom_clock_subclass():
    """Test that any Clock implementation can be injected."""

    class Ticking(Clock):
        def __init__(self):
            self.calls = 0

        def time(self) -> int:
            self.calls += 1
            return 1735689600 + self.calls

    clock = Ticking()
    assert clock.now(timezone.utc).second == 1
    assert clock.now(timezone.utc).second == 2
