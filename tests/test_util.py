import logging

from timehelper import DAY_SECONDS, HOUR_SECONDS, WEEK_SECONDS
from timehelper.util import at_least_one, resolve_zone


def test_constants():
    assert DAY_SECONDS == 24 * 60 * 60
    assert HOUR_SECONDS == 60 * 60
    assert WEEK_SECONDS == 7 * DAY_SECONDS


def test_at_least_one_passes_positive_values():
    assert at_least_one(42) == 42
    assert at_least_one(2.9) == 2


def test_at_least_one_floors_and_logs(caplog):
    """Test that non-positive and non-numeric waits become 1."""
    with caplog.at_level(logging.DEBUG, logger="timehelper.util"):
        assert at_least_one(0) == 1
        assert at_least_one(-30) == 1
        assert at_least_one(None) == 1
        assert at_least_one(0.5) == 1
        assert at_least_one(float("nan")) == 1

    assert len(caplog.records) == 5
    assert "flooring to 1s" in caplog.records[0].getMessage()


def test_resolve_zone():
    assert resolve_zone(None) is None
    assert resolve_zone("UTC").key == "UTC"
