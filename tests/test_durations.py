"""Tests for duration formatting."""

import pytest

from timehelper import InvalidArgument, translate_secs


def test_translate_secs_known_values():
    assert translate_secs(0) == ""
    assert translate_secs(1) == "1秒"
    assert translate_secs(60) == "1分"
    assert translate_secs(3661) == "1小时1分1秒"
    assert translate_secs(86400) == "1天"
    assert translate_secs(90061) == "1天1小时1分1秒"


def test_translate_secs_skips_zero_units():
    """Test that zero-valued middle units are omitted, not padded."""
    assert translate_secs(3600) == "1小时"
    assert translate_secs(3601) == "1小时1秒"
    assert translate_secs(86460) == "1天1分"
    assert translate_secs(2 * 86400 + 5) == "2天5秒"


def test_translate_secs_large_values():
    """Test that days are not rolled up into weeks."""
    assert translate_secs(604800) == "7天"
    assert translate_secs(400 * 86400 + 23 * 3600 + 59 * 60 + 59) == "400天23小时59分59秒"


def test_translate_secs_rejects_negative():
    with pytest.raises(InvalidArgument, match="non-negative"):
        translate_secs(-1)


def test_translate_secs_rejects_non_int():
    """Test that floats and bools raise TypeError."""
    with pytest.raises(TypeError, match="seconds must be int"):
        translate_secs(1.5)

    with pytest.raises(TypeError, match="seconds must be int"):
        translate_secs(True)
