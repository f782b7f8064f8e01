"""Derived values: percentage change, time-ago strings and display ids."""

from datetime import datetime, timedelta

import pytest

from visapilot.shared.formatting import calculate_change, change_type, format_time_ago
from visapilot.shared.sequences import format_display_id


NOW = datetime(2024, 6, 10, 12, 0, 0)


def test_calculate_change_from_zero():
    """Previous zero is +100% when anything happened, else 0%."""
    assert calculate_change(5, 0) == "+100%"
    assert calculate_change(0, 0) == "0%"


def test_calculate_change_rounding():
    assert calculate_change(15, 10) == "+50%"
    assert calculate_change(10, 10) == "+0%"
    assert calculate_change(5, 10) == "-50%"
    assert calculate_change(80, 100) == "-20%"
    # 1/3 -> 33.33...
    assert calculate_change(4, 3) == "+33%"
    # half rounds up
    assert calculate_change(3, 8) == "-62%"
    assert calculate_change(201, 200) == "+1%"


def test_change_type():
    assert change_type(3, 3) == "positive"
    assert change_type(2, 3) == "negative"


@pytest.mark.parametrize(
    "delta, expected",
    [
        (timedelta(seconds=20), "Just now"),
        (timedelta(minutes=1), "1 minute ago"),
        (timedelta(minutes=59), "59 minutes ago"),
        (timedelta(hours=1), "1 hour ago"),
        (timedelta(minutes=90), "1 hour ago"),
        (timedelta(hours=2, minutes=45), "2 hours ago"),
        (timedelta(days=1, hours=23), "1 day ago"),
        (timedelta(days=9), "9 days ago"),
    ],
)
def test_format_time_ago_uses_largest_unit(delta, expected):
    assert format_time_ago(NOW - delta, now=NOW) == expected


def test_format_display_id():
    assert format_display_id("CLI", 1) == "CLI-0001"
    assert format_display_id("INV", 42) == "INV-0042"
    assert format_display_id("PAT", 12345) == "PAT-12345"
    with pytest.raises(ValueError):
        format_display_id("CLI", 0)
