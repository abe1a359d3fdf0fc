import pytest

from timegrid.duration import (
    format_duration_label,
    format_hours,
    format_timer,
    parse_duration,
    parse_duration_optional,
)
from timegrid.errors import FormatError


@pytest.mark.parametrize(
    "text,seconds",
    [
        ("1h 30m", 5400),
        ("45m", 2700),
        ("2h", 7200),
        ("0m", 0),
        ("2h30m", 9000),
        ("  1h   5m ", 3900),
    ],
)
def test_parse_duration_valid(text, seconds):
    """Hours count 3600 seconds and minutes 60."""
    assert parse_duration(text) == seconds


@pytest.mark.parametrize(
    "text", ["", "   ", "2x", "h30m", "abc", "-1h", "30m 2h", "1.5h", "２h", "1h ３0m"]
)
def test_parse_duration_invalid(text):
    """Malformed text raises instead of defaulting to zero."""
    with pytest.raises(FormatError):
        parse_duration(text)


def test_parse_duration_optional_passes_none():
    assert parse_duration_optional(None) is None
    assert parse_duration_optional("15m") == 900


def test_format_timer_pads_minutes_and_seconds():
    assert format_timer(0) == "00:00"
    assert format_timer(65) == "01:05"
    assert format_timer(3725) == "62:05"


def test_format_duration_label():
    assert format_duration_label(9000) == "2h 30m"
    assert format_duration_label(7200) == "2h"
    assert format_duration_label(2700) == "45m"
    assert format_duration_label(0) == "0m"
    assert format_duration_label(40) == "40s"


def test_format_hours_two_decimals():
    assert format_hours(5400) == "1.50"
    assert format_hours(1200) == "0.33"
