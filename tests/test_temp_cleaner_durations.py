"""Tests for temp_cleaner/durations.py."""

from __future__ import annotations

from datetime import timedelta

import pytest

from temp_cleaner.durations import (  # pylint: disable=no-name-in-module
    SECONDS_PER_YEAR,
    DurationError,
    format_duration,
    parse_duration,
)
from tests.assertions import assert_equal


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("60s", timedelta(seconds=60)),
        ("10m", timedelta(minutes=10)),
        ("10h", timedelta(hours=10)),
        ("10d", timedelta(days=10)),
        ("10d2h", timedelta(days=10, hours=2)),
        ("10d 2h", timedelta(days=10, hours=2)),
        ("1w", timedelta(weeks=1)),
        ("2days 3hours", timedelta(days=2, hours=3)),
        ("500ms", timedelta(milliseconds=500)),
        ("1y", timedelta(seconds=SECONDS_PER_YEAR)),
        (" 15min ", timedelta(minutes=15)),
    ],
)
def test_parse_duration(text, expected):
    """Test the accepted compound forms."""
    assert_equal(parse_duration(text), expected)


def test_month_and_minute_are_case_sensitive():
    """Test M means months while m means minutes."""
    assert parse_duration("1M") > timedelta(days=30)
    assert_equal(parse_duration("1m"), timedelta(minutes=1))


@pytest.mark.parametrize("text", ["", "   ", "10", "d10", "10x", "1.5h", "10d-2h", "ten days"])
def test_parse_duration_rejects_malformed(text):
    """Test malformed durations raise DurationError."""
    with pytest.raises(DurationError):
        parse_duration(text)


def test_duration_error_is_value_error():
    """Test DurationError can be handled as a ValueError."""
    with pytest.raises(ValueError):
        parse_duration("soon")


@pytest.mark.parametrize(
    ("duration", "expected"),
    [
        (timedelta(0), "0s"),
        (timedelta(seconds=60), "1m"),
        (timedelta(days=10, hours=2), "10d 2h"),
        (timedelta(hours=1, minutes=1, seconds=1), "1h 1m 1s"),
        (timedelta(milliseconds=1500), "1s 500ms"),
        (timedelta(seconds=SECONDS_PER_YEAR), "365d 6h"),
    ],
)
def test_format_duration(duration, expected):
    """Test compact formatting."""
    assert_equal(format_duration(duration), expected)


def test_formatted_duration_parses_back():
    """Test format_duration output is accepted by parse_duration."""
    duration = timedelta(days=3, hours=4, minutes=5, seconds=6)
    assert_equal(parse_duration(format_duration(duration)), duration)


def test_parse_duration_rejects_out_of_range_values():
    """Test a well-formed duration beyond timedelta's range raises DurationError."""
    with pytest.raises(DurationError, match="is too large") as exc_info:
        parse_duration("99999999999999y")
    assert isinstance(exc_info.value.__cause__, OverflowError)


def test_parse_duration_keeps_large_values_exact():
    """Test large durations keep microsecond precision."""
    assert_equal(
        parse_duration("2000000y 1us"),
        timedelta(seconds=2_000_000 * SECONDS_PER_YEAR, microseconds=1),
    )
    assert_equal(parse_duration("1d 1ns"), timedelta(days=1))
