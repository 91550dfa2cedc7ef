"""
Human duration parsing and formatting.

Accepts compound forms such as ``60s``, ``10m``, ``10d2h``, ``10d 2h`` or ``1y``.
A month is 30.44 days and a year 365.25 days.
"""

from __future__ import annotations

import re
from datetime import timedelta

from .errors import TempCleanerError

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY = 24 * SECONDS_PER_HOUR
SECONDS_PER_WEEK = 7 * SECONDS_PER_DAY
SECONDS_PER_MONTH = 2_630_016  # 30.44 days
SECONDS_PER_YEAR = 31_557_600  # 365.25 days

NANOSECONDS_PER_MICROSECOND = 1000
NANOSECONDS_PER_SECOND = 1_000_000_000

# Nanoseconds per unit
_UNIT_NANOSECONDS: dict[str, int] = {
    "ns": 1,
    "nsec": 1,
    "us": NANOSECONDS_PER_MICROSECOND,
    "usec": NANOSECONDS_PER_MICROSECOND,
    "µs": NANOSECONDS_PER_MICROSECOND,
    "ms": 1_000_000,
    "msec": 1_000_000,
    "s": NANOSECONDS_PER_SECOND,
    "sec": NANOSECONDS_PER_SECOND,
    "secs": NANOSECONDS_PER_SECOND,
    "second": NANOSECONDS_PER_SECOND,
    "seconds": NANOSECONDS_PER_SECOND,
    "m": SECONDS_PER_MINUTE * NANOSECONDS_PER_SECOND,
    "min": SECONDS_PER_MINUTE * NANOSECONDS_PER_SECOND,
    "mins": SECONDS_PER_MINUTE * NANOSECONDS_PER_SECOND,
    "minute": SECONDS_PER_MINUTE * NANOSECONDS_PER_SECOND,
    "minutes": SECONDS_PER_MINUTE * NANOSECONDS_PER_SECOND,
    "h": SECONDS_PER_HOUR * NANOSECONDS_PER_SECOND,
    "hr": SECONDS_PER_HOUR * NANOSECONDS_PER_SECOND,
    "hrs": SECONDS_PER_HOUR * NANOSECONDS_PER_SECOND,
    "hour": SECONDS_PER_HOUR * NANOSECONDS_PER_SECOND,
    "hours": SECONDS_PER_HOUR * NANOSECONDS_PER_SECOND,
    "d": SECONDS_PER_DAY * NANOSECONDS_PER_SECOND,
    "day": SECONDS_PER_DAY * NANOSECONDS_PER_SECOND,
    "days": SECONDS_PER_DAY * NANOSECONDS_PER_SECOND,
    "w": SECONDS_PER_WEEK * NANOSECONDS_PER_SECOND,
    "week": SECONDS_PER_WEEK * NANOSECONDS_PER_SECOND,
    "weeks": SECONDS_PER_WEEK * NANOSECONDS_PER_SECOND,
    "M": SECONDS_PER_MONTH * NANOSECONDS_PER_SECOND,
    "month": SECONDS_PER_MONTH * NANOSECONDS_PER_SECOND,
    "months": SECONDS_PER_MONTH * NANOSECONDS_PER_SECOND,
    "y": SECONDS_PER_YEAR * NANOSECONDS_PER_SECOND,
    "year": SECONDS_PER_YEAR * NANOSECONDS_PER_SECOND,
    "years": SECONDS_PER_YEAR * NANOSECONDS_PER_SECOND,
}

_TOKEN = re.compile(r"\s*(\d+)\s*([A-Za-zµ]+)\s*")


class DurationError(TempCleanerError, ValueError):
    """Raised when a duration string cannot be parsed."""


def parse_duration(text: str) -> timedelta:
    """
    Parse a compound human duration into a timedelta.

    Raises:
        DurationError: If the text is empty, malformed, uses an unknown unit or is
            too large for a timedelta.

    Examples:
        >>> parse_duration("10d2h")
        datetime.timedelta(days=10, seconds=7200)
        >>> parse_duration("90s")
        datetime.timedelta(seconds=90)
    """
    if not text or not text.strip():
        raise DurationError("duration cannot be empty")

    nanoseconds = 0
    position = 0
    while position < len(text):
        match = _TOKEN.match(text, position)
        if match is None:
            raise DurationError(f"invalid duration {text!r} at position {position}")
        number, unit = match.groups()
        if unit not in _UNIT_NANOSECONDS:
            raise DurationError(f"unknown time unit {unit!r} in duration {text!r}")
        nanoseconds += int(number) * _UNIT_NANOSECONDS[unit]
        position = match.end()

    try:
        return timedelta(microseconds=nanoseconds // NANOSECONDS_PER_MICROSECOND)
    except OverflowError as exc:
        raise DurationError(f"duration {text!r} is too large") from exc


def format_duration(duration: timedelta) -> str:
    """Format a timedelta compactly (``10d 2h``) in a form parse_duration accepts."""
    total_microseconds = (
        duration.days * SECONDS_PER_DAY + duration.seconds
    ) * 1_000_000 + duration.microseconds
    if total_microseconds <= 0:
        return "0s"

    seconds, microseconds = divmod(total_microseconds, 1_000_000)
    days, seconds = divmod(seconds, SECONDS_PER_DAY)
    hours, seconds = divmod(seconds, SECONDS_PER_HOUR)
    minutes, seconds = divmod(seconds, SECONDS_PER_MINUTE)
    milliseconds, microseconds = divmod(microseconds, 1000)

    parts = [
        f"{value}{unit}"
        for value, unit in (
            (days, "d"),
            (hours, "h"),
            (minutes, "m"),
            (seconds, "s"),
            (milliseconds, "ms"),
            (microseconds, "us"),
        )
        if value
    ]
    return " ".join(parts)
