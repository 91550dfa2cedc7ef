"""Tests for temp_cleaner/format_utils.py."""

from __future__ import annotations

from pathlib import Path

from temp_cleaner.format_utils import (  # pylint: disable=no-name-in-module
    BYTES_PER_GIB,
    BYTES_PER_KIB,
    BYTES_PER_MIB,
    format_bytes,
    format_summary,
)
from temp_cleaner.stats import Stats
from tests.assertions import assert_equal


class TestFormatBytes:
    """Binary-unit byte formatting."""

    def test_none_and_zero(self):
        """Test None and zero."""
        assert_equal(format_bytes(None), "n/a")
        assert_equal(format_bytes(0), "0 B")

    def test_bytes(self):
        """Test values below one KiB."""
        assert_equal(format_bytes(110), "110.00 B")
        assert_equal(format_bytes(1023), "1023.00 B")

    def test_larger_units(self):
        """Test KiB, MiB and GiB."""
        assert_equal(format_bytes(BYTES_PER_KIB), "1.00 KiB")
        assert_equal(format_bytes(int(1.5 * BYTES_PER_KIB)), "1.50 KiB")
        assert_equal(format_bytes(3 * BYTES_PER_MIB), "3.00 MiB")
        assert_equal(format_bytes(BYTES_PER_GIB, decimal_places=1), "1.0 GiB")

    def test_largest_unit_caps(self):
        """Test values beyond PiB stay in PiB."""
        assert_equal(format_bytes(2048 * 1024**5), "2048.00 PiB")

    def test_negative(self):
        """Test the sign is preserved."""
        assert_equal(format_bytes(-2048), "-2.00 KiB")


def test_format_summary_keeps_exact_counts():
    """Test the summary line carries the exact count and error values."""
    stats = Stats(removed_count=3, removed_bytes=110, errors_total=2)
    assert_equal(
        format_summary(stats, Path("/tmp")),
        f"Removed 3 entries (110.00 B) with 2 errors from path {Path('/tmp')}",
    )
