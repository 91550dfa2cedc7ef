"""
Formatting helpers for run summaries.

Formatting only changes presentation: callers always pass the exact byte
counts collected by the walker.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .stats import Stats

BYTES_PER_KIB = 1024
BYTES_PER_MIB = 1024**2
BYTES_PER_GIB = 1024**3
BYTES_PER_TIB = 1024**4

BINARY_UNITS = ["B", "KiB", "MiB", "GiB", "TiB", "PiB"]


def format_bytes(num_bytes: Optional[int], decimal_places: int = 2) -> str:
    """
    Format a byte count with binary units.

    Examples:
        >>> format_bytes(0)
        '0 B'
        >>> format_bytes(110)
        '110.00 B'
        >>> format_bytes(1536)
        '1.50 KiB'
        >>> format_bytes(None)
        'n/a'
    """
    if num_bytes is None:
        return "n/a"

    sign = "-" if num_bytes < 0 else ""
    value = float(abs(num_bytes))
    if value < 1:
        return f"{sign}0 B"

    for unit in BINARY_UNITS:
        if value < BYTES_PER_KIB or unit == BINARY_UNITS[-1]:
            return f"{sign}{value:.{decimal_places}f} {unit}"
        value /= BYTES_PER_KIB

    return f"{sign}{value:.{decimal_places}f} PiB"


def format_summary(stats: Stats, root: Path) -> str:
    """Render the per-root summary line."""
    return (
        f"Removed {stats.removed_count} entries ({format_bytes(stats.removed_bytes)}) "
        f"with {stats.errors_total} errors from path {root}"
    )
