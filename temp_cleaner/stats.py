"""
Statistics accumulated while cleaning a directory tree.

Each directory scan owns one Stats value and merges the values returned by its
recursive children. Nothing is shared between sibling scans.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Iterable


@dataclass
class Stats:
    """Removed-entry count, removed bytes and error/warning tallies."""

    removed_count: int = 0
    removed_bytes: int = 0
    errors_total: int = 0
    warnings_total: int = 0

    def add(self, other: Stats) -> None:
        """Merge a child's statistics into this accumulator."""
        for item in fields(self):
            setattr(self, item.name, getattr(self, item.name) + getattr(other, item.name))

    def __add__(self, other: Stats) -> Stats:
        if not isinstance(other, Stats):
            return NotImplemented
        return merge(self, other)


def merge(first: Stats, second: Stats) -> Stats:
    """Return the field-wise sum of two Stats values without mutating either."""
    return Stats(
        removed_count=first.removed_count + second.removed_count,
        removed_bytes=first.removed_bytes + second.removed_bytes,
        errors_total=first.errors_total + second.errors_total,
        warnings_total=first.warnings_total + second.warnings_total,
    )


def total(values: Iterable[Stats]) -> Stats:
    """Sum any number of Stats values, starting from the all-zero identity."""
    result = Stats()
    for value in values:
        result.add(value)
    return result
