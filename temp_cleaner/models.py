"""Transient records describing filesystem entries visited during a scan."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass
from pathlib import Path

from .errors import TempCleanerError


class MetadataError(TempCleanerError):
    """Raised when an entry's metadata cannot be read."""


@dataclass(frozen=True)
class Entry:
    """One filesystem item seen by the walker.

    Only regular files contribute a size; directories, links and special files
    report 0 so byte totals do not depend on the filesystem's directory sizes.
    """

    path: Path
    is_dir: bool
    size: int
    stat_result: os.stat_result

    @classmethod
    def from_stat(cls, path: Path, stat_result: os.stat_result) -> Entry:
        is_dir = stat.S_ISDIR(stat_result.st_mode)
        size = stat_result.st_size if stat.S_ISREG(stat_result.st_mode) else 0
        return cls(path=path, is_dir=is_dir, size=size, stat_result=stat_result)


def read_entry(path: Path) -> Entry:
    """Read an entry's metadata without following symbolic links.

    Raises:
        MetadataError: If the metadata cannot be read.
    """
    try:
        stat_result = os.lstat(path)
    except OSError as exc:
        raise MetadataError(f"can't read metadata {path}") from exc
    return Entry.from_stat(path, stat_result)
