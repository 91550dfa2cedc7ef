"""
Recursive cleaning of a directory's contents.

The age filter is evaluated only for the immediate entries of the directory
passed in with ``skip_date_check=False``. Once a directory qualifies, everything
below it is removed regardless of its own age.

Failures are handled at three levels:
- a directory that cannot be listed aborts that call (DirectoryListError);
- a subdirectory that cannot be listed counts one error and stops the current
  directory, returning what was collected so far;
- unreadable metadata or a failed removal counts one error and moves on.
"""

from __future__ import annotations

import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from . import models
from .age_filter import CreationTimeReader, Eligibility, evaluate_age, read_creation_time
from .config import Config
from .errors import TempCleanerError
from .models import MetadataError
from .output import log_error
from .remover import RemovalError, remove_entry
from .stats import Stats

LOGGER = logging.getLogger(__name__)


class DirectoryListError(TempCleanerError):
    """Raised when a directory's entries cannot be listed."""


def list_directory(path: Path) -> list[Path]:
    """Return the directory's entry paths sorted by name.

    Raises:
        DirectoryListError: If the directory cannot be read.
    """
    try:
        with os.scandir(path) as entries:
            names = sorted(entry.name for entry in entries)
    except OSError as exc:
        raise DirectoryListError(f"can't read dir {path}") from exc
    return [Path(path) / name for name in names]


def clean_directory(
    path: Path,
    config: Config,
    skip_date_check: bool = False,
    *,
    logger: Optional[logging.Logger] = None,
    creation_time: CreationTimeReader = read_creation_time,
    now: Optional[datetime] = None,
) -> Stats:
    """Remove the contents of ``path`` and return the statistics for the subtree.

    Raises:
        DirectoryListError: If ``path`` itself cannot be listed.
    """
    logger = logger or LOGGER
    now = now or datetime.now(timezone.utc)
    entry_paths = list_directory(path)
    stats = Stats()

    for entry_path in entry_paths:
        try:
            entry = models.read_entry(entry_path)
        except MetadataError as exc:
            stats.errors_total += 1
            log_error(logger, exc)
            continue

        eligibility = evaluate_age(
            entry,
            config.since,
            skip_date_check,
            creation_time=creation_time,
            now=now,
            logger=logger,
        )
        if eligibility is Eligibility.UNKNOWN_AGE:
            stats.warnings_total += 1
            continue
        if eligibility is not Eligibility.ELIGIBLE:
            continue

        if entry.is_dir:
            try:
                sub_stats = clean_directory(
                    entry.path,
                    config,
                    True,
                    logger=logger,
                    creation_time=creation_time,
                    now=now,
                )
            except DirectoryListError as exc:
                stats.errors_total += 1
                log_error(logger, exc)
                return stats
            stats.add(sub_stats)

        try:
            remove_entry(entry, config.dry_run, logger=logger)
        except RemovalError as exc:
            stats.errors_total += 1
            log_error(logger, exc)
        else:
            stats.removed_bytes += entry.size
            stats.removed_count += 1

    return stats
