"""Removal of a single file or empty directory."""

from __future__ import annotations

import logging
import os
from typing import Optional

from .errors import TempCleanerError
from .models import Entry

LOGGER = logging.getLogger(__name__)


class RemovalError(TempCleanerError):
    """Raised when an entry cannot be removed."""


def remove_entry(entry: Entry, dry_run: bool, *, logger: Optional[logging.Logger] = None) -> None:
    """Remove one entry, or only log it when dry_run is set.

    Directories are removed with rmdir and must already be empty.

    Raises:
        RemovalError: Wrapping the OS error, with the entry path in the message.
    """
    dry_run_tag = " (dry run)" if dry_run else ""
    (logger or LOGGER).debug("Removing%s %s", dry_run_tag, entry.path)

    if dry_run:
        return

    if entry.is_dir:
        try:
            os.rmdir(entry.path)
        except OSError as exc:
            raise RemovalError(f"failed to remove directory {entry.path}") from exc
    else:
        try:
            os.unlink(entry.path)
        except OSError as exc:
            raise RemovalError(f"failed to remove file {entry.path}") from exc
