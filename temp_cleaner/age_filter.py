"""
Age-based eligibility for removal.

An entry whose creation time cannot be read is never eligible: it is logged as
a warning and left on disk.
"""

from __future__ import annotations

import enum
import logging
import os
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from .errors import TempCleanerError
from .models import Entry
from .output import log_error

LOGGER = logging.getLogger(__name__)

CreationTimeReader = Callable[[Entry], datetime]


class CreationTimeError(TempCleanerError):
    """Raised when an entry's creation time is not available."""


class Eligibility(enum.Enum):
    """Outcome of the age check for one entry."""

    ELIGIBLE = "eligible"
    TOO_NEW = "too_new"
    UNKNOWN_AGE = "unknown_age"


def read_creation_time(entry: Entry) -> datetime:
    """Return the entry's creation time as an aware UTC datetime.

    Raises:
        CreationTimeError: If the platform does not record creation times.
    """
    birth_time = getattr(entry.stat_result, "st_birthtime", None)
    if birth_time is None and os.name == "nt":
        birth_time = entry.stat_result.st_ctime
    if birth_time is None:
        raise CreationTimeError(f"creation time is not available for {entry.path}")
    try:
        return datetime.fromtimestamp(birth_time, tz=timezone.utc)
    except (OSError, OverflowError, ValueError) as exc:
        raise CreationTimeError(f"invalid creation time for {entry.path}") from exc


def evaluate_age(
    entry: Entry,
    cutoff: Optional[timedelta],
    skip_check: bool,
    *,
    creation_time: CreationTimeReader = read_creation_time,
    now: Optional[datetime] = None,
    logger: Optional[logging.Logger] = None,
) -> Eligibility:
    """Classify an entry against the age cutoff."""
    if skip_check or cutoff is None:
        return Eligibility.ELIGIBLE

    try:
        created_at = creation_time(entry)
    except CreationTimeError as exc:
        log_error(logger or LOGGER, exc, level=logging.WARNING)
        return Eligibility.UNKNOWN_AGE

    elapsed = (now or datetime.now(timezone.utc)) - created_at
    if elapsed >= cutoff:
        return Eligibility.ELIGIBLE
    return Eligibility.TOO_NEW


def is_eligible(
    entry: Entry,
    cutoff: Optional[timedelta],
    skip_check: bool,
    *,
    creation_time: CreationTimeReader = read_creation_time,
    now: Optional[datetime] = None,
    logger: Optional[logging.Logger] = None,
) -> bool:
    """Return True if the entry is old enough (or inherits eligibility)."""
    outcome = evaluate_age(
        entry,
        cutoff,
        skip_check,
        creation_time=creation_time,
        now=now,
        logger=logger,
    )
    return outcome is Eligibility.ELIGIBLE
