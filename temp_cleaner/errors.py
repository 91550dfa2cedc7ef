"""Base exception shared by every temp_cleaner module."""

from __future__ import annotations


class TempCleanerError(RuntimeError):
    """Root of the temp_cleaner exception hierarchy."""
