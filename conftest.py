"""Pytest configuration and shared fixtures for temp_cleaner."""

# pylint: disable=wrong-import-position

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import logging

import pytest

from temp_cleaner.output import CONSOLE_FORMAT, FILE_FORMAT


@pytest.fixture(autouse=True)
def isolated_env_file(tmp_path_factory, monkeypatch):
    """Auto-use fixture that keeps ~/.env and TEMP_CLEANER_* variables out of tests.

    TEMP_CLEANER_ENV_FILE points at an empty file so config loading never reads
    the developer's own defaults.
    """
    env_file = tmp_path_factory.mktemp("env") / ".env"
    env_file.write_text("")
    monkeypatch.setenv("TEMP_CLEANER_ENV_FILE", str(env_file))
    for key in ("TEMP_CLEANER_CREATED_BEFORE", "TEMP_CLEANER_LOG", "TEMP_CLEANER_DRY_RUN"):
        monkeypatch.delenv(key, raising=False)
    yield env_file


@pytest.fixture(autouse=True)
def close_cli_log_handlers():
    """Close handlers installed by init_logger so log files do not leak between tests."""
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        fmt = getattr(handler.formatter, "_fmt", None)
        if isinstance(handler, logging.NullHandler) or fmt in (CONSOLE_FORMAT, FILE_FORMAT):
            root.removeHandler(handler)
            handler.close()
