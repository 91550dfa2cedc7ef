"""
Run configuration for temp_cleaner.

Command-line values take precedence over defaults read from a ``.env`` file
(``TEMP_CLEANER_*`` keys) and from the process environment.
"""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path
from typing import Optional

from dotenv import dotenv_values

from .durations import DurationError, parse_duration
from .errors import TempCleanerError

ENV_FILE_VARIABLE = "TEMP_CLEANER_ENV_FILE"
CREATED_BEFORE_KEY = "TEMP_CLEANER_CREATED_BEFORE"
LOG_KEY = "TEMP_CLEANER_LOG"
DRY_RUN_KEY = "TEMP_CLEANER_DRY_RUN"
ENV_KEYS = (CREATED_BEFORE_KEY, LOG_KEY, DRY_RUN_KEY)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


class ConfigurationError(TempCleanerError):
    """Raised when the run configuration is invalid."""


@dataclass(frozen=True)
class Config:  # pylint: disable=too-many-instance-attributes
    """Immutable settings for one run."""

    dry_run: bool = False
    since: Optional[timedelta] = None
    verbose: bool = False
    quiet: bool = False
    log_path: Optional[Path] = None
    install_task: bool = False
    roots: tuple[Path, ...] = ()


def resolve_env_path(env_path: Optional[str] = None) -> Path:
    """
    Determine which .env file supplies defaults.

    Priority order:
      1. Explicit parameter
      2. TEMP_CLEANER_ENV_FILE environment variable
      3. ~/.env
    """
    if env_path:
        return Path(env_path).expanduser()
    env_file = os.environ.get(ENV_FILE_VARIABLE)
    if env_file:
        return Path(env_file).expanduser()
    return Path.home() / ".env"


def load_env_defaults(env_path: Optional[str] = None) -> dict[str, str]:
    """Return TEMP_CLEANER_* defaults; process environment wins over the file."""
    resolved_path = resolve_env_path(env_path)
    values: dict[str, str] = {}
    if resolved_path.is_file():
        for key, value in dotenv_values(resolved_path).items():
            if key in ENV_KEYS and value is not None:
                values[key] = value
    for key in ENV_KEYS:
        if key in os.environ:
            values[key] = os.environ[key]
    return values


def parse_env_flag(name: str, value: Optional[str]) -> bool:
    """Interpret a boolean environment value."""
    if value is None:
        return False
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {value!r}")


def parse_since(value: Optional[str]) -> Optional[timedelta]:
    """Parse the --created-before value, or return None when absent."""
    if not value:
        return None
    try:
        return parse_duration(value)
    except DurationError as exc:
        raise ConfigurationError(f"Invalid --created-before value {value!r}") from exc


def build_config(args: argparse.Namespace, env_path: Optional[str] = None) -> Config:
    """Build the run Config from parsed arguments and .env defaults.

    Raises:
        ConfigurationError: If the duration or an environment flag is invalid.
    """
    env = load_env_defaults(env_path or getattr(args, "env_file", None))

    created_before = args.created_before or env.get(CREATED_BEFORE_KEY)
    log_value = args.log or env.get(LOG_KEY)

    return Config(
        dry_run=args.dry_run or parse_env_flag(DRY_RUN_KEY, env.get(DRY_RUN_KEY)),
        since=parse_since(created_before),
        verbose=args.verbose,
        quiet=args.quiet,
        log_path=Path(log_value).expanduser() if log_value else None,
        install_task=args.install_task,
        roots=tuple(Path(root).expanduser() for root in (args.root or [])),
    )
