"""
Logging setup and error reporting for temp_cleaner.

Console and log-file sinks are configured once from the run Config. Errors are
reported with their full cause chain so the original OS error is never lost.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, TYPE_CHECKING

from .errors import TempCleanerError

if TYPE_CHECKING:
    from .config import Config

CONSOLE_FORMAT = "%(levelname)s %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(message)s"


class LogFileError(TempCleanerError):
    """Raised when the log file cannot be used."""


def log_error(logger: logging.Logger, exc: BaseException, *, level: int = logging.ERROR) -> None:
    """Log an exception followed by one line per chained cause."""
    label = "Warning" if level == logging.WARNING else "Error"
    logger.log(level, "%s: %s", label, exc)
    cause = exc.__cause__
    while cause is not None:
        logger.log(level, "  Cause: %s", cause)
        cause = cause.__cause__


def _check_log_path(log_path: Path) -> None:
    # An existing path may be a directory
    if log_path.exists() and not log_path.is_file():
        raise LogFileError(f"Invalid path specified for log file {log_path}")


def open_log_file(log_path: Path) -> IO[str]:
    """Open (or create) the log file for appending.

    Raises:
        LogFileError: If the path is a directory or cannot be opened.
    """
    _check_log_path(log_path)
    try:
        return log_path.open("a", encoding="utf-8")
    except OSError as exc:
        raise LogFileError(f"Unable to create or open the log file {log_path}") from exc


def build_handlers(config: Config) -> list[logging.Handler]:
    """Create the console and file handlers requested by the config."""
    handlers: list[logging.Handler] = []

    if not config.quiet or config.install_task:
        console = logging.StreamHandler()
        console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handlers.append(console)

    if config.log_path is not None and not config.install_task:
        _check_log_path(config.log_path)
        try:
            file_handler = logging.FileHandler(config.log_path, mode="a", encoding="utf-8")
        except OSError as exc:
            raise LogFileError(
                f"Unable to create or open the log file {config.log_path}"
            ) from exc
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        handlers.append(file_handler)

    if not handlers:
        handlers.append(logging.NullHandler())
    return handlers


def init_logger(config: Config) -> None:
    """Configure the root logger from the run config.

    Raises:
        LogFileError: If the configured log file cannot be opened.
    """
    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.INFO,
        handlers=build_handlers(config),
        force=True,
    )
