"""
Command-line interface and main entry point for temp_cleaner.

Handles run orchestration: configuration, logging, root discovery and the
per-root summaries.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .args_parser import parse_args
from .config import Config, ConfigurationError, build_config
from .discovery import DiscoveryError, get_temp_directories
from .durations import format_duration
from .format_utils import format_bytes, format_summary
from .output import LogFileError, init_logger, log_error
from .stats import Stats, total
from .task import TaskInstallError, install_task
from .walker import DirectoryListError, clean_directory

LOGGER = logging.getLogger(__name__)


@dataclass
class RootResult:
    """Statistics for one cleaned root."""

    root: Path
    stats: Stats
    failed: bool = False


def resolve_roots(config: Config) -> list[Path]:
    """Return the explicit roots from the config, or the discovered ones."""
    if config.roots:
        return list(config.roots)
    return get_temp_directories()


def clean_root(root: Path, config: Config, *, logger: Optional[logging.Logger] = None) -> RootResult:
    """Clean one root, turning a listing failure into a single counted error."""
    logger = logger or LOGGER
    logger.debug("Cleaning: %s", root)
    try:
        stats = clean_directory(root, config, False, logger=logger)
    except DirectoryListError as exc:
        log_error(logger, exc)
        return RootResult(root=root, stats=Stats(errors_total=1), failed=True)
    return RootResult(root=root, stats=stats)


def report_result(result: RootResult, *, logger: Optional[logging.Logger] = None) -> None:
    """Log the summary for one root."""
    logger = logger or LOGGER
    if result.failed:
        logger.warning("Skipped %s: the directory could not be listed", result.root)
    logger.info(format_summary(result.stats, result.root))
    if result.stats.warnings_total:
        logger.warning(
            "%d entries skipped because their creation time is unavailable in %s",
            result.stats.warnings_total,
            result.root,
        )


def begin_cleaning(config: Config, *, logger: Optional[logging.Logger] = None) -> list[RootResult]:
    """Clean every existing root and report each one.

    Raises:
        DiscoveryError: If the roots cannot be determined.
    """
    logger = logger or LOGGER
    results: list[RootResult] = []
    for root in resolve_roots(config):
        if not root.exists():
            continue
        result = clean_root(root, config, logger=logger)
        report_result(result, logger=logger)
        results.append(result)

    if len(results) > 1:
        grand_total = total(result.stats for result in results)
        logger.info(
            "Total: removed %d entries (%s) with %d errors from %d paths",
            grand_total.removed_count,
            format_bytes(grand_total.removed_bytes),
            grand_total.errors_total,
            len(results),
        )
    return results


def _log_banner(config: Config) -> None:
    dry_run_tag = " (dry run)" if config.dry_run else ""
    if config.since is not None:
        LOGGER.info(
            "Removing temporary files and directories older than %s%s",
            format_duration(config.since),
            dry_run_tag,
        )
    else:
        LOGGER.info("Removing all temporary files and directories%s", dry_run_tag)


def _report_fatal(exc: Exception, config: Optional[Config]) -> None:
    if config is None or config.quiet:
        print(f"Error: {exc}", file=sys.stderr)
        cause = exc.__cause__
        while cause is not None:
            print(f"  Cause: {cause}", file=sys.stderr)
            cause = cause.__cause__
    if config is not None:
        log_error(LOGGER, exc)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the temp_cleaner CLI."""
    args = parse_args(argv if argv is not None else sys.argv[1:])

    try:
        config = build_config(args)
    except ConfigurationError as exc:
        _report_fatal(exc, None)
        return 1

    try:
        init_logger(config)
    except LogFileError as exc:
        _report_fatal(exc, None)
        return 1

    if config.install_task:
        try:
            install_task(config)
        except TaskInstallError as exc:
            _report_fatal(exc, config)
            return 1
        return 0

    _log_banner(config)
    try:
        begin_cleaning(config)
    except DiscoveryError as exc:
        _report_fatal(exc, config)
        return 1
    return 0
