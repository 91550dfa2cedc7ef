"""
Argument parsing for the temp_cleaner CLI.

Handles command-line argument definition and parsing; values are turned into a
Config by config.build_config.
"""

from __future__ import annotations

import argparse

from . import __version__


def add_filter_arguments(parser: argparse.ArgumentParser) -> None:
    """Add age filtering and root selection arguments."""
    parser.add_argument(
        "-b",
        "--created-before",
        metavar="DURATION",
        help="Remove only entries created before DURATION (60s, 10m, 10h, 10d, 10d2h, 1y).",
    )
    parser.add_argument(
        "--root",
        action="append",
        metavar="PATH",
        help="Clean PATH instead of the discovered temporary directories (repeatable).",
    )


def add_action_arguments(parser: argparse.ArgumentParser) -> None:
    """Add action arguments."""
    parser.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        help="Report what would be removed without removing anything.",
    )
    parser.add_argument(
        "--install-task",
        action="store_true",
        help="Register a scheduled task running this tool at startup with the given options.",
    )


def add_output_arguments(parser: argparse.ArgumentParser) -> None:
    """Add logging and output arguments."""
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v", "--verbose", action="store_true", help="Log every removed entry."
    )
    verbosity.add_argument(
        "-q", "--quiet", action="store_true", help="Do not log to the console."
    )
    parser.add_argument(
        "-l",
        "--log",
        metavar="FILE",
        help="Append log output to FILE (created if missing).",
    )
    parser.add_argument(
        "--env-file",
        metavar="FILE",
        help="Read TEMP_CLEANER_* defaults from FILE (default: $TEMP_CLEANER_ENV_FILE or ~/.env).",
    )


def build_parser() -> argparse.ArgumentParser:
    """Create the temp_cleaner argument parser."""
    parser = argparse.ArgumentParser(
        prog="temp-cleaner",
        description="Remove the contents of temporary directories, optionally only old entries.",
    )
    add_filter_arguments(parser)
    add_action_arguments(parser)
    add_output_arguments(parser)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse command-line arguments for temp_cleaner."""
    return build_parser().parse_args(argv)
