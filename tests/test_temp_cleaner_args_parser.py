"""Tests for temp_cleaner/args_parser.py."""

from __future__ import annotations

import pytest

from temp_cleaner import __version__
from temp_cleaner.args_parser import parse_args  # pylint: disable=no-name-in-module
from tests.assertions import assert_equal


def test_defaults():
    """Test defaults when no flags are given."""
    args = parse_args([])
    assert args.created_before is None
    assert not args.dry_run
    assert not args.verbose
    assert not args.quiet
    assert args.log is None
    assert not args.install_task
    assert args.root is None


def test_short_flags():
    """Test the short aliases."""
    args = parse_args(["-b", "1y", "-n", "-q", "-l", "out.log"])
    assert_equal(args.created_before, "1y")
    assert args.dry_run
    assert args.quiet
    assert_equal(args.log, "out.log")


def test_verbose_and_quiet_are_exclusive():
    """Test --verbose and --quiet cannot be combined."""
    with pytest.raises(SystemExit) as exc_info:
        parse_args(["--verbose", "--quiet"])
    assert_equal(exc_info.value.code, 2)


def test_version(capsys):
    """Test --version prints the package version and exits zero."""
    with pytest.raises(SystemExit) as exc_info:
        parse_args(["--version"])
    assert_equal(exc_info.value.code, 0)
    assert __version__ in capsys.readouterr().out


def test_help_exits_zero():
    """Test --help exits cleanly."""
    with pytest.raises(SystemExit) as exc_info:
        parse_args(["--help"])
    assert_equal(exc_info.value.code, 0)
