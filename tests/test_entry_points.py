"""Tests for CLI entry point modules."""

import runpy
import sys
from unittest.mock import patch

import pytest

import clean_temp
import temp_cleaner
from temp_cleaner import cli


def test_wrapper_imports():
    """Test the clean_temp wrapper exposes the CLI main."""
    assert clean_temp.main is cli.main


def test_package_exports():
    """Test the package re-exports its public API."""
    for name in temp_cleaner.__all__:
        assert hasattr(temp_cleaner, name)


def test_module_entry_point(tmp_path):
    """Test python -m temp_cleaner runs main and exits with its status."""
    with patch.object(sys, "argv", ["temp_cleaner", "--root", str(tmp_path), "--quiet"]):
        with pytest.raises(SystemExit) as exc_info:
            runpy.run_module("temp_cleaner", run_name="__main__")
    assert exc_info.value.code == 0
