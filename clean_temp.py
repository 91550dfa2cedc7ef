#!/usr/bin/env python3
"""
Remove the contents of the machine's temporary directories.

Optionally restricted to entries created before a given age (--created-before).

This is a thin wrapper around the temp_cleaner package.
"""
from __future__ import annotations

from temp_cleaner.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
