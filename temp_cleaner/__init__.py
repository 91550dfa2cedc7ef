"""
Temporary directory cleaner.

Discover temporary directories and remove their contents, optionally only the
entries created before a given age.
"""

__version__ = "0.1.0"

from . import (  # noqa: E402
    age_filter,
    args_parser,
    cli,
    config,
    discovery,
    durations,
    format_utils,
    models,
    output,
    remover,
    stats,
    task,
    walker,
)
from .config import Config  # noqa: E402
from .stats import Stats, merge  # noqa: E402
from .walker import DirectoryListError, clean_directory  # noqa: E402

__all__ = [
    "Config",
    "DirectoryListError",
    "Stats",
    "__version__",
    "age_filter",
    "args_parser",
    "clean_directory",
    "cli",
    "config",
    "discovery",
    "durations",
    "format_utils",
    "merge",
    "models",
    "output",
    "remover",
    "stats",
    "task",
    "walker",
]
