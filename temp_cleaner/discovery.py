"""
Discovery of the temporary directories to clean.

The set of roots is a precondition for a run: failing to enumerate user
directories aborts before anything is removed. Roots that do not exist are
returned anyway and skipped by the caller.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .errors import TempCleanerError


class DiscoveryError(TempCleanerError):
    """Raised when the temporary directory roots cannot be determined."""


@dataclass(frozen=True)
class DiscoveryLayout:
    """System temp directories plus the per-user temp directory location."""

    system_dirs: tuple[Path, ...]
    users_dir: Optional[Path]
    user_temp_subdir: Path


WINDOWS_LAYOUT = DiscoveryLayout(
    system_dirs=(Path(r"C:\Windows\Temp"), Path(r"C:\ProgramData\Temp")),
    users_dir=Path(r"C:\Users"),
    user_temp_subdir=Path("AppData", "Local", "Temp"),
)

MACOS_LAYOUT = DiscoveryLayout(
    system_dirs=(Path("/private/tmp"), Path("/private/var/tmp")),
    users_dir=Path("/Users"),
    user_temp_subdir=Path("Library", "Caches", "TemporaryItems"),
)

LINUX_LAYOUT = DiscoveryLayout(
    system_dirs=(Path("/tmp"), Path("/var/tmp")),
    users_dir=Path("/home"),
    user_temp_subdir=Path("tmp"),
)


def default_layout(platform: Optional[str] = None) -> DiscoveryLayout:
    """Return the layout for the given (or current) platform."""
    platform = platform or sys.platform
    if platform.startswith("win"):
        return WINDOWS_LAYOUT
    if platform == "darwin":
        return MACOS_LAYOUT
    return LINUX_LAYOUT


def _user_temp_dirs(layout: DiscoveryLayout) -> list[Path]:
    if layout.users_dir is None:
        return []
    try:
        with os.scandir(layout.users_dir) as entries:
            names = sorted(entry.name for entry in entries)
    except OSError as exc:
        raise DiscoveryError(f"can't list user directories in {layout.users_dir}") from exc
    return [layout.users_dir / name / layout.user_temp_subdir for name in names]


def get_temp_directories(layout: Optional[DiscoveryLayout] = None) -> list[Path]:
    """Return system temp directories followed by one temp directory per user.

    Raises:
        DiscoveryError: If the users directory cannot be listed.
    """
    layout = layout or default_layout()
    dirs = list(layout.system_dirs)
    dirs.extend(_user_temp_dirs(layout))
    return list(dict.fromkeys(dirs))
