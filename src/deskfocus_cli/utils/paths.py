"""Platform-specific locations of the desktop and the home directory."""

from __future__ import annotations

import os
import sys
from pathlib import Path

from deskfocus_cli.models.errors import UnsupportedPlatform


def get_home_dir() -> Path:
    """Return the user's home directory; holding folders live under it."""
    return Path.home()


def get_desktop_path(platform: str | None = None) -> Path:
    """Return the desktop directory for the current operating system.

    Windows uses ``%USERPROFILE%\\Desktop``; macOS and Linux use
    ``~/Desktop``. Localized desktop names are not resolved.

    Raises:
        UnsupportedPlatform: On any other platform.
    """
    platform = platform or sys.platform

    if platform.startswith("win"):
        profile = os.environ.get("USERPROFILE")
        base = Path(profile) if profile else get_home_dir()
        return base / "Desktop"
    if platform == "darwin" or platform.startswith("linux"):
        return get_home_dir() / "Desktop"

    raise UnsupportedPlatform(platform)


def describe_file_type(name: str) -> str:
    """Short type marker shown next to a desktop entry."""
    suffix = Path(name).suffix
    if suffix == ".lnk":
        return "[Shortcut]"
    if suffix == ".url":
        return "[URL]"
    if suffix:
        return f"[{suffix}]"
    return ""


def is_plain_name(name: str) -> bool:
    """True when *name* is a single directory entry rather than a path."""
    if not name or name in (".", ".."):
        return False
    return Path(name).name == name and "/" not in name and "\\" not in name
