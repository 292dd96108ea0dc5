"""Single-file move primitives between the desktop and holding folders."""

from __future__ import annotations

import os
from pathlib import Path

from deskfocus_cli.models.errors import (
    AlreadyExists,
    MoveFailed,
    NotFound,
    SourceUnavailable,
)
from deskfocus_cli.utils.logger import get_logger
from deskfocus_cli.utils.paths import is_plain_name

logger = get_logger("mover")


class ShortcutMover:
    """Atomic rename of one shortcut, with existence checks.

    ``move_out`` may overwrite inside a holding folder, which the organizer
    owns. ``move_in`` never overwrites anything on the desktop.
    """

    def check_out(self, name: str, from_dir: Path, to_dir: Path) -> None:
        """Pre-checks of ``move_out`` without touching the filesystem."""
        if not is_plain_name(name) or not os.path.lexists(from_dir / name):
            raise NotFound(name, from_dir)

    def check_in(self, name: str, from_dir: Path, to_dir: Path) -> None:
        """Pre-checks of ``move_in`` without touching the filesystem."""
        if not is_plain_name(name) or not os.path.lexists(from_dir / name):
            raise NotFound(name, from_dir)
        if os.path.lexists(to_dir / name):
            raise AlreadyExists(name, to_dir)

    def move_out(self, name: str, from_dir: Path, to_dir: Path) -> Path:
        """Move *name* from the desktop into a holding folder.

        Raises:
            NotFound: If ``from_dir/name`` does not exist.
            MoveFailed: On any OS-level rename error.
        """
        self.check_out(name, from_dir, to_dir)
        source, target = from_dir / name, to_dir / name
        self._rename(name, source, target)
        logger.info("moved out: %s -> %s", source, target)
        return target

    def move_in(self, name: str, from_dir: Path, to_dir: Path) -> Path:
        """Move *name* from a holding folder back onto the desktop.

        Raises:
            NotFound: If ``from_dir/name`` does not exist.
            AlreadyExists: If ``to_dir/name`` already exists.
            MoveFailed: On any OS-level rename error.
        """
        self.check_in(name, from_dir, to_dir)
        source, target = from_dir / name, to_dir / name
        self._rename(name, source, target)
        logger.info("moved in: %s -> %s", source, target)
        return target

    @staticmethod
    def _rename(name: str, source: Path, target: Path) -> None:
        try:
            os.rename(source, target)
        except OSError as e:
            raise MoveFailed(name, e) from e

    @staticmethod
    def list_files(directory: Path) -> list[str]:
        """Names of the non-directory entries of *directory*, sorted.

        Raises:
            SourceUnavailable: If the directory cannot be listed.
        """
        try:
            with os.scandir(directory) as entries:
                return sorted(entry.name for entry in entries if not entry.is_dir())
        except OSError as e:
            raise SourceUnavailable(directory, e) from e
