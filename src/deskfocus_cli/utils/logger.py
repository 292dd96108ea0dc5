"""Application-wide logger writing to platformdirs user_log_dir.

Every module logs through a child of the ``deskfocus_cli`` logger, e.g.
``get_logger("organizer")`` logs as ``deskfocus_cli.organizer``. Only the
root application logger owns a handler; children propagate to it.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "deskfocus_cli"
_LOG_FILE = "deskfocus.log"
_LEVEL_ENV = "DESKFOCUS_LOG_LEVEL"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3

_logger: logging.Logger | None = None


def _resolve_level() -> int:
    name = os.environ.get(_LEVEL_ENV, "DEBUG").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.DEBUG


def _init_root_logger() -> logging.Logger:
    log_dir = Path(user_log_dir(_APP_NAME))
    log_dir.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        log_dir / _LOG_FILE,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )

    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(_resolve_level())
    if not logger.handlers:
        logger.addHandler(handler)
    logger.propagate = False
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the application logger, or one of its children.

    The file handler is attached lazily on the first call.
    """
    global _logger
    if _logger is None:
        _logger = _init_root_logger()

    if not name:
        return _logger
    return _logger.getChild(name)
