"""Exception hierarchy for DeskFocus.

Every error carries the exit code the CLI should terminate with. Per-file
errors (``ShortcutError`` subclasses) are caught by the organization
engine and turned into failed outcomes; everything else is structural and
aborts the requested operation.
"""

from __future__ import annotations

from collections.abc import Iterable

from deskfocus_cli.utils.exit_codes import (
    ERROR_CONFIG,
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    ERROR_NOT_FOUND,
    ERROR_PERMISSION_DENIED,
)


class DeskFocusError(Exception):
    """Base application error with exit code."""

    exit_code = ERROR_GENERAL

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


# ---------------------------------------------------------------------------
# Session / mode validation
# ---------------------------------------------------------------------------


class InvalidDuration(DeskFocusError):
    """Session duration is zero, negative or not a usable number."""

    exit_code = ERROR_INVALID_ARGS

    def __init__(self, duration, reason: str = "must be positive"):
        super().__init__(f"duration {reason}, got {duration}")
        self.duration = duration


class InvalidMode(DeskFocusError):
    """Requested mode is not configured."""

    exit_code = ERROR_INVALID_ARGS

    def __init__(self, mode_name: str, available_modes: Iterable[str]):
        self.mode_name = mode_name
        self.available_modes = sorted(available_modes)
        available = ", ".join(self.available_modes) or "none"
        super().__init__(
            f"invalid mode '{mode_name}': not found in configuration. "
            f"Available modes: {available}"
        )


class ModeNotFound(InvalidMode):
    """Raised by registry lookup for an unknown mode name."""


class InvalidTransition(DeskFocusError):
    """Illegal edge of the focus session state machine."""

    exit_code = ERROR_INVALID_ARGS

    def __init__(self, state, action: str):
        self.state = state
        self.action = action
        label = getattr(state, "value", state)
        super().__init__(f"cannot {action} a session that is {label}")


# ---------------------------------------------------------------------------
# Per-file move errors
# ---------------------------------------------------------------------------


class ShortcutError(DeskFocusError):
    """A single shortcut could not be moved."""

    def __init__(self, name: str, message: str, exit_code: int | None = None):
        super().__init__(message, exit_code)
        self.name = name


class NotFound(ShortcutError):
    """Source file of a move does not exist."""

    exit_code = ERROR_NOT_FOUND

    def __init__(self, name: str, directory):
        super().__init__(name, f"shortcut '{name}' not found in {directory}")
        self.directory = directory


class AlreadyExists(ShortcutError):
    """Restoring would overwrite a file already on the desktop."""

    def __init__(self, name: str, directory):
        super().__init__(name, f"shortcut '{name}' already exists in {directory}")
        self.directory = directory


class MoveFailed(ShortcutError):
    """The operating system refused the rename."""

    def __init__(self, name: str, cause: OSError):
        exit_code = (
            ERROR_PERMISSION_DENIED if isinstance(cause, PermissionError) else None
        )
        super().__init__(name, f"error moving shortcut '{name}': {cause}", exit_code)
        self.cause = cause


# ---------------------------------------------------------------------------
# Structural filesystem / platform errors
# ---------------------------------------------------------------------------


class SourceUnavailable(DeskFocusError):
    """A directory to read from (desktop or holding folder) cannot be listed."""

    exit_code = ERROR_NOT_FOUND

    def __init__(self, directory, cause: OSError | None = None):
        detail = f": {cause}" if cause else ""
        super().__init__(f"cannot read directory {directory}{detail}")
        self.directory = directory
        self.cause = cause


class DestinationUnavailable(DeskFocusError):
    """A holding folder could not be created."""

    exit_code = ERROR_PERMISSION_DENIED

    def __init__(self, directory, cause: OSError):
        super().__init__(f"cannot create holding folder {directory}: {cause}")
        self.directory = directory
        self.cause = cause


class UnsupportedPlatform(DeskFocusError):
    """No desktop location is known for this operating system."""

    def __init__(self, platform: str):
        super().__init__(f"unsupported operating system: {platform}")
        self.platform = platform


# ---------------------------------------------------------------------------
# Configuration errors
# ---------------------------------------------------------------------------


class ConfigError(DeskFocusError):
    """Profile or categories file problem."""

    exit_code = ERROR_CONFIG

    def __init__(self, path, message: str):
        super().__init__(message)
        self.path = path


class ConfigUnreadable(ConfigError):
    """Config file could not be opened or read."""

    def __init__(self, path, cause: OSError):
        super().__init__(path, f"error reading config file {path}: {cause}")
        self.cause = cause


class ConfigMalformed(ConfigError):
    """Config file is not valid YAML or does not match the schema."""

    def __init__(self, path, detail: str):
        super().__init__(path, f"error parsing config file {path}: {detail}")
        self.detail = detail
