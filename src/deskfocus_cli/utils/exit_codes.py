"""
Exit codes for DeskFocus CLI.

Semantic exit codes so scripts wrapping ``deskfocus`` can tell a bad
argument from a broken config or an unreadable desktop. Partial per-file
failures during a move are reported in the output and still exit 0.
"""

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments: bad duration, unknown mode, illegal session transition
ERROR_INVALID_ARGS = 2

# Desktop or holding folder missing / unreadable
ERROR_NOT_FOUND = 5

# Permission denied by the operating system
ERROR_PERMISSION_DENIED = 6

# Profile or categories file unreadable or malformed
ERROR_CONFIG = 7


_CODE_NAMES = {
    SUCCESS: "SUCCESS",
    ERROR_GENERAL: "ERROR_GENERAL",
    ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
    ERROR_NOT_FOUND: "ERROR_NOT_FOUND",
    ERROR_PERMISSION_DENIED: "ERROR_PERMISSION_DENIED",
    ERROR_CONFIG: "ERROR_CONFIG",
}

_DESCRIPTIONS = {
    SUCCESS: "Command executed successfully",
    ERROR_GENERAL: "A general error occurred",
    ERROR_INVALID_ARGS: "Invalid arguments or validation error",
    ERROR_NOT_FOUND: "Desktop or holding folder not found",
    ERROR_PERMISSION_DENIED: "Permission denied",
    ERROR_CONFIG: "Configuration file could not be read or parsed",
}


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    return _CODE_NAMES.get(code, f"UNKNOWN({code})")


def get_exit_code_description(code: int) -> str:
    """Get a human-readable description of an exit code."""
    return _DESCRIPTIONS.get(code, "Unknown error")
