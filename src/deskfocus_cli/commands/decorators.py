"""Decorators for command functions."""

import functools
import time
import traceback
from collections.abc import Callable

import typer

from deskfocus_cli.models.errors import DeskFocusError
from deskfocus_cli.utils.exit_codes import (
    ERROR_GENERAL,
    get_exit_code_description,
    get_exit_code_name,
)
from deskfocus_cli.utils.logger import get_logger
from deskfocus_cli.utils.ui.formatters import format_error


def command_wrapper(func: Callable):
    """Log timing and turn DeskFocusError into a clean exit with its code."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger()
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            result = func(*args, **kwargs)
            elapsed = time.monotonic() - start
            logger.info("command completed: %s (%.3fs)", cmd, elapsed)
            return result

        except DeskFocusError as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s: %s [exit %s: %s]",
                cmd,
                elapsed,
                type(e).__name__,
                str(e),
                get_exit_code_name(e.exit_code),
                get_exit_code_description(e.exit_code),
            )
            format_error(str(e))
            raise typer.Exit(code=e.exit_code) from e

        except typer.Exit:
            raise

        except Exception as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s\n%s",
                cmd,
                elapsed,
                str(e),
                traceback.format_exc(),
            )
            format_error(f"An unexpected error occurred: {str(e)}")
            raise typer.Exit(code=ERROR_GENERAL) from e

    return wrapper
