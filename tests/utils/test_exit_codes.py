"""Unit tests for deskfocus_cli.utils.exit_codes."""

from __future__ import annotations

import pytest

from deskfocus_cli.utils.exit_codes import (
    ERROR_CONFIG,
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    ERROR_NOT_FOUND,
    ERROR_PERMISSION_DENIED,
    SUCCESS,
    get_exit_code_description,
    get_exit_code_name,
)


# ---------------------------------------------------------------------------
# Constant value tests
# ---------------------------------------------------------------------------


def test_constant_values():
    assert SUCCESS == 0
    assert ERROR_GENERAL == 1
    assert ERROR_INVALID_ARGS == 2
    assert ERROR_NOT_FOUND == 5
    assert ERROR_PERMISSION_DENIED == 6
    assert ERROR_CONFIG == 7


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("code", "name"),
    [
        (SUCCESS, "SUCCESS"),
        (ERROR_INVALID_ARGS, "ERROR_INVALID_ARGS"),
        (ERROR_CONFIG, "ERROR_CONFIG"),
    ],
)
def test_get_exit_code_name(code, name):
    assert get_exit_code_name(code) == name


def test_unknown_code_name():
    assert get_exit_code_name(99) == "UNKNOWN(99)"


def test_descriptions():
    assert get_exit_code_description(ERROR_CONFIG).startswith("Configuration file")
    assert get_exit_code_description(-1) == "Unknown error"
