"""CLI tests for 'focus start'.

The live countdown is replaced by a fake TimerDisplay whose run_timer ends
the session immediately, so the tests never block on the terminal.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from deskfocus_cli.main import app
from deskfocus_cli.models.focus.state import SessionState
from deskfocus_cli.utils.exit_codes import ERROR_CONFIG, ERROR_INVALID_ARGS

runner = CliRunner()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _ending(action: str):
    """run_timer replacement that ends the session with *action*."""

    def run_timer(session):
        getattr(session, action)()
        return session.state

    return run_timer


@pytest.fixture()
def fake_display():
    with patch("deskfocus_cli.commands.focus.TimerDisplay") as display_cls:
        display_cls.return_value.run_timer.side_effect = _ending("complete")
        yield display_cls.return_value


# ---------------------------------------------------------------------------
# focus start
# ---------------------------------------------------------------------------


class TestFocusStart:
    def test_completed_session_restores(
        self, fake_display, profile_file, desktop, make_files
    ):
        make_files(desktop, "Steam.lnk", "Epic Games.lnk")

        result = runner.invoke(
            app, ["focus", "start", "--duration", "1", "--config", str(profile_file)]
        )

        assert result.exit_code == 0, result.output
        session = fake_display.run_timer.call_args[0][0]
        assert session.state is SessionState.COMPLETED
        assert session.mode == "focusmode"
        assert session.organize_report.success_count == 2
        assert "Focus Session Complete" in result.output
        assert (desktop / "Steam.lnk").exists()

    def test_shortcuts_hidden_while_running(
        self, fake_display, profile_file, desktop, home, make_files
    ):
        make_files(desktop, "Steam.lnk")
        seen = {}

        def run_timer(session):
            seen["hidden"] = (home / "Hidden_Shortcuts" / "Steam.lnk").exists()
            seen["on_desktop"] = (desktop / "Steam.lnk").exists()
            session.complete()
            return session.state

        fake_display.run_timer.side_effect = run_timer

        runner.invoke(app, ["focus", "start", "--config", str(profile_file)])

        assert seen == {"hidden": True, "on_desktop": False}

    def test_no_auto_restore_leaves_shortcuts_hidden(
        self, fake_display, profile_file, desktop, home, make_files
    ):
        make_files(desktop, "Steam.lnk")
        fake_display.run_timer.side_effect = _ending("interrupt")

        result = runner.invoke(
            app,
            ["focus", "start", "--no-auto-restore", "--config", str(profile_file)],
        )

        assert result.exit_code == 0, result.output
        assert "Session Stopped" in result.output
        assert not (desktop / "Steam.lnk").exists()
        assert (home / "Hidden_Shortcuts" / "Steam.lnk").exists()

    def test_named_mode(self, fake_display, profile_file, desktop, make_files):
        make_files(desktop, "VS Code.lnk")

        result = runner.invoke(
            app,
            ["focus", "start", "--mode", "gamemode", "--config", str(profile_file)],
        )

        assert result.exit_code == 0, result.output
        session = fake_display.run_timer.call_args[0][0]
        assert session.mode == "gamemode"

    def test_zero_duration_rejected(self, fake_display, profile_file, desktop, make_files):
        make_files(desktop, "Steam.lnk")

        result = runner.invoke(
            app, ["focus", "start", "--duration", "0", "--config", str(profile_file)]
        )

        assert result.exit_code == ERROR_INVALID_ARGS
        assert "duration must be positive" in result.output
        fake_display.run_timer.assert_not_called()
        assert (desktop / "Steam.lnk").exists()

    @pytest.mark.parametrize("value", ["nan", "inf"])
    def test_non_finite_duration_rejected(self, fake_display, profile_file, value):
        result = runner.invoke(
            app, ["focus", "start", "--duration", value, "--config", str(profile_file)]
        )

        assert result.exit_code == ERROR_INVALID_ARGS
        assert "finite number of minutes" in result.output
        fake_display.run_timer.assert_not_called()

    def test_unknown_mode_rejected(self, fake_display, profile_file):
        result = runner.invoke(
            app, ["focus", "start", "--mode", "nope", "--config", str(profile_file)]
        )

        assert result.exit_code == ERROR_INVALID_ARGS
        assert "invalid mode" in result.output
        assert "Available modes" in result.output
        fake_display.run_timer.assert_not_called()

    def test_missing_config(self, fake_display, home):
        result = runner.invoke(app, ["focus", "start", "--config", "missing.yml"])
        assert result.exit_code == ERROR_CONFIG

    def test_move_failures_reported(self, fake_display, profile_file, desktop, make_files):
        make_files(desktop, "Steam.lnk")

        result = runner.invoke(app, ["focus", "start", "--config", str(profile_file)])

        assert result.exit_code == 0
        assert "could not be moved" in result.output
        assert "Epic Games.lnk" in result.output
