"""Focus mode commands with a fullscreen countdown."""

import typer

from deskfocus_cli.models.focus.state import FocusSession
from deskfocus_cli.models.focus.ui import TimerDisplay, show_completion_message
from deskfocus_cli.services.config_service import (
    DEFAULT_CATEGORIES_FILE,
    DEFAULT_CONFIG_FILE,
)
from deskfocus_cli.utils.typer_helpers import SuggestingGroup
from deskfocus_cli.utils.ui.console import get_console
from deskfocus_cli.utils.ui.formatters import format_report, format_warning

from .common import build_engine, config_service
from .decorators import command_wrapper

console = get_console()
app = typer.Typer(cls=SuggestingGroup, help="Timed focus sessions")


@app.command("start")
@command_wrapper
def start_focus(
    mode: str | None = typer.Option(
        None, "--mode", "-m", help="Mode to apply (default mode if omitted)"
    ),
    duration: float = typer.Option(
        25, "--duration", "-d", help="Duration in minutes"
    ),
    auto_restore: bool = typer.Option(
        True,
        "--auto-restore/--no-auto-restore",
        help="Move shortcuts back when the session ends",
    ),
    config: str = typer.Option(
        DEFAULT_CONFIG_FILE, "--config", "-c", help="Profile file"
    ),
    categories: str = typer.Option(
        DEFAULT_CATEGORIES_FILE, "--categories", help="Categories file"
    ),
) -> None:
    """Hide a mode's shortcuts and run a focus countdown."""
    registry = config_service(config, categories).load_registry()
    mode_name = registry.resolve(mode)

    session = FocusSession.start(
        registry,
        mode_name,
        duration,
        auto_restore=auto_restore,
        engine=build_engine(),
    )

    report = session.organize_report
    if report.failure_count:
        format_warning(f"{report.failure_count} shortcut(s) could not be moved")
        format_report(report)

    TimerDisplay(console=console).run_timer(session)
    show_completion_message(session, console=console)

    if session.restore_report is not None and session.restore_report.failure_count:
        format_warning(
            f"{session.restore_report.failure_count} shortcut(s) could not be restored"
        )
        format_report(session.restore_report, verb="restore", past="Restored")
