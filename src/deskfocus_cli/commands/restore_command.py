"""Command 'restore' - move shortcuts back onto the desktop."""

import typer

from deskfocus_cli.services.config_service import (
    DEFAULT_CATEGORIES_FILE,
    DEFAULT_CONFIG_FILE,
)
from deskfocus_cli.utils.exit_codes import ERROR_INVALID_ARGS
from deskfocus_cli.utils.ui.console import get_console
from deskfocus_cli.utils.ui.formatters import (
    OUTPUT_FORMATS,
    format_data,
    format_error,
    format_info,
    format_report,
    format_summary,
    format_warning,
)

from .common import build_engine, config_service
from .decorators import command_wrapper

console = get_console()


@command_wrapper
def restore(
    mode: str | None = typer.Option(
        None, "--mode", "-m", help="Mode to restore (default mode if omitted)"
    ),
    all_modes: bool = typer.Option(False, "--all", "-a", help="Restore every mode"),
    dry_run: bool = typer.Option(
        False, "--dry-run", "-n", help="Show what would move without moving"
    ),
    config: str = typer.Option(
        DEFAULT_CONFIG_FILE, "--config", "-c", help="Profile file"
    ),
    categories: str = typer.Option(
        DEFAULT_CATEGORIES_FILE, "--categories", help="Categories file"
    ),
    output: str = typer.Option(
        "pretty", "--output", "-o", help=f"Output format: {', '.join(OUTPUT_FORMATS)}"
    ),
) -> None:
    """Move shortcuts from holding folders back to the desktop."""
    if mode and all_modes:
        format_error("--mode and --all cannot be used together")
        raise typer.Exit(ERROR_INVALID_ARGS)

    registry = config_service(config, categories).load_registry()
    engine = build_engine(dry_run=dry_run)

    if all_modes:
        reports = engine.restore_all(registry)
        if output in ("json", "yaml"):
            format_data(
                {name: report.to_dict() for name, report in reports.items()}, output
            )
            return

        restored = failed = 0
        for mode_name, report in reports.items():
            console.print(f"\n[bold cyan]{mode_name}[/bold cyan]")
            if report.error:
                format_warning(report.error)
            elif report.note:
                format_info(report.note)
            format_report(
                report, verb="restore", past="Restored", output_format=output
            )
            restored += report.success_count
            failed += report.failure_count
        format_summary(None, restored, failed, dry_run, verb="restored")
        return

    mode_name = registry.resolve(mode)
    report = engine.restore(mode_name, registry)

    if output in ("json", "yaml"):
        format_report(report, output_format=output)
        return

    if report.note:
        format_info(report.note)
    format_report(report, verb="restore", past="Restored", output_format=output)
    format_summary(
        mode_name,
        report.success_count,
        report.failure_count,
        dry_run,
        verb="restored",
    )
