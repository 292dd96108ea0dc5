"""Command 'organize' - move a mode's shortcuts off the desktop."""

import typer

from deskfocus_cli.services.config_service import (
    DEFAULT_CATEGORIES_FILE,
    DEFAULT_CONFIG_FILE,
)
from deskfocus_cli.utils.ui.formatters import (
    OUTPUT_FORMATS,
    format_info,
    format_report,
    format_summary,
)

from .common import build_engine, config_service
from .decorators import command_wrapper


@command_wrapper
def organize(
    mode: str | None = typer.Option(
        None, "--mode", "-m", help="Mode to apply (default mode if omitted)"
    ),
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
    """Move shortcuts for a mode into its holding folder."""
    registry = config_service(config, categories).load_registry()
    mode_name = registry.resolve(mode)
    mode_config = registry.lookup(mode_name)

    engine = build_engine(dry_run=dry_run)
    report = engine.organize(mode_config, mode_name=mode_name)

    if output in ("json", "yaml"):
        format_report(report, output_format=output)
        return

    if not report.outcomes:
        format_info(f"No shortcuts to move for mode '{mode_name}'")
    format_report(report, output_format=output)
    format_summary(
        mode_name,
        report.success_count,
        report.failure_count,
        dry_run,
        verb="moved",
        location=report.destination,
    )
