"""Output formatters for move reports, mode lists and status messages."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml
from rich.markup import escape
from rich.table import Table

from deskfocus_cli.utils.ui.console import get_console

if TYPE_CHECKING:
    from deskfocus_cli.services.organization_service import OrganizeReport

console = get_console()
err_console = get_console(stderr=True)

OUTPUT_FORMATS = ("pretty", "table", "json", "yaml")


def format_error(message: str) -> None:
    """Format and display an error message."""
    err_console.print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    err_console.print(f"[bold yellow]Warning:[/bold yellow] {message}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    console.print(f"[bold blue]Info:[/bold blue] {message}")


def format_data(data: Any, output_format: str) -> None:
    """Dump plain data as json or yaml."""
    if output_format == "yaml":
        print(yaml.safe_dump(data, default_flow_style=False, sort_keys=False))
    else:
        print(json.dumps(data, indent=2, default=str, ensure_ascii=False))


def format_report(
    report: OrganizeReport,
    verb: str = "move",
    past: str = "Moved",
    output_format: str = "pretty",
) -> None:
    """Display every outcome of a move or restore batch.

    *verb* words dry-run lines ("Would move"), *past* words done lines.
    """
    if output_format in ("json", "yaml"):
        format_data(report.to_dict(), output_format)
        return

    if output_format == "table":
        _format_report_table(report, past)
        return

    for outcome in report.outcomes:
        if not outcome.succeeded:
            console.print(
                f"[red]✗[/red] {escape(outcome.name)}: {escape(outcome.error or '')}",
                highlight=False,
            )
        elif outcome.dry_run:
            console.print(f"[dim][DRY RUN][/dim] Would {verb}: {escape(outcome.name)}")
        else:
            console.print(f"[green]✓[/green] {past}: {escape(outcome.name)}")


def _format_report_table(report: OrganizeReport, past: str) -> None:
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Shortcut")
    table.add_column("Result")
    table.add_column("Detail", style="dim")

    for index, outcome in enumerate(report.outcomes, start=1):
        if not outcome.succeeded:
            result = f"[red]{outcome.error_type or 'failed'}[/red]"
        elif outcome.dry_run:
            result = "[cyan]dry run[/cyan]"
        else:
            result = f"[green]{past.lower()}[/green]"
        table.add_row(
            str(index), escape(outcome.name), result, escape(outcome.error or "")
        )

    console.print(table)


def format_summary(
    mode_name: str | None,
    success_count: int,
    failure_count: int,
    dry_run: bool,
    verb: str = "moved",
    location: Path | str | None = None,
) -> None:
    """Print the closing summary block of a move or restore run."""
    console.print("\n[bold]--- Summary ---[/bold]")
    if mode_name:
        console.print(f"Mode: {mode_name}")
    console.print(f"Successfully {verb}: {success_count}")
    if failure_count > 0:
        console.print(f"[red]Failed: {failure_count}[/red]")
    if dry_run:
        console.print(f"[dim](Dry run - no files were actually {verb})[/dim]")
    elif location is not None:
        console.print(f"Location: {location}", highlight=False)
