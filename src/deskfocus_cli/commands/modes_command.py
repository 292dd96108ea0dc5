"""Command 'modes' - list configured modes."""

import typer
from rich.table import Table

from deskfocus_cli.services.config_service import (
    DEFAULT_CATEGORIES_FILE,
    DEFAULT_CONFIG_FILE,
)
from deskfocus_cli.utils.paths import get_home_dir
from deskfocus_cli.utils.ui.console import get_console
from deskfocus_cli.utils.ui.formatters import format_data, format_info

from .common import config_service
from .decorators import command_wrapper

console = get_console()


@command_wrapper
def modes(
    config: str = typer.Option(
        DEFAULT_CONFIG_FILE, "--config", "-c", help="Profile file"
    ),
    categories: str = typer.Option(
        DEFAULT_CATEGORIES_FILE, "--categories", help="Categories file"
    ),
    output: str = typer.Option(
        "pretty", "--output", "-o", help="Output format: pretty, json, yaml"
    ),
) -> None:
    """List available modes, marking the default."""
    registry = config_service(config, categories).load_registry()
    names = sorted(registry.available_modes())

    if output in ("json", "yaml"):
        format_data(
            {
                "default_mode": registry.default_mode,
                "modes": {
                    name: registry.lookup(name).model_dump(mode="json")
                    for name in names
                },
            },
            output,
        )
        return

    if not names:
        format_info("No modes configured")
        return

    home = get_home_dir()
    table = Table(title="Modes", show_header=True, header_style="bold magenta")
    table.add_column("Mode", style="cyan")
    table.add_column("Shortcuts", justify="right")
    table.add_column("Holding folder", style="dim")

    for name in names:
        mode_config = registry.lookup(name)
        label = f"{name} (default)" if name == registry.default_mode else name
        count = "all" if mode_config.move_all else str(len(mode_config.shortcuts))
        table.add_row(label, count, str(registry.holding_dir(name, home)))

    console.print(table)
