"""Command 'desktop' - show what is on the desktop, by category."""

import typer
from rich.markup import escape

from deskfocus_cli.services.category_service import group_by_category, mode_for_category
from deskfocus_cli.services.config_service import (
    DEFAULT_CATEGORIES_FILE,
    DEFAULT_CONFIG_FILE,
)
from deskfocus_cli.services.shortcut_mover import ShortcutMover
from deskfocus_cli.utils.paths import describe_file_type, get_desktop_path
from deskfocus_cli.utils.ui.console import get_console
from deskfocus_cli.utils.ui.formatters import format_data, format_info

from .common import config_service
from .decorators import command_wrapper

console = get_console(highlight=False)


@command_wrapper
def desktop(
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
    """List desktop files grouped by category with suggested modes."""
    category_config = config_service(config, categories).load_categories()
    desktop_dir = get_desktop_path()
    names = ShortcutMover.list_files(desktop_dir)
    groups = group_by_category(names, category_config)

    if output in ("json", "yaml"):
        format_data(
            {
                "desktop": str(desktop_dir),
                "categories": {
                    category_id: {
                        "mode": mode_for_category(category_id),
                        "files": files,
                    }
                    for category_id, files in groups.items()
                },
            },
            output,
        )
        return

    console.print(f"[bold]Desktop:[/bold] {desktop_dir}")
    if not names:
        format_info("No files found on the desktop")
        return

    for category_id, files in groups.items():
        label, icon = category_config.display_info(category_id)
        mode_name = mode_for_category(category_id)
        console.print(f"\n{icon} [bold]{label}[/bold] ({len(files)})")
        for name in files:
            marker = describe_file_type(name)
            suffix = f" {marker}" if marker else ""
            console.print(f"  • {escape(name)}{suffix} [dim]→ {mode_name}[/dim]")

    console.print("\n[bold]--- Summary ---[/bold]")
    console.print(f"Total files: {len(names)}")
    for category_id, files in groups.items():
        label, icon = category_config.display_info(category_id)
        console.print(f"{icon} {label}: {len(files)}")
