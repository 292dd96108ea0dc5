"""Command 'auto-config' - generate a profile from the desktop contents."""

import typer

from deskfocus_cli.services.config_service import (
    DEFAULT_CATEGORIES_FILE,
    DEFAULT_CONFIG_FILE,
)
from deskfocus_cli.services.profile_service import (
    generate_profile,
    render_profile_yaml,
)
from deskfocus_cli.services.shortcut_mover import ShortcutMover
from deskfocus_cli.utils.paths import get_desktop_path
from deskfocus_cli.utils.ui.console import get_console
from deskfocus_cli.utils.ui.formatters import format_success

from .common import config_service
from .decorators import command_wrapper

console = get_console(highlight=False)


@command_wrapper
def auto_config(
    output: str = typer.Option(
        DEFAULT_CONFIG_FILE, "--output", "-o", help="Where to write the profile"
    ),
    categories: str = typer.Option(
        DEFAULT_CATEGORIES_FILE, "--categories", help="Categories file"
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", "-n", help="Print the profile instead of writing it"
    ),
) -> None:
    """Generate a profile from the shortcuts on the desktop."""
    service = config_service(DEFAULT_CONFIG_FILE, categories)
    category_config = service.load_categories()
    names = ShortcutMover.list_files(get_desktop_path())

    registry = generate_profile(names, category_config)
    content = render_profile_yaml(registry)

    if dry_run:
        console.print(content, markup=False)
        return

    target = service.save_profile(content, output)
    format_success(f"Profile written to {target}")
    for mode_name in sorted(registry.available_modes()):
        count = len(registry.lookup(mode_name).shortcuts)
        console.print(f"  {mode_name}: {count} shortcut(s)")
    if registry.modes and all(not m.shortcuts for m in registry.modes.values()):
        console.print("[dim]No shortcuts found - edit the profile to add some.[/dim]")
