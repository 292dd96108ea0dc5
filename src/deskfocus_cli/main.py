"""Main entry point for DeskFocus CLI."""

import typer

from deskfocus_cli.commands import focus
from deskfocus_cli.commands.auto_config_command import auto_config
from deskfocus_cli.commands.desktop_command import desktop
from deskfocus_cli.commands.modes_command import modes
from deskfocus_cli.commands.organize_command import organize
from deskfocus_cli.commands.restore_command import restore
from deskfocus_cli.commands.version_command import version
from deskfocus_cli.utils.typer_helpers import SuggestingGroup

# Create main app with custom group class
app = typer.Typer(
    name="deskfocus",
    cls=SuggestingGroup,
    help="Hide distracting desktop shortcuts while you focus",
    no_args_is_help=True,
)

app.command("organize")(organize)
app.command("restore")(restore)
app.command("modes")(modes)
app.command("desktop")(desktop)
app.command("auto-config")(auto_config)
app.command("version")(version)

app.add_typer(focus.app, name="focus", help="Timed focus sessions")


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
