"""Command 'version' of deskfocus-cli"""

from deskfocus_cli import __version__
from deskfocus_cli.utils.ui.console import get_console

console = get_console(highlight=False)


def version() -> None:
    """Show version information"""
    console.print(__version__)
