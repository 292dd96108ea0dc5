"""Console utilities for DeskFocus CLI."""

from functools import lru_cache

from rich.console import Console


@lru_cache(maxsize=4)
def get_console(highlight: bool = True, stderr: bool = False) -> Console:
    """Shared Rich console.

    Results go to stdout; ``stderr=True`` gives the diagnostics console so
    errors and warnings never mix into ``--output json`` payloads.
    """
    return Console(highlight=highlight, stderr=stderr)
