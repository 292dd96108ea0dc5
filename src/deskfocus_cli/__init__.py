"""DeskFocus CLI - declutter your desktop for focus and game sessions."""

__version__ = "0.3.0"
