"""CLI commands for DeskFocus."""
