"""Shared helpers for building services from command-line options."""

from __future__ import annotations

from deskfocus_cli.services.config_service import ConfigService, get_config_service
from deskfocus_cli.services.organization_service import OrganizationEngine
from deskfocus_cli.utils.paths import get_desktop_path, get_home_dir


def config_service(config_path: str, categories_path: str) -> ConfigService:
    return get_config_service(str(config_path), str(categories_path))


def build_engine(dry_run: bool = False) -> OrganizationEngine:
    """Engine bound to this machine's desktop and home directory."""
    return OrganizationEngine(
        desktop_dir=get_desktop_path(),
        home_dir=get_home_dir(),
        dry_run=dry_run,
    )
