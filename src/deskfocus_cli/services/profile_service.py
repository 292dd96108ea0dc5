"""Generate a starter profile from what is on the desktop."""

from __future__ import annotations

from collections.abc import Iterable

import yaml

from deskfocus_cli.models.config_models import (
    DEFAULT_MODE,
    CategoriesConfig,
    ModeConfig,
    ModeRegistry,
)
from deskfocus_cli.services.category_service import (
    GAME_MODE,
    classify,
    mode_for_category,
)

HOLDING_FOLDER = "Hidden_Shortcuts"

PROFILE_HEADER = (
    "# FocusMode Configuration\n"
    "# Auto-generated from desktop shortcuts\n"
    "# Review and adjust as needed\n\n"
)


def generate_profile(
    shortcuts: Iterable[str], categories: CategoriesConfig
) -> ModeRegistry:
    """Assign each shortcut to the mode that should hide it.

    Modes that end up empty are left out, except that an all-empty desktop
    still yields an empty ``focusmode`` so the profile is usable.
    """
    rules = categories.rules()
    assigned: dict[str, list[str]] = {DEFAULT_MODE: [], GAME_MODE: []}
    for name in shortcuts:
        assigned[mode_for_category(classify(name, rules))].append(name)

    modes = {
        mode_name: ModeConfig(destination=HOLDING_FOLDER, shortcuts=names)
        for mode_name, names in assigned.items()
        if names
    }
    if not modes:
        modes[DEFAULT_MODE] = ModeConfig(destination=HOLDING_FOLDER, shortcuts=[])

    return ModeRegistry(modes=modes, default_mode=DEFAULT_MODE)


def render_profile_yaml(registry: ModeRegistry) -> str:
    """Serialize *registry* as profile.yml content with a header comment."""
    data = registry.model_dump(mode="json")
    body = yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    return PROFILE_HEADER + body
