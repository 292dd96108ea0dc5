"""Unit tests for profile generation from desktop contents."""

from __future__ import annotations

import yaml

from deskfocus_cli.models.config_models import ModeRegistry, default_categories
from deskfocus_cli.services.profile_service import (
    HOLDING_FOLDER,
    PROFILE_HEADER,
    generate_profile,
    render_profile_yaml,
)


class TestGenerateProfile:
    def test_assigns_shortcuts_to_modes(self):
        registry = generate_profile(
            ["Steam.lnk", "VS Code.lnk", "Excel.lnk", "notes.txt"],
            default_categories(),
        )

        assert registry.default_mode == "focusmode"
        assert registry.lookup("focusmode").shortcuts == ["Steam.lnk", "notes.txt"]
        assert registry.lookup("gamemode").shortcuts == ["VS Code.lnk", "Excel.lnk"]

    def test_both_modes_share_holding_folder(self):
        registry = generate_profile(["Steam.lnk", "Git.lnk"], default_categories())
        assert registry.lookup("focusmode").destination == HOLDING_FOLDER
        assert registry.lookup("gamemode").destination == HOLDING_FOLDER

    def test_empty_mode_omitted(self):
        registry = generate_profile(["Steam.lnk"], default_categories())
        assert registry.available_modes() == ["focusmode"]

    def test_empty_desktop_gives_empty_focusmode(self):
        registry = generate_profile([], default_categories())
        assert registry.available_modes() == ["focusmode"]
        assert registry.lookup("focusmode").shortcuts == []

    def test_only_work_shortcuts(self):
        registry = generate_profile(["Word.lnk"], default_categories())
        assert registry.available_modes() == ["gamemode"]


class TestRenderProfileYaml:
    def test_header_and_reload(self):
        registry = generate_profile(["Steam.lnk", "Git.lnk"], default_categories())

        content = render_profile_yaml(registry)

        assert content.startswith(PROFILE_HEADER)
        assert content.startswith("# FocusMode Configuration\n")
        reloaded = ModeRegistry.model_validate(yaml.safe_load(content))
        assert reloaded == registry
