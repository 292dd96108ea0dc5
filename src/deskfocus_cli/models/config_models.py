"""Configuration models for modes and shortcut categories.

``ModeRegistry`` mirrors ``profile.yml``::

    modes:
      focusmode:
        destination: Hidden_Shortcuts
        shortcuts: [Steam.lnk, Epic Games.lnk]
        move_all: false
    default_mode: focusmode

``CategoriesConfig`` mirrors ``categories.yml``. Both are frozen; lookups
hand out copies instead of patching shared state.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from deskfocus_cli.models.errors import ModeNotFound
from deskfocus_cli.utils.paths import is_plain_name

DEFAULT_MODE = "focusmode"
OTHER_CATEGORY = "other"
DEFAULT_CATEGORY_ORDER = ["game", "development", "work", OTHER_CATEGORY]
OTHER_ICON = "📁"


class ModeConfig(BaseModel):
    """Where a mode moves shortcuts and which ones."""

    model_config = ConfigDict(frozen=True)

    destination: str = Field(default="", description="Folder under home dir")
    shortcuts: list[str] = Field(default_factory=list)
    move_all: bool = Field(default=False)

    @field_validator("destination", mode="before")
    @classmethod
    def _none_destination(cls, v):
        return "" if v is None else v

    @field_validator("shortcuts", mode="before")
    @classmethod
    def _none_shortcuts(cls, v):
        return [] if v is None else v

    @field_validator("shortcuts")
    @classmethod
    def _plain_names(cls, v: list[str]) -> list[str]:
        for name in v:
            if not is_plain_name(name):
                raise ValueError(f"shortcut {name!r} must be a plain file name")
        return v


class ModeRegistry(BaseModel):
    """Validated mapping of mode name to ModeConfig."""

    model_config = ConfigDict(frozen=True)

    modes: dict[str, ModeConfig] = Field(default_factory=dict)
    default_mode: str = Field(default=DEFAULT_MODE)

    @field_validator("modes", mode="before")
    @classmethod
    def _none_modes(cls, v):
        return {} if v is None else v

    @field_validator("default_mode", mode="before")
    @classmethod
    def _default_mode_fallback(cls, v):
        # the default mode is not checked against `modes` here, only on lookup
        return v or DEFAULT_MODE

    def available_modes(self) -> list[str]:
        """All configured mode names; order carries no meaning."""
        return list(self.modes)

    def lookup(self, mode_name: str) -> ModeConfig:
        """Return the config for *mode_name* with its destination filled in.

        Raises:
            ModeNotFound: If the mode is not configured.
        """
        mode = self.modes.get(mode_name)
        if mode is None:
            raise ModeNotFound(mode_name, self.available_modes())

        if not mode.destination:
            return mode.model_copy(update={"destination": f"{mode_name}_Shortcuts"})
        return mode

    def holding_dir(self, mode_name: str, home: Path) -> Path:
        """Absolute holding folder of a mode."""
        return home / self.lookup(mode_name).destination

    def resolve(self, mode_name: str | None) -> str:
        """Explicit mode name, or the default when none was given."""
        return mode_name or self.default_mode


class CategoryDefinition(BaseModel):
    """One entry under ``categories:`` in categories.yml."""

    name: str = Field(default="")
    icon: str = Field(default="")
    keywords: list[str] = Field(default_factory=list)


class CategoryRule(BaseModel):
    """A category in evaluation position *order*."""

    model_config = ConfigDict(frozen=True)

    id: str
    keywords: tuple[str, ...]
    order: int


class CategoriesConfig(BaseModel):
    """Keyword categories and the order they are evaluated in."""

    categories: dict[str, CategoryDefinition] = Field(default_factory=dict)
    category_order: list[str] = Field(
        default_factory=lambda: list(DEFAULT_CATEGORY_ORDER)
    )

    @field_validator("categories", mode="before")
    @classmethod
    def _none_categories(cls, v):
        return {} if v is None else v

    @field_validator("category_order", mode="before")
    @classmethod
    def _empty_order(cls, v):
        return v or list(DEFAULT_CATEGORY_ORDER)

    def rules(self) -> list[CategoryRule]:
        """Ordered rule list; "other" and undefined ids are skipped."""
        rules = []
        for category_id in self.category_order:
            if category_id == OTHER_CATEGORY:
                continue
            definition = self.categories.get(category_id)
            if definition is None:
                continue
            rules.append(
                CategoryRule(
                    id=category_id,
                    keywords=tuple(definition.keywords),
                    order=len(rules),
                )
            )
        return rules

    def display_info(self, category_id: str) -> tuple[str, str]:
        """Label and icon for a category id."""
        if category_id == OTHER_CATEGORY:
            return "Other", OTHER_ICON
        definition = self.categories.get(category_id)
        if definition is None:
            return category_id, OTHER_ICON
        return definition.name or category_id, definition.icon or OTHER_ICON


def default_categories() -> CategoriesConfig:
    """Built-in categories used when no categories.yml exists."""
    return CategoriesConfig(
        categories={
            "game": CategoryDefinition(
                name="Games", icon="🎮", keywords=["game", "steam", "epic"]
            ),
            "development": CategoryDefinition(
                name="Development Tools", icon="💻", keywords=["code", "docker", "git"]
            ),
            "work": CategoryDefinition(
                name="Work/Productivity", icon="💼", keywords=["office", "word", "excel"]
            ),
        },
        category_order=list(DEFAULT_CATEGORY_ORDER),
    )
