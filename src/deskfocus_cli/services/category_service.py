"""Keyword-based categorization of desktop shortcuts."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from deskfocus_cli.models.config_models import (
    DEFAULT_MODE,
    OTHER_CATEGORY,
    CategoriesConfig,
    CategoryRule,
)

GAME_MODE = "gamemode"

# Which mode hides a category: games are moved away while focusing, work and
# development tools are moved away while gaming.
_CATEGORY_MODES = {
    "game": DEFAULT_MODE,
    "development": GAME_MODE,
    "work": GAME_MODE,
}


def classify(name: str, rules: Sequence[CategoryRule]) -> str:
    """Return the id of the first rule with a keyword contained in *name*.

    Matching is case-insensitive and strictly first-match-wins in rule
    order. Falls back to ``"other"``.
    """
    name_lower = name.lower()
    for rule in rules:
        if any(keyword.lower() in name_lower for keyword in rule.keywords):
            return rule.id
    return OTHER_CATEGORY


def mode_for_category(category: str) -> str:
    """Mode that should move shortcuts of *category* off the desktop."""
    return _CATEGORY_MODES.get(category, DEFAULT_MODE)


def group_by_category(
    names: Iterable[str], categories: CategoriesConfig
) -> dict[str, list[str]]:
    """Bucket names by category, keyed in ``category_order`` order.

    Categories without matches are left out. Ids that are categorized but
    missing from the order (only possible for "other") come last.
    """
    rules = categories.rules()
    buckets: dict[str, list[str]] = {}
    for name in names:
        buckets.setdefault(classify(name, rules), []).append(name)

    ordered: dict[str, list[str]] = {}
    for category_id in categories.category_order:
        if category_id in buckets:
            ordered[category_id] = buckets.pop(category_id)
    ordered.update(buckets)
    return ordered
