"""Configuration service for DeskFocus profile and category files.

``ConfigService`` is the single place YAML config is read and written:

- ``profile.yml`` -> ``ModeRegistry``
- ``categories.yml`` -> ``CategoriesConfig`` (built-in defaults if absent)

Relative paths that do not exist in the working directory are looked up in
the per-user config directory.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

import yaml
from platformdirs import user_config_dir
from pydantic import BaseModel, ValidationError

from deskfocus_cli.models.config_models import (
    CategoriesConfig,
    ModeRegistry,
    default_categories,
)
from deskfocus_cli.models.errors import ConfigError, ConfigMalformed, ConfigUnreadable
from deskfocus_cli.utils.logger import get_logger

DEFAULT_CONFIG_FILE = "profile.yml"
DEFAULT_CATEGORIES_FILE = "categories.yml"

logger = get_logger("config")


class ConfigService:
    """Loads and saves DeskFocus configuration files."""

    def __init__(
        self,
        config_path: str | Path = DEFAULT_CONFIG_FILE,
        categories_path: str | Path = DEFAULT_CATEGORIES_FILE,
    ):
        self.config_dir = Path(user_config_dir("deskfocus_cli"))
        self.config_path = self.resolve_path(config_path)
        self.categories_path = self.resolve_path(categories_path)

    def resolve_path(self, path: str | Path) -> Path:
        """Use *path* as given unless it is relative and missing locally."""
        path = Path(path).expanduser()
        if path.is_absolute() or path.exists():
            return path
        candidate = self.config_dir / path
        if candidate.exists():
            return candidate
        return path

    def load_registry(self) -> ModeRegistry:
        """Load and validate the mode profile.

        Raises:
            ConfigUnreadable: If the file cannot be read.
            ConfigMalformed: If it is not YAML or does not match the schema.
        """
        return self._load(self.config_path, ModeRegistry)

    def load_categories(self) -> CategoriesConfig:
        """Load category definitions, falling back to the built-in set."""
        if not self.categories_path.exists():
            logger.debug(
                "categories file %s not found, using defaults", self.categories_path
            )
            return default_categories()
        return self._load(self.categories_path, CategoriesConfig)

    def save_profile(self, content: str, output: str | Path | None = None) -> Path:
        """Write rendered profile YAML to *output* (default: config path)."""
        target = Path(output) if output is not None else self.config_path
        try:
            if target.parent != Path("."):
                target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        except OSError as e:
            raise ConfigError(target, f"error writing config file {target}: {e}") from e
        logger.info("profile written to %s", target)
        return target

    def _load(self, path: Path, model: type[BaseModel]):
        try:
            with open(path, encoding="utf-8") as f:
                raw = f.read()
        except OSError as e:
            raise ConfigUnreadable(path, e) from e

        try:
            data = yaml.safe_load(raw)
        except yaml.YAMLError as e:
            raise ConfigMalformed(path, str(e)) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigMalformed(path, "top level must be a mapping")

        try:
            loaded = model.model_validate(data)
        except ValidationError as e:
            raise ConfigMalformed(path, str(e)) from e

        logger.debug("loaded %s from %s", model.__name__, path)
        return loaded


@lru_cache(maxsize=8)
def get_config_service(
    config_path: str = DEFAULT_CONFIG_FILE,
    categories_path: str = DEFAULT_CATEGORIES_FILE,
) -> ConfigService:
    """Get a config service instance for the given file pair."""
    return ConfigService(config_path, categories_path)
