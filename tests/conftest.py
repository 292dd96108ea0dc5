"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from the real desktop, home
directory, config directory and log file.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from pathlib import Path
from unittest.mock import patch

import pytest

from deskfocus_cli.models.config_models import ModeConfig, ModeRegistry
from deskfocus_cli.services.organization_service import OrganizationEngine


# ---------------------------------------------------------------------------
# Log isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True, scope="session")
def isolated_log_dir(tmp_path_factory):
    """Point the application log file at a temporary directory."""
    import deskfocus_cli.utils.logger as logger_mod

    log_dir = tmp_path_factory.mktemp("logs")
    logger_mod._logger = None
    logging.getLogger(logger_mod._APP_NAME).handlers.clear()
    with patch("deskfocus_cli.utils.logger.user_log_dir", return_value=str(log_dir)):
        logger_mod.get_logger()
        yield log_dir


# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def clear_config_cache():
    """Each test gets a fresh ConfigService for its own paths."""
    from deskfocus_cli.services.config_service import get_config_service

    get_config_service.cache_clear()
    yield
    get_config_service.cache_clear()


@pytest.fixture()
def home(tmp_path, monkeypatch) -> Path:
    """A fake home directory with an empty Desktop.

    HOME, USERPROFILE and XDG_CONFIG_HOME all point inside *tmp_path*, so
    both ``get_desktop_path()`` and ``user_config_dir()`` resolve there.
    """
    home_dir = tmp_path / "home"
    (home_dir / "Desktop").mkdir(parents=True)
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.setenv("USERPROFILE", str(home_dir))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg_config"))
    monkeypatch.chdir(tmp_path)
    return home_dir


@pytest.fixture()
def desktop(home) -> Path:
    return home / "Desktop"


def _make_files(directory: Path, *names: str) -> list[Path]:
    directory.mkdir(parents=True, exist_ok=True)
    paths = []
    for name in names:
        path = directory / name
        path.write_text("", encoding="utf-8")
        paths.append(path)
    return paths


@pytest.fixture()
def make_files():
    """Create empty files: ``make_files(directory, "a.lnk", "b.url")``."""
    return _make_files


# ---------------------------------------------------------------------------
# Domain fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def registry() -> ModeRegistry:
    """Two modes with distinct holding folders; focusmode is the default."""
    return ModeRegistry(
        modes={
            "focusmode": ModeConfig(
                destination="Hidden_Shortcuts",
                shortcuts=["Steam.lnk", "Epic Games.lnk"],
            ),
            "gamemode": ModeConfig(
                destination="Work_Shortcuts",
                shortcuts=["VS Code.lnk"],
            ),
        },
        default_mode="focusmode",
    )


@pytest.fixture()
def engine(desktop, home) -> OrganizationEngine:
    return OrganizationEngine(desktop_dir=desktop, home_dir=home)


class FakeClock:
    """Manually advanced clock for deterministic session timing."""

    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


PROFILE_YAML = """\
modes:
  focusmode:
    destination: Hidden_Shortcuts
    shortcuts:
      - Steam.lnk
      - Epic Games.lnk
  gamemode:
    destination: Work_Shortcuts
    shortcuts:
      - VS Code.lnk
default_mode: focusmode
"""


@pytest.fixture()
def profile_file(home) -> Path:
    """profile.yml in the working directory matching the ``registry`` fixture."""
    path = home.parent / "profile.yml"
    path.write_text(PROFILE_YAML, encoding="utf-8")
    return path
