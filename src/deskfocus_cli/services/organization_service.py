"""Organization engine: batch moves of shortcuts for a mode.

The engine never aborts a batch because of one file. Each candidate gets
a ``MoveOutcome``; only structural problems (an unreadable desktop, a
holding folder that cannot be created) raise.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import asdict, dataclass, field
from pathlib import Path

from deskfocus_cli.models.config_models import ModeConfig, ModeRegistry
from deskfocus_cli.models.errors import (
    DestinationUnavailable,
    ShortcutError,
    SourceUnavailable,
)
from deskfocus_cli.services.shortcut_mover import ShortcutMover
from deskfocus_cli.utils.logger import get_logger

logger = get_logger("organizer")


@dataclass
class MoveOutcome:
    """Result of moving (or simulating a move of) one shortcut."""

    name: str
    succeeded: bool
    error: str | None = None
    error_type: str | None = None
    dry_run: bool = False

    @classmethod
    def failure(cls, error: ShortcutError, dry_run: bool = False) -> MoveOutcome:
        return cls(
            name=error.name,
            succeeded=False,
            error=str(error),
            error_type=type(error).__name__,
            dry_run=dry_run,
        )


@dataclass
class OrganizeReport:
    """Ordered outcomes of one move or restore batch."""

    mode: str | None
    source: Path
    destination: Path
    outcomes: list[MoveOutcome] = field(default_factory=list)
    dry_run: bool = False
    # set when the whole batch could not run (e.g. unreadable folder)
    error: str | None = None
    note: str | None = None

    @property
    def success_count(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.succeeded)

    @property
    def failure_count(self) -> int:
        return sum(1 for outcome in self.outcomes if not outcome.succeeded)

    @property
    def moved(self) -> list[str]:
        """Names that were (or in a dry run would be) moved."""
        return [outcome.name for outcome in self.outcomes if outcome.succeeded]

    @property
    def failures(self) -> list[MoveOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.succeeded]

    def to_dict(self) -> dict:
        return {
            "mode": self.mode,
            "source": str(self.source),
            "destination": str(self.destination),
            "dry_run": self.dry_run,
            "success_count": self.success_count,
            "failure_count": self.failure_count,
            "error": self.error,
            "note": self.note,
            "outcomes": [asdict(outcome) for outcome in self.outcomes],
        }


MoveStep = Callable[[str, Path, Path], object]


class OrganizationEngine:
    """Moves a mode's shortcuts off the desktop and back again."""

    def __init__(
        self,
        desktop_dir: Path,
        home_dir: Path,
        mover: ShortcutMover | None = None,
        dry_run: bool = False,
    ):
        self.desktop_dir = Path(desktop_dir)
        self.home_dir = Path(home_dir)
        self.mover = mover or ShortcutMover()
        self.dry_run = dry_run

    def candidates(self, mode_config: ModeConfig, source_dir: Path) -> list[str]:
        """Names a mode wants moved, in the order they will be attempted.

        The source is listed either way, so an unreadable directory fails
        before anything moves. With ``move_all`` the result is a snapshot of
        that listing; files created afterwards are not picked up.
        """
        listing = self.mover.list_files(source_dir)
        if mode_config.move_all:
            return listing
        return list(mode_config.shortcuts)

    def organize(
        self,
        mode_config: ModeConfig,
        source_dir: Path | None = None,
        mode_name: str | None = None,
    ) -> OrganizeReport:
        """Move the mode's shortcuts from *source_dir* into its holding folder.

        Raises:
            SourceUnavailable: If the source directory is missing or
                cannot be listed. Nothing is created or moved then.
            DestinationUnavailable: If the holding folder cannot be created.
        """
        source = Path(source_dir) if source_dir is not None else self.desktop_dir
        destination = self.home_dir / mode_config.destination

        names = self.candidates(mode_config, source)
        logger.info(
            "organize mode=%s: %d candidate(s) %s -> %s%s",
            mode_name,
            len(names),
            source,
            destination,
            " [dry run]" if self.dry_run else "",
        )

        if not self.dry_run:
            try:
                destination.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise DestinationUnavailable(destination, e) from e

        report = OrganizeReport(
            mode=mode_name, source=source, destination=destination, dry_run=self.dry_run
        )
        self._run_batch(
            report,
            names,
            step=self.mover.move_out,
            check=self.mover.check_out,
        )
        return report

    def restore(self, mode_name: str, registry: ModeRegistry) -> OrganizeReport:
        """Move everything in the mode's holding folder back to the desktop.

        A holding folder that does not exist means there is nothing to
        restore and yields an empty report.

        Raises:
            ModeNotFound: If the mode is not configured.
            SourceUnavailable: If the holding folder exists but cannot be read.
        """
        holding = registry.holding_dir(mode_name, self.home_dir)
        report = OrganizeReport(
            mode=mode_name,
            source=holding,
            destination=self.desktop_dir,
            dry_run=self.dry_run,
        )

        if not holding.is_dir():
            logger.info("restore mode=%s: %s does not exist", mode_name, holding)
            report.note = f"folder does not exist: {holding}"
            return report

        names = self.mover.list_files(holding)
        logger.info(
            "restore mode=%s: %d file(s) %s -> %s%s",
            mode_name,
            len(names),
            holding,
            self.desktop_dir,
            " [dry run]" if self.dry_run else "",
        )
        self._run_batch(
            report,
            names,
            step=self.mover.move_in,
            check=self.mover.check_in,
        )
        return report

    def restore_all(self, registry: ModeRegistry) -> dict[str, OrganizeReport]:
        """Restore every configured mode.

        Modes sharing a holding folder are restored once, under the first
        mode name. A folder that cannot be read is recorded on that mode's
        report instead of stopping the remaining modes.
        """
        reports: dict[str, OrganizeReport] = {}
        seen: dict[Path, str] = {}

        for mode_name in sorted(registry.available_modes()):
            holding = registry.holding_dir(mode_name, self.home_dir)
            if holding in seen:
                reports[mode_name] = OrganizeReport(
                    mode=mode_name,
                    source=holding,
                    destination=self.desktop_dir,
                    dry_run=self.dry_run,
                    note=f"same folder as {seen[holding]}",
                )
                continue
            seen[holding] = mode_name

            try:
                reports[mode_name] = self.restore(mode_name, registry)
            except SourceUnavailable as e:
                logger.warning("restore mode=%s failed: %s", mode_name, e)
                reports[mode_name] = OrganizeReport(
                    mode=mode_name,
                    source=holding,
                    destination=self.desktop_dir,
                    dry_run=self.dry_run,
                    error=str(e),
                )
        return reports

    def _run_batch(
        self,
        report: OrganizeReport,
        names: list[str],
        step: MoveStep,
        check: MoveStep,
    ) -> None:
        for name in names:
            try:
                if self.dry_run:
                    check(name, report.source, report.destination)
                else:
                    step(name, report.source, report.destination)
            except ShortcutError as e:
                logger.warning("%s: %s", type(e).__name__, e)
                report.outcomes.append(MoveOutcome.failure(e, dry_run=self.dry_run))
            else:
                report.outcomes.append(
                    MoveOutcome(name=name, succeeded=True, dry_run=self.dry_run)
                )
