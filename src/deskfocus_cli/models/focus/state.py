"""Focus session state machine.

A session moves a mode's shortcuts off the desktop when it starts and,
with auto-restore, moves them back when it completes or is interrupted::

    RUNNING --pause--> PAUSED --resume--> RUNNING
    RUNNING|PAUSED --complete--> COMPLETED
    RUNNING|PAUSED --interrupt--> INTERRUPTED

Pause accounting keeps only the cumulative ``paused_total`` plus the start
of the pause in progress, so state stays constant-size however many
pause/resume cycles happen. Sessions live in memory for one process.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from datetime import datetime, timedelta
from enum import Enum
from typing import TYPE_CHECKING

from deskfocus_cli.models.config_models import ModeRegistry
from deskfocus_cli.models.errors import InvalidDuration, InvalidTransition
from deskfocus_cli.utils.logger import get_logger

if TYPE_CHECKING:
    from deskfocus_cli.services.organization_service import (
        OrganizationEngine,
        OrganizeReport,
    )

logger = get_logger("session")

Clock = Callable[[], datetime]


class SessionState(str, Enum):
    """Lifecycle state of a focus session."""

    RUNNING = "running"
    PAUSED = "paused"
    COMPLETED = "completed"
    INTERRUPTED = "interrupted"

    @property
    def is_terminal(self) -> bool:
        return self in (SessionState.COMPLETED, SessionState.INTERRUPTED)


_TRANSITIONS: dict[tuple[SessionState, str], SessionState] = {
    (SessionState.RUNNING, "pause"): SessionState.PAUSED,
    (SessionState.PAUSED, "resume"): SessionState.RUNNING,
    (SessionState.RUNNING, "complete"): SessionState.COMPLETED,
    (SessionState.PAUSED, "complete"): SessionState.COMPLETED,
    (SessionState.RUNNING, "interrupt"): SessionState.INTERRUPTED,
    (SessionState.PAUSED, "interrupt"): SessionState.INTERRUPTED,
}


def next_state(state: SessionState, action: str) -> SessionState:
    """Target state of *action* from *state*.

    Raises:
        InvalidTransition: If the edge does not exist.
    """
    try:
        return _TRANSITIONS[(state, action)]
    except KeyError:
        raise InvalidTransition(state, action) from None


def _now() -> datetime:
    return datetime.now().astimezone()


def _as_duration(duration: timedelta | float) -> timedelta:
    if isinstance(duration, timedelta):
        return duration
    if not math.isfinite(duration):
        raise InvalidDuration(duration, "must be a finite number of minutes")
    try:
        return timedelta(minutes=duration)
    except OverflowError:
        raise InvalidDuration(duration, "is too large") from None


class FocusSession:
    """Timed focus period bound to one mode."""

    def __init__(
        self,
        duration: timedelta,
        mode: str,
        registry: ModeRegistry,
        engine: OrganizationEngine | None = None,
        auto_restore: bool = False,
        clock: Clock | None = None,
        start_time: datetime | None = None,
    ):
        self.clock = clock or _now
        self.duration = duration
        self.mode = mode
        self.registry = registry
        self.engine = engine
        self.auto_restore = auto_restore
        self.start_time = start_time or self.clock()
        self.paused_at: datetime | None = None
        self.paused_total = timedelta(0)
        self.state = SessionState.RUNNING
        self.ended_at: datetime | None = None
        self.organize_report: OrganizeReport | None = None
        self.restore_report: OrganizeReport | None = None
        self._frozen_elapsed: timedelta | None = None

    @classmethod
    def start(
        cls,
        registry: ModeRegistry,
        mode_name: str,
        duration: timedelta | float,
        auto_restore: bool,
        engine: OrganizationEngine,
        clock: Clock | None = None,
    ) -> FocusSession:
        """Validate, create a RUNNING session and move the mode's shortcuts out.

        *duration* is a ``timedelta`` or a number of minutes.

        Raises:
            InvalidDuration: If duration is zero, negative or not finite.
            InvalidMode: If *mode_name* is not configured.
        """
        span = _as_duration(duration)
        if span <= timedelta(0):
            raise InvalidDuration(duration)

        mode_config = registry.lookup(mode_name)

        session = cls(
            duration=span,
            mode=mode_name,
            registry=registry,
            engine=engine,
            auto_restore=auto_restore,
            clock=clock,
        )
        session.organize_report = engine.organize(mode_config, mode_name=mode_name)
        logger.info(
            "session started: mode=%s duration=%s auto_restore=%s moved=%d failed=%d",
            mode_name,
            span,
            auto_restore,
            session.organize_report.success_count,
            session.organize_report.failure_count,
        )
        return session

    @property
    def is_active(self) -> bool:
        return not self.state.is_terminal

    def _transition(self, action: str) -> SessionState:
        target = next_state(self.state, action)
        logger.debug("session %s: %s -> %s", action, self.state.value, target.value)
        return target

    def pause(self) -> None:
        """Freeze the clock. Only legal while RUNNING."""
        target = self._transition("pause")
        self.paused_at = self.clock()
        self.state = target

    def resume(self) -> None:
        """Continue after a pause. Only legal while PAUSED."""
        target = self._transition("resume")
        self._close_pause(self.clock())
        self.state = target

    def complete(self) -> OrganizeReport | None:
        """End the session normally; restores shortcuts if auto-restore is on."""
        return self._finish("complete")

    def interrupt(self) -> OrganizeReport | None:
        """End the session early; restores shortcuts if auto-restore is on.

        Without auto-restore the shortcuts stay in the holding folder until
        an explicit ``restore``.
        """
        return self._finish("interrupt")

    def _finish(self, action: str) -> OrganizeReport | None:
        target = self._transition(action)
        now = self.clock()
        if self.state == SessionState.PAUSED:
            # freeze at the moment the pause began
            self._frozen_elapsed = self._elapsed_at(self.paused_at)
            self._close_pause(now)
        else:
            self._frozen_elapsed = self._elapsed_at(now)
        self.ended_at = now
        self.state = target
        logger.info(
            "session %s: mode=%s elapsed=%s", target.value, self.mode, self.elapsed()
        )

        if self.auto_restore and self.engine is not None:
            self.restore_report = self.engine.restore(self.mode, self.registry)
        return self.restore_report

    def _close_pause(self, now: datetime) -> None:
        if self.paused_at is not None:
            self.paused_total += max(now - self.paused_at, timedelta(0))
        self.paused_at = None

    def _elapsed_at(self, moment: datetime) -> timedelta:
        return max(moment - self.start_time - self.paused_total, timedelta(0))

    def elapsed(self) -> timedelta:
        """Focus time so far, excluding every pause. Never negative."""
        if self._frozen_elapsed is not None:
            return self._frozen_elapsed
        if self.state == SessionState.PAUSED and self.paused_at is not None:
            return self._elapsed_at(self.paused_at)
        return self._elapsed_at(self.clock())

    def remaining(self) -> timedelta:
        """Time left, clamped at zero."""
        return max(self.duration - self.elapsed(), timedelta(0))

    def is_expired(self) -> bool:
        return self.remaining() == timedelta(0)

    def progress(self) -> float:
        """Fraction of the duration already focused, 0.0 to 1.0."""
        total = self.duration.total_seconds()
        if total <= 0:
            return 1.0
        return min(1.0, self.elapsed().total_seconds() / total)

    def to_dict(self) -> dict:
        return {
            "mode": self.mode,
            "state": self.state.value,
            "duration_seconds": int(self.duration.total_seconds()),
            "elapsed_seconds": int(self.elapsed().total_seconds()),
            "remaining_seconds": int(self.remaining().total_seconds()),
            "paused_seconds": int(self.paused_total.total_seconds()),
            "auto_restore": self.auto_restore,
            "start_time": self.start_time.isoformat(),
            "ended_at": self.ended_at.isoformat() if self.ended_at else None,
        }
