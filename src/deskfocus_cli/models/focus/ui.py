"""Full-screen countdown UI for focus sessions."""

from __future__ import annotations

import time
from collections.abc import Callable
from datetime import timedelta

from rich.align import Align
from rich.console import Console, Group
from rich.layout import Layout
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from .keyboard import create_keyboard_handler
from .state import FocusSession, SessionState

KeyReaderFactory = Callable[[], object]


def format_duration(duration: timedelta) -> str:
    """Compact human duration: ``0s``, ``45s``, ``5m 30s``, ``1h 25m``."""
    total = max(int(duration.total_seconds()), 0)
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)

    parts = []
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}m")
    if seconds or not parts:
        parts.append(f"{seconds}s")
    return " ".join(parts)


def display_progress(
    elapsed: timedelta,
    remaining: timedelta,
    paused: bool,
    console: Console | None = None,
) -> str:
    """Print and return a one-line progress status."""
    if paused:
        line = f"⏸  Paused | Elapsed: {format_duration(elapsed)} | Remaining: {format_duration(remaining)}"
    else:
        line = f"⏳ Focus Session | Elapsed: {format_duration(elapsed)} | Remaining: {format_duration(remaining)}"
    if console is not None:
        console.print(line, highlight=False)
    return line


class TimerDisplay:
    """Renders a session and serializes keyboard commands with polling.

    Keys: ``p`` pause, ``r`` resume, ``q``/``s`` interrupt. The countdown
    loop is the only place that mutates the session, so reads of
    ``elapsed()``/``remaining()`` never see a half-applied transition.
    """

    def __init__(
        self,
        console: Console | None = None,
        key_reader_factory: KeyReaderFactory | None = None,
        tick: float = 0.25,
    ):
        self.console = console or Console()
        self.key_reader_factory = key_reader_factory or create_keyboard_handler
        self.tick = tick

    def create_layout(self, session: FocusSession) -> Layout:
        layout = Layout()
        layout.split_column(
            Layout(name="header", size=3),
            Layout(name="body"),
            Layout(name="footer", size=3),
        )

        if session.state == SessionState.PAUSED:
            emoji, title, color = "⏸", "PAUSED", "yellow"
        elif session.state == SessionState.RUNNING:
            emoji, title, color = "⏳", f"DeskFocus - {session.mode}", "cyan"
        elif session.state == SessionState.COMPLETED:
            emoji, title, color = "✓", "COMPLETED", "green"
        else:
            emoji, title, color = "✗", "INTERRUPTED", "red"

        header = Text(f"{emoji}  {title}", style=f"bold {color}", justify="center")
        layout["header"].update(Align.center(header, vertical="middle"))
        layout["body"].update(
            Align.center(self._create_body_content(session), vertical="middle")
        )
        layout["footer"].update(
            Align.center(self._create_footer(session), vertical="middle")
        )
        return layout

    def _create_body_content(self, session: FocusSession) -> Group:
        remaining = int(session.remaining().total_seconds())
        mins, secs = divmod(remaining, 60)

        if session.state == SessionState.PAUSED:
            timer_color = "yellow"
        elif remaining < 60:
            timer_color = "red"
        elif remaining < 300:
            timer_color = "yellow"
        else:
            timer_color = "cyan"

        components = [
            Text(f"{mins:02d}:{secs:02d}", style=f"bold {timer_color}", justify="center"),
            Text(""),
        ]

        bar_width = 40
        pct = int(session.progress() * 100)
        filled = int(bar_width * pct / 100)
        progress_bar = "▓" * filled + "░" * (bar_width - filled)
        components.append(Text(f"{progress_bar}  {pct}%", style="dim", justify="center"))

        report = session.organize_report
        if report is not None:
            components.append(Text(""))
            components.append(
                Text(
                    f"{report.success_count} shortcut(s) hidden in {report.destination}",
                    style="dim",
                    justify="center",
                )
            )

        if session.state == SessionState.PAUSED and session.paused_at is not None:
            paused_for = session.clock() - session.paused_at
            components.append(Text(""))
            components.append(
                Text(
                    f"Paused for: {format_duration(paused_for)}",
                    style="yellow dim",
                    justify="center",
                )
            )

        return Group(*components)

    def _create_footer(self, session: FocusSession) -> Group:
        paused = session.state == SessionState.PAUSED
        status = display_progress(session.elapsed(), session.remaining(), paused)
        if paused:
            hints = "Press 'r' to resume  •  'q' to stop"
        else:
            hints = "Press 'p' to pause  •  'q' to stop"
        return Group(
            Text(status, justify="center"),
            Text(hints, style="dim", justify="center"),
        )

    def handle_key(self, session: FocusSession, key: str | None) -> bool:
        """Apply one key press. Returns True when the session ended."""
        if key == "p" and session.state == SessionState.RUNNING:
            session.pause()
        elif key == "r" and session.state == SessionState.PAUSED:
            session.resume()
        elif key in ("q", "s"):
            session.interrupt()
            return True
        return False

    def run_timer(self, session: FocusSession) -> SessionState:
        """Drive *session* until it completes or is interrupted.

        Ctrl-C interrupts the session. Returns the terminal state.
        """
        keyboard = self.key_reader_factory()
        try:
            with Live(
                self.create_layout(session),
                console=self.console,
                refresh_per_second=4,
                screen=True,
            ) as live:
                while session.is_active:
                    if self.handle_key(session, keyboard.get_key()):
                        break

                    if session.state == SessionState.RUNNING and session.is_expired():
                        session.complete()
                        live.update(self.create_layout(session))
                        break

                    live.update(self.create_layout(session))
                    time.sleep(self.tick)
        except KeyboardInterrupt:
            if session.is_active:
                session.interrupt()
        finally:
            keyboard.stop()
        return session.state


def show_completion_message(session: FocusSession, console: Console | None = None):
    """Summary panel once a session has ended."""
    console = console or Console()

    completed = session.state == SessionState.COMPLETED
    title = "🎉 Focus Session Complete!" if completed else "Session Stopped"
    color = "green" if completed else "yellow"

    moved = session.organize_report.success_count if session.organize_report else 0
    if session.restore_report is not None:
        restore_line = f"Restored to desktop: {session.restore_report.success_count}"
        if session.restore_report.failure_count:
            restore_line += f" ({session.restore_report.failure_count} failed)"
    else:
        restore_line = "Shortcuts left in holding folder (run 'deskfocus restore')"

    panel = Panel(
        f"""[bold {color}]{title}[/bold {color}]

Mode: {session.mode}
Planned: {format_duration(session.duration)}
Focused: {format_duration(session.elapsed())}
Paused: {format_duration(session.paused_total)}
Shortcuts hidden: {moved}
{restore_line}""",
        border_style=color,
        padding=(1, 2),
    )
    console.print(panel)
