"""Non-blocking single-key input for the live countdown."""

from __future__ import annotations

import sys


class KeyboardHandler:
    """POSIX key reader: puts the terminal in cbreak mode while alive."""

    def __init__(self):
        self.fd = None
        self.old_settings = None
        self._setup()

    def _setup(self):
        try:
            import termios
            import tty

            self.fd = sys.stdin.fileno()
            self.old_settings = termios.tcgetattr(self.fd)
            tty.setcbreak(self.fd)
        except Exception:
            # stdin is not a tty (pipes, CliRunner): keys are simply never seen
            self.old_settings = None

    def get_key(self) -> str | None:
        """Return the pressed key lower-cased, or None without blocking."""
        if self.old_settings is None:
            return None
        import select

        try:
            if select.select([sys.stdin], [], [], 0)[0]:
                return sys.stdin.read(1).lower()
        except (OSError, ValueError):
            return None
        return None

    def stop(self):
        """Restore terminal settings."""
        if self.old_settings is None:
            return
        import termios

        try:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, self.old_settings)
        except Exception:
            pass


class WindowsKeyboardHandler:
    """Key reader for Windows consoles using msvcrt."""

    def __init__(self):
        try:
            import msvcrt

            self.msvcrt = msvcrt
        except ImportError:
            self.msvcrt = None

    def get_key(self) -> str | None:
        if not self.msvcrt or not self.msvcrt.kbhit():
            return None
        key = self.msvcrt.getch()
        if isinstance(key, bytes):
            key = key.decode("utf-8", errors="ignore")
        return key.lower()

    def stop(self):
        pass


def create_keyboard_handler() -> KeyboardHandler | WindowsKeyboardHandler:
    """Key reader suited to the current platform."""
    if sys.platform.startswith("win"):
        return WindowsKeyboardHandler()
    return KeyboardHandler()
