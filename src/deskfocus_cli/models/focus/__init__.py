"""Focus mode - timed sessions that hide distracting shortcuts."""

from .keyboard import KeyboardHandler
from .state import FocusSession, SessionState, next_state
from .ui import (
    TimerDisplay,
    display_progress,
    format_duration,
    show_completion_message,
)

__all__ = [
    "FocusSession",
    "SessionState",
    "next_state",
    "TimerDisplay",
    "KeyboardHandler",
    "display_progress",
    "format_duration",
    "show_completion_message",
]
