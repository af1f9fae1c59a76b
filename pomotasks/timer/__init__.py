"""Timer package."""

from .engine import (
    Mode,
    PomodoroState,
    TickResult,
    DURATIONS,
    POMODOROS_PER_LONG_BREAK,
    get_duration_for_mode,
    create_pomodoro_state,
    switch_mode,
    tick_timer,
    start_timer,
    pause_timer,
    toggle_timer,
    reset_timer,
    progress,
    format_time,
)

__all__ = [
    "Mode",
    "PomodoroState",
    "TickResult",
    "DURATIONS",
    "POMODOROS_PER_LONG_BREAK",
    "get_duration_for_mode",
    "create_pomodoro_state",
    "switch_mode",
    "tick_timer",
    "start_timer",
    "pause_timer",
    "toggle_timer",
    "reset_timer",
    "progress",
    "format_time",
]
