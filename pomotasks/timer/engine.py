"""Pomodoro state machine for PomoTasks.

Modes
-----
FOCUS         Work period, 25 min.
SHORT_BREAK   Break after a focus period, 5 min.
LONG_BREAK    Break after every 4th focus period, 15 min.

Transitions
-----------
FOCUS → SHORT_BREAK | LONG_BREAK           (countdown reaches 0)
SHORT_BREAK | LONG_BREAK → FOCUS           (countdown reaches 0)
Any → any                                  (switch_mode, stops the clock)

Every function here is pure: it takes a ``PomodoroState`` and returns a new
one.  Nothing schedules itself; the caller decides when a second has passed
and calls ``tick_timer`` (see ``SessionDriver`` for the Qt shell that does).
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from ..tasks.manager import Task


# ── enums ─────────────────────────────────────────────────────────────────


class Mode(str, Enum):
    FOCUS = "focus"
    SHORT_BREAK = "short-break"
    LONG_BREAK = "long-break"


# ── constants ─────────────────────────────────────────────────────────────

DURATIONS: dict[Mode, int] = {
    Mode.FOCUS: 25 * 60,
    Mode.SHORT_BREAK: 5 * 60,
    Mode.LONG_BREAK: 15 * 60,
}

POMODOROS_PER_LONG_BREAK = 4


# ── state ─────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class PomodoroState:
    """Snapshot of the whole session.

    ``mode`` is normally a ``Mode`` but keeps whatever the caller handed to
    ``switch_mode``; unknown modes simply run on the focus duration.
    ``is_running`` is bookkeeping for the shell and is never consulted here.
    """

    mode: Mode | str = Mode.FOCUS
    remaining_seconds: int = DURATIONS[Mode.FOCUS]
    completed_pomodoros: int = 0
    is_running: bool = False
    tasks: tuple[Task, ...] = ()


class TickResult(NamedTuple):
    next_state: PomodoroState
    completed_cycle: bool


# ── durations ─────────────────────────────────────────────────────────────


def get_duration_for_mode(mode) -> int:
    """Seconds in a period of *mode*; unrecognized modes get the focus length."""
    try:
        return DURATIONS[Mode(mode)]
    except ValueError:
        return DURATIONS[Mode.FOCUS]


def create_pomodoro_state() -> PomodoroState:
    return PomodoroState(
        mode=Mode.FOCUS,
        remaining_seconds=get_duration_for_mode(Mode.FOCUS),
        completed_pomodoros=0,
        is_running=False,
        tasks=(),
    )


# ── transitions ───────────────────────────────────────────────────────────


def switch_mode(state: PomodoroState, mode) -> PomodoroState:
    """Jump to *mode* with a full countdown.  Always stops the clock."""
    return replace(
        state,
        mode=mode,
        remaining_seconds=get_duration_for_mode(mode),
        is_running=False,
    )


def tick_timer(state: PomodoroState) -> TickResult:
    """Advance the countdown by one second.

    On the last second the period completes: a finished focus period bumps
    ``completed_pomodoros`` and moves to a break (long on every 4th), a
    finished break moves back to focus.  The new period starts stopped.
    """
    if state.remaining_seconds > 1:
        return TickResult(
            replace(state, remaining_seconds=state.remaining_seconds - 1),
            False,
        )

    completed = state.completed_pomodoros
    if state.mode == Mode.FOCUS:
        completed += 1
        if completed % POMODOROS_PER_LONG_BREAK == 0:
            next_mode = Mode.LONG_BREAK
        else:
            next_mode = Mode.SHORT_BREAK
    else:
        next_mode = Mode.FOCUS

    next_state = replace(
        state,
        mode=next_mode,
        remaining_seconds=get_duration_for_mode(next_mode),
        completed_pomodoros=completed,
        is_running=False,
    )
    return TickResult(next_state, True)


def start_timer(state: PomodoroState) -> PomodoroState:
    return replace(state, is_running=True)


def pause_timer(state: PomodoroState) -> PomodoroState:
    return replace(state, is_running=False)


def toggle_timer(state: PomodoroState) -> PomodoroState:
    return replace(state, is_running=not state.is_running)


def reset_timer(state: PomodoroState) -> PomodoroState:
    """Rewind the current period to its full length and stop."""
    return replace(
        state,
        remaining_seconds=get_duration_for_mode(state.mode),
        is_running=False,
    )


# ── display helpers ───────────────────────────────────────────────────────


def progress(state: PomodoroState) -> float:
    """0.0 → 1.0 progress through the current period."""
    duration = get_duration_for_mode(state.mode)
    elapsed = duration - state.remaining_seconds
    return max(0.0, min(1.0, elapsed / duration))


def format_time(total_seconds: int) -> str:
    """Render seconds as ``MM:SS``.  Minutes are not capped at 59."""
    if total_seconds < 0:
        raise ValueError(f"total_seconds must be non-negative, got {total_seconds}")
    minutes, seconds = divmod(total_seconds, 60)
    return f"{minutes:02d}:{seconds:02d}"
