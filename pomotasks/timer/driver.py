"""Qt shell around the pure engine.

``SessionDriver`` holds the one live ``PomodoroState``, owns the single
one-second ``QTimer`` that feeds ``tick_timer``, and turns the engine's
results into Qt signals.  The timer is stopped before every mode switch,
reset and pause, and after every completed period, so two countdowns can
never run at once.
"""

from __future__ import annotations

import logging
from datetime import datetime

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from ..errors import TaskError
from ..tasks import manager
from ..tasks.manager import Task
from . import engine
from .engine import Mode, PomodoroState

logger = logging.getLogger(__name__)

TICK_INTERVAL_MS = 1000


class SessionDriver(QObject):
    """Drives a ``PomodoroState`` on a ``QTimer``.

    Signals
    -------
    tick(remaining_seconds: int)
        Emitted after every one-second step.
    state_changed(state: PomodoroState)
        Emitted whenever the live state is replaced.
    cycle_completed(data: dict)
        Emitted when a period runs down.  Keys: ``mode``, ``next_mode``,
        ``duration_seconds``, ``completed_pomodoros``, ``completed_at``,
        ``record_id`` (None when history is off).
    tasks_changed(tasks: tuple)
        Emitted after every successful task operation.
    """

    tick = pyqtSignal(int)
    state_changed = pyqtSignal(object)
    cycle_completed = pyqtSignal(object)
    tasks_changed = pyqtSignal(object)

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        history_enabled: bool = True,
        auto_advance: bool = False,
        state: PomodoroState | None = None,
    ) -> None:
        super().__init__(parent)

        self._history_enabled: bool = history_enabled
        self._auto_advance: bool = auto_advance
        if state is None:
            state = engine.create_pomodoro_state()
        # The QTimer starts stopped, so the state must agree.
        self._state: PomodoroState = engine.pause_timer(state)

        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(TICK_INTERVAL_MS)
        self._qt_timer.timeout.connect(self._on_tick)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def state(self) -> PomodoroState:
        return self._state

    @property
    def mode(self):
        return self._state.mode

    @property
    def remaining(self) -> int:
        return self._state.remaining_seconds

    @property
    def formatted_time(self) -> str:
        return engine.format_time(self._state.remaining_seconds)

    @property
    def progress(self) -> float:
        return engine.progress(self._state)

    @property
    def is_running(self) -> bool:
        return self._state.is_running

    @property
    def is_active(self) -> bool:
        """True while the one-second QTimer is armed."""
        return self._qt_timer.isActive()

    @property
    def auto_advance(self) -> bool:
        return self._auto_advance

    @auto_advance.setter
    def auto_advance(self, value: bool) -> None:
        self._auto_advance = value

    # ══════════════════════════════════════════════════════════════════
    #  TIMER CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def start(self) -> None:
        """Start counting down.  No-op while already running."""
        if self._qt_timer.isActive():
            return
        self._replace(engine.start_timer(self._state))
        self._qt_timer.start()
        logger.info(
            "Started %s at %s", _mode_name(self.mode), self.formatted_time
        )

    def pause(self) -> None:
        if not self._qt_timer.isActive() and not self._state.is_running:
            return
        self._qt_timer.stop()
        self._replace(engine.pause_timer(self._state))
        logger.info("Paused at %s", self.formatted_time)

    def toggle(self) -> None:
        if self._qt_timer.isActive():
            self.pause()
        else:
            self.start()

    def reset(self) -> None:
        """Stop and rewind the current period."""
        self._qt_timer.stop()
        self._replace(engine.reset_timer(self._state))
        logger.info("Reset %s", _mode_name(self.mode))

    def switch_mode(self, mode) -> None:
        """Stop any countdown and load a fresh period of *mode*."""
        self._qt_timer.stop()
        self._replace(engine.switch_mode(self._state, mode))
        logger.info("Switched to %s", _mode_name(mode))

    # ══════════════════════════════════════════════════════════════════
    #  TASKS
    # ══════════════════════════════════════════════════════════════════

    def add_task(self, title: str, notes: str | None = None) -> Task:
        self._apply_tasks(manager.add_task, title, notes)
        return self._state.tasks[-1]

    def edit_task(self, task_id: str, **updates) -> Task:
        self._apply_tasks(manager.edit_task, task_id, updates)
        return manager.get_task(self._state, task_id)

    def remove_task(self, task_id: str) -> None:
        self._apply_tasks(manager.remove_task, task_id)

    def toggle_task(self, task_id: str) -> Task:
        self._apply_tasks(manager.toggle_task, task_id)
        return manager.get_task(self._state, task_id)

    def _apply_tasks(self, operation, *args) -> None:
        try:
            new_state = operation(self._state, *args)
        except TaskError as exc:
            logger.warning("%s failed: %s", operation.__name__, exc)
            raise
        self._replace(new_state)
        self.tasks_changed.emit(new_state.tasks)

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL — timer mechanics
    # ══════════════════════════════════════════════════════════════════

    def _on_tick(self) -> None:
        finished = self._state
        result = engine.tick_timer(finished)
        self._state = result.next_state
        self.tick.emit(self._state.remaining_seconds)

        if result.completed_cycle:
            self._finish_period(finished)
        else:
            self.state_changed.emit(self._state)

    def _finish_period(self, finished: PomodoroState) -> None:
        self._qt_timer.stop()
        completed_at = datetime.now()
        duration = engine.get_duration_for_mode(finished.mode)
        next_state = self._state

        record_id = None
        if self._history_enabled:
            record_id = self._persist_cycle(finished.mode, duration, completed_at)

        logger.info(
            "Completed %s; next up %s (pomodoros: %d)",
            _mode_name(finished.mode),
            _mode_name(next_state.mode),
            next_state.completed_pomodoros,
        )
        self.state_changed.emit(next_state)
        self.cycle_completed.emit({
            "mode": _mode_name(finished.mode),
            "next_mode": _mode_name(next_state.mode),
            "duration_seconds": duration,
            "completed_pomodoros": next_state.completed_pomodoros,
            "completed_at": completed_at,
            "record_id": record_id,
        })

        if self._auto_advance:
            self.start()

    def _replace(self, new_state: PomodoroState) -> None:
        self._state = new_state
        self.state_changed.emit(new_state)

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL — database persistence
    # ══════════════════════════════════════════════════════════════════

    def _persist_cycle(self, mode, duration: int, completed_at: datetime) -> int:
        from ..database.history import record_cycle

        return record_cycle(
            _mode_name(mode),
            duration,
            self._state.completed_pomodoros,
            completed_at,
        )


def _mode_name(mode) -> str:
    return mode.value if isinstance(mode, Mode) else str(mode)
