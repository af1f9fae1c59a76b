"""Shared test helpers for PomoTasks."""

from dataclasses import replace

from pomotasks.tasks.manager import add_task
from pomotasks.timer.driver import SessionDriver
from pomotasks.timer.engine import PomodoroState, tick_timer


class SignalCollector:
    """Records every emission of the pyqtSignal it is connected to."""

    def __init__(self):
        self.items: list = []

    def __call__(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __len__(self):
        return len(self.items)

    @property
    def last(self):
        return self.items[-1] if self.items else None


def finish_period(driver: SessionDriver) -> None:
    """Jump the driver to the last second and tick once."""
    driver._state = replace(driver.state, remaining_seconds=1)
    driver._on_tick()


def run_period(state: PomodoroState):
    """Tick *state* until its period completes; returns (result, ticks)."""
    ticks = 0
    while True:
        result = tick_timer(state)
        ticks += 1
        if result.completed_cycle:
            return result, ticks
        state = result.next_state


def with_tasks(state: PomodoroState, count: int) -> PomodoroState:
    for i in range(count):
        state = add_task(state, f"Task {i + 1}")
    return state
