"""PomoTasks: a Pomodoro timer engine with a small to-do list."""

__version__ = "0.1.0"
