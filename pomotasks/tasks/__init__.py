"""Task list package."""

from .manager import (
    Task,
    MAX_TASKS,
    add_task,
    edit_task,
    remove_task,
    toggle_task,
    get_task,
    task_counts,
)

__all__ = [
    "Task",
    "MAX_TASKS",
    "add_task",
    "edit_task",
    "remove_task",
    "toggle_task",
    "get_task",
    "task_counts",
]
