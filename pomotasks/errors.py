"""Error kinds raised by the task list operations.

All of them are recoverable: the operation that raised left the caller's
state untouched, so the shell can report the problem and carry on.
"""


class TaskError(Exception):
    """Base class for task list failures."""


class ValidationError(TaskError):
    """Malformed input, e.g. an empty title or an unknown field."""


class CapacityError(TaskError):
    """The task list already holds ``MAX_TASKS`` entries."""


class NotFoundError(TaskError):
    """No task with the requested id."""

    def __init__(self, task_id: str) -> None:
        super().__init__(f"task not found: {task_id}")
        self.task_id = task_id
