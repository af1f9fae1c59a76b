"""Task list operations.

Each function takes a ``PomodoroState`` and returns a new one with a new
``tasks`` tuple.  Failures raise one of the ``pomotasks.errors`` kinds before
anything is built, so the caller's state is never half-updated.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Mapping
from dataclasses import dataclass, replace

from ..errors import CapacityError, NotFoundError, ValidationError
from ..timer.engine import PomodoroState

logger = logging.getLogger(__name__)

MAX_TASKS = 10

EDITABLE_FIELDS = frozenset({"title", "notes", "is_done"})


@dataclass(frozen=True)
class Task:
    id: str
    title: str
    notes: str | None = None
    is_done: bool = False


def _clean_title(title) -> str:
    if not isinstance(title, str) or not title.strip():
        raise ValidationError("title required")
    return title.strip()


def _index_of(tasks: tuple[Task, ...], task_id: str) -> int:
    for i, task in enumerate(tasks):
        if task.id == task_id:
            return i
    raise NotFoundError(task_id)


def _assert_unique_ids(tasks: tuple[Task, ...]) -> None:
    ids = [t.id for t in tasks]
    assert len(ids) == len(set(ids)), f"duplicate task ids in {ids}"


# ── CRUD ──────────────────────────────────────────────────────────────────


def add_task(
    state: PomodoroState, title: str, notes: str | None = None
) -> PomodoroState:
    """Append a new, not-done task.

    Raises ``ValidationError`` for a blank title and ``CapacityError`` when
    the list already holds ``MAX_TASKS`` tasks.
    """
    title = _clean_title(title)
    if len(state.tasks) >= MAX_TASKS:
        raise CapacityError("max tasks reached")

    task = Task(id=uuid.uuid4().hex, title=title, notes=notes)
    tasks = state.tasks + (task,)
    _assert_unique_ids(tasks)
    logger.debug("Added task %s (%d/%d)", task.id, len(tasks), MAX_TASKS)
    return replace(state, tasks=tasks)


def edit_task(
    state: PomodoroState, task_id: str, updates: Mapping[str, object]
) -> PomodoroState:
    """Merge *updates* into the task with *task_id*.

    Only ``title``, ``notes`` and ``is_done`` may be changed.  The task keeps
    its position in the list.
    """
    index = _index_of(state.tasks, task_id)

    unknown = set(updates) - EDITABLE_FIELDS
    if unknown:
        raise ValidationError(f"cannot edit field(s): {', '.join(sorted(unknown))}")

    changes = dict(updates)
    if "title" in changes:
        changes["title"] = _clean_title(changes["title"])
    if "is_done" in changes:
        if not isinstance(changes["is_done"], bool):
            raise ValidationError("is_done must be True or False")

    tasks = list(state.tasks)
    tasks[index] = replace(tasks[index], **changes)
    logger.debug("Edited task %s: %s", task_id, sorted(changes))
    return replace(state, tasks=tuple(tasks))


def remove_task(state: PomodoroState, task_id: str) -> PomodoroState:
    """Drop the task with *task_id*.  An unknown id raises ``NotFoundError``."""
    index = _index_of(state.tasks, task_id)
    tasks = state.tasks[:index] + state.tasks[index + 1:]
    logger.debug("Removed task %s", task_id)
    return replace(state, tasks=tasks)


def toggle_task(state: PomodoroState, task_id: str) -> PomodoroState:
    task = get_task(state, task_id)
    return edit_task(state, task_id, {"is_done": not task.is_done})


# ── queries ───────────────────────────────────────────────────────────────


def get_task(state: PomodoroState, task_id: str) -> Task:
    return state.tasks[_index_of(state.tasks, task_id)]


def task_counts(state: PomodoroState) -> tuple[int, int]:
    """``(done, total)`` for the "2 / 5" counter."""
    done = sum(1 for t in state.tasks if t.is_done)
    return done, len(state.tasks)
