# src/priority_tasks/tasks/task_api.py

"""
Application-level task operations.

Every operation takes the AppState explicitly and returns an ActionResult whose
`message` is the user-facing notification. Successful mutations are persisted
right away through state.task_store.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, date, datetime

from ..core.state import AppState
from .task_filter import ALL, filter_tasks
from .task_models import Task, TaskStatus
from .validation import (
    DEFAULT_DESCRIPTION_MAX_LENGTH,
    DEFAULT_TITLE_MIN_LENGTH,
    parse_priority,
    validate_task_input,
)

logger = logging.getLogger(__name__)

MSG_NOT_FOUND = "Task not found"


@dataclass(frozen=True, slots=True)
class ActionResult:
    ok: bool
    message: str
    task: Task | None = None


def save_state(state: AppState) -> ActionResult:
    try:
        state.task_store.save_snapshot(state.queue.heap, state.next_task_id)
    except Exception:
        logger.exception("Failed to save tasks to storage")
        return ActionResult(False, "Error saving tasks to storage")
    return ActionResult(True, "Tasks saved")


def load_state(state: AppState) -> ActionResult:
    """Replace the queue content and id counter with what the store holds."""
    try:
        tasks, next_id = state.task_store.load_snapshot()
        state.queue.load_from(tasks)
    except Exception:
        logger.exception("Failed to load tasks from storage")
        return ActionResult(False, "Error loading tasks from storage")

    state.next_task_id = max(state.next_task_id, next_id)
    logger.info("Loaded %s tasks (next id=%s)", state.queue.size, state.next_task_id)
    return ActionResult(True, "Tasks loaded successfully")


def _persisted(state: AppState, result: ActionResult) -> ActionResult:
    saved = save_state(state)
    if not saved.ok:
        return ActionResult(False, f"{result.message} ({saved.message})", result.task)
    return result


def add_task(
    state: AppState,
    *,
    title: str,
    description: str,
    due_date: str | None,
    priority: object,
    today: date | None = None,
) -> ActionResult:
    settings = state.settings
    check = validate_task_input(
        title,
        description,
        due_date,
        priority,
        today=today or date.today(),
        title_min_length=getattr(settings, "title_min_length", DEFAULT_TITLE_MIN_LENGTH),
        description_max_length=getattr(
            settings, "description_max_length", DEFAULT_DESCRIPTION_MAX_LENGTH
        ),
    )
    if not check.ok:
        logger.debug("Task rejected kind=%s", check.kind)
        return ActionResult(False, check.message)

    if check.due is None or check.priority is None:
        raise RuntimeError("validation passed without parsed due date/priority")

    task = Task(
        id=state.allocate_task_id(),
        priority=check.priority,
        title=title.strip(),
        description=(description or "").strip(),
        due_date=check.due.isoformat(),
        status=TaskStatus.PENDING,
        created_at=datetime.now(UTC).isoformat(),
    )
    state.queue.insert(task)
    logger.info("Task added id=%s priority=%s due=%s", task.id, task.priority, task.due_date)
    return _persisted(state, ActionResult(True, "Task added successfully!", task))


def find_task(state: AppState, task_id: int) -> Task | None:
    for task in state.queue.heap:
        if task.id == task_id:
            return task
    return None


def toggle_task(state: AppState, task_id: int) -> ActionResult:
    """Flip pending/completed in place. The key is unchanged, so the heap needs no repair."""
    task = find_task(state, task_id)
    if task is None:
        return ActionResult(False, MSG_NOT_FOUND)

    task.status = task.status.toggled()
    logger.info("Task %s -> %s", task.id, task.status.value)
    text = "Task completed!" if task.is_completed else "Task marked as pending!"
    return _persisted(state, ActionResult(True, text, task))


def delete_task(state: AppState, task_id: int) -> ActionResult:
    task = state.queue.remove_by_id(task_id)
    if task is None:
        return ActionResult(False, MSG_NOT_FOUND)

    logger.info("Task deleted id=%s", task.id)
    return _persisted(state, ActionResult(True, "Task deleted successfully!", task))


def change_priority(state: AppState, task_id: int, new_priority: object) -> ActionResult:
    prio = parse_priority(new_priority)
    if prio is None:
        return ActionResult(False, "Priority must be one of 1, 2, 3")

    if not state.queue.update_task(task_id, prio):
        return ActionResult(False, MSG_NOT_FOUND)

    logger.info("Task %s priority -> %s", task_id, prio)
    return _persisted(state, ActionResult(True, "Task priority updated!", find_task(state, task_id)))


def list_tasks(
    state: AppState,
    *,
    search: str = "",
    priority: int | str = ALL,
    status: TaskStatus | str = ALL,
) -> list[Task]:
    return filter_tasks(state.queue.get_all_tasks(), search=search, priority=priority, status=status)


def next_task(state: AppState) -> Task | None:
    return state.queue.peek()
