# src/priority_tasks/tasks/task_filter.py

from __future__ import annotations

from collections.abc import Iterable

from .task_models import Task, TaskStatus

ALL = "all"


def filter_tasks(
    tasks: Iterable[Task],
    *,
    search: str = "",
    priority: int | str = ALL,
    status: TaskStatus | str = ALL,
) -> list[Task]:
    """
    Keep tasks that match every active filter. Input order is preserved.

    - search: case-insensitive substring of title or description ("" matches all)
    - priority: "all" or an exact priority value
    - status: "all", "pending" or "completed"

    Unknown filter values raise ValueError.
    """
    term = (search or "").strip().lower()
    want_priority = None if str(priority).lower() == ALL else int(priority)
    want_status = None if str(status).lower() == ALL else TaskStatus(str(status).lower())

    out: list[Task] = []
    for task in tasks:
        if term and term not in task.title.lower() and term not in task.description.lower():
            continue
        if want_priority is not None and task.priority != want_priority:
            continue
        if want_status is not None and task.status != want_status:
            continue
        out.append(task)
    return out
