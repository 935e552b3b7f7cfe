# src/priority_tasks/cli/render.py

"""Plain-text rendering of tasks for the console."""

from __future__ import annotations

from datetime import date

from ..tasks.task_models import Priority, Task

_LABELS = {
    Priority.HIGH: "High Priority",
    Priority.MEDIUM: "Medium Priority",
    Priority.LOW: "Low Priority",
}
_ICONS = {
    Priority.HIGH: "↑",
    Priority.MEDIUM: "-",
    Priority.LOW: "↓",
}


def priority_label(priority: int) -> str:
    return _LABELS.get(priority, _LABELS[Priority.MEDIUM])


def priority_icon(priority: int) -> str:
    return _ICONS.get(priority, _ICONS[Priority.MEDIUM])


def format_due_date(iso: str) -> str:
    """'2026-10-19' -> 'Oct 19, 2026'. Unparseable input is returned unchanged."""
    try:
        d = date.fromisoformat(iso)
    except (TypeError, ValueError):
        return iso
    return f"{d:%b} {d.day}, {d.year}"


def is_overdue(task: Task, today: date) -> bool:
    if task.is_completed:
        return False
    try:
        return date.fromisoformat(task.due_date) < today
    except (TypeError, ValueError):
        return False


def render_task(task: Task, today: date) -> str:
    mark = "[x]" if task.is_completed else "[ ]"
    line = (
        f"{mark} #{task.id} {task.title}  "
        f"{priority_icon(task.priority)} {priority_label(task.priority)}  "
        f"due {format_due_date(task.due_date)}"
    )
    if is_overdue(task, today):
        line += "  OVERDUE"
    if task.description:
        line += f"\n      {task.description}"
    return line


def render_task_list(tasks: list[Task], today: date) -> str:
    if not tasks:
        return "No tasks found"
    lines = [f"{len(tasks)} Tasks"]
    lines.extend(render_task(t, today) for t in tasks)
    return "\n".join(lines)
