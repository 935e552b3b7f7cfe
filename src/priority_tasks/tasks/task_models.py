# src/priority_tasks/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, StrEnum


class TaskStatus(StrEnum):
    PENDING = "pending"
    COMPLETED = "completed"

    @classmethod
    def from_db(cls, raw: str | None) -> TaskStatus:
        if not raw:
            return cls.PENDING
        try:
            return cls(raw)
        except ValueError:
            return cls.PENDING

    def toggled(self) -> TaskStatus:
        return TaskStatus.PENDING if self is TaskStatus.COMPLETED else TaskStatus.COMPLETED


class Priority(IntEnum):
    """User-selectable priorities. Lower value = served first."""

    HIGH = 1
    MEDIUM = 2
    LOW = 3


@dataclass(slots=True)
class Task:
    id: int
    priority: int

    title: str
    description: str
    due_date: str  # YYYY-MM-DD
    status: TaskStatus
    created_at: str  # ISO-8601, UTC

    @property
    def is_completed(self) -> bool:
        return self.status == TaskStatus.COMPLETED
