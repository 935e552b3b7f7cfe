# src/priority_tasks/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps storage swappable and makes testing easier.
"""

from typing import Any, Protocol


class HeapItem(Protocol):
    """What PriorityQueue needs from a record: an identifier and an integer key."""

    id: Any
    priority: int


class TaskRepo(Protocol):
    """Persistence port: a snapshot of the queue array plus the id counter."""

    def save_snapshot(self, tasks: list[Any], next_task_id: int) -> None: ...
    def load_snapshot(self) -> tuple[list[Any], int]: ...
    def count_tasks(self) -> int: ...
