# src/priority_tasks/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..tasks.task_models import Task
from .ports import TaskRepo
from .priority_queue import PriorityQueue


@dataclass
class AppState:
    """
    Owning context for one running application.

    Built once by the bootstrap and passed explicitly to the task API,
    commands and connectors.
    """

    # Store Settings on the state for easy access in other modules.
    settings: object

    task_store: TaskRepo
    queue: PriorityQueue[Task] = field(default_factory=PriorityQueue)
    next_task_id: int = 1

    def allocate_task_id(self) -> int:
        task_id = self.next_task_id
        self.next_task_id += 1
        return task_id
