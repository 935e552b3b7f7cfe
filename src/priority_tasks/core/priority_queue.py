# src/priority_tasks/core/priority_queue.py

"""
Array-backed binary min-heap over task records.

Records are ordered by their integer `priority` (lower value = served first).
The queue keeps references to the records it is given, so in-place changes to
payload fields are visible without re-insertion. Only `priority` changes must
go through `update_task`.

Not reentrancy-safe: callers serialize access.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, Generic, TypeVar

from .ports import HeapItem

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=HeapItem)


class PriorityQueue(Generic[T]):
    def __init__(self) -> None:
        self._heap: list[T] = []

    # ---- index helpers ----

    @staticmethod
    def _parent(index: int) -> int:
        return (index - 1) // 2

    @staticmethod
    def _left(index: int) -> int:
        return 2 * index + 1

    @staticmethod
    def _right(index: int) -> int:
        return 2 * index + 2

    def _swap(self, i: int, j: int) -> None:
        self._heap[i], self._heap[j] = self._heap[j], self._heap[i]

    def _sift_up(self, index: int) -> None:
        current = index
        while current > 0:
            parent = self._parent(current)
            if self._heap[current].priority < self._heap[parent].priority:
                self._swap(current, parent)
                current = parent
            else:
                break

    def _sift_down(self, index: int) -> None:
        size = len(self._heap)
        current = index
        while True:
            smallest = current
            left = self._left(current)
            right = self._right(current)

            # Strict comparisons: on a tie between children the left one wins.
            if left < size and self._heap[left].priority < self._heap[smallest].priority:
                smallest = left
            if right < size and self._heap[right].priority < self._heap[smallest].priority:
                smallest = right

            if smallest == current:
                break
            self._swap(current, smallest)
            current = smallest

    def _find_index(self, task_id: Any) -> int:
        for i, task in enumerate(self._heap):
            if task.id == task_id:
                return i
        return -1

    # ---- public API ----

    @property
    def size(self) -> int:
        return len(self._heap)

    @property
    def heap(self) -> list[T]:
        """Shallow copy of the records in internal array (heap) order."""
        return list(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def is_empty(self) -> bool:
        return len(self._heap) == 0

    def insert(self, task: T) -> None:
        self._heap.append(task)
        self._sift_up(len(self._heap) - 1)

    def remove(self) -> T | None:
        """Remove and return the record with the lowest priority value, or None if empty."""
        if not self._heap:
            return None

        top = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        return top

    def peek(self) -> T | None:
        return self._heap[0] if self._heap else None

    def update_task(self, task_id: Any, new_priority: int) -> bool:
        """
        Change the priority of the first record whose id matches.

        Only the touched position is repaired: up if the key decreased,
        down otherwise. Returns False (no side effects) if the id is unknown.
        """
        index = self._find_index(task_id)
        if index == -1:
            return False

        old_priority = self._heap[index].priority
        self._heap[index].priority = new_priority

        if new_priority < old_priority:
            self._sift_up(index)
        else:
            self._sift_down(index)
        return True

    def remove_by_id(self, task_id: Any) -> T | None:
        """Remove the record with the given id. Returns it, or None if unknown."""
        index = self._find_index(task_id)
        if index == -1:
            return None

        removed = self._heap[index]
        last = self._heap.pop()
        if index < len(self._heap):
            self._heap[index] = last
            if index > 0 and last.priority < self._heap[self._parent(index)].priority:
                self._sift_up(index)
            else:
                self._sift_down(index)
        return removed

    def get_all_tasks(self) -> list[T]:
        """All live records sorted by ascending priority (stable). Heap order is untouched."""
        return sorted(self._heap, key=lambda task: task.priority)

    def load_from(self, records: Iterable[T]) -> None:
        """
        Replace the whole content with `records` and rebuild the heap.

        Every record must carry an `id` and an integer `priority`, otherwise
        ValueError is raised and the queue is left as it was. The input does
        not have to be heap ordered.
        """
        items = list(records)
        for pos, record in enumerate(items):
            if not hasattr(record, "id"):
                raise ValueError(f"record at position {pos} has no id")
            priority = getattr(record, "priority", None)
            if isinstance(priority, bool) or not isinstance(priority, int):
                raise ValueError(
                    f"record at position {pos} has a non-integer priority: {priority!r}"
                )

        self._heap = items
        for index in range(len(items) // 2 - 1, -1, -1):
            self._sift_down(index)
        logger.debug("PriorityQueue loaded size=%s", len(items))
