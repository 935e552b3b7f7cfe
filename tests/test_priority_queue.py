# tests/test_priority_queue.py

from __future__ import annotations

import random
from types import SimpleNamespace

import pytest

from priority_tasks.core.priority_queue import PriorityQueue

from .fakes import make_task


def assert_heap(queue: PriorityQueue) -> None:
    items = queue.heap
    assert len(items) == queue.size
    for i in range(1, len(items)):
        parent = (i - 1) // 2
        assert items[parent].priority <= items[i].priority, f"heap broken at {i}"


def drain(queue: PriorityQueue) -> list:
    out = []
    while not queue.is_empty():
        out.append(queue.remove())
    return out


def test_scenario_peek_update_and_remove_order() -> None:
    q = PriorityQueue()
    q.insert(make_task(1, 2))
    q.insert(make_task(2, 1))
    q.insert(make_task(3, 3))

    assert q.peek().id == 2
    assert q.update_task(3, 0) is True
    assert_heap(q)

    assert [t.id for t in drain(q)] == [3, 2, 1]


def test_random_operations_keep_heap_invariant() -> None:
    rng = random.Random(1234)
    q = PriorityQueue()
    next_id = 1

    for _ in range(500):
        op = rng.random()
        if op < 0.5 or q.is_empty():
            q.insert(make_task(next_id, rng.randint(-5, 10)))
            next_id += 1
        elif op < 0.75:
            q.remove()
        else:
            target = rng.choice(q.heap).id
            assert q.update_task(target, rng.randint(-5, 10))
        assert_heap(q)


def test_inserts_then_removes_are_non_decreasing() -> None:
    rng = random.Random(7)
    q = PriorityQueue()
    for i in range(100):
        q.insert(make_task(i, rng.randint(1, 3)))

    priorities = [t.priority for t in drain(q)]
    assert len(priorities) == 100
    assert priorities == sorted(priorities)


def test_get_all_tasks_sorted_without_touching_heap() -> None:
    q = PriorityQueue()
    for task_id, prio in enumerate([3, 1, 2, 1], start=1):
        q.insert(make_task(task_id, prio))
    before = [t.id for t in q.heap]

    dump = q.get_all_tasks()

    assert [t.priority for t in dump] == [1, 1, 2, 3]
    assert {t.id for t in dump[:2]} == {2, 4}
    assert [t.id for t in q.heap] == before
    assert q.size == 4
    assert q.remove().priority == 1


def test_remove_and_peek_on_empty_return_none() -> None:
    q = PriorityQueue()
    assert q.remove() is None
    assert q.peek() is None
    assert q.size == 0
    assert q.is_empty()
    assert len(q) == 0


def test_update_unknown_id_is_a_no_op() -> None:
    q = PriorityQueue()
    for task_id, prio in [(1, 2), (2, 1), (3, 3)]:
        q.insert(make_task(task_id, prio))
    before = [(t.id, t.priority) for t in q.heap]

    assert q.update_task(99, 0) is False
    assert [(t.id, t.priority) for t in q.heap] == before
    assert q.size == 3


def test_update_to_larger_priority_sifts_down() -> None:
    q = PriorityQueue()
    for task_id, prio in [(1, 1), (2, 2), (3, 3), (4, 4)]:
        q.insert(make_task(task_id, prio))

    assert q.update_task(1, 5)
    assert_heap(q)
    assert [t.id for t in drain(q)] == [2, 3, 4, 1]


def test_peek_is_idempotent() -> None:
    q = PriorityQueue()
    q.insert(make_task(1, 2))
    q.insert(make_task(2, 1))

    first = q.peek()
    for _ in range(5):
        assert q.peek() is first
    assert q.size == 2


def test_equal_children_prefer_left() -> None:
    q = PriorityQueue()
    # Heap array after inserts: [a(0), b(1), c(1), d(5)]
    for task_id, prio in [(1, 0), (2, 1), (3, 1), (4, 5)]:
        q.insert(make_task(task_id, prio))

    assert q.remove().id == 1
    # Root must be the left child (id 2) on a tie.
    assert q.peek().id == 2


def test_queue_keeps_references() -> None:
    q = PriorityQueue()
    task = make_task(1, 2)
    q.insert(task)

    task.title = "changed outside"
    assert q.peek().title == "changed outside"


def test_round_trip_through_sorted_dump() -> None:
    rng = random.Random(42)
    q = PriorityQueue()
    for i in range(30):
        q.insert(make_task(i, rng.randint(1, 3)))

    fresh = PriorityQueue()
    for task in q.get_all_tasks():
        fresh.insert(task)

    assert [t.priority for t in drain(fresh)] == [t.priority for t in drain(q)]


def test_remove_by_id_keeps_invariant() -> None:
    rng = random.Random(99)
    q = PriorityQueue()
    for i in range(40):
        q.insert(make_task(i, rng.randint(0, 20)))

    ids = [t.id for t in q.heap]
    rng.shuffle(ids)
    for task_id in ids[:25]:
        removed = q.remove_by_id(task_id)
        assert removed is not None and removed.id == task_id
        assert_heap(q)

    assert q.size == 15
    assert q.remove_by_id(12345) is None
    assert q.size == 15


def test_remove_by_id_last_element() -> None:
    q = PriorityQueue()
    q.insert(make_task(1, 1))
    q.insert(make_task(2, 2))

    assert q.remove_by_id(2).id == 2
    assert q.remove_by_id(1).id == 1
    assert q.is_empty()


def test_load_from_reheapifies_unordered_input() -> None:
    q = PriorityQueue()
    q.insert(make_task(100, 1))

    records = [make_task(i, p) for i, p in enumerate([9, 7, 5, 3, 1, 8, 6, 4, 2])]
    q.load_from(records)

    assert q.size == 9
    assert_heap(q)
    assert [t.priority for t in drain(q)] == [1, 2, 3, 4, 5, 6, 7, 8, 9]


@pytest.mark.parametrize(
    "bad",
    [
        SimpleNamespace(id=2, priority="1"),
        SimpleNamespace(id=2, priority=None),
        SimpleNamespace(id=2, priority=True),
        SimpleNamespace(priority=1),
    ],
)
def test_load_from_rejects_malformed_records(bad) -> None:
    q = PriorityQueue()
    q.insert(make_task(1, 1))

    with pytest.raises(ValueError):
        q.load_from([make_task(5, 2), bad])

    assert [t.id for t in q.heap] == [1]


def test_heap_property_returns_a_copy() -> None:
    q = PriorityQueue()
    q.insert(make_task(1, 1))

    snapshot = q.heap
    snapshot.clear()
    assert q.size == 1
