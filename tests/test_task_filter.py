# tests/test_task_filter.py

from __future__ import annotations

import pytest

from priority_tasks.tasks.task_filter import filter_tasks
from priority_tasks.tasks.task_models import TaskStatus

from .fakes import make_task


@pytest.fixture()
def tasks():
    return [
        make_task(1, 1, title="Buy MILK", description=""),
        make_task(2, 1, title="Call mom", description="about the milk order", status=TaskStatus.COMPLETED),
        make_task(3, 2, title="Write report", description="quarterly"),
        make_task(4, 3, title="Gym", description=""),
    ]


def test_no_filters_keeps_everything_in_order(tasks) -> None:
    assert [t.id for t in filter_tasks(tasks)] == [1, 2, 3, 4]


def test_search_is_case_insensitive_on_title_and_description(tasks) -> None:
    assert [t.id for t in filter_tasks(tasks, search="milk")] == [1, 2]
    assert [t.id for t in filter_tasks(tasks, search="QUARTER")] == [3]
    assert filter_tasks(tasks, search="nothing") == []


def test_priority_and_status_filters(tasks) -> None:
    assert [t.id for t in filter_tasks(tasks, priority=1)] == [1, 2]
    assert [t.id for t in filter_tasks(tasks, priority="3")] == [4]
    assert [t.id for t in filter_tasks(tasks, status="completed")] == [2]
    assert [t.id for t in filter_tasks(tasks, status=TaskStatus.PENDING)] == [1, 3, 4]


def test_filters_combine(tasks) -> None:
    got = filter_tasks(tasks, search="milk", priority=1, status="pending")
    assert [t.id for t in got] == [1]


def test_unknown_status_raises(tasks) -> None:
    with pytest.raises(ValueError):
        filter_tasks(tasks, status="archived")
