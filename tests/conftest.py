# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from priority_tasks.core.state import AppState
from priority_tasks.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the task API.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="priority-tasks-test",
        data_dir=tmp_path,
        tasks_db_path=tmp_path / "tasks.sqlite3",
        log_dir=tmp_path,
        title_min_length=3,
        description_max_length=500,
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """
    AppState with a real SQLite TaskStore: persistence is part of what we test.
    """
    return AppState(settings=settings, task_store=TaskStore(settings.tasks_db_path))
