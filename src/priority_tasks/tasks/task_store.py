# src/priority_tasks/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
from collections.abc import Iterable
from pathlib import Path

from .task_models import Task, TaskStatus

logger = logging.getLogger(__name__)

_NEXT_ID_KEY = "next_task_id"


class TaskStore:
    """
    SQLite task store.

    Holds a snapshot of the priority queue: one row per task in internal heap
    array order (`position`), plus the next-id counter in a key/value table.

    The schema is intentionally simple and migration-safe:
    - create table if missing
    - use PRAGMA table_info to detect missing columns
    - add columns with ALTER TABLE only when needed

    Each method opens its own SQLite connection.
    """

    def __init__(self, db_path: str | Path = "tasks.sqlite3") -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()
        logger.info("TaskStore ready db=%s total=%s", self._db_path, self.count_tasks())

    @property
    def db_path(self) -> Path:
        return self._db_path

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        conn.row_factory = sqlite3.Row
        with contextlib.suppress(sqlite3.DatabaseError):
            conn.execute("PRAGMA journal_mode=WAL")
        return conn

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            cur = conn.cursor()

            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS tasks (
                    position INTEGER NOT NULL,
                    id INTEGER PRIMARY KEY,
                    priority INTEGER NOT NULL,
                    title TEXT NOT NULL DEFAULT '',
                    description TEXT NOT NULL DEFAULT '',
                    due_date TEXT NOT NULL DEFAULT '',
                    status TEXT NOT NULL DEFAULT 'pending',
                    created_at TEXT NOT NULL DEFAULT ''
                )
                """
            )
            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS meta (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
                """
            )

            cur.execute("PRAGMA table_info(tasks)")
            cols = {row["name"] for row in cur.fetchall()}

            def add_col(name: str, decl: str) -> None:
                if name in cols:
                    return
                cur.execute(f"ALTER TABLE tasks ADD COLUMN {name} {decl}")
                logger.info("TaskStore migration: added column %s", name)

            add_col("description", "TEXT NOT NULL DEFAULT ''")
            add_col("due_date", "TEXT NOT NULL DEFAULT ''")
            add_col("status", "TEXT NOT NULL DEFAULT 'pending'")
            add_col("created_at", "TEXT NOT NULL DEFAULT ''")

            cur.execute("CREATE INDEX IF NOT EXISTS idx_tasks_position ON tasks(position)")

            conn.commit()
        finally:
            conn.close()

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        return Task(
            id=int(row["id"]),
            priority=int(row["priority"]),
            title=str(row["title"] or ""),
            description=str(row["description"] or ""),
            due_date=str(row["due_date"] or ""),
            status=TaskStatus.from_db(row["status"]),
            created_at=str(row["created_at"] or ""),
        )

    # ---- public API ----

    def count_tasks(self) -> int:
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute("SELECT COUNT(*) FROM tasks")
            (n,) = cur.fetchone()
            return int(n)
        finally:
            conn.close()

    def save_snapshot(self, tasks: Iterable[Task], next_task_id: int) -> None:
        """Replace every stored task with `tasks` (kept in the given order) in one transaction."""
        rows = [
            (
                pos,
                int(t.id),
                int(t.priority),
                t.title,
                t.description,
                t.due_date,
                TaskStatus(t.status).value,
                t.created_at,
            )
            for pos, t in enumerate(tasks)
        ]

        conn = self._get_conn()
        try:
            with conn:
                conn.execute("DELETE FROM tasks")
                conn.executemany(
                    """
                    INSERT INTO tasks(
                        position, id, priority, title, description,
                        due_date, status, created_at
                    )
                    VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    rows,
                )
                conn.execute(
                    "INSERT OR REPLACE INTO meta(key, value) VALUES (?, ?)",
                    (_NEXT_ID_KEY, str(int(next_task_id))),
                )
            logger.debug("TaskStore saved tasks=%s next_task_id=%s", len(rows), next_task_id)
        finally:
            conn.close()

    def load_snapshot(self) -> tuple[list[Task], int]:
        """
        Return (tasks in stored order, next task id).

        The counter defaults to 1 and is never lower than max(id) + 1,
        so ids are not reused even if the meta row is missing.
        """
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute("SELECT * FROM tasks ORDER BY position ASC")
            tasks = [self._row_to_task(r) for r in cur.fetchall()]

            cur.execute("SELECT value FROM meta WHERE key = ?", (_NEXT_ID_KEY,))
            row = cur.fetchone()
        finally:
            conn.close()

        next_id = 1
        if row is not None:
            try:
                next_id = int(row["value"])
            except (TypeError, ValueError):
                logger.warning("TaskStore: bad %s value %r; recomputing", _NEXT_ID_KEY, row["value"])

        if tasks:
            next_id = max(next_id, max(t.id for t in tasks) + 1)

        logger.debug("TaskStore loaded tasks=%s next_task_id=%s", len(tasks), next_id)
        return tasks, max(1, next_id)
