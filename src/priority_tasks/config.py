# src/priority_tasks/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

- One Settings object for the whole app.
- Invalid values fall back to defaults instead of failing at import time.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "PTASKS"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    tasks_db_path: Path
    log_dir: Path

    # ---- Task input limits ----
    title_min_length: int
    description_max_length: int

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "priority-tasks").strip() or "priority-tasks"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/priority_tasks"))
        tasks_db_path = _env_path(_k("TASKS_DB_PATH"), data_dir / "tasks.sqlite3")
        log_dir = _env_path(_k("LOG_DIR"), data_dir)

        title_min_length = max(0, _env_int(_k("TITLE_MIN_LENGTH"), 3))
        description_max_length = max(0, _env_int(_k("DESCRIPTION_MAX_LENGTH"), 500))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            tasks_db_path=tasks_db_path,
            log_dir=log_dir,
            title_min_length=title_min_length,
            description_max_length=description_max_length,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Load settings once (reads a local .env first, without overriding the real environment)."""
    global _SETTINGS
    if _SETTINGS is None:
        load_dotenv(override=False)
        _SETTINGS = Settings.from_env()
    return _SETTINGS
