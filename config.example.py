# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "PTASKS_APP_NAME": "App display name (default: priority-tasks).",
    "PTASKS_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Paths (gitignored)
    "PTASKS_DATA_DIR": "Local data directory (default: .local/priority_tasks).",
    "PTASKS_TASKS_DB_PATH": "TaskStore SQLite path (default: <data_dir>/tasks.sqlite3).",
    "PTASKS_LOG_DIR": "Directory for priority_tasks.log (default: <data_dir>).",
    # Task input limits
    "PTASKS_TITLE_MIN_LENGTH": "Minimum task title length after trimming (default: 3).",
    "PTASKS_DESCRIPTION_MAX_LENGTH": "Maximum task description length (default: 500).",
}
