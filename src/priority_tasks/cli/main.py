# src/priority_tasks/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (restoring saved tasks), then runs the
console REPL until the user exits.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging
from ..tasks import task_api
from .bootstrap import create_initial_state

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.log_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)

    try:
        run_console_loop(state)
    finally:
        # Mutations are saved as they happen; this covers anything left over.
        result = task_api.save_state(state)
        if not result.ok:
            logger.error("%s on shutdown.", result.message)
        logger.info("Bye.")


if __name__ == "__main__":
    main()
