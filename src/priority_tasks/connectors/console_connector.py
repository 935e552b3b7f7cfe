# src/priority_tasks/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..cli.commands import CommandRegistry
from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def run_console_loop(
    state: AppState,
    *,
    registry: CommandRegistry = command_registry,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = _print_ts,
) -> None:
    logger.info("Console connector started (tasks=%s).", state.queue.size)
    write("[CONSOLE] Use /help for commands. Use /exit to quit.")

    while True:
        try:
            line = read_line(">>> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not line:
            continue

        if line.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            response = registry.handle(state, line)
        except Exception:
            logger.exception("Command handler crashed.")
            response = "Internal error while handling a command."

        if response is None:
            response = "Commands start with '/'. Use /help to list available commands."
        write(response)

    logger.info("Console connector finished.")
