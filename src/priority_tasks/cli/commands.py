# src/priority_tasks/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date, datetime

from ..core.state import AppState
from ..tasks import task_api
from ..tasks.task_filter import ALL
from ..tasks.task_models import Priority, TaskStatus
from .render import render_task, render_task_list

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()

ADD_USAGE = "Usage: /add <priority 1-3> <YYYY-MM-DD> <title...> [-- <description...>]"
LIST_USAGE = "Usage: /list [priority=1|2|3|all] [status=pending|completed|all] [search text]"


def _parse_id(args: list[str]) -> int | None:
    if not args:
        return None
    try:
        return int(args[0].lstrip("#"))
    except ValueError:
        return None


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add 1 2026-11-01 Buy milk -- two litres
    """
    if len(args) < 3:
        return ADD_USAGE

    priority, due_date, rest = args[0], args[1], args[2:]
    if "--" in rest:
        cut = rest.index("--")
        title, description = " ".join(rest[:cut]), " ".join(rest[cut + 1 :])
    else:
        title, description = " ".join(rest), ""

    result = task_api.add_task(
        state,
        title=title,
        description=description,
        due_date=due_date,
        priority=priority,
    )
    if result.ok and result.task is not None:
        return f"{result.message}\n{render_task(result.task, date.today())}"
    return result.message


def cmd_list(state: AppState, args: list[str]) -> str:
    """
    /list                         -> all tasks by priority
    /list priority=1              -> only high priority
    /list status=completed milk   -> completed tasks mentioning "milk"
    """
    priority: int | str = ALL
    status: str = ALL
    terms: list[str] = []

    for arg in args:
        key, sep, value = arg.partition("=")
        key = key.lower()
        if sep and key == "priority":
            if value.lower() == ALL:
                priority = ALL
            else:
                try:
                    priority = int(Priority(int(value)))
                except ValueError:
                    return LIST_USAGE
        elif sep and key == "status":
            value = value.lower()
            if value != ALL and value not in {s.value for s in TaskStatus}:
                return LIST_USAGE
            status = value
        else:
            terms.append(arg)

    tasks = task_api.list_tasks(state, search=" ".join(terms), priority=priority, status=status)
    return render_task_list(tasks, date.today())


def cmd_done(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /done <id>"
    return task_api.toggle_task(state, task_id).message


def cmd_delete(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /delete <id>"
    return task_api.delete_task(state, task_id).message


def cmd_priority(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None or len(args) < 2:
        return "Usage: /priority <id> <1-3>"
    return task_api.change_priority(state, task_id, args[1]).message


def cmd_next(state: AppState, args: list[str]) -> str:
    task = task_api.next_task(state)
    if task is None:
        return "No tasks found"
    return render_task(task, date.today())


def cmd_status(state: AppState, args: list[str]) -> str:
    total = state.queue.size
    pending = len(task_api.list_tasks(state, status=TaskStatus.PENDING))
    db_path = getattr(state.settings, "tasks_db_path", "?")
    now = datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")
    return (
        "Status:\n"
        f"  Tasks: {total} ({pending} pending)\n"
        f"  Storage: {db_path}\n"
        f"  Local time: {now}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("add", cmd_add, help_text="Add a task: /add <priority> <YYYY-MM-DD> <title> [-- <description>].")
registry.register(
    "list",
    cmd_list,
    help_text="List tasks by priority: /list [priority=N] [status=pending|completed] [search].",
    aliases=["ls"],
)
registry.register("done", cmd_done, help_text="Toggle completion: /done <id>.", aliases=["toggle"])
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <id>.", aliases=["rm"])
registry.register("priority", cmd_priority, help_text="Change priority: /priority <id> <1-3>.")
registry.register("next", cmd_next, help_text="Show the highest-priority task.")
registry.register("status", cmd_status, help_text="Show task counts, storage path and local time.")
