# tests/test_console_connector.py

from __future__ import annotations

from priority_tasks.cli.commands import CommandRegistry
from priority_tasks.connectors.console_connector import run_console_loop


def _feed(lines):
    it = iter(lines)

    def read_line(prompt: str) -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read_line


def test_console_routes_commands_until_exit(state) -> None:
    out: list[str] = []
    run_console_loop(
        state,
        read_line=_feed(["", "/add 1 2999-01-01 From console", "hello", "/exit", "/list"]),
        write=out.append,
    )

    assert out[1].startswith("Task added successfully!")
    assert out[2].startswith("Commands start with '/'")
    # /list after /exit is never read
    assert len(out) == 3
    assert state.queue.size == 1


def test_console_survives_crashing_handler(state) -> None:
    reg = CommandRegistry()

    def boom(state, args):
        raise RuntimeError("boom")

    reg.register("boom", boom, "crash")
    out: list[str] = []
    run_console_loop(state, registry=reg, read_line=_feed(["/boom", "/boom"]), write=out.append)

    assert out[1:] == ["Internal error while handling a command."] * 2
