# src/taskboard/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..tasks.task_models import BoardError, OpResult
from ..view.render import render_board_text

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

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

    def unregister(self, name: str) -> None:
        key = name.lower()
        handler = self._handlers.pop(key, None)
        self._help.pop(key, None)
        for alias in [k for k, h in self._handlers.items() if h is handler]:
            del self._handlers[alias]

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


def _position(raw: str) -> int | None:
    """Console positions are 1-based; the board is 0-based."""
    try:
        pos = int(raw)
    except ValueError:
        return None
    return pos - 1 if pos >= 1 else None


def _reply(state: AppState, result: OpResult, *, kind: str = "", pos: str = "") -> str:
    if result.ok:
        return render_board_text(state.board)
    if result.error is BoardError.INDEX_OUT_OF_RANGE:
        return f"No {kind} at position {pos}."
    return result.message


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    return render_board_text(state.board)


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <hours> <description...>

    Takes the pending subtasks with it.
    """
    if len(args) < 2:
        return "Usage: /add <hours> <description>"
    hours, description = args[0], " ".join(args[1:])
    return _reply(state, state.board.add_task(description, hours))


def cmd_sub(state: AppState, args: list[str]) -> str:
    """/sub <date> <name...>"""
    if len(args) < 2:
        return "Usage: /sub <date> <name>"
    date, name = args[0], " ".join(args[1:])
    return _reply(state, state.board.add_subtask_to_buffer(name, date))


def _positional(
    state: AppState,
    args: list[str],
    op: Callable[[int], OpResult],
    *,
    kind: str,
    usage: str,
) -> str:
    if len(args) != 1:
        return usage
    idx = _position(args[0])
    if idx is None:
        return f"No {kind} at position {args[0]}."
    return _reply(state, op(idx), kind=kind, pos=args[0])


def cmd_unsub(state: AppState, args: list[str]) -> str:
    return _positional(
        state, args, state.board.remove_subtask_from_buffer, kind="subtask", usage="Usage: /unsub <n>"
    )


def cmd_rm(state: AppState, args: list[str]) -> str:
    return _positional(state, args, state.board.remove_task, kind="task", usage="Usage: /rm <n>")


def cmd_toggle(state: AppState, args: list[str]) -> str:
    return _positional(state, args, state.board.toggle_task, kind="task", usage="Usage: /toggle <n>")


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show tasks and pending subtasks.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add a task: /add <hours> <description>.")
registry.register("sub", cmd_sub, help_text="Queue a subtask for the next task: /sub <date> <name>.")
registry.register("unsub", cmd_unsub, help_text="Drop a pending subtask: /unsub <n>.")
registry.register("rm", cmd_rm, help_text="Remove a task: /rm <n>.", aliases=["remove"])
registry.register("toggle", cmd_toggle, help_text="Mark a task done/undone: /toggle <n>.", aliases=["t"])
