# src/taskmaster/cli/commands.py

from __future__ import annotations

import contextlib
import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.intents import Intent, IntentKind, dispatch
from ..core.state import AppState
from .view import render_board, render_stats

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, str], str]
CommandHandler3 = Callable[[AppState, str, CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, /toggle, ...)."""

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

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        Handlers get the raw text after the command name (one separating space removed),
        so /draft and /add keep whitespace exactly as typed.
        """
        if not line.startswith("/"):
            return None

        body = line[1:]
        name, _, arg_text = body.partition(" ")
        name = name.strip().lower()
        if not name:
            return "Empty command. Use /help to list available commands."

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, arg_text, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, arg_text)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Quit.")
        lines.append("Any other line adds a task (or saves the edit in progress).")
        return "\n".join(lines)


registry = CommandRegistry()


def parse_task_id(arg_text: str) -> int | None:
    """First whitespace-separated token as an id; '#3' and '3' both work."""
    parts = arg_text.split()
    if not parts:
        return None
    token = parts[0].lstrip("#")
    try:
        return int(token)
    except ValueError:
        return None


def _id_command(kind: IntentKind, usage: str) -> CommandHandler2:
    def handler(state: AppState, arg_text: str) -> str:
        task_id = parse_task_id(arg_text)
        if task_id is None:
            return usage
        dispatch(state, Intent(kind, task_id=task_id))
        return render_board(state)

    return handler


def cmd_help(state: AppState, arg_text: str) -> str:
    return registry.build_help()


def cmd_list(state: AppState, arg_text: str) -> str:
    return render_board(state)


def cmd_stats(state: AppState, arg_text: str) -> str:
    return render_stats(state.store.stats())


def cmd_add(state: AppState, arg_text: str) -> str:
    """
    /add <text>  -> add a task
    Blank text is ignored silently (the board is simply shown again).
    """
    dispatch(state, Intent(IntentKind.SUBMIT_TASK, text=arg_text))
    return render_board(state)


cmd_toggle = _id_command(IntentKind.TOGGLE, "Usage: /toggle <id>")
cmd_delete = _id_command(IntentKind.DELETE, "Usage: /delete <id>")


def cmd_edit(state: AppState, arg_text: str, emit: CommandEmitter | None = None) -> str:
    """
    /edit <id>  -> start editing a task (replaces any edit in progress)
    """
    task_id = parse_task_id(arg_text)
    if task_id is None:
        return "Usage: /edit <id>"

    logger.debug("Edit requested id=%s", task_id)
    dispatch(state, Intent(IntentKind.BEGIN_EDIT, task_id=task_id))
    if emit and state.store.is_editing(task_id):
        with contextlib.suppress(Exception):
            emit(f"Editing #{task_id}. Type the new text and press Enter, or /cancel.")
    return render_board(state)


def cmd_draft(state: AppState, arg_text: str) -> str:
    """
    /draft <text>  -> replace the draft without saving
    """
    if not state.store.is_editing():
        return "Nothing is being edited. Use /edit <id> first."
    dispatch(state, Intent(IntentKind.UPDATE_DRAFT, text=arg_text))
    return render_board(state)


def cmd_save(state: AppState, arg_text: str) -> str:
    dispatch(state, Intent(IntentKind.COMMIT_EDIT))
    return render_board(state)


def cmd_cancel(state: AppState, arg_text: str) -> str:
    dispatch(state, Intent(IntentKind.DISCARD_EDIT))
    return render_board(state)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show the task list.", aliases=["ls"])
registry.register("stats", cmd_stats, help_text="Show total/completed/pending counts.")
registry.register("add", cmd_add, help_text="Add a task: /add <text>.")
registry.register(
    "toggle", cmd_toggle, help_text="Mark a task done/undone: /toggle <id>.", aliases=["done"]
)
registry.register(
    "delete", cmd_delete, help_text="Delete a task: /delete <id>.", aliases=["del", "rm"]
)
registry.register("edit", cmd_edit, help_text="Edit a task's text: /edit <id>.")
registry.register("draft", cmd_draft, help_text="Replace the draft of the edit in progress.")
registry.register("save", cmd_save, help_text="Save the edit in progress.")
registry.register("cancel", cmd_cancel, help_text="Discard the edit in progress.")
