# src/taskmaster/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..cli.view import INPUT_PLACEHOLDER, render_board
from ..core.intents import Intent, IntentKind, dispatch, set_input_text
from ..core.state import AppState

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("/exit", "/quit")


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _make_printer(state: AppState) -> Callable[[str], None]:
    show_ts = bool(getattr(state.settings, "show_timestamps", True))

    def out(text: str) -> None:
        if show_ts:
            print(f"[{_ts_local()}] {text}", flush=True)
        else:
            print(text, flush=True)

    return out


def _prompt(state: AppState) -> str:
    cursor = state.store.edit_cursor
    if cursor is not None:
        return f"edit #{cursor.target_id}> "
    return "> "


def handle_line(state: AppState, line: str, emit: Callable[[str], None] | None = None) -> str:
    """
    Turn one typed line into intents and return what should be shown next.

    - "/..." lines go to the command registry
    - while editing, a plain line replaces the draft and saves it (Enter in the edit box)
    - otherwise a plain line is submitted as a new task (Enter in the add box)
    """
    cmd_response = command_registry.handle(state, line, emit=emit)
    if cmd_response is not None:
        return cmd_response

    if state.store.is_editing():
        dispatch(state, Intent(IntentKind.UPDATE_DRAFT, text=line))
        dispatch(state, Intent(IntentKind.COMMIT_EDIT))
    else:
        set_input_text(state, line)
        dispatch(state, Intent(IntentKind.SUBMIT_TASK))
    return render_board(state)


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started.")
    out = _make_printer(state)
    out(render_board(state))
    out(f"{INPUT_PLACEHOLDER} Type a task and press Enter. Use /help for commands, /exit to quit.")

    while True:
        try:
            line = input(_prompt(state))
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not line.strip():
            continue

        if line.strip().lower() in EXIT_COMMANDS:
            logger.info("Console exit command received.")
            break

        try:
            reply = handle_line(state, line, emit=out)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        out(reply)

    sys.stdout.flush()
    logger.info("Console connector finished.")
