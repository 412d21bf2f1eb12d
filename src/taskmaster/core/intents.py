# src/taskmaster/core/intents.py

"""
User intents recognized by the presentation layer.

Each intent maps to exactly one TaskListStore operation. Connectors translate raw
input (a typed line, a slash command) into an Intent and call dispatch(); they never
mutate the store directly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

from .state import AppState

logger = logging.getLogger(__name__)


class IntentKind(StrEnum):
    SUBMIT_TASK = "submit_task"
    DELETE = "delete"
    TOGGLE = "toggle"
    BEGIN_EDIT = "begin_edit"
    UPDATE_DRAFT = "update_draft"
    COMMIT_EDIT = "commit_edit"
    DISCARD_EDIT = "discard_edit"


# Which payload each intent carries.
_NEEDS_ID = frozenset({IntentKind.DELETE, IntentKind.TOGGLE, IntentKind.BEGIN_EDIT})
_NEEDS_TEXT = frozenset({IntentKind.UPDATE_DRAFT})


@dataclass(frozen=True, slots=True)
class Intent:
    kind: IntentKind
    task_id: int | None = None
    text: str | None = None

    def __post_init__(self) -> None:
        if self.kind in _NEEDS_ID and self.task_id is None:
            raise ValueError(f"intent {self.kind} requires task_id")
        if self.kind in _NEEDS_TEXT and self.text is None:
            raise ValueError(f"intent {self.kind} requires text")


def set_input_text(state: AppState, text: str) -> None:
    """Replace the pending new-task input (keystrokes in the add box)."""
    state.input_text = text


def dispatch(state: AppState, intent: Intent) -> None:
    """
    Apply one intent to state.store.

    SUBMIT_TASK reads state.input_text (or intent.text, which replaces the input first).
    On acceptance the input is cleared; on a blank submit it is left exactly as typed.
    """
    store = state.store
    kind = intent.kind
    logger.debug("dispatch %s id=%s", kind, intent.task_id)

    if kind is IntentKind.SUBMIT_TASK:
        if intent.text is not None:
            state.input_text = intent.text
        if store.add_task(state.input_text) is not None:
            state.input_text = ""
        return

    if kind is IntentKind.DELETE:
        store.delete_task(_require_id(intent))
        return

    if kind is IntentKind.TOGGLE:
        store.toggle_complete(_require_id(intent))
        return

    if kind is IntentKind.BEGIN_EDIT:
        store.start_editing(_require_id(intent))
        return

    if kind is IntentKind.UPDATE_DRAFT:
        store.update_draft_text(intent.text or "")
        return

    if kind is IntentKind.COMMIT_EDIT:
        store.save_edit()
        return

    if kind is IntentKind.DISCARD_EDIT:
        store.cancel_edit()
        return

    raise ValueError(f"unhandled intent: {kind!r}")


def _require_id(intent: Intent) -> int:
    assert intent.task_id is not None  # enforced by Intent.__post_init__
    return intent.task_id
