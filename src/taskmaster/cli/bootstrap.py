# src/taskmaster/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it takes settings once and wires the
concrete TaskListStore into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import IdSource
from ..core.state import AppState
from ..tasks.task_store import TaskListStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None, id_source: IdSource | None = None) -> AppState:
    """
    Create AppState with an empty task list.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    state = AppState(settings=settings, store=TaskListStore(id_source=id_source))
    logger.info("Task list ready (app=%s)", getattr(settings, "app_name", "?"))
    return state
