# src/taskmaster/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import TaskRepo


@dataclass
class AppState:
    # Settings live on the state so commands/connectors never read global config.
    settings: object

    store: TaskRepo

    # Pending text of the "new task" input; survives a rejected (blank) submit.
    input_text: str = ""
