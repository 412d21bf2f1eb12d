# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskmaster.core.state import AppState
from taskmaster.tasks.task_store import TaskListStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the cli modules.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="Task Master",
        subtitle="Stay organized, get things done",
        log_level="INFO",
        log_dir=tmp_path / "logs",
        file_logging=False,
        show_timestamps=False,
    )


@pytest.fixture()
def store() -> TaskListStore:
    return TaskListStore()


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskListStore) -> AppState:
    return AppState(settings=settings, store=store)
