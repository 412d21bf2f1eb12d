# src/taskmaster/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the presentation side.

Connectors and commands depend on these Protocols instead of TaskListStore itself,
so a view can be driven by any object with the same surface (e.g. a recording fake in tests).
"""

from typing import Protocol

from ..tasks.task_models import EditCursor, Task, TaskStats


class IdSource(Protocol):
    """Zero-arg callable returning a fresh, never-repeated task id."""
    def __call__(self) -> int: ...


class TaskRepo(Protocol):
    # Read API
    def tasks(self) -> tuple[Task, ...]: ...
    def get_task(self, task_id: int) -> Task | None: ...
    @property
    def edit_cursor(self) -> EditCursor | None: ...
    def is_editing(self, task_id: int | None = None) -> bool: ...
    def stats(self) -> TaskStats: ...

    # Mutations (invalid input is a no-op)
    def add_task(self, raw_text: str) -> Task | None: ...
    def delete_task(self, task_id: int) -> None: ...
    def toggle_complete(self, task_id: int) -> None: ...
    def start_editing(self, task_id: int) -> None: ...
    def update_draft_text(self, text: str) -> None: ...
    def save_edit(self) -> None: ...
    def cancel_edit(self) -> None: ...
