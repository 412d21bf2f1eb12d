# src/taskmaster/tasks/task_store.py

from __future__ import annotations

import itertools
import logging
from dataclasses import replace

from ..core.ports import IdSource
from .task_models import EditCursor, Task, TaskStats

logger = logging.getLogger(__name__)


def counter_ids(start: int = 1) -> IdSource:
    """Monotonic id source: 1, 2, 3, ... (never reused within one store)."""
    counter = itertools.count(start)
    return lambda: next(counter)


class TaskListStore:
    """
    In-memory task list with a single store-wide edit cursor.

    Contract:
    - invalid input (blank text, unknown id) is a silent no-op, never an exception
    - tasks keep insertion order
    - stats() is recomputed on every call

    Thread-safety:
    - none; every call is expected to come from one input loop
    """

    def __init__(self, id_source: IdSource | None = None) -> None:
        self._next_id = id_source or counter_ids()
        self._tasks: list[Task] = []
        self._cursor: EditCursor | None = None

    def __len__(self) -> int:
        return len(self._tasks)

    # ---- low-level helpers ----

    def _index_of(self, task_id: int) -> int | None:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return None

    # ---- read API ----

    def tasks(self) -> tuple[Task, ...]:
        """Ordered snapshot; mutating the returned tasks does not touch the store."""
        return tuple(replace(t) for t in self._tasks)

    def get_task(self, task_id: int) -> Task | None:
        idx = self._index_of(task_id)
        if idx is None:
            return None
        return replace(self._tasks[idx])

    @property
    def edit_cursor(self) -> EditCursor | None:
        return self._cursor

    def is_editing(self, task_id: int | None = None) -> bool:
        if self._cursor is None:
            return False
        return task_id is None or self._cursor.target_id == task_id

    def stats(self) -> TaskStats:
        total = len(self._tasks)
        completed = sum(1 for t in self._tasks if t.completed)
        return TaskStats(total=total, completed=completed, pending=total - completed)

    # ---- mutations ----

    def add_task(self, raw_text: str) -> Task | None:
        text = raw_text.strip()
        if not text:
            logger.debug("add_task rejected: blank text")
            return None

        task = Task(id=self._next_id(), text=text)
        self._tasks.append(task)
        logger.debug("Task added id=%s total=%d", task.id, len(self._tasks))
        return replace(task)

    def delete_task(self, task_id: int) -> None:
        idx = self._index_of(task_id)
        if idx is None:
            logger.debug("delete_task ignored: unknown id=%s", task_id)
            return

        del self._tasks[idx]
        # A cursor must never point at a task that no longer exists.
        if self._cursor is not None and self._cursor.target_id == task_id:
            self._cursor = None
            logger.debug("Edit cursor cancelled: target id=%s deleted", task_id)
        logger.debug("Task deleted id=%s total=%d", task_id, len(self._tasks))

    def toggle_complete(self, task_id: int) -> None:
        idx = self._index_of(task_id)
        if idx is None:
            logger.debug("toggle_complete ignored: unknown id=%s", task_id)
            return

        task = self._tasks[idx]
        task.completed = not task.completed
        logger.debug("Task toggled id=%s completed=%s", task_id, task.completed)

    def start_editing(self, task_id: int) -> None:
        idx = self._index_of(task_id)
        if idx is None:
            logger.debug("start_editing ignored: unknown id=%s", task_id)
            return

        if self._cursor is not None and self._cursor.target_id != task_id:
            logger.debug("Edit cursor redirected %s -> %s", self._cursor.target_id, task_id)
        self._cursor = EditCursor(target_id=task_id, draft_text=self._tasks[idx].text)

    def update_draft_text(self, text: str) -> None:
        if self._cursor is None:
            return
        self._cursor = replace(self._cursor, draft_text=text)

    def save_edit(self) -> None:
        cursor = self._cursor
        if cursor is None:
            return

        text = cursor.draft_text.strip()
        if not text:
            logger.debug("save_edit rejected: blank draft for id=%s", cursor.target_id)
            return

        idx = self._index_of(cursor.target_id)
        if idx is not None:
            self._tasks[idx].text = text
            logger.debug("Task edited id=%s", cursor.target_id)
        self._cursor = None

    def cancel_edit(self) -> None:
        if self._cursor is not None:
            logger.debug("Edit cancelled id=%s", self._cursor.target_id)
        self._cursor = None
