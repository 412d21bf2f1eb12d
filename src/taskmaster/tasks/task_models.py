# src/taskmaster/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Task:
    id: int
    text: str
    completed: bool = False


@dataclass(frozen=True, slots=True)
class EditCursor:
    """
    In-progress edit of a single task.

    Target and draft live in one object so they are always set and cleared together.
    """

    target_id: int
    draft_text: str


@dataclass(frozen=True, slots=True)
class TaskStats:
    total: int
    completed: int
    pending: int

    def as_dict(self) -> dict[str, int]:
        return {"total": self.total, "completed": self.completed, "pending": self.pending}
