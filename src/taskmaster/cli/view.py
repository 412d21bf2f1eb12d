# src/taskmaster/cli/view.py

"""Plain-text rendering of the task list (header, stats, tasks or empty state)."""

from __future__ import annotations

from ..config import DEFAULT_APP_NAME, DEFAULT_SUBTITLE
from ..core.state import AppState
from ..tasks.task_models import Task, TaskStats

EMPTY_TITLE = "No tasks yet"
EMPTY_HINT = "Add your first task to get started!"
INPUT_PLACEHOLDER = "What needs to be done?"

CHECK_ON = "[x]"
CHECK_OFF = "[ ]"


def render_stats(stats: TaskStats) -> str:
    return f"Total: {stats.total} | Completed: {stats.completed} | Pending: {stats.pending}"


def render_task(task: Task, draft_text: str | None = None) -> str:
    if draft_text is not None:
        return f"  ✎ #{task.id} {draft_text}  (editing: Enter to save, /cancel to discard)"
    mark = CHECK_ON if task.completed else CHECK_OFF
    return f"  {mark} #{task.id} {task.text}"


def render_board(state: AppState) -> str:
    settings = state.settings
    title = str(getattr(settings, "app_name", DEFAULT_APP_NAME))
    subtitle = str(getattr(settings, "subtitle", DEFAULT_SUBTITLE))

    store = state.store
    lines = [f"✓ {title}"]
    if subtitle:
        lines.append(subtitle)
    lines.append(render_stats(store.stats()))
    lines.append("")

    tasks = store.tasks()
    if not tasks:
        lines.append(f"  {EMPTY_TITLE}")
        lines.append(f"  {EMPTY_HINT}")
        return "\n".join(lines)

    cursor = store.edit_cursor
    for task in tasks:
        draft = cursor.draft_text if cursor is not None and cursor.target_id == task.id else None
        lines.append(render_task(task, draft))
    return "\n".join(lines)
