# tests/test_console_connector.py

from __future__ import annotations

import builtins
from collections.abc import Iterable

import pytest

from taskmaster.cli import commands
from taskmaster.connectors.console_connector import handle_line, run_console_loop
from taskmaster.core.state import AppState


def _feed(monkeypatch: pytest.MonkeyPatch, lines: Iterable[str]) -> list[str]:
    """Patch input() to return `lines`, then raise EOFError. Returns recorded prompts."""
    it = iter(lines)
    prompts: list[str] = []

    def fake_input(prompt: str = "") -> str:
        prompts.append(prompt)
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr(builtins, "input", fake_input)
    return prompts


def test_plain_line_adds_task(state: AppState) -> None:
    out = handle_line(state, "Buy milk")
    (task,) = state.store.tasks()
    assert task.text == "Buy milk"
    assert "Total: 1 | Completed: 0 | Pending: 1" in out
    assert state.input_text == ""


def test_plain_line_while_editing_saves_edit(state: AppState) -> None:
    handle_line(state, "Buy milk")
    (task,) = state.store.tasks()
    handle_line(state, f"/edit {task.id}")

    handle_line(state, "Buy oat milk")
    assert state.store.get_task(task.id).text == "Buy oat milk"
    assert state.store.edit_cursor is None
    assert state.store.stats().total == 1


def test_loop_runs_scenario_until_eof(
    state: AppState, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    prompts = _feed(monkeypatch, ["Buy milk", "Walk dog", "", "/toggle 1", "/delete 2"])
    run_console_loop(state)

    s = state.store.stats()
    assert (s.total, s.completed, s.pending) == (1, 1, 0)
    assert len(prompts) == 6
    assert "Total: 1 | Completed: 1 | Pending: 0" in capsys.readouterr().out


def test_loop_prompt_shows_edit_target(state: AppState, monkeypatch: pytest.MonkeyPatch) -> None:
    prompts = _feed(monkeypatch, ["a", "/edit 1", "/cancel"])
    run_console_loop(state)
    assert prompts == ["> ", "> ", "edit #1> ", "> "]


def test_loop_exit_command_stops_reading(state: AppState, monkeypatch: pytest.MonkeyPatch) -> None:
    _feed(monkeypatch, ["a", "/exit", "b"])
    run_console_loop(state)
    assert [t.text for t in state.store.tasks()] == ["a"]


def test_loop_survives_crashing_command(
    state: AppState, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    def boom(state, arg_text):
        raise RuntimeError("boom")

    monkeypatch.setitem(commands.registry._handlers, "boom", boom)
    _feed(monkeypatch, ["/boom", "still here"])
    run_console_loop(state)

    assert "Internal error while handling a command." in capsys.readouterr().out
    assert [t.text for t in state.store.tasks()] == ["still here"]


def test_loop_keyboard_interrupt_exits(state: AppState, monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_input(prompt: str = "") -> str:
        raise KeyboardInterrupt

    monkeypatch.setattr(builtins, "input", fake_input)
    run_console_loop(state)
    assert state.store.stats().total == 0


def test_timestamps_prefix_output(
    state: AppState, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    state.settings.show_timestamps = True
    _feed(monkeypatch, [])
    run_console_loop(state)
    first = capsys.readouterr().out.splitlines()[0]
    assert first.startswith("[") and first.endswith("✓ Task Master")
