# tests/test_logging_setup.py

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from taskmaster.logging_setup import _ConsoleNoiseFilter, level_from_name, setup_logging


@pytest.fixture()
def restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_filter_keeps_own_logs_and_quiets_others() -> None:
    f = _ConsoleNoiseFilter()
    assert f.filter(_record("taskmaster.tasks.task_store", logging.DEBUG))
    assert not f.filter(_record("urllib3", logging.WARNING))
    assert f.filter(_record("urllib3", logging.ERROR))
    assert not f.filter(_record("py.warnings", logging.WARNING))


def test_level_from_name() -> None:
    assert level_from_name("debug") == logging.DEBUG
    assert level_from_name("WARNING") == logging.WARNING
    assert level_from_name("nonsense") == logging.INFO
    assert level_from_name(None, logging.ERROR) == logging.ERROR


def test_setup_without_dir_has_console_only(restore_root_logger) -> None:
    assert setup_logging() is None
    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert not isinstance(handlers[0], logging.FileHandler)


def test_setup_with_dir_writes_file(restore_root_logger, tmp_path: Path) -> None:
    log_file = setup_logging(log_dir=tmp_path / "logs", console_level=logging.ERROR)
    assert log_file == tmp_path / "logs" / "taskmaster.log"

    logging.getLogger("taskmaster.test").debug("hello file")
    for h in logging.getLogger().handlers:
        h.flush()
    assert "hello file" in log_file.read_text("utf-8")


def test_setup_replaces_previous_handlers(restore_root_logger) -> None:
    setup_logging()
    setup_logging()
    assert len(logging.getLogger().handlers) == 1
