from __future__ import annotations

import logging
from pathlib import Path

import pytest

from todo_api.app.core.logging_config import setup_logging


def _bare_root_logger(monkeypatch: pytest.MonkeyPatch) -> logging.Logger:
    # pytest attaches its capture handlers to the root logger for the test
    # call itself, so they have to be hidden from inside the test body.
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    return root


def test_setup_logging_writes_to_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    root = _bare_root_logger(monkeypatch)
    logfile = tmp_path / "todo.log"

    setup_logging("debug", str(logfile))
    logging.getLogger("todo_api.test").debug("created todo %s", 3)
    for handler in root.handlers:
        handler.flush()

    assert root.level == logging.DEBUG
    assert len(root.handlers) == 2
    assert "[DEBUG] todo_api.test: created todo 3" in logfile.read_text(encoding="utf-8")
    for handler in root.handlers:
        handler.close()


def test_setup_logging_configures_root_once(monkeypatch: pytest.MonkeyPatch) -> None:
    root = _bare_root_logger(monkeypatch)

    setup_logging("info")
    setup_logging("debug")

    assert len(root.handlers) == 1
    assert root.level == logging.INFO


def test_unknown_level_falls_back_to_info(monkeypatch: pytest.MonkeyPatch) -> None:
    root = _bare_root_logger(monkeypatch)

    setup_logging("chatty")

    assert root.level == logging.INFO


def test_server_loggers_propagate_even_when_root_is_configured(monkeypatch: pytest.MonkeyPatch) -> None:
    access = logging.getLogger("uvicorn.access")
    monkeypatch.setattr(access, "handlers", [logging.NullHandler()])
    monkeypatch.setattr(access, "propagate", False)
    monkeypatch.setattr(logging.getLogger(), "handlers", [logging.NullHandler()])

    setup_logging()

    assert access.handlers == []
    assert access.propagate is True
