from __future__ import annotations

import logging
from pathlib import Path

import pytest

from m3uscan.log import configure_logging, resolve_level


@pytest.fixture
def scratch_logger():
    name = "m3uscan.tests.scratch"
    logger = logging.getLogger(name)
    yield name
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


def test_resolve_level_defaults_to_warning(monkeypatch) -> None:
    monkeypatch.delenv("LOGLEVEL", raising=False)

    assert resolve_level() == logging.WARNING
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level("nonsense") == logging.WARNING


def test_resolve_level_environment_wins(monkeypatch) -> None:
    monkeypatch.setenv("LOGLEVEL", "error")

    assert resolve_level("debug") == logging.ERROR


def test_configure_logging_stream_only(monkeypatch, scratch_logger) -> None:
    monkeypatch.delenv("LOGLEVEL", raising=False)

    assert configure_logging("info", logger_name=scratch_logger) is None

    logger = logging.getLogger(scratch_logger)
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1


def test_configure_logging_writes_file(tmp_path: Path, monkeypatch, scratch_logger) -> None:
    monkeypatch.delenv("LOGLEVEL", raising=False)

    log_path = configure_logging("debug", log_folder=tmp_path / "logs", logger_name=scratch_logger)
    logging.getLogger(scratch_logger).debug("hello %s", "file")
    for handler in logging.getLogger(scratch_logger).handlers:
        handler.flush()

    assert log_path is not None
    assert log_path.parent == tmp_path / "logs"
    content = log_path.read_text(encoding="utf-8")
    assert "[DEBUG] m3uscan.tests.scratch: hello file" in content


def test_configure_logging_twice_keeps_single_handler_set(tmp_path: Path, monkeypatch, scratch_logger) -> None:
    monkeypatch.delenv("LOGLEVEL", raising=False)
    logger = logging.getLogger(scratch_logger)
    own_handler = logging.NullHandler()
    logger.addHandler(own_handler)

    configure_logging("info", logger_name=scratch_logger)
    configure_logging("info", logger_name=scratch_logger)

    assert len(logger.handlers) == 2
    assert own_handler in logger.handlers

    log_path = configure_logging("debug", log_folder=tmp_path, logger_name=scratch_logger)

    assert log_path is not None
    assert len(logger.handlers) == 3
    assert logger.level == logging.DEBUG
    assert sum(isinstance(handler, logging.FileHandler) for handler in logger.handlers) == 1
