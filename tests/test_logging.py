"""Tests for structured logging functionality."""

from __future__ import annotations

import json
import logging
import logging.handlers
import sys

import pytest

from arctrack.config import BaseConfig
from arctrack.logging_config import JSONFormatter, get_logger, setup_logging


@pytest.fixture
def config(tmp_path, monkeypatch):
    monkeypatch.setenv("ARCTRACK_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("ARCTRACK_DEV_MODE", "true")
    cfg = BaseConfig()
    yield cfg
    logging.getLogger("arctrack").handlers.clear()


def make_record(**kwargs) -> logging.LogRecord:
    record = logging.LogRecord(
        name="arctrack.test",
        level=kwargs.pop("level", logging.INFO),
        pathname="test.py",
        lineno=42,
        msg=kwargs.pop("msg", "Test message"),
        args=(),
        exc_info=kwargs.pop("exc_info", None),
    )
    record.module = "test_module"
    record.funcName = "test_function"
    for key, value in kwargs.items():
        setattr(record, key, value)
    return record


def test_json_formatter():
    """JSONFormatter renders the core fields of a record."""
    log_data = json.loads(JSONFormatter().format(make_record()))

    assert log_data["level"] == "INFO"
    assert log_data["logger"] == "arctrack.test"
    assert log_data["message"] == "Test message"
    assert log_data["module"] == "test_module"
    assert log_data["function"] == "test_function"
    assert log_data["line"] == 42
    assert "timestamp" in log_data
    assert "extra" not in log_data


def test_json_formatter_with_extra_fields():
    record = make_record(user_id=7, entry_date="2024-01-03")

    log_data = json.loads(JSONFormatter().format(record))

    assert log_data["extra"] == {"user_id": 7, "entry_date": "2024-01-03"}


def test_json_formatter_with_exception():
    try:
        raise ValueError("Test error")
    except ValueError:
        exc_info = sys.exc_info()

    log_data = json.loads(JSONFormatter().format(make_record(level=logging.ERROR, exc_info=exc_info)))

    assert log_data["exception"]["type"] == "ValueError"
    assert "Test error" in log_data["exception"]["message"]
    assert log_data["exception"]["traceback"]


def test_setup_logging_writes_json_file(config, tmp_path):
    logger = setup_logging(config)

    assert logger.name == "arctrack"
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 2  # Console + File

    get_logger("services.test").warning("Something odd", extra={"user_id": 3})
    for handler in logger.handlers:
        handler.flush()

    log_file = tmp_path / "logs" / "arctrack.log"
    lines = [json.loads(line) for line in log_file.read_text().splitlines() if line.strip()]

    assert lines[0]["message"] == "Logging initialized"
    assert lines[-1]["logger"] == "arctrack.services.test"
    assert lines[-1]["extra"]["user_id"] == 3


def test_setup_logging_without_file(config, tmp_path):
    config.LOG_TO_FILE = False

    logger = setup_logging(config)

    assert len(logger.handlers) == 1
    assert not (tmp_path / "logs").exists()


def test_setup_logging_is_repeatable(config):
    setup_logging(config)
    logger = setup_logging(config)

    assert len(logger.handlers) == 2


def test_get_logger():
    assert get_logger("module1").name == "arctrack.module1"
    assert get_logger("module1") is not get_logger("module2")


@pytest.mark.parametrize("dev_mode", [True, False])
def test_logging_levels_by_mode(config, dev_mode):
    """Console logging level adjusts based on dev mode."""
    config.DEV_MODE = dev_mode

    logger = setup_logging(config)

    console_handler = next(
        handler
        for handler in logger.handlers
        if isinstance(handler, logging.StreamHandler)
        and not isinstance(handler, logging.handlers.RotatingFileHandler)
    )
    assert console_handler.level == (logging.INFO if dev_mode else logging.WARNING)
