"""Structured logging tests: JSONFormatter output and handler installation."""

import json
import logging
import sys

import pytest

from model_collection.config import Settings
from model_collection.infrastructure.observability import (
    JSONFormatter, configure_logging, setup_logging,
)


@pytest.fixture
def restore_root_logger():
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    logging.root.handlers[:] = handlers
    logging.root.setLevel(level)


def _record(msg="hello", exc_info=None, **extra):
    record = logging.LogRecord(
        name="model_collection.core.model_collection", level=logging.DEBUG,
        pathname=__file__, lineno=1, msg=msg, args=(), exc_info=exc_info,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


# --- JSONFormatter --------------------------------------------------------------

def test_formatter_emits_base_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "DEBUG"
    assert payload["logger"] == "model_collection.core.model_collection"
    assert payload["message"] == "hello"
    assert "timestamp" in payload


def test_formatter_surfaces_known_extras_only():
    record = _record(item_type="Task", operation="append", unrelated="skip")
    payload = json.loads(JSONFormatter().format(record))
    assert payload["item_type"] == "Task"
    assert payload["operation"] == "append"
    assert "unrelated" not in payload
    assert "item_count" not in payload


def test_formatter_includes_exception_text():
    try:
        raise ValueError("boom")
    except ValueError:
        record = _record(exc_info=sys.exc_info())
    payload = json.loads(JSONFormatter().format(record))
    assert "ValueError: boom" in payload["exception"]


# --- setup_logging --------------------------------------------------------------

def test_setup_logging_json(restore_root_logger):
    handler = setup_logging("debug", "json")
    assert isinstance(handler.formatter, JSONFormatter)
    assert logging.root.level == logging.DEBUG
    assert handler in logging.root.handlers


def test_setup_logging_text(restore_root_logger):
    handler = setup_logging("WARNING", "text")
    assert not isinstance(handler.formatter, JSONFormatter)
    assert logging.root.level == logging.WARNING


def test_setup_logging_replaces_previous_handler(restore_root_logger):
    first = setup_logging()
    second = setup_logging()
    assert first not in logging.root.handlers
    assert second in logging.root.handlers


def test_setup_logging_unknown_level_falls_back_to_info(restore_root_logger):
    setup_logging("chatty")
    assert logging.root.level == logging.INFO


def test_configure_logging_from_settings(restore_root_logger):
    handler = configure_logging(Settings(_env_file=None, log_level="error", log_format="text"))
    assert logging.root.level == logging.ERROR
    assert not isinstance(handler.formatter, JSONFormatter)


def test_configure_logging_defaults_to_environment(restore_root_logger, monkeypatch):
    monkeypatch.setenv("MODEL_COLLECTION_LOG_LEVEL", "warning")
    handler = configure_logging()
    assert logging.root.level == logging.WARNING
    assert isinstance(handler.formatter, JSONFormatter)
