"""Tests for structured JSON logging configuration."""

import json
import logging
from unittest.mock import MagicMock, patch

import pytest
from pythonjsonlogger.json import JsonFormatter

from onenote_api.logging_config import LOGGING_CONFIG, configure_logging


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_configure_logging_explicit_level():
    config = configure_logging("debug")
    root = logging.getLogger()
    assert config["root"]["level"] == "DEBUG"
    assert root.level == logging.DEBUG
    assert any(isinstance(h.formatter, JsonFormatter) for h in root.handlers)


@patch("onenote_api.logging_config.get_settings")
def test_configure_logging_level_from_settings(mock_get_settings):
    settings = MagicMock()
    settings.log_level = "warning"
    mock_get_settings.return_value = settings

    configure_logging()
    assert logging.getLogger().level == logging.WARNING


def test_base_config_not_mutated():
    configure_logging("ERROR")
    assert LOGGING_CONFIG["root"]["level"] == "INFO"


def test_json_output_fields():
    configure_logging("INFO")
    handler = next(h for h in logging.getLogger().handlers if isinstance(h.formatter, JsonFormatter))
    record = logging.LogRecord("onenote_api.test", logging.WARNING, __file__, 1, "hello %s", ("x",), None)

    payload = json.loads(handler.formatter.format(record))
    assert payload["message"] == "hello x"
    assert payload["severity"] == "WARNING"
    assert payload["logger"] == "onenote_api.test"
    assert payload["service"] == "onenote-api-client"
