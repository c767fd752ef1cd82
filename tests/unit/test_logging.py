"""Unit tests for structured logging setup."""

import logging

import pytest
import structlog

from payments.core import logging as logging_setup


@pytest.fixture
def restore_logging():
    """Undo setup_logging() so later tests see structlog's defaults."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level

    yield

    structlog.reset_defaults()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_json_renderer(self, monkeypatch, restore_logging):
        monkeypatch.setattr(logging_setup.settings, "log_format", "json")

        logging_setup.setup_logging()

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_console_renderer(self, monkeypatch, restore_logging):
        monkeypatch.setattr(logging_setup.settings, "log_format", "console")

        logging_setup.setup_logging()

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_root_level_from_settings(self, monkeypatch, restore_logging):
        monkeypatch.setattr(logging_setup.settings, "log_level", "WARNING")

        logging_setup.setup_logging()

        assert logging.getLogger().level == logging.WARNING

    def test_app_context_added(self):
        event_dict = logging_setup.add_app_context(None, "info", {"event": "x"})

        assert event_dict["app_name"] == "payment-transactions"
        assert event_dict["app_version"] == "0.1.0"
