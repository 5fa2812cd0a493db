"""Unit tests for logging configuration."""
import logging
import sys

import pytest
import structlog

from catalog.config.settings import Settings
from catalog.utils.logger import configure_logging


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_production_renders_json(self):
        configure_logging(Settings(_env_file=None, environment="production"))

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_development_renders_console(self):
        configure_logging(Settings(_env_file=None, environment="development"))

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_logs_go_to_stderr(self):
        configure_logging(Settings(_env_file=None, log_level="DEBUG"))

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert any(getattr(h, "stream", None) is sys.stderr for h in root.handlers)

    def test_sqlalchemy_engine_kept_quiet(self):
        configure_logging(Settings(_env_file=None, log_level="DEBUG"))

        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
