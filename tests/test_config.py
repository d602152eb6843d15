"""
Tests for configuration and logging setup.
"""

import io
import json
import logging

import pytest
from pydantic import ValidationError

from instrument_catalog.config import Settings, get_settings
from instrument_catalog.logging import CatalogFormatter, get_logger, setup_logging


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self) -> None:
        """Settings should default to quiet, human-readable logging."""
        settings = Settings()
        assert settings.log_level == "WARNING"
        assert settings.log_json is False

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Prefixed environment variables should override defaults."""
        monkeypatch.setenv("INSTRUMENT_CATALOG_LOG_LEVEL", "debug")
        monkeypatch.setenv("INSTRUMENT_CATALOG_LOG_JSON", "true")

        settings = Settings()
        assert settings.log_level == "DEBUG"
        assert settings.log_json is True

    def test_invalid_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Unknown log levels should be rejected."""
        monkeypatch.setenv("INSTRUMENT_CATALOG_LOG_LEVEL", "LOUD")
        with pytest.raises(ValidationError):
            Settings()

    def test_get_settings_cached(self) -> None:
        """get_settings() should return the same instance until cleared."""
        assert get_settings() is get_settings()

    def test_redacted_config(self) -> None:
        """Redacted config should be a plain dict."""
        assert Settings().get_redacted_config() == {
            "log_level": "WARNING",
            "log_json": False,
        }


class TestLogging:
    """Tests for logging setup."""

    def test_human_readable_format(self) -> None:
        """Human-readable lines should carry level, module and message."""
        stream = io.StringIO()
        setup_logging(level="INFO", stream=stream)

        get_logger("instrument_catalog.test").info("hello catalog")

        line = stream.getvalue().strip()
        assert "| INFO     | instrument_catalog.test | hello catalog" in line

    def test_json_format(self) -> None:
        """JSON lines should parse and carry the message."""
        stream = io.StringIO()
        setup_logging(level="INFO", json_output=True, stream=stream)

        get_logger("instrument_catalog.test").warning("json line")

        record = json.loads(stream.getvalue().strip())
        assert record["level"] == "WARNING"
        assert record["module"] == "instrument_catalog.test"
        assert record["message"] == "json line"

    def test_json_format_escapes_message(self) -> None:
        """Quotes and newlines in messages should not break the JSON line."""
        stream = io.StringIO()
        setup_logging(level="DEBUG", json_output=True, stream=stream)

        get_logger("instrument_catalog.test").debug('name %s\nnext', '"12-string"')

        lines = stream.getvalue().splitlines()
        assert len(lines) == 1
        assert json.loads(lines[0])["message"] == 'name "12-string"\nnext'

    def test_level_filtering(self) -> None:
        """Messages below the configured level should be dropped."""
        stream = io.StringIO()
        setup_logging(level="WARNING", stream=stream)

        get_logger("instrument_catalog.test").info("hidden")

        assert stream.getvalue() == ""

    def test_setup_replaces_handlers(self) -> None:
        """Repeated setup should leave a single handler with our formatter."""
        setup_logging(stream=io.StringIO())
        root = setup_logging(stream=io.StringIO())

        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, CatalogFormatter)
        assert root.level == logging.WARNING
