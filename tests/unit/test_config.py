"""Tests for settings and logging configuration."""
from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from result_kit.shared.config import Settings
from result_kit.shared.logging import configure_logging, get_logger, reset_logging


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test default values."""
        for name in ("LOG_LEVEL", "LOG_FORMAT", "LOG_FILE"):
            monkeypatch.delenv(f"RESULT_KIT_{name}", raising=False)

        s = Settings(_env_file=None)
        assert s.app_name == "result_kit"
        assert s.log_level == "INFO"
        assert s.log_format == "console"
        assert s.log_file is None

    def test_environment_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test RESULT_KIT_ prefixed variables are read."""
        monkeypatch.setenv("RESULT_KIT_LOG_LEVEL", "warning")
        monkeypatch.setenv("RESULT_KIT_LOG_FORMAT", "json")

        s = Settings(_env_file=None)
        assert s.log_level == "WARNING"
        assert s.log_format == "json"

    def test_invalid_log_format(self) -> None:
        """Test unknown formats are rejected."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_format="xml")


class TestLogging:
    """Tests for logging setup."""

    def test_configure_sets_level(self, configured_logging: None) -> None:
        """Test the root logger level follows the configuration."""
        assert logging.getLogger().level == logging.DEBUG

    def test_configure_is_idempotent(self, configured_logging: None) -> None:
        """Test a second configure call adds no handlers."""
        before = len(logging.getLogger().handlers)
        configure_logging(level="ERROR")
        assert len(logging.getLogger().handlers) == before
        assert logging.getLogger().level == logging.DEBUG

    def test_log_file(self, tmp_path) -> None:  # type: ignore[no-untyped-def]
        """Test records are written to the configured file."""
        log_file = tmp_path / "result_kit.log"
        reset_logging()
        try:
            configure_logging(level="INFO", log_format="json", log_file=str(log_file))
            get_logger("result_kit.test").info("hello", answer=42)
            for handler in logging.getLogger().handlers:
                handler.flush()
        finally:
            reset_logging()

        content = log_file.read_text()
        assert '"event": "hello"' in content
        assert '"answer": 42' in content

    def test_get_logger_does_not_configure(self) -> None:
        """Test library loggers leave the root logger alone."""
        reset_logging()
        root_logger = logging.getLogger()
        handlers_before = list(root_logger.handlers)
        level_before = root_logger.level

        get_logger("result_kit.test")

        assert root_logger.handlers == handlers_before
        assert root_logger.level == level_before
