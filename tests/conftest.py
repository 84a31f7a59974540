"""Pytest configuration and fixtures."""
from __future__ import annotations

from typing import Generator

import pytest

from result_kit.shared.config import Settings
from result_kit.shared.logging import configure_logging, reset_logging


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with debug logging."""
    return Settings(
        log_level="DEBUG",
        log_format="console",
    )


@pytest.fixture
def configured_logging(test_settings: Settings) -> Generator[None, None, None]:
    """Configure logging from test settings and tear it down afterwards."""
    reset_logging()
    configure_logging(
        level=test_settings.log_level,
        log_format=test_settings.log_format,
    )
    yield
    reset_logging()
