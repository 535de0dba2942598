"""Shared fixtures for CLI tests."""

import logging
from collections.abc import Generator

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Drop handlers bound to CliRunner's streams once a test ends."""
    yield
    logging.getLogger().handlers.clear()
    structlog.reset_defaults()
