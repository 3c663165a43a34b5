"""Pytest fixtures for CLI tests."""

import pytest
from click.testing import CliRunner

from datekit.core.logging import logger


@pytest.fixture(autouse=True)
def log_dir(tmp_path, monkeypatch):
    """Send CLI log files to a temporary directory."""
    monkeypatch.setenv("DATEKIT_LOG_DIR", str(tmp_path))
    yield tmp_path
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def runner(monkeypatch):
    """Create a CliRunner with datekit environment variables cleared."""
    for name in ("DATEKIT_PATTERN", "DATEKIT_DEBUG", "DEBUG"):
        monkeypatch.delenv(name, raising=False)
    return CliRunner()
