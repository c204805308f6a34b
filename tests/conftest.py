"""Shared fixtures for skillmatch tests."""

import logging
from pathlib import Path

import pytest
import yaml

from skillmatch.logging.context import clear_log_context

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir():
    """Directory holding YAML fixture documents."""
    return FIXTURES_DIR


@pytest.fixture
def sample_marketplace():
    """Parsed sample marketplace document (candidate, postings, candidates)."""
    with open(FIXTURES_DIR / "sample_marketplace.yaml", "r") as f:
        return yaml.safe_load(f)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove skillmatch environment overrides for the duration of a test."""
    for name in ("LOG_LEVEL", "LOG_FORMAT", "ENVIRONMENT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def clean_log_context():
    """Clear logging context before and after each test."""
    clear_log_context()
    yield
    clear_log_context()


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way pytest configured it."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level

    yield root_logger

    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
