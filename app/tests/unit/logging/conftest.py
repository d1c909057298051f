"""Fixtures for phrasebook.logging tests."""

import logging
from unittest.mock import Mock

import pytest

from phrasebook.configuration import Settings


@pytest.fixture
def mock_settings():
    """Mock Settings instance for testing."""
    settings = Mock(spec=Settings)
    settings.LOG_LEVEL = None
    settings.is_production = False
    return settings


@pytest.fixture
def restore_root_level():
    """Restore the root logger level after a test changes it."""
    level = logging.root.level
    yield
    logging.root.setLevel(level)
