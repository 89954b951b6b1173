"""
Pytest configuration and shared fixtures.
"""

import logging

import pytest

from src.localization.core.config import reset_settings
from src.localization.languages import LanguageFactory
from src.localization.services.language_manager import LanguageManager


@pytest.fixture
def factory():
    """Factory for the packaged language tables."""
    return LanguageFactory.builtin()


@pytest.fixture
def manager(factory):
    """Fresh LanguageManager with default settings."""
    return LanguageManager(factory=factory)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Keep cached settings from leaking between tests."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def restore_root_logger():
    """Undo root logger changes made by setup_logging()."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
