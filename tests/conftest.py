"""
Shared fixtures.
"""

import pytest
import structlog

from barkit.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Reload settings per test and undo any logging configuration."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()
