"""Global pytest configuration."""

import pytest

from tripengine.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Re-read settings for every test so env overrides do not leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
