import pytest

from verity.config import reset_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Avoid cross-test leakage of cached settings."""
    reset_settings()
    yield
    reset_settings()
