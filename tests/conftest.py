"""
Pytest configuration and shared fixtures.
"""
import pytest

from query_builder import config
from query_builder.config import Settings

ENV_VARS = (
    "QUERY_BUILDER_STRICT_IDENTIFIERS",
    "QUERY_BUILDER_MAX_LIMIT",
    "QUERY_BUILDER_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    """Pin default settings so a developer's environment or .env cannot leak in."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config, "_settings", Settings())
    return config._settings


@pytest.fixture
def lenient_settings():
    """Settings with identifier checks switched off."""
    return Settings(strict_identifiers=False)


@pytest.fixture
def capped_settings():
    """Settings that clamp LIMIT to 100."""
    return Settings(max_limit=100)


# Markers
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "config: marks tests that read environment configuration")
