"""
Shared fixtures.

Every API test gets a fresh application backed by an in-memory
SQLite database, so tests never share rows or rate-limit counters.
"""

from collections.abc import Callable

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app
from app.shared.i18n.message_source import MessageSource


def _test_settings(**overrides) -> Settings:
    values = {"database_url": "sqlite://", "rate_limit_enabled": False}
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def make_settings() -> Callable[..., Settings]:
    """Factory for test settings that ignore any local .env file."""
    return _test_settings


@pytest.fixture
def messages() -> MessageSource:
    """Message source over the catalogs shipped with the package."""
    return MessageSource()


@pytest.fixture
def client():
    """Test client for a fresh application with an empty database."""
    app = create_app(_test_settings())
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
