"""
Pytest configuration and shared fixtures.
"""

import pytest
from unittest.mock import MagicMock

from cf_client.container import DependencyContainer
from cf_client.ports.oauth.token_provider_port import TokenProviderPort

CF_ENV = {
    "CF_CAPI_URL": "https://api.example.com",
    "CF_UAA_URL": "https://uaa.example.com",
    "CF_CLIENT_ID": "automator",
    "CF_CLIENT_SECRET": "secret",
}


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def mock_token_provider():
    """
    Create a token provider double returning a fixed token.

    Returns:
        Mock TokenProviderPort instance
    """
    provider = MagicMock(spec=TokenProviderPort)
    provider.token.return_value = "bearer token"
    return provider


@pytest.fixture
def cf_env(monkeypatch):
    """Set the environment variables required by Settings."""
    for key, value in CF_ENV.items():
        monkeypatch.setenv(key, value)
    monkeypatch.delenv("CF_HTTP_TIMEOUT", raising=False)
    monkeypatch.delenv("CF_SKIP_SSL_VALIDATION", raising=False)
    return CF_ENV


@pytest.fixture
def dependency_container(mock_logger):
    """
    Create a dependency container with mocked logger for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer()
    # Replace the logger with our mock
    container._logger = mock_logger
    yield container
    container.close()
