"""Shared pytest fixtures for fdy-fetch-client tests."""

import pytest

from fdy_fetch_client import ClientConfig, FetchClient, ProxySpec
from tests.helpers.engine_mocks import create_mock_engine, make_engine_response


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: end-to-end tests through the httpx engine")
    config.addinivalue_line("markers", "unit: isolated tests against mocked engines")


@pytest.fixture(autouse=True)
def clean_fdy_env(monkeypatch):
    """Keep FDY_* variables from the developer shell out of the tests."""
    for name in (
        "FDY_BASE_URL",
        "FDY_DEBUG",
        "FDY_DEFAULT_HEADERS",
        "FDY_PROXY_HOST",
        "FDY_PROXY_PORT",
        "FDY_PROXY_SCHEME",
        "FDY_PROXY_USERNAME",
        "FDY_PROXY_PASSWORD",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sample_proxy():
    """Credential-less proxy settings."""
    return ProxySpec(host="127.0.0.1", port=8080, scheme="http")


@pytest.fixture
def sample_config():
    """Client configuration with base URL and default headers."""
    return ClientConfig(
        base_url="https://api.example.com",
        default_headers={"Accept": "application/json", "X-Client": "fdy"},
    )


@pytest.fixture
def mock_engine():
    """Engine answering 200 with an empty body."""
    return create_mock_engine(make_engine_response())


@pytest.fixture
def client(sample_config, mock_engine):
    """Client wired to the mock engine."""
    return FetchClient(sample_config, engine=mock_engine)
