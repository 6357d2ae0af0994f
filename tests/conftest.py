"""Pytest configuration and shared fixtures for travis-client tests."""

import httpx
import pytest

from travis_client.endpoints import Endpoint, Tier


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear token-like environment variables before each test.

    Keeps a developer's real tokens out of credential resolution tests.
    """
    import os

    test_prefixes = ("TEST_", "TRAVIS_", "GITHUB_", "GH_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def endpoint():
    return Endpoint(base_url="https://api.travis.test", tier=Tier.PUBLIC)


@pytest.fixture
def make_response():
    """Attach a request to a response so its url and method are available."""

    def factory(status_code: int = 200, **kwargs) -> httpx.Response:
        request = httpx.Request("GET", "https://api.travis.test/repo/1")
        return httpx.Response(status_code=status_code, request=request, **kwargs)

    return factory
