"""Pytest configuration and shared fixtures for api-wrapper tests."""

import time

import httpx
import pytest

from api_wrapper.auth.tokens import AccessToken
from api_wrapper.testing import FakeProvider


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear client configuration variables before each test.

    This prevents test pollution when testing configuration resolution.
    """
    import os

    for key in list(os.environ.keys()):
        if key.startswith(("API_WRAPPER_", "TEST_")):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def provider():
    """FakeProvider answering every API call with an empty 200 envelope."""
    fake = FakeProvider()
    yield fake
    fake.close()


@pytest.fixture
def valid_token():
    return AccessToken(access_token="valid-token", expires_at=time.time() + 3600)


@pytest.fixture
def expired_token():
    return AccessToken(access_token="expired-token", expires_at=time.time() - 10)


@pytest.fixture
def api_request():
    return httpx.Request("GET", "https://api.example.com/v1/items")
