"""
Shared pytest fixtures for all tests.

This module provides the client configuration, fake HTTP responses and an
in-memory MultiChat API used across the test suite.
"""

import json
from collections.abc import Callable
from typing import Any
from unittest.mock import MagicMock

import httpx
import pytest

from multichat.client import MultiChatClient, MultiChatConfig, MultiChatHttpClient
from multichat.config.settings import reset_settings

BASE_URL = "https://api.example.com"
API_ROOT = f"{BASE_URL}/api/v1"


# ============================================================================
# ENVIRONMENT ISOLATION
# ============================================================================


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep MULTICHAT_* variables from the developer's shell out of the tests."""
    for key in (
        "MULTICHAT_TOKEN",
        "MULTICHAT_BASE_URL",
        "MULTICHAT_API_VERSION",
        "MULTICHAT_TIMEOUT",
        "MULTICHAT_STATUS_TIMEOUT",
        "MULTICHAT_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)
    reset_settings()
    yield
    reset_settings()


# ============================================================================
# CONFIGURATION FIXTURES
# ============================================================================


@pytest.fixture
def config() -> MultiChatConfig:
    """Client configuration used by most tests."""
    return MultiChatConfig(token="t1", base_url=BASE_URL, page_unique_code="PAGE1")


# ============================================================================
# HTTP FIXTURES
# ============================================================================


def make_response(status_code: int = 200, body: Any = None, text: str | None = None) -> MagicMock:
    """Build a mock httpx.Response; `body` is returned by .json()."""
    response = MagicMock()
    response.status_code = status_code
    if body is not None:
        response.json.return_value = body
        response.text = json.dumps(body)
    else:
        response.json.side_effect = json.JSONDecodeError("Expecting value", text or "", 0)
        response.text = text or ""
    return response


class FakeMultiChatApi:
    """
    In-memory MultiChat API for httpx.MockTransport.

    Routes are keyed by (method, path) and answer with a status code and a
    JSON body. Every request is recorded in `requests`.
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], Any] = {}
        self.requests: list[httpx.Request] = []

    def add(self, method: str, path: str, body: Any, status_code: int = 200) -> None:
        self.routes[(method, path)] = (status_code, body)

    def calls(self, method: str, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path == path]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"success": False, "data": None})
        status_code, body = route
        return httpx.Response(status_code, json=body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def fake_api() -> FakeMultiChatApi:
    return FakeMultiChatApi()


@pytest.fixture
def client_factory(fake_api) -> Callable[[MultiChatConfig], MultiChatClient]:
    """Build MultiChatClient instances wired to the fake API."""

    def factory(cfg: MultiChatConfig) -> MultiChatClient:
        http_client = MultiChatHttpClient(cfg.token, timeout=cfg.timeout, transport=fake_api.transport)
        return MultiChatClient(cfg, http_client=http_client)

    return factory


@pytest.fixture
def api_client(config, client_factory) -> MultiChatClient:
    """Client wired to the fake API."""
    client = client_factory(config)
    yield client
    client.close()


@pytest.fixture
def response_factory() -> Callable[..., MagicMock]:
    """Expose make_response to tests."""
    return make_response
