"""Shared fixtures: a TestClient whose config and upstream HTTP calls are faked."""

from typing import Callable, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from api.main import app
from landing_core.config import ServerConfig, get_config
from landing_core.http_client import build_async_client, get_client_factory

TEST_CONFIG = ServerConfig(
    gemini_api_key="test-gemini-key",
    sheets_url="https://script.google.com/macros/s/test-deployment/exec",
)


class UpstreamRecorder:
    """MockTransport handler that records every outbound request."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []
        self.clients_opened = 0
        self._handler = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)


def gemini_reply(text: str) -> dict:
    """A minimal successful generateContent response body."""
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


@pytest.fixture
def make_client():
    """
    Build a TestClient against the app with overridden dependencies.

    Call with the config to inject and a handler standing in for the
    upstream service; returns the client and the request recorder.
    """

    def _make(
        config: ServerConfig = TEST_CONFIG,
        upstream: Optional[Callable[[httpx.Request], httpx.Response]] = None,
    ):
        recorder = UpstreamRecorder(upstream or (lambda request: httpx.Response(200, json={})))

        def client_factory() -> httpx.AsyncClient:
            recorder.clients_opened += 1
            return build_async_client(transport=httpx.MockTransport(recorder))

        app.dependency_overrides[get_config] = lambda: config
        app.dependency_overrides[get_client_factory] = lambda: client_factory
        return TestClient(app), recorder

    yield _make
    app.dependency_overrides.clear()
