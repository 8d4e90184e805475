"""Pytest configuration and fixtures."""

import json
import os
from typing import Any, Optional

import httpx
import pytest
from httpx import AsyncClient, ASGITransport

from config import Settings
from main import app
from providers import get_http_client


class StubProvider:
    """Stands in for every provider endpoint and records outbound requests."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: Any = {}
        self.error: Optional[Exception] = None

    def respond(self, status_code: int = 200, body: Any = None) -> None:
        self.status_code = status_code
        self.body = {} if body is None else body

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if isinstance(self.body, (bytes, str)):
            return httpx.Response(self.status_code, content=self.body)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_json(self) -> dict:
        return json.loads(self.last_request.content)


@pytest.fixture(autouse=True)
def app_settings(monkeypatch):
    """Default settings that ignore the ambient environment and any .env file."""
    for name in list(os.environ):
        if name.startswith("ORYO_"):
            monkeypatch.delenv(name)
    settings = Settings(_env_file=None)
    monkeypatch.setattr("providers.base.get_settings", lambda: settings)
    monkeypatch.setattr("chat.service.get_settings", lambda: settings)
    return settings


@pytest.fixture
def stub_provider():
    """Recording stub for outbound provider calls."""
    return StubProvider()


@pytest.fixture
async def stub_client(stub_provider):
    """Outbound HTTP client wired to the stub provider."""
    transport = httpx.MockTransport(stub_provider.handler)
    async with AsyncClient(transport=transport) as client:
        yield client


@pytest.fixture
async def async_client(stub_client):
    """Async HTTP client for testing API endpoints; provider calls hit the stub."""
    app.dependency_overrides[get_http_client] = lambda: stub_client
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.pop(get_http_client, None)


@pytest.fixture
def sample_history():
    """Three prior turns, oldest first."""
    return [
        {"role": "user", "content": "What is Python?"},
        {"role": "assistant", "content": "A programming language."},
        {"role": "user", "content": "Who made it?"},
    ]


@pytest.fixture
def provider_replies():
    """Successful response bodies keyed by provider, each replying "Hello!"."""
    return {
        "openai": {"choices": [{"message": {"role": "assistant", "content": "Hello!"}}]},
        "groq": {"choices": [{"message": {"role": "assistant", "content": "Hello!"}}]},
        "anthropic": {"content": [{"type": "text", "text": "Hello!"}]},
        "gemini": {"candidates": [{"content": {"parts": [{"text": "Hello!"}], "role": "model"}}]},
    }
