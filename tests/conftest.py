"""
Shared fixtures for adapter and service tests.

No test touches the network: provider traffic goes through an
httpx.MockTransport injected via the `client` argument, and every request
the transport sees is recorded so tests can assert on (or the absence of)
outbound calls.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Callable

import httpx
import pytest

OPENAI_KEY = "sk-test-openai-0000001234"
ANTHROPIC_KEY = "sk-ant-test-000000005678"
GEMINI_KEY = "AIzaTestGeminiKey00009abc"


@dataclass
class RecordingTransport:
    """Answers every request with `handler` and keeps what it was sent."""

    handler: Callable[[httpx.Request], httpx.Response]
    requests: list[httpx.Request] = field(default_factory=list)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


@pytest.fixture()
def respond():
    """Build a RecordingTransport that replies with a fixed status and JSON body."""

    def _factory(status_code: int = 200, body: Any = None) -> RecordingTransport:
        return RecordingTransport(
            handler=lambda request: httpx.Response(status_code, json=body if body is not None else {})
        )

    return _factory


@pytest.fixture()
def failing_transport():
    """Transport whose every request fails before a response exists."""

    def _raise(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    return RecordingTransport(handler=_raise)
