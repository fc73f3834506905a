"""Abstract base class that all provider adapters must implement."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

import httpx

from shared.llm_adapter.errors import ResponseShapeError
from shared.llm_adapter.models import Provider
from shared.logging.logger import install_query_key_filter

JSON_HEADERS = {"Content-Type": "application/json"}

# httpx logs every request URL at INFO; the Gemini key rides in that URL.
install_query_key_filter("httpx")


@dataclass(frozen=True)
class ProviderCall:
    """
    One outbound HTTP request, fully described.

    Headers and query params may carry the credential, so they are kept
    out of the repr.
    """

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict, repr=False)
    params: dict[str, str] = field(default_factory=dict, repr=False)
    body: dict[str, Any] | None = None


class ProviderAdapter(ABC):
    """
    Contract for provider adapters.

    An adapter only maps logical requests onto a provider's HTTP API and
    maps responses back. It holds no state and never performs I/O itself;
    `send_call` does the round trip.
    """

    provider: Provider
    label: str

    @abstractmethod
    def validation_call(self, api_key: str) -> ProviderCall:
        """Cheapest authenticated request that proves the key is accepted."""

    @abstractmethod
    def generation_call(self, model: str, api_key: str, prompt: str) -> ProviderCall:
        """Single-turn generation request carrying the raw prompt."""

    @abstractmethod
    def extract_text(self, body: Any) -> str:
        """Pull the generated text out of a successful response body."""

    def _dig(self, body: Any, *path: str | int) -> str:
        """Walk `path` through nested dicts/lists and return the string at its end."""
        node = body
        for key in path:
            if not isinstance(node, (dict, list)):
                node = None
                break
            try:
                node = node[key]
            except (KeyError, IndexError, TypeError):
                node = None
                break
        if not isinstance(node, str):
            raise ResponseShapeError(
                f"{self.label} response is missing {_render_path(path)}"
            )
        return node


async def send_call(
    call: ProviderCall,
    client: httpx.AsyncClient | None = None,
) -> httpx.Response:
    """
    Perform `call` and return the fully read response.

    Without a caller-supplied client a private one is opened for this call
    only, with no timeout.
    """
    if client is None:
        async with httpx.AsyncClient(timeout=None) as own_client:
            return await _request(own_client, call)
    return await _request(client, call)


async def _request(client: httpx.AsyncClient, call: ProviderCall) -> httpx.Response:
    return await client.request(
        call.method,
        call.url,
        headers=call.headers,
        params=call.params or None,
        json=call.body,
    )


def _render_path(path: tuple[str | int, ...]) -> str:
    rendered = ""
    for key in path:
        if isinstance(key, int):
            rendered += f"[{key}]"
        else:
            rendered += f".{key}" if rendered else key
    return rendered
