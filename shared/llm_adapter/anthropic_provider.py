"""
Anthropic (Claude) adapter.

Auth goes in the `x-api-key` header together with a pinned
`anthropic-version`. There is no free endpoint that checks a key, so
validation sends a one-token message to the cheapest model.
"""

from __future__ import annotations

from typing import Any

from shared.llm_adapter.base import JSON_HEADERS, ProviderAdapter, ProviderCall
from shared.llm_adapter.models import Provider

ANTHROPIC_BASE_URL = "https://api.anthropic.com/v1"
ANTHROPIC_VERSION = "2023-06-01"

VALIDATION_MODEL = "claude-3-5-haiku-20241022"
VALIDATION_PROMPT = "Hello"
MAX_TOKENS = 1000


class AnthropicAdapter(ProviderAdapter):
    provider = Provider.ANTHROPIC
    label = "Anthropic"

    def __init__(self, base_url: str = ANTHROPIC_BASE_URL) -> None:
        self._base_url = base_url.rstrip("/")

    def _headers(self, api_key: str) -> dict[str, str]:
        return {
            "x-api-key": api_key,
            "anthropic-version": ANTHROPIC_VERSION,
            **JSON_HEADERS,
        }

    def _messages_call(self, api_key: str, model: str, max_tokens: int, content: str) -> ProviderCall:
        return ProviderCall(
            method="POST",
            url=f"{self._base_url}/messages",
            headers=self._headers(api_key),
            body={
                "model": model,
                "max_tokens": max_tokens,
                "messages": [{"role": "user", "content": content}],
            },
        )

    def validation_call(self, api_key: str) -> ProviderCall:
        return self._messages_call(api_key, VALIDATION_MODEL, 1, VALIDATION_PROMPT)

    def generation_call(self, model: str, api_key: str, prompt: str) -> ProviderCall:
        return self._messages_call(api_key, model, MAX_TOKENS, prompt)

    def extract_text(self, body: Any) -> str:
        return self._dig(body, "content", 0, "text")
