"""
OpenAI adapter.

Bearer-token auth against the public REST API:
  - validation: GET  /v1/models
  - generation: POST /v1/chat/completions  (no output cap is sent)
"""

from __future__ import annotations

from typing import Any

from shared.llm_adapter.base import JSON_HEADERS, ProviderAdapter, ProviderCall
from shared.llm_adapter.models import Provider

OPENAI_BASE_URL = "https://api.openai.com/v1"

TEMPERATURE = 0.7


class OpenAIAdapter(ProviderAdapter):
    provider = Provider.OPENAI
    label = "OpenAI"

    def __init__(self, base_url: str = OPENAI_BASE_URL) -> None:
        self._base_url = base_url.rstrip("/")

    def _headers(self, api_key: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {api_key}", **JSON_HEADERS}

    def validation_call(self, api_key: str) -> ProviderCall:
        return ProviderCall(
            method="GET",
            url=f"{self._base_url}/models",
            headers=self._headers(api_key),
        )

    def generation_call(self, model: str, api_key: str, prompt: str) -> ProviderCall:
        return ProviderCall(
            method="POST",
            url=f"{self._base_url}/chat/completions",
            headers=self._headers(api_key),
            body={
                "model": model,
                "messages": [{"role": "user", "content": prompt}],
                "temperature": TEMPERATURE,
            },
        )

    def extract_text(self, body: Any) -> str:
        return self._dig(body, "choices", 0, "message", "content")
