"""
Google Gemini (AI Studio) adapter.

The key is passed as the `key` query parameter, never as a header, and the
model id is part of the generation URL path.
"""

from __future__ import annotations

from typing import Any

from shared.llm_adapter.base import JSON_HEADERS, ProviderAdapter, ProviderCall
from shared.llm_adapter.models import Provider

GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"

TEMPERATURE = 0.7
MAX_OUTPUT_TOKENS = 1000


class GeminiAdapter(ProviderAdapter):
    provider = Provider.GEMINI
    label = "Gemini"

    def __init__(self, base_url: str = GEMINI_BASE_URL) -> None:
        self._base_url = base_url.rstrip("/")

    def validation_call(self, api_key: str) -> ProviderCall:
        return ProviderCall(
            method="GET",
            url=f"{self._base_url}/models",
            headers=dict(JSON_HEADERS),
            params={"key": api_key},
        )

    def generation_call(self, model: str, api_key: str, prompt: str) -> ProviderCall:
        return ProviderCall(
            method="POST",
            url=f"{self._base_url}/models/{model}:generateContent",
            headers=dict(JSON_HEADERS),
            params={"key": api_key},
            body={
                "contents": [{"parts": [{"text": prompt}]}],
                "generationConfig": {
                    "temperature": TEMPERATURE,
                    "maxOutputTokens": MAX_OUTPUT_TOKENS,
                },
            },
        )

    def extract_text(self, body: Any) -> str:
        return self._dig(body, "candidates", 0, "content", "parts", 0, "text")
