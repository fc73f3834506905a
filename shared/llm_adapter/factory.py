"""
Adapter factory -- maps a Provider onto its adapter.

Supported providers:

  openai     OpenAI REST API      -- bearer token
  anthropic  Anthropic Messages   -- x-api-key + anthropic-version headers
  gemini     Google AI Studio     -- `key` query parameter
                                     https://aistudio.google.com/apikey

The set is closed: every Provider member has exactly one adapter class.
Adapters are cheap and stateless, so a fresh one is built per call.
"""

from __future__ import annotations

from shared.llm_adapter.anthropic_provider import AnthropicAdapter
from shared.llm_adapter.base import ProviderAdapter
from shared.llm_adapter.gemini_provider import GeminiAdapter
from shared.llm_adapter.models import Provider
from shared.llm_adapter.openai_provider import OpenAIAdapter

_ADAPTERS: dict[Provider, type[ProviderAdapter]] = {
    Provider.OPENAI: OpenAIAdapter,
    Provider.ANTHROPIC: AnthropicAdapter,
    Provider.GEMINI: GeminiAdapter,
}


def get_adapter(provider: Provider) -> ProviderAdapter:
    adapter_cls = _ADAPTERS.get(provider)
    if adapter_cls is None:
        raise ValueError(
            f"Unknown provider '{provider}'. Available: {', '.join(p.value for p in _ADAPTERS)}"
        )
    return adapter_cls()
