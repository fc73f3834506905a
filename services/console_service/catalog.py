"""
Suggested models per provider, as offered by the browser form.

The adapters never consult this list; any model id the caller sends is
forwarded as-is and judged by the provider.
"""

from __future__ import annotations

from shared.llm_adapter import Provider

DISPLAY_NAMES: dict[Provider, str] = {
    Provider.OPENAI: "OpenAI",
    Provider.ANTHROPIC: "Anthropic",
    Provider.GEMINI: "Google Gemini",
}

SUGGESTED_MODELS: dict[Provider, list[str]] = {
    Provider.OPENAI: ["gpt-4", "gpt-4o", "o4-mini", "o3-mini"],
    Provider.ANTHROPIC: [
        "claude-3-5-haiku-20241022",
        "claude-3-7-sonnet-20250219",
        "claude-sonnet-4-20250514",
    ],
    Provider.GEMINI: ["gemini-1.5-pro", "gemini-2.0-flash", "gemini-1.0-pro"],
}


def provider_catalog() -> list[dict]:
    """One entry per provider; the first model is the default selection."""
    return [
        {
            "id": provider.value,
            "name": DISPLAY_NAMES[provider],
            "models": list(SUGGESTED_MODELS[provider]),
            "default_model": SUGGESTED_MODELS[provider][0],
        }
        for provider in Provider
    ]
