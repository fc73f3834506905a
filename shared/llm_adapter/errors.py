"""
Error helpers shared by every provider adapter.

All three providers report failures as `{"error": {"message": ...}}`, so a
single extractor covers them. Credentials can leak into exception text
(the Gemini key travels in the query string), hence `mask_secret`.
"""

from __future__ import annotations

from typing import Any

import httpx

UNKNOWN_ERROR = "Unknown error"


class ResponseShapeError(ValueError):
    """A 2xx response body did not carry the text where the provider documents it."""


def extract_error_detail(body: Any, fallback: str = UNKNOWN_ERROR) -> str:
    if not isinstance(body, dict):
        return fallback
    error = body.get("error")
    if isinstance(error, dict):
        message = error.get("message")
        if isinstance(message, str) and message:
            return message
    return fallback


def mask_secret(text: str, secret: str) -> str:
    secret = (secret or "").strip()
    if not secret or not text:
        return text
    tail = secret[-4:] if len(secret) > 8 else ""
    # As it appears inside a request URL's query string.
    encoded = str(httpx.QueryParams({"k": secret})).split("=", 1)[1]
    for form in sorted({secret, encoded}, key=len, reverse=True):
        text = text.replace(form, f"****{tail}")
    return text


def describe_exception(exc: BaseException, secret: str = "") -> str:
    return mask_secret(str(exc), secret) or UNKNOWN_ERROR
