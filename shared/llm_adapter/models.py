"""Data models for the LLM adapter layer."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel


class Provider(str, Enum):
    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    GEMINI = "gemini"

    @classmethod
    def parse(cls, value: Any) -> Provider | None:
        """Resolve a caller-supplied provider id, or None if it is not one of ours."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


class OperationResult(BaseModel):
    """
    Uniform outcome of a validation or dispatch call.

    `message` explains a failure (or confirms a valid key); `data` carries
    the generated text on a successful dispatch.
    """

    success: bool
    message: str | None = None
    data: str | None = None

    @classmethod
    def failure(cls, message: str) -> OperationResult:
        return cls(success=False, message=message)
