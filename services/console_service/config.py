from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class ConsoleConfig:
    log_level: str
    cors_origins: tuple[str, ...]
    request_timeout: float | None

    @classmethod
    def from_env(cls) -> ConsoleConfig:
        origins = os.environ.get("CONSOLE_CORS_ORIGINS", "*")
        timeout = os.environ.get("LLM_REQUEST_TIMEOUT", "").strip()
        return cls(
            log_level=os.environ.get("LOG_LEVEL", "INFO"),
            cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()) or ("*",),
            # Unset means no timeout: a provider call runs until it answers or fails.
            request_timeout=float(timeout) if timeout else None,
        )
