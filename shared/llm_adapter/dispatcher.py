"""Single-prompt dispatch to the selected provider."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from shared.llm_adapter.base import send_call
from shared.llm_adapter.errors import describe_exception, extract_error_detail, mask_secret
from shared.llm_adapter.factory import get_adapter
from shared.llm_adapter.models import OperationResult, Provider
from shared.observability.metrics import llm_operation_latency, record_outcome

logger = logging.getLogger(__name__)

OPERATION = "dispatch"


async def send_prompt(
    provider: Provider | str,
    model: str,
    api_key: str,
    prompt: str,
    *,
    client: httpx.AsyncClient | None = None,
) -> OperationResult:
    """
    Send `prompt` to `model` and return the generated text in `data`.

    Input checks run before any I/O, in this order: key, prompt, provider.
    The prompt is forwarded untouched; `model` is not checked locally.
    """
    resolved = Provider.parse(provider)
    provider_tag = resolved.value if resolved else "unknown"

    if not (api_key or "").strip():
        record_outcome(provider_tag, OPERATION, "invalid_input")
        return OperationResult.failure("API key is required")

    if not (prompt or "").strip():
        record_outcome(provider_tag, OPERATION, "invalid_input")
        return OperationResult.failure("Prompt cannot be empty")

    if resolved is None:
        record_outcome(provider_tag, OPERATION, "invalid_input")
        return OperationResult.failure("Unknown provider")

    adapter = get_adapter(resolved)
    try:
        with llm_operation_latency.labels(provider=provider_tag, operation=OPERATION).time():
            response = await send_call(adapter.generation_call(model, api_key, prompt), client)

        body: Any = response.json()
        if not response.is_success:
            detail = mask_secret(extract_error_detail(body), api_key)
            logger.info(
                "%s rejected prompt for model %s (HTTP %d): %s",
                adapter.label,
                model,
                response.status_code,
                detail,
            )
            record_outcome(provider_tag, OPERATION, "rejected")
            return OperationResult.failure(f"{adapter.label} API error: {detail}")

        text = adapter.extract_text(body)
        logger.info(
            "%s answered prompt for model %s (%d chars)",
            adapter.label,
            model,
            len(text),
        )
        record_outcome(provider_tag, OPERATION, "success")
        return OperationResult(success=True, data=text)

    except Exception as exc:
        detail = describe_exception(exc, api_key)
        logger.warning(
            "Prompt dispatch error for %s model %s: %s (%s)",
            adapter.label,
            model,
            detail,
            type(exc).__name__,
        )
        record_outcome(provider_tag, OPERATION, "error")
        return OperationResult.failure(f"Error sending prompt: {detail}")
