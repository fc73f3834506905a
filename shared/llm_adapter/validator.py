"""
API key validation.

One lightweight authenticated request per call; the provider's verdict is
turned into an OperationResult. Nothing raised inside escapes to the caller.
"""

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

OPERATION = "validate"


async def validate_api_key(
    provider: Provider | str,
    api_key: str,
    *,
    client: httpx.AsyncClient | None = None,
) -> OperationResult:
    """
    Check whether `api_key` is accepted by `provider`.

    Args:
        provider: Provider member or its string id.
        api_key:  Candidate credential. Never logged.
        client:   Optional shared AsyncClient; a private one is used otherwise.
    """
    resolved = Provider.parse(provider)
    provider_tag = resolved.value if resolved else "unknown"

    if not (api_key or "").strip():
        record_outcome(provider_tag, OPERATION, "invalid_input")
        return OperationResult.failure("API key cannot be empty")

    if resolved is None:
        record_outcome(provider_tag, OPERATION, "invalid_input")
        return OperationResult.failure("Unknown provider")

    adapter = get_adapter(resolved)
    try:
        with llm_operation_latency.labels(provider=provider_tag, operation=OPERATION).time():
            response = await send_call(adapter.validation_call(api_key), client)

        if response.is_success:
            logger.info("%s API key accepted", adapter.label)
            record_outcome(provider_tag, OPERATION, "success")
            return OperationResult(success=True, message=f"{adapter.label} API key is valid")

        body: Any = response.json()
        detail = mask_secret(extract_error_detail(body), api_key)
        logger.info(
            "%s API key rejected (HTTP %d): %s",
            adapter.label,
            response.status_code,
            detail,
        )
        record_outcome(provider_tag, OPERATION, "rejected")
        return OperationResult.failure(f"Invalid {adapter.label} API key: {detail}")

    except Exception as exc:
        detail = describe_exception(exc, api_key)
        logger.warning(
            "API key validation error for %s: %s (%s)",
            adapter.label,
            detail,
            type(exc).__name__,
        )
        record_outcome(provider_tag, OPERATION, "error")
        return OperationResult.failure(f"Error validating API key: {detail}")
