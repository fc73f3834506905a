from shared.llm_adapter.base import ProviderAdapter, ProviderCall, send_call
from shared.llm_adapter.dispatcher import send_prompt
from shared.llm_adapter.errors import ResponseShapeError, extract_error_detail, mask_secret
from shared.llm_adapter.factory import get_adapter
from shared.llm_adapter.models import OperationResult, Provider
from shared.llm_adapter.validator import validate_api_key

__all__ = [
    "OperationResult",
    "Provider",
    "ProviderAdapter",
    "ProviderCall",
    "ResponseShapeError",
    "extract_error_detail",
    "get_adapter",
    "mask_secret",
    "send_call",
    "send_prompt",
    "validate_api_key",
]
