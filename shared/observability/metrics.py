from prometheus_client import (
    Counter,
    Histogram,
    generate_latest,
    CONTENT_TYPE_LATEST,
)
from fastapi import Response


llm_operations = Counter(
    "llm_operations_total",
    "Key validations and prompt dispatches by outcome",
    ["provider", "operation", "outcome"],
)

llm_operation_latency = Histogram(
    "llm_operation_latency_seconds",
    "Round-trip time of provider calls that reached the network",
    ["provider", "operation"],
    buckets=(0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0, 60.0, 120.0),
)


def record_outcome(provider: str, operation: str, outcome: str) -> None:
    llm_operations.labels(provider=provider, operation=operation, outcome=outcome).inc()


def metrics_response() -> Response:
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST,
    )
