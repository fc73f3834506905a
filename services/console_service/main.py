"""
Console Service -- backend for the browser prompt console.

Responsibilities:
1. GET  /api/providers -- provider catalog with suggested models
2. POST /api/validate  -- check an API key against the chosen provider
3. POST /api/prompt    -- send one prompt, return one response

Every call is stateless: keys and prompts arrive with the request, are
forwarded once, and are never stored or logged. Both POST routes always
answer 200 with an OperationResult; the outcome lives in `success`.
"""

from __future__ import annotations

from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from shared.llm_adapter import OperationResult, send_prompt, validate_api_key
from shared.logging.logger import setup_logging
from shared.observability.metrics import metrics_response
from services.console_service.catalog import provider_catalog
from services.console_service.config import ConsoleConfig

SERVICE_NAME = "console_service"
http_client: httpx.AsyncClient | None = None
# Read once: CORS is wired at import, the lifespan reuses the same values.
cfg = ConsoleConfig.from_env()


@asynccontextmanager
async def lifespan(application: FastAPI):
    global http_client
    logger = setup_logging(SERVICE_NAME, cfg.log_level)

    http_client = httpx.AsyncClient(timeout=cfg.request_timeout)
    logger.info(
        "Console Service ready (request timeout: %s)",
        cfg.request_timeout if cfg.request_timeout is not None else "none",
    )
    yield

    logger.info("Shutting down")
    if http_client:
        await http_client.aclose()
    http_client = None


app = FastAPI(
    title="LLM Prompt Console - Console Service",
    version="0.1.0",
    description="API key validation and single-prompt dispatch for OpenAI, Anthropic and Gemini",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(cfg.cors_origins),
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


@app.get("/health")
async def health():
    return {"status": "ok", "service": SERVICE_NAME}


@app.get("/metrics")
async def metrics():
    return metrics_response()


@app.get("/api/providers")
async def list_providers():
    return {"providers": provider_catalog()}


class ValidateKeyRequest(BaseModel):
    provider: str
    api_key: str


class PromptRequest(BaseModel):
    provider: str
    model: str
    api_key: str
    prompt: str


@app.post("/api/validate", response_model=OperationResult, response_model_exclude_none=True)
async def validate_key(req: ValidateKeyRequest) -> OperationResult:
    return await validate_api_key(req.provider, req.api_key, client=http_client)


@app.post("/api/prompt", response_model=OperationResult, response_model_exclude_none=True)
async def prompt(req: PromptRequest) -> OperationResult:
    return await send_prompt(
        req.provider,
        req.model,
        req.api_key,
        req.prompt,
        client=http_client,
    )
