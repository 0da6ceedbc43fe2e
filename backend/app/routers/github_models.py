"""GitHub Models API endpoints."""

import logging

from fastapi import APIRouter, Depends, Request

from app.models.github_models import (
    ChatCompletionRequest,
    ChatCompletionResponse,
    ConnectionTestResponse,
    EnrichedModelCard,
    KnownModelEntry,
)
from app.rate_limit import CHAT_LIMIT, MODELS_LIMIT, limiter
from app.services.auth import extract_github_token
from app.services.llm.errors import AuthenticationError, ProviderRuntimeError
from app.services.llm.known_models import load_known_models
from app.services.llm.registry import get_provider

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/github-models", tags=["github-models"])


def _require_token(token: str | None) -> str:
    if not token:
        raise AuthenticationError("GitHub token required (Authorization: Bearer <token>)")
    return token


@router.post("/models", response_model=list[EnrichedModelCard])
@limiter.limit(MODELS_LIMIT)
async def list_models(
    request: Request,
    token: str | None = Depends(extract_github_token),
) -> list[EnrichedModelCard]:
    """List GitHub Models annotated with context windows and capabilities."""
    provider = get_provider(api_key=_require_token(token))
    return await provider.list_models()


@router.get("/known-models", response_model=list[KnownModelEntry])
async def known_models() -> list[KnownModelEntry]:
    """Return the local known-model table (no token needed)."""
    return load_known_models()


@router.post("/chat", response_model=ChatCompletionResponse)
@limiter.limit(CHAT_LIMIT)
async def chat(
    req: ChatCompletionRequest,
    request: Request,
    token: str | None = Depends(extract_github_token),
) -> ChatCompletionResponse:
    """Run one chat completion. Reasoning models are never streamed upstream."""
    provider = get_provider(api_key=_require_token(token), model=req.model)
    options = req.model_dump(exclude={"model", "messages"}, exclude_none=True)
    content, streamed = await provider.complete(
        [m.model_dump() for m in req.messages], **options
    )
    return ChatCompletionResponse(model=req.model, content=content, stream=streamed)


@router.post("/test-connection", response_model=ConnectionTestResponse)
@limiter.limit(MODELS_LIMIT)
async def test_connection(
    request: Request,
    model: str | None = None,
    token: str | None = Depends(extract_github_token),
) -> ConnectionTestResponse:
    """Check that the token can reach GitHub Models."""
    try:
        provider = get_provider(api_key=_require_token(token), model=model)
        success = await provider.test_connection()
        return ConnectionTestResponse(
            success=success,
            message="Connection successful" if success else "Connection failed",
            model=model,
        )
    except ProviderRuntimeError as exc:
        logger.warning("Connection test failed: %s", exc.message)
        return ConnectionTestResponse(success=False, message=exc.message, model=model)
    except Exception:
        logger.exception("Connection test failed")
        return ConnectionTestResponse(success=False, message="Connection test failed", model=model)
