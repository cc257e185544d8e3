"""HTTP API for quota, dashboard access and chunk attribution.

Handlers only translate between HTTP and use cases; no business logic.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from knowledge_chat.config.compose import Container, build_container
from knowledge_chat.config.logging_setup import setup_logging
from knowledge_chat.domain.errors import OwnershipErrorKind
from knowledge_chat.domain.models import RateLimitStatus, WeightedChunk
from knowledge_chat.domain.services.rate_limiting import rate_limit_headers
from knowledge_chat.infrastructure.identity.header_identity import HeaderIdentityProvider

# Generic messages so denial responses stay uniform per kind
PUBLIC_MESSAGES: dict[OwnershipErrorKind, str] = {
    OwnershipErrorKind.UNAUTHENTICATED: "Please sign in to continue.",
    OwnershipErrorKind.USER_NOT_FOUND: "Not found.",
    OwnershipErrorKind.RESOURCE_NOT_FOUND: "Not found.",
    OwnershipErrorKind.FORBIDDEN: "Access denied.",
}

RATE_LIMIT_MESSAGE = "Rate limit exceeded. Please wait a moment before sending another message."


class QuotaResponseModel(BaseModel):
    """Response model for /v1/chat/quota."""

    allowed: bool
    remaining: int
    limit: int
    source: str
    degraded: bool


class ChatbotSummaryModel(BaseModel):
    id: str
    title: str
    creator_id: str


class OwnershipResponseModel(BaseModel):
    """Response model for /v1/dashboard/{chatbot_id}."""

    user_id: str
    chatbot_id: str
    chatbot: ChatbotSummaryModel


class ChunkModel(BaseModel):
    """A ranked chunk; unknown fields are carried through untouched."""

    model_config = ConfigDict(extra="allow")

    chunk_id: str


class AttributionRequestModel(BaseModel):
    chunks: list[ChunkModel] = Field(default_factory=list)


class AttributionModel(BaseModel):
    chunk_id: str
    rank: int
    weight: float
    extra: dict[str, Any] = Field(default_factory=dict)


class AttributionResponseModel(BaseModel):
    attributions: list[AttributionModel]


_container: Container | None = None


def get_container() -> Container:
    """FastAPI dependency; overridable in tests."""
    global _container
    if _container is None:
        _container = build_container()
    return _container


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    container = get_container()
    setup_logging(container.settings.log_level)
    yield


app = FastAPI(title="Knowledge Chat API", version="1.0.0", lifespan=lifespan)


def _identity(request: Request, container: Container) -> HeaderIdentityProvider:
    return HeaderIdentityProvider(request.headers, container.settings.identity_header)


def _quota_payload(status: RateLimitStatus) -> dict[str, Any]:
    return QuotaResponseModel(
        allowed=status.allowed,
        remaining=status.remaining,
        limit=status.limit,
        source=status.source.value,
        degraded=status.degraded,
    ).model_dump()


@app.get("/v1/chat/quota", response_model=QuotaResponseModel)
def chat_quota(request: Request, container: Container = Depends(get_container)) -> JSONResponse:
    """Message quota of the calling user.

    Anonymous callers (or subjects without a user record) are not limited.
    Returns 429 once the quota for the current window is used up.
    """
    external_id = _identity(request, container).current_identity()
    user = container.get_user_directory().find_by_external_id(external_id) if external_id else None

    status = container.get_rate_limit_use_case().execute(user.id if user else None)
    headers = rate_limit_headers(status)

    if not status.allowed:
        return JSONResponse(
            status_code=429,
            content={"error": RATE_LIMIT_MESSAGE, **_quota_payload(status)},
            headers=headers,
        )
    return JSONResponse(content=_quota_payload(status), headers=headers)


@app.get("/v1/dashboard/{chatbot_id}", response_model=OwnershipResponseModel)
def dashboard_access(
    chatbot_id: str, request: Request, container: Container = Depends(get_container)
) -> OwnershipResponseModel:
    """Creator dashboard gate: only members of the owning creator pass."""
    result = container.get_ownership_use_case().execute(
        chatbot_id, _identity(request, container)
    )

    if not result.ok or result.value is None:
        err = result.error
        raise HTTPException(status_code=err.status_code, detail=PUBLIC_MESSAGES[err.kind])

    value = result.value
    return OwnershipResponseModel(
        user_id=value.user_id,
        chatbot_id=value.chatbot_id,
        chatbot=ChatbotSummaryModel(
            id=value.chatbot.id,
            title=value.chatbot.title,
            creator_id=value.chatbot.creator_id,
        ),
    )


@app.post("/v1/attribution", response_model=AttributionResponseModel)
def attribution(
    req: AttributionRequestModel, container: Container = Depends(get_container)
) -> AttributionResponseModel:
    """Position weights for a rank-ordered chunk list.

    Example:
        POST /v1/attribution
        {"chunks": [{"chunk_id": "c1", "source_title": "Intro"}, {"chunk_id": "c2"}]}
    """
    chunks = [
        WeightedChunk(chunk_id=c.chunk_id, extra=dict(c.model_extra or {})) for c in req.chunks
    ]
    attributions = container.get_attribution_use_case().execute(chunks)
    return AttributionResponseModel(
        attributions=[
            AttributionModel(
                chunk_id=a.chunk_id, rank=a.rank, weight=a.weight, extra=dict(a.extra)
            )
            for a in attributions
        ]
    )


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "healthy", "service": "knowledge-chat"}
