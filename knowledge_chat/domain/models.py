# knowledge_chat/domain/models.py
# Domain models must be pure (no I/O, no external libs)
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class WeightedChunk:
    """
    A retrieved chunk as seen by attribution.

    - chunk_id:  stable identifier from the vector store
    - extra:     opaque passthrough fields (source title, score, ...); never read
    """

    chunk_id: str
    extra: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ChunkAttribution:
    """Weight assigned to one chunk at a 1-based rank."""

    chunk_id: str
    rank: int
    weight: float
    extra: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class RateLimitPolicy:
    """Maximum user messages per trailing window."""

    limit: int = 10
    window: timedelta = timedelta(seconds=60)


class QuotaSource(str, Enum):
    COMPUTED = "computed"  # counted from the message log
    ANONYMOUS = "anonymous"  # no user id, exempt
    ASSUMED = "assumed"  # message log failed, fail-open


@dataclass(frozen=True)
class RateLimitStatus:
    allowed: bool
    remaining: int
    limit: int
    reset_at: datetime
    source: QuotaSource = QuotaSource.COMPUTED

    @property
    def degraded(self) -> bool:
        """True when the quota was assumed rather than counted."""
        return self.source is QuotaSource.ASSUMED


@dataclass(frozen=True)
class UserRecord:
    id: str
    external_id: str


@dataclass(frozen=True)
class ChatbotMembership:
    """Chatbot with its creator's membership rows, filtered to one user."""

    id: str
    title: str
    creator_id: str
    member_ids: tuple[str, ...] = ()


@dataclass(frozen=True)
class ChatbotSummary:
    id: str
    title: str
    creator_id: str


@dataclass(frozen=True)
class OwnershipResult:
    user_id: str
    chatbot_id: str
    chatbot: ChatbotSummary
