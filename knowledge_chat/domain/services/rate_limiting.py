# knowledge_chat/domain/services/rate_limiting.py
# Pure domain services: no I/O, deterministic, no external libraries.
from __future__ import annotations

from datetime import datetime

from knowledge_chat.domain.models import QuotaSource, RateLimitPolicy, RateLimitStatus


def window_start(now: datetime, policy: RateLimitPolicy) -> datetime:
    """Inclusive lower bound of the trailing window ending at ``now``."""
    return now - policy.window


def evaluate_quota(count: int, policy: RateLimitPolicy, now: datetime) -> RateLimitStatus:
    """
    Decide from the number of actions already in the window.

    The (limit+1)-th action is the first one blocked; remaining never drops
    below zero.
    """
    return RateLimitStatus(
        allowed=count < policy.limit,
        remaining=max(0, policy.limit - count),
        limit=policy.limit,
        reset_at=now + policy.window,
        source=QuotaSource.COMPUTED,
    )


def unrestricted_quota(
    policy: RateLimitPolicy, now: datetime, source: QuotaSource
) -> RateLimitStatus:
    """Full quota for anonymous callers or when counting failed."""
    return RateLimitStatus(
        allowed=True,
        remaining=policy.limit,
        limit=policy.limit,
        reset_at=now + policy.window,
        source=source,
    )


def rate_limit_headers(status: RateLimitStatus) -> dict[str, str]:
    return {
        "X-RateLimit-Limit": str(status.limit),
        "X-RateLimit-Remaining": str(status.remaining),
        "X-RateLimit-Reset": str(int(status.reset_at.timestamp())),
    }
