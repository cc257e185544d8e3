"""Tests for the pure rate-limit decision helpers."""

from datetime import UTC, datetime, timedelta

import pytest

from knowledge_chat.domain.models import QuotaSource, RateLimitPolicy
from knowledge_chat.domain.services.rate_limiting import (
    evaluate_quota,
    rate_limit_headers,
    unrestricted_quota,
    window_start,
)

NOW = datetime(2026, 10, 19, 12, 0, 0, tzinfo=UTC)
POLICY = RateLimitPolicy(limit=10, window=timedelta(seconds=60))


def test_window_start_is_now_minus_window():
    assert window_start(NOW, POLICY) == datetime(2026, 10, 19, 11, 59, 0, tzinfo=UTC)


@pytest.mark.parametrize(
    "count,allowed,remaining",
    [
        (0, True, 10),
        (1, True, 9),
        (9, True, 1),
        (10, False, 0),
        (11, False, 0),
        (50, False, 0),
    ],
)
def test_evaluate_quota_boundaries(count: int, allowed: bool, remaining: int):
    status = evaluate_quota(count, POLICY, NOW)
    assert status.allowed is allowed
    assert status.remaining == remaining
    assert status.limit == 10
    assert status.source is QuotaSource.COMPUTED


def test_evaluate_quota_reset_is_end_of_window():
    status = evaluate_quota(3, POLICY, NOW)
    assert status.reset_at == NOW + timedelta(seconds=60)


def test_unrestricted_quota_reports_full_limit():
    status = unrestricted_quota(POLICY, NOW, QuotaSource.ASSUMED)
    assert status.allowed is True
    assert status.remaining == 10
    assert status.limit == 10
    assert status.degraded is True


def test_anonymous_quota_is_not_degraded():
    status = unrestricted_quota(POLICY, NOW, QuotaSource.ANONYMOUS)
    assert status.degraded is False


def test_rate_limit_headers():
    status = evaluate_quota(4, POLICY, NOW)
    headers = rate_limit_headers(status)
    assert headers == {
        "X-RateLimit-Limit": "10",
        "X-RateLimit-Remaining": "6",
        "X-RateLimit-Reset": str(int((NOW + timedelta(seconds=60)).timestamp())),
    }
