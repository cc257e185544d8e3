# knowledge_chat/application/use_cases/check_rate_limit.py
from __future__ import annotations

import logging

from knowledge_chat.application.ports.clock_port import ClockPort
from knowledge_chat.application.ports.message_log_port import MessageLogPort
from knowledge_chat.application.ports.telemetry_port import TelemetryPort
from knowledge_chat.domain.models import QuotaSource, RateLimitPolicy, RateLimitStatus
from knowledge_chat.domain.services.rate_limiting import (
    evaluate_quota,
    unrestricted_quota,
    window_start,
)

logger = logging.getLogger(__name__)


class CheckRateLimit:
    """
    Sliding-window limit on chat messages per user.

    Only reads the message log; the caller persists the message itself.
    Anonymous callers are exempt. When the message log cannot be queried the
    check fails open (availability over strict quota) and returns a status
    with ``source=QuotaSource.ASSUMED``.
    """

    def __init__(
        self,
        message_log: MessageLogPort,
        clock: ClockPort,
        telemetry: TelemetryPort,
        policy: RateLimitPolicy | None = None,
    ) -> None:
        self.message_log = message_log
        self.clock = clock
        self.telemetry = telemetry
        self.policy = policy or RateLimitPolicy()

    def execute(self, user_id: str | None) -> RateLimitStatus:
        now = self.clock.now()

        if not user_id:
            status = unrestricted_quota(self.policy, now, QuotaSource.ANONYMOUS)
            self._count(status)
            return status

        try:
            count = self.message_log.count_user_messages_since(
                user_id, window_start(now, self.policy)
            )
        except Exception as ex:
            logger.warning("Rate limit check failed for user %s, allowing: %s", user_id, ex)
            self._report(ex)
            status = unrestricted_quota(self.policy, now, QuotaSource.ASSUMED)
            self._count(status)
            return status

        status = evaluate_quota(count, self.policy, now)
        if not status.allowed:
            logger.info("Rate limit exceeded for user %s (%d/%d)", user_id, count, status.limit)
        self._count(status)
        return status

    def _report(self, error: Exception) -> None:
        try:
            self.telemetry.capture_error(error, {"component": "rate_limit"})
        except Exception as ex:  # noqa: BLE001
            logger.debug("Telemetry sink failed: %s", ex)

    def _count(self, status: RateLimitStatus) -> None:
        try:
            self.telemetry.incr(
                "chat.rate_limit.checks",
                {"source": status.source.value, "allowed": str(status.allowed).lower()},
            )
        except Exception as ex:  # noqa: BLE001
            logger.debug("Telemetry sink failed: %s", ex)
