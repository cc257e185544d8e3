"""System clock adapter providing real UTC time.

Production implementation of ClockPort; tests inject a fixed clock instead.
"""

from __future__ import annotations

from datetime import UTC, datetime

from ...application.ports.clock_port import ClockPort


class SystemClock(ClockPort):
    """Returns timezone-aware UTC time from the host clock."""

    def now(self) -> datetime:  # pragma: no cover - trivial
        return datetime.now(UTC)
