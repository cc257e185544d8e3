from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime


class ClockPort(ABC):
    """Port for time-related operations.

    Rate-limit windows are computed from this clock so tests can pin "now".
    Infrastructure provides the concrete implementation (SystemClock).
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return current UTC datetime (timezone-aware)."""
        ...
