"""Telemetry port for monitoring, metrics and error reporting."""

from typing import Any, Protocol


class TelemetryPort(Protocol):
    """Port for telemetry and monitoring.

    Implementations are fire-and-forget: callers must not depend on them
    succeeding.
    """

    def incr(self, name: str, tags: dict[str, Any] | None = None) -> None:
        """Increment a counter metric."""
        ...

    def observe(self, name: str, value: float, tags: dict[str, Any] | None = None) -> None:
        """Observe a value for histogram/summary metric."""
        ...

    def capture_error(self, error: BaseException, tags: dict[str, Any] | None = None) -> None:
        """Report a handled error to the error sink."""
        ...
