"""OpenTelemetry adapter for metrics and error reporting."""

import logging
from dataclasses import dataclass
from importlib import import_module
from typing import Any

from knowledge_chat.application.ports import TelemetryPort

logger = logging.getLogger(__name__)


@dataclass
class OtelConfig:
    """Configuration for OpenTelemetry."""

    service_name: str = "knowledge-chat"
    otlp_endpoint: str | None = None  # e.g., "http://localhost:4317"
    environment: str = "production"
    enable_console: bool = False  # Debug: print metrics to console


class OpenTelemetryAdapter(TelemetryPort):
    """OpenTelemetry adapter for metrics and handled-error reporting.

    Metrics:
    - Counters: incr() for events (quota checks, denials)
    - Histograms: observe() for distributions (latency)
    - Errors: capture_error() logs the error and counts it by type

    Every method swallows its own failures; telemetry never breaks a request.
    """

    def __init__(self, cfg: OtelConfig) -> None:
        """Initialize OpenTelemetry adapter.

        Args:
            cfg: OtelConfig with service name and OTLP endpoint

        Note: Metrics become no-ops if opentelemetry-sdk cannot be initialized.
        """
        self._cfg = cfg
        self._meter: Any | None = None
        self._counters: dict[str, Any] = {}
        self._histograms: dict[str, Any] = {}
        self._init_otel()

    def _init_otel(self) -> None:
        """Initialize OpenTelemetry SDK with lazy import.

        Sets up:
        - OTLP exporter (if endpoint configured)
        - Console exporter (if enable_console=True)
        - Meter for creating instruments
        """
        try:
            otel_sdk = import_module("opentelemetry.sdk.metrics")
            otel_export = import_module("opentelemetry.sdk.metrics.export")
            otel_resources = import_module("opentelemetry.sdk.resources")

            resource = otel_resources.Resource.create(
                {
                    "service.name": self._cfg.service_name,
                    "deployment.environment": self._cfg.environment,
                }
            )

            readers = []
            reader_cls = otel_export.PeriodicExportingMetricReader

            if self._cfg.otlp_endpoint:
                otel_otlp = import_module("opentelemetry.exporter.otlp.proto.grpc.metric_exporter")
                readers.append(
                    reader_cls(otel_otlp.OTLPMetricExporter(endpoint=self._cfg.otlp_endpoint))
                )

            if self._cfg.enable_console:
                readers.append(reader_cls(otel_export.ConsoleMetricExporter()))

            provider = otel_sdk.MeterProvider(resource=resource, metric_readers=readers)
            self._meter = provider.get_meter(self._cfg.service_name)

        except Exception as ex:  # noqa: BLE001
            logger.debug("OpenTelemetry unavailable, metrics disabled: %s", ex)
            self._meter = None

    def incr(self, name: str, tags: dict[str, Any] | None = None) -> None:
        """Increment a counter metric.

        Examples:
            - incr("chat.rate_limit.checks", {"source": "computed", "allowed": "true"})
            - incr("chat.errors.total", {"error_type": "RateLimitStoreError"})
        """
        if self._meter is None:
            return

        try:
            if name not in self._counters:
                self._counters[name] = self._meter.create_counter(
                    name=name,
                    description=f"Counter for {name}",
                )
            self._counters[name].add(1, attributes=tags or {})
        except Exception as ex:  # noqa: BLE001
            logger.debug("Counter %s failed: %s", name, ex)

    def observe(self, name: str, value: float, tags: dict[str, Any] | None = None) -> None:
        """Observe a value for histogram/summary metric."""
        if self._meter is None:
            return

        try:
            if name not in self._histograms:
                self._histograms[name] = self._meter.create_histogram(
                    name=name,
                    description=f"Histogram for {name}",
                )
            self._histograms[name].record(value, attributes=tags or {})
        except Exception as ex:  # noqa: BLE001
            logger.debug("Histogram %s failed: %s", name, ex)

    def capture_error(self, error: BaseException, tags: dict[str, Any] | None = None) -> None:
        """Report a handled error: log it and count it by type."""
        attributes = dict(tags or {})
        attributes["error_type"] = type(error).__name__
        logger.error("Handled error reported: %s (%s)", error, attributes)
        self.incr("chat.errors.total", attributes)
