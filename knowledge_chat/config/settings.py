"""Application settings with environment-driven configuration."""

import os
from dataclasses import dataclass, field
from datetime import timedelta

from knowledge_chat.domain.errors import ValidationError
from knowledge_chat.domain.models import RateLimitPolicy


@dataclass(frozen=True)
class AppSettings:
    """Application settings loaded from environment variables.

    This is the ONLY place where environment variables are read.
    All other layers receive settings via dependency injection.
    """

    # ===== Relational Store =====
    database_url: str = field(
        default_factory=lambda: os.getenv("DATABASE_URL", "sqlite:///var/knowledge_chat.db")
    )
    database_echo: bool = field(
        default_factory=lambda: os.getenv("DATABASE_ECHO", "false").lower() == "true"
    )

    # ===== Rate Limiting =====
    rate_limit_messages: int = field(
        default_factory=lambda: int(os.getenv("RATE_LIMIT_MESSAGES", "10"))
    )
    rate_limit_window_s: int = field(
        default_factory=lambda: int(os.getenv("RATE_LIMIT_WINDOW_S", "60"))
    )

    # ===== Identity =====
    identity_header: str = field(
        default_factory=lambda: os.getenv("IDENTITY_HEADER", "X-Authenticated-User")
    )
    # Header set by the auth gateway after verifying the session

    # ===== Logging =====
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())

    # ===== Telemetry Configuration =====
    telemetry_enabled: bool = field(
        default_factory=lambda: os.getenv("TELEMETRY_ENABLED", "true").lower() == "true"
    )
    otlp_endpoint: str = field(default_factory=lambda: os.getenv("OTLP_ENDPOINT", ""))
    # Empty string = no OTLP export

    telemetry_environment: str = field(
        default_factory=lambda: os.getenv("TELEMETRY_ENVIRONMENT", "production")
    )
    service_name: str = field(default_factory=lambda: os.getenv("SERVICE_NAME", "knowledge-chat"))

    def rate_limit_policy(self) -> RateLimitPolicy:
        if self.rate_limit_messages <= 0:
            raise ValidationError("RATE_LIMIT_MESSAGES must be > 0")
        if self.rate_limit_window_s <= 0:
            raise ValidationError("RATE_LIMIT_WINDOW_S must be > 0")
        return RateLimitPolicy(
            limit=self.rate_limit_messages,
            window=timedelta(seconds=self.rate_limit_window_s),
        )
