"""Dependency injection container with environment-driven wiring.

Single place for wiring; domain and application layers stay pure.
"""

from typing import Any

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from knowledge_chat.application.ports import (
    ChatbotRepositoryPort,
    ClockPort,
    MessageLogPort,
    TelemetryPort,
    UserDirectoryPort,
)
from knowledge_chat.application.use_cases.attribute_chunks import AttributeChunks
from knowledge_chat.application.use_cases.check_rate_limit import CheckRateLimit
from knowledge_chat.application.use_cases.verify_chatbot_ownership import VerifyChatbotOwnership
from knowledge_chat.config.settings import AppSettings


class Container:
    """Dependency injection container for application components.

    Responsibilities:
    1. Read settings from environment (via AppSettings)
    2. Build adapters lazily (engine, repositories, clock, telemetry)
    3. Inject dependencies into use cases

    Adapters are shared; use cases are cheap and built per call.
    """

    def __init__(self, settings: AppSettings | None = None) -> None:
        """Initialize container with settings.

        Args:
            settings: Application settings (default: load from environment)
        """
        self.settings = settings or AppSettings()
        self._engine: Engine | None = None
        self._session_factory: sessionmaker[Session] | None = None
        self._clock: ClockPort | None = None
        self._telemetry: TelemetryPort | None = None

    # ===== Adapters =====

    def get_engine(self) -> Engine:
        """Get or create the SQLAlchemy engine."""
        if self._engine is None:
            from knowledge_chat.infrastructure.persistence.session import (
                DatabaseConfig,
                build_engine,
            )

            self._engine = build_engine(
                DatabaseConfig(url=self.settings.database_url, echo=self.settings.database_echo)
            )
        return self._engine

    def get_session_factory(self) -> sessionmaker[Session]:
        if self._session_factory is None:
            from knowledge_chat.infrastructure.persistence.session import build_session_factory

            self._session_factory = build_session_factory(self.get_engine())
        return self._session_factory

    def get_message_log(self) -> MessageLogPort:
        from knowledge_chat.infrastructure.persistence.sqlalchemy_repositories import (
            SqlMessageLog,
        )

        return SqlMessageLog(self.get_session_factory())

    def get_user_directory(self) -> UserDirectoryPort:
        from knowledge_chat.infrastructure.persistence.sqlalchemy_repositories import (
            SqlUserDirectory,
        )

        return SqlUserDirectory(self.get_session_factory())

    def get_chatbot_repository(self) -> ChatbotRepositoryPort:
        from knowledge_chat.infrastructure.persistence.sqlalchemy_repositories import (
            SqlChatbotRepository,
        )

        return SqlChatbotRepository(self.get_session_factory())

    def get_clock(self) -> ClockPort:
        if self._clock is None:
            from knowledge_chat.infrastructure.time.system_clock import SystemClock

            self._clock = SystemClock()
        return self._clock

    def get_telemetry(self) -> TelemetryPort:
        """Get or create telemetry adapter based on settings."""
        if self._telemetry is None:
            self._telemetry = self._build_telemetry()
        return self._telemetry

    # ===== Use Cases =====

    def get_rate_limit_use_case(self) -> CheckRateLimit:
        return CheckRateLimit(
            message_log=self.get_message_log(),
            clock=self.get_clock(),
            telemetry=self.get_telemetry(),
            policy=self.settings.rate_limit_policy(),
        )

    def get_ownership_use_case(self) -> VerifyChatbotOwnership:
        return VerifyChatbotOwnership(
            users=self.get_user_directory(),
            chatbots=self.get_chatbot_repository(),
        )

    def get_attribution_use_case(self) -> AttributeChunks:
        return AttributeChunks()

    # ===== Private Builder Methods =====

    def _build_telemetry(self) -> TelemetryPort:
        """Build telemetry adapter based on settings.telemetry_enabled.

        Returns:
            OpenTelemetryAdapter, or a logging-only adapter if disabled
        """
        if not self.settings.telemetry_enabled:
            return self._build_logging_telemetry()

        from knowledge_chat.infrastructure.telemetry.otel_adapter import (
            OpenTelemetryAdapter,
            OtelConfig,
        )

        cfg = OtelConfig(
            service_name=self.settings.service_name,
            otlp_endpoint=self.settings.otlp_endpoint or None,
            environment=self.settings.telemetry_environment,
            enable_console=False,
        )

        return OpenTelemetryAdapter(cfg)

    def _build_logging_telemetry(self) -> TelemetryPort:
        """Metrics off; handled errors still reach the log."""
        import logging

        log = logging.getLogger("knowledge_chat.telemetry")

        class LoggingTelemetry:
            def incr(self, name: str, tags: dict[str, Any] | None = None) -> None:
                pass

            def observe(self, name: str, value: float, tags: dict[str, Any] | None = None) -> None:
                pass

            def capture_error(
                self, error: BaseException, tags: dict[str, Any] | None = None
            ) -> None:
                log.error("Handled error reported: %s (%s)", error, tags or {})

        return LoggingTelemetry()


# ===== Convenience Functions =====


def build_container(settings: AppSettings | None = None) -> Container:
    """Build dependency injection container with settings.

    Example:
        container = build_container()
        status = container.get_rate_limit_use_case().execute(user_id)
    """
    return Container(settings)
