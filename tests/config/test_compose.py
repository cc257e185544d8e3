"""Tests for the composition root (dependency injection/wiring).

The container is the ONLY place that instantiates concrete adapters and
wires them into use cases.
"""

from datetime import timedelta

from knowledge_chat.application.ports import (
    ChatbotRepositoryPort,
    MessageLogPort,
    UserDirectoryPort,
)
from knowledge_chat.application.use_cases.attribute_chunks import AttributeChunks
from knowledge_chat.application.use_cases.check_rate_limit import CheckRateLimit
from knowledge_chat.application.use_cases.verify_chatbot_ownership import VerifyChatbotOwnership
from knowledge_chat.config.compose import build_container
from knowledge_chat.config.settings import AppSettings
from knowledge_chat.infrastructure.telemetry.otel_adapter import OpenTelemetryAdapter
from knowledge_chat.infrastructure.time.system_clock import SystemClock


def make_settings(**overrides) -> AppSettings:
    values = {"database_url": "sqlite:///:memory:", "telemetry_enabled": False}
    values.update(overrides)
    return AppSettings(**values)


class TestContainer:
    def test_adapters_implement_ports(self) -> None:
        container = build_container(make_settings())

        assert isinstance(container.get_message_log(), MessageLogPort)
        assert isinstance(container.get_user_directory(), UserDirectoryPort)
        assert isinstance(container.get_chatbot_repository(), ChatbotRepositoryPort)
        assert isinstance(container.get_clock(), SystemClock)

    def test_engine_and_session_factory_are_shared(self) -> None:
        container = build_container(make_settings())

        assert container.get_engine() is container.get_engine()
        assert container.get_session_factory() is container.get_session_factory()

    def test_rate_limit_use_case_uses_configured_policy(self) -> None:
        container = build_container(make_settings(rate_limit_messages=3, rate_limit_window_s=30))
        uc = container.get_rate_limit_use_case()

        assert isinstance(uc, CheckRateLimit)
        assert uc.policy.limit == 3
        assert uc.policy.window == timedelta(seconds=30)
        assert uc.telemetry is container.get_telemetry()

    def test_ownership_and_attribution_use_cases(self) -> None:
        container = build_container(make_settings())

        assert isinstance(container.get_ownership_use_case(), VerifyChatbotOwnership)
        assert isinstance(container.get_attribution_use_case(), AttributeChunks)

    def test_disabled_telemetry_still_accepts_errors(self) -> None:
        telemetry = build_container(make_settings()).get_telemetry()

        assert not isinstance(telemetry, OpenTelemetryAdapter)
        telemetry.incr("x")
        telemetry.observe("y", 1.0)
        telemetry.capture_error(RuntimeError("boom"), {"component": "test"})

    def test_enabled_telemetry_uses_otel_adapter(self) -> None:
        telemetry = build_container(make_settings(telemetry_enabled=True)).get_telemetry()

        assert isinstance(telemetry, OpenTelemetryAdapter)
