"""Only one concrete ClockPort implementation exists in infrastructure."""

import inspect
from datetime import UTC

import pytest

from knowledge_chat.application.ports.clock_port import ClockPort
from knowledge_chat.infrastructure.time import system_clock


def test_only_one_clock_implementation():
    impls = [
        cls
        for _, cls in inspect.getmembers(system_clock, inspect.isclass)
        if issubclass(cls, ClockPort) and cls is not ClockPort
    ]
    assert [cls.__name__ for cls in impls] == ["SystemClock"]


def test_clock_port_is_abstract():
    with pytest.raises(TypeError):
        ClockPort()  # type: ignore[abstract]


def test_system_clock_returns_utc():
    now = system_clock.SystemClock().now()
    assert now.tzinfo == UTC
