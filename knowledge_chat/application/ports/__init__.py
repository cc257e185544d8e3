"""Application ports package.

Re-exports every port so use cases and adapters import from one place.
"""

from knowledge_chat.application.ports.chatbot_repository_port import ChatbotRepositoryPort
from knowledge_chat.application.ports.clock_port import ClockPort
from knowledge_chat.application.ports.identity_port import IdentityProviderPort
from knowledge_chat.application.ports.message_log_port import MessageLogPort
from knowledge_chat.application.ports.telemetry_port import TelemetryPort
from knowledge_chat.application.ports.user_directory_port import UserDirectoryPort

__all__ = [
    "ChatbotRepositoryPort",
    "ClockPort",
    "IdentityProviderPort",
    "MessageLogPort",
    "TelemetryPort",
    "UserDirectoryPort",
]
