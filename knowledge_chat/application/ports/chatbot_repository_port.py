from typing import Protocol, runtime_checkable

from knowledge_chat.domain.models import ChatbotMembership


@runtime_checkable
class ChatbotRepositoryPort(Protocol):
    def find_with_membership(self, chatbot_id: str, user_id: str) -> ChatbotMembership | None:
        """Load a chatbot with its creator's membership rows filtered to ``user_id``.

        Returns None when the chatbot does not exist.
        """
        ...
