# knowledge_chat/application/use_cases/verify_chatbot_ownership.py
from __future__ import annotations

import logging

from knowledge_chat.application.ports.chatbot_repository_port import ChatbotRepositoryPort
from knowledge_chat.application.ports.identity_port import IdentityProviderPort
from knowledge_chat.application.ports.user_directory_port import UserDirectoryPort
from knowledge_chat.domain.errors import (
    Forbidden,
    OwnershipError,
    ResourceNotFound,
    Unauthenticated,
    UserNotFound,
)
from knowledge_chat.domain.models import ChatbotSummary, OwnershipResult
from knowledge_chat.domain.types import Result

logger = logging.getLogger(__name__)


class VerifyChatbotOwnership:
    """
    Authorize the caller for a creator-owned chatbot.

    Steps short-circuit on the first failure:
    identity -> internal user -> chatbot (+ filtered membership) -> membership.
    Store errors are not caught here; they propagate to the handler.
    """

    def __init__(self, users: UserDirectoryPort, chatbots: ChatbotRepositoryPort) -> None:
        self.users = users
        self.chatbots = chatbots

    def execute(
        self, chatbot_id: str, identity: IdentityProviderPort
    ) -> Result[OwnershipResult, OwnershipError]:
        # 1) Authenticate
        external_id = identity.current_identity()
        if not external_id:
            return self._deny(Unauthenticated(), chatbot_id)

        # 2) Internal user
        user = self.users.find_by_external_id(external_id)
        if user is None:
            return self._deny(UserNotFound(), chatbot_id)

        # 3) Chatbot with creator membership rows for this user
        chatbot = self.chatbots.find_with_membership(chatbot_id, user.id)
        if chatbot is None:
            return self._deny(ResourceNotFound(), chatbot_id)

        # 4) Membership
        if not chatbot.member_ids:
            return self._deny(Forbidden(), chatbot_id)

        return Result.success(
            OwnershipResult(
                user_id=user.id,
                chatbot_id=chatbot.id,
                chatbot=ChatbotSummary(
                    id=chatbot.id,
                    title=chatbot.title,
                    creator_id=chatbot.creator_id,
                ),
            )
        )

    @staticmethod
    def _deny(error: OwnershipError, chatbot_id: str) -> Result[OwnershipResult, OwnershipError]:
        logger.info("Chatbot access denied (%s) for chatbot %s", error.kind.value, chatbot_id)
        return Result.failure(error)
