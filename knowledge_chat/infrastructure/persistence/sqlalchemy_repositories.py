"""SQLAlchemy adapters for the store ports.

Each call opens its own short-lived session from the shared factory, so the
adapters hold no per-request state.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from sqlalchemy import and_, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from knowledge_chat.application.ports.chatbot_repository_port import ChatbotRepositoryPort
from knowledge_chat.application.ports.message_log_port import MessageLogPort
from knowledge_chat.application.ports.user_directory_port import UserDirectoryPort
from knowledge_chat.domain.errors import RateLimitStoreError
from knowledge_chat.domain.models import ChatbotMembership, UserRecord
from knowledge_chat.infrastructure.persistence.models import (
    Chatbot,
    Conversation,
    CreatorUser,
    Message,
    User,
)


@dataclass
class SqlMessageLog(MessageLogPort):
    session_factory: sessionmaker[Session]

    def count_user_messages_since(self, user_id: str, since: datetime) -> int:
        stmt = (
            select(func.count(Message.id))
            .join(Conversation, Message.conversation_id == Conversation.id)
            .where(
                Conversation.user_id == user_id,
                Message.role == "user",
                Message.created_at >= since,
            )
        )
        try:
            with self.session_factory() as session:
                return int(session.scalar(stmt) or 0)
        except SQLAlchemyError as ex:
            raise RateLimitStoreError(f"message count failed: {ex}") from ex


@dataclass
class SqlUserDirectory(UserDirectoryPort):
    session_factory: sessionmaker[Session]

    def find_by_external_id(self, external_id: str) -> UserRecord | None:
        stmt = select(User.id, User.external_id).where(User.external_id == external_id)
        with self.session_factory() as session:
            row = session.execute(stmt).first()
        if row is None:
            return None
        return UserRecord(id=row.id, external_id=row.external_id)


@dataclass
class SqlChatbotRepository(ChatbotRepositoryPort):
    session_factory: sessionmaker[Session]

    def find_with_membership(self, chatbot_id: str, user_id: str) -> ChatbotMembership | None:
        # One read: the outer join keeps the chatbot row when the user has no membership.
        stmt = (
            select(
                Chatbot.id,
                Chatbot.title,
                Chatbot.creator_id,
                CreatorUser.id.label("membership_id"),
            )
            .outerjoin(
                CreatorUser,
                and_(
                    CreatorUser.creator_id == Chatbot.creator_id,
                    CreatorUser.user_id == user_id,
                ),
            )
            .where(Chatbot.id == chatbot_id)
        )
        with self.session_factory() as session:
            rows = session.execute(stmt).all()
        if not rows:
            return None
        first = rows[0]
        return ChatbotMembership(
            id=first.id,
            title=first.title,
            creator_id=first.creator_id,
            member_ids=tuple(r.membership_id for r in rows if r.membership_id is not None),
        )
