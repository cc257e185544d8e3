"""SQLAlchemy ORM models for the relational store.

Only the tables the chat core reads are mapped here; rows are written by the
chat and creator-management handlers.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, String, Text, UniqueConstraint, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    pass


class User(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    # Identity provider subject; immutable per user.
    external_id: Mapped[str] = mapped_column(String, unique=True, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())


class Creator(Base):
    __tablename__ = "creators"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    name: Mapped[str] = mapped_column(String)

    users: Mapped[list[CreatorUser]] = relationship(back_populates="creator")
    chatbots: Mapped[list[Chatbot]] = relationship(back_populates="creator")


class CreatorUser(Base):
    __tablename__ = "creator_users"
    __table_args__ = (UniqueConstraint("creator_id", "user_id", name="uq_creator_users_member"),)

    id: Mapped[str] = mapped_column(String, primary_key=True)
    creator_id: Mapped[str] = mapped_column(String, ForeignKey("creators.id"), index=True)
    user_id: Mapped[str] = mapped_column(String, ForeignKey("users.id"), index=True)

    creator: Mapped[Creator] = relationship(back_populates="users")


class Chatbot(Base):
    __tablename__ = "chatbots"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    title: Mapped[str] = mapped_column(String)
    creator_id: Mapped[str] = mapped_column(String, ForeignKey("creators.id"), index=True)

    creator: Mapped[Creator] = relationship(back_populates="chatbots")


class Conversation(Base):
    __tablename__ = "conversations"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    chatbot_id: Mapped[str] = mapped_column(String, ForeignKey("chatbots.id"), index=True)
    # Anonymous conversations have no owner.
    user_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("users.id"), index=True, nullable=True
    )


class Message(Base):
    __tablename__ = "messages"
    __table_args__ = (
        Index("ix_messages_conversation_role_created", "conversation_id", "role", "created_at"),
    )

    id: Mapped[str] = mapped_column(String, primary_key=True)
    conversation_id: Mapped[str] = mapped_column(String, ForeignKey("conversations.id"))
    role: Mapped[str] = mapped_column(String(16))  # "user" | "assistant"
    content: Mapped[str] = mapped_column(Text, default="")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), index=True
    )
