"""Engine and session factory for the relational store."""

from __future__ import annotations

import os
from dataclasses import dataclass

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool


@dataclass
class DatabaseConfig:
    """Configuration for the SQLAlchemy engine."""

    url: str = "sqlite:///var/knowledge_chat.db"
    echo: bool = False


def build_engine(cfg: DatabaseConfig) -> Engine:
    """Create the engine.

    In-memory SQLite gets a single shared connection so every session sees
    the same database.
    """
    if cfg.url.startswith("sqlite") and ":memory:" in cfg.url:
        return create_engine(
            cfg.url,
            echo=cfg.echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    if cfg.url.startswith("sqlite:///"):
        db_dir = os.path.dirname(cfg.url.removeprefix("sqlite:///"))
        if db_dir:
            os.makedirs(db_dir, exist_ok=True)
        return create_engine(cfg.url, echo=cfg.echo, connect_args={"check_same_thread": False})
    return create_engine(cfg.url, echo=cfg.echo, pool_pre_ping=True)


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, expire_on_commit=False)
