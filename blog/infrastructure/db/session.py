# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from blog.shared.config import DatabaseConfig
from blog.shared.logging import logger

_MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


class Base(DeclarativeBase):
    pass


class Database:
    """Owns the process-wide engine; every unit of work opens its own session."""

    def __init__(self, config: DatabaseConfig) -> None:
        connect_args: dict[str, object] = {}
        pool_args: dict[str, object] = {
            "pool_size": config.pool_size,
            "max_overflow": config.max_overflow,
            "pool_timeout": config.pool_timeout,
        }
        if config.url.startswith("sqlite"):
            connect_args = {
                "check_same_thread": False,
                "timeout": int(config.pool_timeout),
            }
            if config.url in _MEMORY_URLS:
                # An in-memory database only exists on its one connection.
                pool_args = {"poolclass": StaticPool}

        self.engine: Engine = create_engine(
            config.url,
            echo=False,
            pool_pre_ping=True,
            connect_args=connect_args,
            **pool_args,
        )
        self._sessions = sessionmaker(
            bind=self.engine, autoflush=False, expire_on_commit=False
        )

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        session = self._sessions()
        logger.debug("db.session: opened session")
        try:
            yield session
            session.commit()
            logger.debug("db.session: committed session")
        except Exception:
            logger.debug("db.session: error, rolling back")
            session.rollback()
            raise
        finally:
            session.close()
            logger.debug("db.session: closed session")

    def create_tables(self) -> None:
        Base.metadata.create_all(bind=self.engine)
        logger.info("Database schema ensured")

    def dispose(self) -> None:
        self.engine.dispose()
