# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker
from sqlalchemy.pool import StaticPool

from authdesk.shared.config import DatabaseConfig
from authdesk.shared.logging import logger


class Base(DeclarativeBase):
    pass


def _build_engine(config: DatabaseConfig) -> Engine:
    if config.is_memory():
        # a single shared connection, otherwise every checkout sees an empty database
        return create_engine(
            config.url,
            future=True,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )

    connect_args: dict[str, object] = {}
    if config.is_sqlite():
        connect_args = {
            "check_same_thread": False,
            "timeout": int(config.pool_timeout),
        }

    return create_engine(
        config.url,
        echo=False,
        future=True,
        pool_pre_ping=True,
        pool_size=config.pool_size,
        max_overflow=config.max_overflow,
        pool_timeout=config.pool_timeout,
        connect_args=connect_args,
    )


class Database:
    """Engine plus session factory, constructed once and passed to repositories."""

    def __init__(self, config: DatabaseConfig) -> None:
        self._config = config
        self.engine: Engine = _build_engine(config)
        if config.is_sqlite():
            event.listen(self.engine, "connect", _set_sqlite_pragmas)
        self.session_factory = sessionmaker(
            bind=self.engine, autoflush=False, autocommit=False, expire_on_commit=False
        )

    def init_schema(self) -> None:
        Base.metadata.create_all(bind=self.engine)
        logger.info("Database schema ensured")

    def ping(self) -> bool:
        with self.engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        return True

    def dispose(self) -> None:
        self.engine.dispose()
        logger.info("Database pool disposed")


def _set_sqlite_pragmas(dbapi_conn, _) -> None:
    cur = dbapi_conn.cursor()
    try:
        cur.execute("PRAGMA foreign_keys=ON;")
        cur.execute("PRAGMA busy_timeout=30000;")
    finally:
        cur.close()
