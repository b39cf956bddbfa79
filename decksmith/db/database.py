"""
Database engine and session management for the deck store.

Provides the async SQLAlchemy engine and a per-request session for FastAPI.
Decks live in SQLite by default; any async SQLAlchemy URL (e.g. asyncpg)
can be set through the `DATABASE_URL` setting.
"""

import logging
from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy import event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from decksmith.config import settings
from decksmith.models.db import Base

logger = logging.getLogger(__name__)


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """Turn on SQLite foreign key enforcement so deck entries cascade with their deck."""

    @event.listens_for(engine.sync_engine, "connect")
    def set_sqlite_pragma(dbapi_connection: Any, _connection_record: Any) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


engine = create_async_engine(
    settings.database_url,
    echo=settings.debug,
    pool_pre_ping=True,
)

if engine.dialect.name == "sqlite":
    enable_sqlite_foreign_keys(engine)

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency that provides a database session.

    Commits when the request succeeds. Deck changes made by a request
    that fails are discarded when the session closes.
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except SQLAlchemyError:
            logger.warning("Rolling back deck store session after database error")
            await session.rollback()
            raise


async def init_db() -> None:
    """
    Create the deck store tables if they don't exist.

    Called once at application startup.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Deck store ready at %s", engine.url.render_as_string(hide_password=True))
