"""
Database connection setup.

This module initializes the async engine for the relational store and
provides the `get_db` dependency used by the API routers.

SQLite connections get `PRAGMA case_sensitive_like = ON` so that name and
title filters behave the same as on PostgreSQL, where LIKE is already
case-sensitive.
"""

from typing import AsyncGenerator

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker

from server.src.core.config import settings
from server.src.core.logging_config import get_logger
from server.src.models.base import Base

logger = get_logger(__name__)


def _enable_case_sensitive_like(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA case_sensitive_like = ON")
    cursor.close()


def configure_engine(engine: AsyncEngine) -> AsyncEngine:
    """Attach backend specific connection hooks to an engine."""
    sync_engine: Engine = engine.sync_engine
    if sync_engine.dialect.name == "sqlite":
        event.listen(sync_engine, "connect", _enable_case_sensitive_like)
    return engine


engine = configure_engine(
    create_async_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO, future=True)
)

AsyncSessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency to get a database session.
    """
    async with AsyncSessionLocal() as session:
        yield session


async def create_tables(target: AsyncEngine = engine) -> None:
    """Create the players table if it does not exist yet."""
    async with target.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ensured", extra={"url": target.url.render_as_string()})
