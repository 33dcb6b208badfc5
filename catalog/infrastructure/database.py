"""
SQLAlchemy engine and session factory for the record store.

The engine is a process-wide resource created once by the application
factory and shared by every request through the session factory.
"""

import logging

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from catalog.core.config import Settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""


def build_engine(settings: Settings) -> AsyncEngine:
    """Build the async SQLAlchemy engine from application settings."""
    return create_async_engine(
        settings.get_database_url(),
        echo=settings.database_echo,
        pool_pre_ping=True,
    )


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Return a session factory bound to the engine."""
    return async_sessionmaker(engine, expire_on_commit=False)


async def connect_db(engine: AsyncEngine) -> bool:
    """Check connectivity once and create missing tables.

    A failure is logged and swallowed so the application keeps
    serving; store-backed requests then fail individually.

    Returns:
        True if the store answered, False otherwise.
    """
    # Register models on Base.metadata before create_all.
    from catalog.infrastructure.products import models  # noqa: F401

    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except Exception as exc:
        logger.error("Database connection failed: %s", type(exc).__name__)
        return False

    logger.info("Database connection established")
    return True
