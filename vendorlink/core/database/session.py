"""
Global database session and engine management.

This module manages the global AsyncEngine and async_sessionmaker instances
that are used throughout the application for database access.
"""

from __future__ import annotations

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from vendorlink.core.logging_config import get_logger
from vendorlink.server.core.config import settings

from .utils import create_all, create_engine, create_sessionmaker

logger = get_logger(__name__)

# Create global engine and session factory
engine = create_engine(settings.database.url, echo=settings.database.echo)
async_session_maker = create_sessionmaker(engine)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency generator for database sessions.

    Yields:
        AsyncSession: An asynchronous SQLAlchemy session.
    """
    async with async_session_maker() as session:
        yield session


async def init_db() -> None:
    """
    Initialize the database.

    In production the Alembic migrations own the schema and this is a no-op.
    With ``DATABASE__AUTO_CREATE=true`` missing tables are created from the
    entity metadata, which is convenient for local development.
    """
    if not settings.database.auto_create:
        logger.info("Skipping table creation; schema is managed by Alembic migrations")
        return
    logger.info("Creating missing database tables from entity metadata")
    await create_all(engine)
