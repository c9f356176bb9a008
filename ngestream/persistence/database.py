"""Database connection and session management.

Provides async database engine and session factory for PostgreSQL.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import logfire
from sqlalchemy.exc import DBAPIError, InterfaceError, SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from ngestream.config import Settings
from ngestream.domain.error import StoreError


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,  # Log SQL queries in debug mode
        pool_pre_ping=True,  # Verify connections before using
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Args:
        engine: Database engine

    Returns:
        Session factory for creating database sessions
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,  # Don't expire objects after commit
        autoflush=False,  # Manual flushing for better control
        autocommit=False,  # Explicit transaction management
    )


@asynccontextmanager
async def store_errors(session: AsyncSession, operation: str) -> AsyncIterator[None]:
    """Run statements in a savepoint, translating failures into StoreError.

    A failed statement only rolls back its own savepoint, so the session
    stays usable and earlier writes of the same request survive. When the
    connection itself is gone the whole session is rolled back so the next
    call checks out a fresh connection.

    Args:
        session: Session the wrapped statements run on
        operation: Short description used in the error and log event
    """
    try:
        async with session.begin_nested():
            yield
    except (SQLAlchemyError, OSError) as e:
        logfire.error(
            "Database operation failed",
            operation=operation,
            error_type=type(e).__name__,
            error=str(e),
        )
        if _connection_lost(e):
            await _rollback(session, operation)
        raise StoreError(f"{operation} failed: {e.__class__.__name__}") from e


def _connection_lost(error: Exception) -> bool:
    if isinstance(error, (OSError, InterfaceError)):
        return True
    return isinstance(error, DBAPIError) and error.connection_invalidated


async def _rollback(session: AsyncSession, operation: str) -> None:
    try:
        await session.rollback()
    except (SQLAlchemyError, OSError) as e:
        # The pool discards the dead connection on next checkout
        logfire.warn(
            "Rollback after lost connection failed",
            operation=operation,
            error_type=type(e).__name__,
        )
