"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from ngestream.config import Settings
from ngestream.domain.repository import (
    CommentRepository,
    ProfileRepository,
    SubscriptionRepository,
)
from ngestream.persistence.database import create_engine, create_session_factory
from ngestream.persistence.repository import (
    PostgresCommentRepository,
    PostgresProfileRepository,
    PostgresSubscriptionRepository,
)
from ngestream.util.di.base import ProviderBase
from ngestream.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine; the pool is disposed with the container."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        Committed at the end of the request, rolled back if it raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_profile_repository(self, session: AsyncSession) -> ProfileRepository:
        """Provide Profile repository."""
        return PostgresProfileRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_subscription_repository(
        self, session: AsyncSession
    ) -> SubscriptionRepository:
        """Provide Subscription repository."""
        return PostgresSubscriptionRepository(session)
