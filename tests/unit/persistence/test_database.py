"""Unit tests for store error translation on Postgres repositories."""

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from ngestream.domain.error import StoreError
from ngestream.domain.value import MovieId
from ngestream.persistence.database import store_errors
from ngestream.persistence.repository import PostgresCommentRepository


class FakeSavepoint:
    def __init__(self, session: "FakeSession") -> None:
        self.session = session

    async def __aenter__(self):
        self.session.savepoints += 1
        return self

    async def __aexit__(self, exc_type, exc, tb):
        if exc_type is not None:
            self.session.savepoint_rollbacks += 1
        return False


class FakeSession:
    """Stands in for AsyncSession; every statement raises ``error``."""

    def __init__(self, error: BaseException) -> None:
        self.error = error
        self.savepoints = 0
        self.savepoint_rollbacks = 0
        self.rollbacks = 0

    def begin_nested(self) -> FakeSavepoint:
        return FakeSavepoint(self)

    async def execute(self, stmt):
        raise self.error

    async def flush(self):
        pass

    async def rollback(self):
        self.rollbacks += 1


class TestStoreErrors:
    """Tests for translating driver failures and recovering the session."""

    @pytest.mark.asyncio
    async def test_refused_connection_becomes_store_error(self):
        """A network failure should become StoreError and reset the session."""
        # Arrange
        session = FakeSession(ConnectionRefusedError(111, "Connection refused"))
        repo = PostgresCommentRepository(session)

        # Act
        with pytest.raises(StoreError, match="ConnectionRefusedError"):
            await repo.find_by_movie(MovieId("movie-1"))

        # Assert
        assert session.savepoint_rollbacks == 1
        assert session.rollbacks == 1

    @pytest.mark.asyncio
    async def test_constraint_violation_only_rolls_back_savepoint(self):
        """A rejected statement should leave earlier work in the transaction."""
        # Arrange
        error = IntegrityError("INSERT INTO comments", {}, Exception("check"))
        session = FakeSession(error)
        repo = PostgresCommentRepository(session)

        # Act
        with pytest.raises(StoreError, match="IntegrityError"):
            await repo.find_by_movie(MovieId("movie-1"))

        # Assert
        assert session.savepoint_rollbacks == 1
        assert session.rollbacks == 0

    @pytest.mark.asyncio
    async def test_invalidated_connection_resets_session(self):
        """A driver error that invalidated the connection should reset the session."""
        error = OperationalError(
            "SELECT 1", {}, Exception("server closed"), connection_invalidated=True
        )
        session = FakeSession(error)

        with pytest.raises(StoreError):
            async with store_errors(session, "Fetching comments"):
                await session.execute("SELECT 1")

        assert session.rollbacks == 1

    @pytest.mark.asyncio
    async def test_other_errors_pass_through(self):
        """Programming errors in our own code should not be disguised."""
        session = FakeSession(KeyError("id"))

        with pytest.raises(KeyError):
            async with store_errors(session, "Fetching comments"):
                await session.execute("SELECT 1")

        assert session.savepoint_rollbacks == 1
        assert session.rollbacks == 0
