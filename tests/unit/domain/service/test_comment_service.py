"""Unit tests for CommentService."""

import asyncio
from uuid import uuid4

import pytest

from ngestream.domain.error import NotAuthorOfComment, StoreError
from ngestream.domain.repository import CommentRepository
from ngestream.domain.service import CommentService
from ngestream.domain.value import CommentId, MovieId, UserId
from ngestream.persistence.repository.inmemory import InMemoryCommentRepository
from tests.conftest import make_comment
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class SlowCommentRepository(InMemoryCommentRepository):
    """Repository whose reads never come back in time."""

    async def find_by_movie(self, movie_id):
        await asyncio.sleep(1)
        return []


class UnreachableCommentRepository(InMemoryCommentRepository):
    async def find_by_movie(self, movie_id):
        raise ConnectionRefusedError(111, "Connection refused")


class TestCreateComment:
    """Tests for create_comment method."""

    @pytest.mark.asyncio
    async def test_create_root_comment(self, unit_env):
        """Root comment should be stored with store-assigned fields."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        user_id = UserId(uuid4())

        # Act
        result = await comment_service.create_comment(
            movie_id=MovieId("movie-1"), user_id=user_id, text="Loved it"
        )

        # Assert
        assert result.parent_id is None
        assert result.comment == "Loved it"
        assert result.user_id == user_id
        assert result.created_at == result.updated_at
        assert result.created_at.tzinfo is not None
        assert await comment_repo.find_by_id(result.id) == result

    @pytest.mark.asyncio
    async def test_create_reply(self, unit_env):
        """Reply should carry its parent's id."""
        comment_service = await unit_env.get(CommentService)
        root = await comment_service.create_comment(
            movie_id=MovieId("movie-1"), user_id=UserId(uuid4()), text="Root"
        )

        reply = await comment_service.create_comment(
            movie_id=MovieId("movie-1"),
            user_id=UserId(uuid4()),
            text="Reply",
            parent_id=root.id,
        )

        assert reply.parent_id == root.id


class TestUpdateText:
    """Tests for update_text method."""

    @pytest.mark.asyncio
    async def test_update_bumps_updated_at(self, unit_env):
        """Author edit should change body and updated_at only."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        author = UserId(uuid4())
        original = await comment_repo.add(make_comment("Before", user_id=author))

        # Act
        updated = await comment_service.update_text(original.id, author, "After")

        # Assert
        assert updated.comment == "After"
        assert updated.created_at == original.created_at
        assert updated.updated_at > original.updated_at
        assert updated.is_edited

    @pytest.mark.asyncio
    async def test_update_by_non_author_raises(self, unit_env):
        """Store-side author scope matching nothing should raise."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        original = await comment_repo.add(make_comment("Mine"))

        with pytest.raises(NotAuthorOfComment):
            await comment_service.update_text(original.id, UserId(uuid4()), "Hijack")

        assert (await comment_repo.find_by_id(original.id)).comment == "Mine"


class TestDeleteComment:
    """Tests for delete_comment method."""

    @pytest.mark.asyncio
    async def test_delete_cascades_to_replies(self, unit_env):
        """Deleting a comment should remove its whole subtree."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        author = UserId(uuid4())
        root = await comment_repo.add(make_comment("Root", user_id=author))
        child = await comment_repo.add(make_comment("Child", parent=root, minutes=1))
        grandchild = await comment_repo.add(
            make_comment("Grandchild", parent=child, minutes=2)
        )
        other_root = await comment_repo.add(make_comment("Other", minutes=3))

        # Act
        removed = await comment_service.delete_comment(root.id, author)

        # Assert
        assert removed == 3
        for gone in (root, child, grandchild):
            assert await comment_repo.find_by_id(gone.id) is None
        assert await comment_repo.find_by_id(other_root.id) is not None

    @pytest.mark.asyncio
    async def test_delete_unknown_comment_raises(self, unit_env):
        """Deleting nothing should surface as NotAuthorOfComment."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotAuthorOfComment):
            await comment_service.delete_comment(CommentId(uuid4()), UserId(uuid4()))


class TestStoreBounds:
    """Tests for store timeouts."""

    @pytest.mark.asyncio
    async def test_slow_store_raises_store_error(self):
        """A fetch that outlives the timeout should fail with StoreError."""
        comment_service = CommentService(
            comment_repository=SlowCommentRepository(), store_timeout_seconds=0.01
        )

        with pytest.raises(StoreError, match="timed out"):
            await comment_service.get_comments_for_movie(MovieId("movie-1"))

    @pytest.mark.asyncio
    async def test_network_failure_raises_store_error(self):
        """A refused connection should surface as StoreError."""
        comment_service = CommentService(
            comment_repository=UnreachableCommentRepository()
        )

        with pytest.raises(StoreError, match="ConnectionRefusedError") as exc_info:
            await comment_service.get_comments_for_movie(MovieId("movie-1"))

        assert isinstance(exc_info.value.__cause__, ConnectionRefusedError)
