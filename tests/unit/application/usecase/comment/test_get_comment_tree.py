"""Unit tests for GetCommentTreeUseCase."""

from uuid import uuid4

import pytest

from ngestream.application.usecase.comment import (
    GetCommentTreeRequest,
    GetCommentTreeUseCase,
)
from ngestream.domain.error import StoreError
from ngestream.domain.model import UserProfile
from ngestream.domain.repository import CommentRepository, ProfileRepository
from ngestream.domain.service import CommentService, ProfileService
from ngestream.domain.value import UserId
from ngestream.persistence.repository.inmemory import InMemoryCommentRepository
from tests.conftest import make_comment
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class BrokenCommentRepository(InMemoryCommentRepository):
    async def find_by_movie(self, movie_id):
        raise StoreError("connection refused")


class TestGetCommentTreeUseCase:
    """Tests for GetCommentTreeUseCase."""

    @pytest.mark.asyncio
    async def test_tree_with_authors(self, unit_env):
        """Response should nest replies and decorate authors."""
        # Arrange
        use_case = await unit_env.get(GetCommentTreeUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        profile_repo = await unit_env.get(ProfileRepository)
        known = UserId(uuid4())
        unknown = UserId(uuid4())
        await profile_repo.save(UserProfile(user_id=known, full_name="Kofi Mensah"))

        root = await comment_repo.add(make_comment("Root", user_id=known))
        await comment_repo.add(
            make_comment("Reply", user_id=unknown, parent=root, minutes=1)
        )
        await comment_repo.add(make_comment("Other movie", movie_id="movie-2"))

        # Act
        response = await use_case.execute(GetCommentTreeRequest(movie_id="movie-1"))

        # Assert
        assert response.total == 2
        (root_response,) = response.comments
        assert root_response.author_name == "Kofi Mensah"
        assert root_response.reply_count == 1
        (reply_response,) = root_response.replies
        assert reply_response.author_name == f"User {str(unknown)[:8]}..."
        assert reply_response.author_avatar_url == "/placeholder.svg"
        assert reply_response.parent_id == str(root.id)

    @pytest.mark.asyncio
    async def test_empty_movie(self, unit_env):
        """A movie with no comments should return an empty forest."""
        use_case = await unit_env.get(GetCommentTreeUseCase)

        response = await use_case.execute(GetCommentTreeRequest(movie_id="quiet"))

        assert response.comments == []
        assert response.total == 0

    @pytest.mark.asyncio
    async def test_store_failure_propagates(self, unit_env):
        """A failing fetch should surface as StoreError with nothing partial."""
        profile_service = await unit_env.get(ProfileService)
        use_case = GetCommentTreeUseCase(
            comment_service=CommentService(BrokenCommentRepository()),
            profile_service=profile_service,
        )

        with pytest.raises(StoreError):
            await use_case.execute(GetCommentTreeRequest(movie_id="movie-1"))
