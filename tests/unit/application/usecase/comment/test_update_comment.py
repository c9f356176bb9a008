"""Unit tests for UpdateCommentUseCase."""

from uuid import uuid4

import pytest

from ngestream.application.usecase.comment import (
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from ngestream.domain.error import (
    NotAuthorOfComment,
    NotFoundError,
    PermissionDenied,
    ValidationError,
)
from ngestream.domain.repository import CommentRepository
from ngestream.domain.value import Actor, SubscriptionTier, UserId
from tests.conftest import make_comment
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUpdateCommentUseCase:
    """Tests for UpdateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_author_can_edit(self, unit_env):
        """Author should be able to replace the body."""
        # Arrange
        use_case = await unit_env.get(UpdateCommentUseCase)
        repo = await unit_env.get(CommentRepository)
        actor = Actor(user_id=UserId(uuid4()), tier=SubscriptionTier.PREMIUM)
        comment = await repo.add(make_comment("Typo", user_id=actor.user_id))

        # Act
        response = await use_case.execute(
            UpdateCommentRequest(
                movie_id="movie-1",
                comment_id=str(comment.id),
                actor=actor,
                comment=" Fixed ",
            )
        )

        # Assert
        assert response.comment == "Fixed"
        assert response.edited is True
        stored = await repo.find_by_id(comment.id)
        assert stored.comment == "Fixed"

    @pytest.mark.asyncio
    async def test_non_author_cannot_edit(self, unit_env):
        """Another premium user should get NotAuthorOfComment."""
        # Arrange
        use_case = await unit_env.get(UpdateCommentUseCase)
        repo = await unit_env.get(CommentRepository)
        comment = await repo.add(make_comment("Mine"))
        intruder = Actor(user_id=UserId(uuid4()), tier=SubscriptionTier.PREMIUM)

        # Act & Assert
        with pytest.raises(NotAuthorOfComment):
            await use_case.execute(
                UpdateCommentRequest(
                    movie_id="movie-1",
                    comment_id=str(comment.id),
                    actor=intruder,
                    comment="Not yours",
                )
            )
        assert (await repo.find_by_id(comment.id)).comment == "Mine"

    @pytest.mark.asyncio
    async def test_author_downgraded_to_basic_denied(self, unit_env):
        """Authors lose edit rights with their premium tier."""
        use_case = await unit_env.get(UpdateCommentUseCase)
        repo = await unit_env.get(CommentRepository)
        actor = Actor(user_id=UserId(uuid4()), tier=SubscriptionTier.BASIC)
        comment = await repo.add(make_comment("Old", user_id=actor.user_id))

        with pytest.raises(PermissionDenied):
            await use_case.execute(
                UpdateCommentRequest(
                    movie_id="movie-1",
                    comment_id=str(comment.id),
                    actor=actor,
                    comment="New",
                )
            )

    @pytest.mark.asyncio
    async def test_blank_edit_rejected(self, unit_env):
        """Editing to whitespace should raise ValidationError."""
        use_case = await unit_env.get(UpdateCommentUseCase)
        repo = await unit_env.get(CommentRepository)
        actor = Actor(user_id=UserId(uuid4()), tier=SubscriptionTier.PREMIUM)
        comment = await repo.add(make_comment("Keep", user_id=actor.user_id))

        with pytest.raises(ValidationError):
            await use_case.execute(
                UpdateCommentRequest(
                    movie_id="movie-1",
                    comment_id=str(comment.id),
                    actor=actor,
                    comment="   ",
                )
            )

    @pytest.mark.asyncio
    async def test_comment_on_other_movie_not_found(self, unit_env):
        """Movie and comment ids must agree."""
        use_case = await unit_env.get(UpdateCommentUseCase)
        repo = await unit_env.get(CommentRepository)
        actor = Actor(user_id=UserId(uuid4()), tier=SubscriptionTier.PREMIUM)
        comment = await repo.add(
            make_comment("Elsewhere", movie_id="movie-2", user_id=actor.user_id)
        )

        with pytest.raises(NotFoundError):
            await use_case.execute(
                UpdateCommentRequest(
                    movie_id="movie-1",
                    comment_id=str(comment.id),
                    actor=actor,
                    comment="Moved",
                )
            )
