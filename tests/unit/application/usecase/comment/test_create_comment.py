"""Unit tests for CreateCommentUseCase."""

from uuid import uuid4

import pytest

from ngestream.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from ngestream.domain.error import NotFoundError, PermissionDenied, ValidationError
from ngestream.domain.repository import CommentRepository
from ngestream.domain.value import Actor, MovieId, SubscriptionTier, UserId
from tests.conftest import make_comment
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


def premium_actor() -> Actor:
    return Actor(user_id=UserId(uuid4()), tier=SubscriptionTier.PREMIUM)


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_create_root_comment_trims_body(self, unit_env):
        """Body should be stored trimmed."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        actor = premium_actor()

        # Act
        response = await use_case.execute(
            CreateCommentRequest(
                movie_id="movie-1", actor=actor, comment="  What an ending!  "
            )
        )

        # Assert
        assert response.comment == "What an ending!"
        assert response.user_id == str(actor.user_id)
        assert response.parent_id is None
        assert response.edited is False

    @pytest.mark.asyncio
    async def test_reply_to_existing_comment(self, unit_env):
        """Reply should reference its parent."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        repo = await unit_env.get(CommentRepository)
        parent = await repo.add(make_comment("Root", movie_id="movie-1"))

        # Act
        response = await use_case.execute(
            CreateCommentRequest(
                movie_id="movie-1",
                actor=premium_actor(),
                comment="Agreed",
                parent_id=str(parent.id),
            )
        )

        # Assert
        assert response.parent_id == str(parent.id)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("tier", [SubscriptionTier.FREE, SubscriptionTier.BASIC])
    async def test_non_premium_denied_without_store_write(self, unit_env, tier):
        """Non-premium tiers should be refused before anything is stored."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        repo = await unit_env.get(CommentRepository)
        actor = Actor(user_id=UserId(uuid4()), tier=tier)

        # Act & Assert
        with pytest.raises(PermissionDenied):
            await use_case.execute(
                CreateCommentRequest(movie_id="movie-1", actor=actor, comment="Hi")
            )
        assert await repo.find_by_movie(MovieId("movie-1")) == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", ["", "   ", "\n\t "])
    async def test_blank_body_rejected(self, unit_env, body):
        """Whitespace-only bodies should raise ValidationError."""
        use_case = await unit_env.get(CreateCommentUseCase)
        repo = await unit_env.get(CommentRepository)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(
                CreateCommentRequest(
                    movie_id="movie-1", actor=premium_actor(), comment=body
                )
            )
        assert await repo.find_by_movie(MovieId("movie-1")) == []

    @pytest.mark.asyncio
    async def test_too_long_body_rejected(self, unit_env):
        """Bodies over the configured maximum should raise ValidationError."""
        use_case = await unit_env.get(CreateCommentUseCase)
        body = "x" * (use_case.comment_settings.max_length + 1)

        with pytest.raises(ValidationError):
            await use_case.execute(
                CreateCommentRequest(
                    movie_id="movie-1", actor=premium_actor(), comment=body
                )
            )

    @pytest.mark.asyncio
    async def test_unknown_parent_not_found(self, unit_env):
        """Replying to a missing comment should raise NotFoundError."""
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(
                    movie_id="movie-1",
                    actor=premium_actor(),
                    comment="Hello?",
                    parent_id=str(uuid4()),
                )
            )

    @pytest.mark.asyncio
    async def test_parent_on_other_movie_rejected(self, unit_env):
        """A reply must stay on its parent's movie."""
        use_case = await unit_env.get(CreateCommentUseCase)
        repo = await unit_env.get(CommentRepository)
        parent = await repo.add(make_comment("Elsewhere", movie_id="movie-2"))

        with pytest.raises(ValidationError):
            await use_case.execute(
                CreateCommentRequest(
                    movie_id="movie-1",
                    actor=premium_actor(),
                    comment="Wrong thread",
                    parent_id=str(parent.id),
                )
            )

    @pytest.mark.asyncio
    @pytest.mark.parametrize("parent_id", ["not-a-uuid", ""])
    async def test_malformed_parent_id_rejected(self, unit_env, parent_id):
        """A parent id that is not a UUID should raise ValidationError."""
        use_case = await unit_env.get(CreateCommentUseCase)
        repo = await unit_env.get(CommentRepository)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(
                CreateCommentRequest(
                    movie_id="movie-1",
                    actor=premium_actor(),
                    comment="Reply",
                    parent_id=parent_id,
                )
            )
        assert isinstance(exc_info.value.__cause__, ValueError)
        assert await repo.find_by_movie(MovieId("movie-1")) == []
