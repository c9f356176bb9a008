"""Create comment use case."""

from pydantic import BaseModel

from ngestream.config import CommentSettings
from ngestream.domain.error import NotFoundError, ValidationError
from ngestream.domain.service import CommentService, EntitlementService
from ngestream.domain.value import Actor

from .common import CommentResponse, normalize_text, parse_comment_id, parse_movie_id


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    movie_id: str
    actor: Actor
    comment: str
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentUseCase:
    """Use case for posting a root comment or replying to a comment."""

    def __init__(
        self,
        comment_service: CommentService,
        entitlement_service: EntitlementService,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            entitlement_service: Entitlement domain service
            comment_settings: Comment limits
        """
        self.comment_service = comment_service
        self.entitlement_service = entitlement_service
        self.comment_settings = comment_settings

    async def execute(self, request: CreateCommentRequest) -> CommentResponse:
        """Execute create comment flow.

        Steps:
        1. Check the actor's tier may write
        2. Trim and validate the body
        3. For replies, verify the parent exists on the same movie
        4. Insert via comment service

        Nothing reaches the store when steps 1-3 fail.

        Args:
            request: Create comment request

        Returns:
            The stored comment

        Raises:
            PermissionDenied: If the tier may not write
            ValidationError: If the body is empty or the parent is on another movie
            NotFoundError: If the parent comment does not exist
            StoreError: If the store fails
        """
        self.entitlement_service.require_write(request.actor)

        movie_id = parse_movie_id(request.movie_id)
        text = normalize_text(request.comment, self.comment_settings.max_length)

        parent_id = None
        if request.parent_id is not None:
            parent_id = parse_comment_id(request.parent_id)
            parent = await self.comment_service.get_comment_by_id(parent_id)
            if parent is None:
                raise NotFoundError("Comment", request.parent_id)
            if parent.movie_id != movie_id:
                raise ValidationError(
                    f"Comment {request.parent_id} does not belong to movie {movie_id}"
                )

        comment = await self.comment_service.create_comment(
            movie_id=movie_id,
            user_id=request.actor.user_id,
            text=text,
            parent_id=parent_id,
        )
        return CommentResponse.from_domain(comment)
