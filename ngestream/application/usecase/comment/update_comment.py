"""Update comment use case."""

from pydantic import BaseModel

from ngestream.config import CommentSettings
from ngestream.domain.error import NotAuthorOfComment, NotFoundError
from ngestream.domain.service import CommentService, EntitlementService
from ngestream.domain.value import Actor

from .common import CommentResponse, normalize_text, parse_comment_id, parse_movie_id


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    movie_id: str
    comment_id: str
    actor: Actor  # Must be the author
    comment: str  # New body, cannot be empty


class UpdateCommentUseCase:
    """Use case for editing a comment's body."""

    def __init__(
        self,
        comment_service: CommentService,
        entitlement_service: EntitlementService,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
            entitlement_service: Entitlement domain service
            comment_settings: Comment limits
        """
        self.comment_service = comment_service
        self.entitlement_service = entitlement_service
        self.comment_settings = comment_settings

    async def execute(self, request: UpdateCommentRequest) -> CommentResponse:
        """Execute update comment flow.

        Authorization is identity equality with the comment's author; there
        is no moderator override.

        Args:
            request: Update comment request

        Returns:
            Updated comment

        Raises:
            PermissionDenied: If the tier may not write
            ValidationError: If the new body is empty
            NotFoundError: If the comment does not exist on this movie
            NotAuthorOfComment: If the actor is not the author
            StoreError: If the store fails
        """
        self.entitlement_service.require_write(request.actor)

        movie_id = parse_movie_id(request.movie_id)
        comment_id = parse_comment_id(request.comment_id)
        text = normalize_text(request.comment, self.comment_settings.max_length)

        # 1. Retrieve existing comment
        comment = await self.comment_service.get_comment_by_id(comment_id)
        if comment is None or comment.movie_id != movie_id:
            raise NotFoundError("Comment", request.comment_id)

        # 2. Check authorship
        if comment.user_id != request.actor.user_id:
            raise NotAuthorOfComment(request.comment_id, str(request.actor.user_id))

        # 3. Scoped update (store re-checks authorship)
        updated = await self.comment_service.update_text(
            comment_id, request.actor.user_id, text
        )
        return CommentResponse.from_domain(updated)
