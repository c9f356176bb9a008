"""Delete comment use case."""

from pydantic import BaseModel

from ngestream.domain.error import NotAuthorOfComment, NotFoundError
from ngestream.domain.service import CommentService, EntitlementService
from ngestream.domain.value import Actor

from .common import parse_comment_id, parse_movie_id


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    movie_id: str
    comment_id: str
    actor: Actor  # Must be the author


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: str
    removed: int  # Target row plus cascaded replies


class DeleteCommentUseCase:
    """Use case for deleting a comment together with its replies."""

    def __init__(
        self,
        comment_service: CommentService,
        entitlement_service: EntitlementService,
    ) -> None:
        self.comment_service = comment_service
        self.entitlement_service = entitlement_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Only the target row is deleted here; replies go with it through the
        store's cascade.

        Raises:
            PermissionDenied: If the tier may not write
            NotFoundError: If the comment does not exist on this movie
            NotAuthorOfComment: If the actor is not the author
            StoreError: If the store fails
        """
        self.entitlement_service.require_write(request.actor)

        movie_id = parse_movie_id(request.movie_id)
        comment_id = parse_comment_id(request.comment_id)

        comment = await self.comment_service.get_comment_by_id(comment_id)
        if comment is None or comment.movie_id != movie_id:
            raise NotFoundError("Comment", request.comment_id)

        if comment.user_id != request.actor.user_id:
            raise NotAuthorOfComment(request.comment_id, str(request.actor.user_id))

        removed = await self.comment_service.delete_comment(
            comment_id, request.actor.user_id
        )
        return DeleteCommentResponse(comment_id=request.comment_id, removed=removed)
