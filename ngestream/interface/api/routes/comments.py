"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, status
from pydantic import BaseModel

from ngestream.application.usecase.auth import ResolveActorUseCase
from ngestream.application.usecase.comment import (
    CommentResponse,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentTreeRequest,
    GetCommentTreeResponse,
    GetCommentTreeUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from ngestream.domain.error import DomainError
from ngestream.interface.api.session import require_actor
from ngestream.interface.error import InterfaceError, to_http_exception

router = APIRouter(prefix="/movies", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment.

    Body length and blankness are checked by the use case so the caller
    gets a 400 with a readable message.
    """

    comment: str
    parent_id: str | None = None  # Parent comment ID for replies


class UpdateCommentAPIRequest(BaseModel):
    """API request for editing a comment."""

    comment: str


@router.get("/{movie_id}/comments", response_model=GetCommentTreeResponse)
async def get_comments(
    movie_id: str,
    get_comment_tree_use_case: FromDishka[GetCommentTreeUseCase],
) -> GetCommentTreeResponse:
    """Get a movie's comments as a threaded forest.

    Roots come newest first; replies at every level come oldest first.
    Open to everyone, including anonymous visitors.
    """
    try:
        return await get_comment_tree_use_case.execute(
            GetCommentTreeRequest(movie_id=movie_id)
        )
    except DomainError as e:
        raise to_http_exception(e) from e


@router.post(
    "/{movie_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    movie_id: str,
    request: CreateCommentAPIRequest,
    resolve_actor: FromDishka[ResolveActorUseCase],
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> CommentResponse:
    """Post a root comment, or reply when ``parent_id`` is given.

    Requires a premium subscription.

    Raises:
        HTTPException: 401 if not authenticated, 403 if the tier may not
            write, 404 if the parent is unknown, 400 if the body is invalid
    """
    try:
        actor = await require_actor(
            resolve_actor, authorization, auth_token, "post comments"
        )
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                movie_id=movie_id,
                actor=actor,
                comment=request.comment,
                parent_id=request.parent_id,
            )
        )
    except (DomainError, InterfaceError) as e:
        logfire.warn("Comment creation failed", movie_id=movie_id, error=str(e))
        raise to_http_exception(e) from e


@router.patch("/{movie_id}/comments/{comment_id}", response_model=CommentResponse)
async def update_comment(
    movie_id: str,
    comment_id: str,
    request: UpdateCommentAPIRequest,
    resolve_actor: FromDishka[ResolveActorUseCase],
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> CommentResponse:
    """Replace a comment's body.

    Only the author can edit.
    """
    try:
        actor = await require_actor(
            resolve_actor, authorization, auth_token, "edit comments"
        )
        return await update_comment_use_case.execute(
            UpdateCommentRequest(
                movie_id=movie_id,
                comment_id=comment_id,
                actor=actor,
                comment=request.comment,
            )
        )
    except (DomainError, InterfaceError) as e:
        logfire.warn(
            "Comment update failed",
            movie_id=movie_id,
            comment_id=comment_id,
            error=str(e),
        )
        raise to_http_exception(e) from e


@router.delete(
    "/{movie_id}/comments/{comment_id}", response_model=DeleteCommentResponse
)
async def delete_comment(
    movie_id: str,
    comment_id: str,
    resolve_actor: FromDishka[ResolveActorUseCase],
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> DeleteCommentResponse:
    """Delete a comment together with all of its replies.

    Only the author can delete.
    """
    try:
        actor = await require_actor(
            resolve_actor, authorization, auth_token, "delete comments"
        )
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(movie_id=movie_id, comment_id=comment_id, actor=actor)
        )
    except (DomainError, InterfaceError) as e:
        logfire.warn(
            "Comment deletion failed",
            movie_id=movie_id,
            comment_id=comment_id,
            error=str(e),
        )
        raise to_http_exception(e) from e
