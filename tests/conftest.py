"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import logfire

from ngestream.domain.model import Comment
from ngestream.domain.value import CommentId, MovieId, UserId

# Console-only, quiet; app and services call logfire at import and run time
logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


def make_comment(
    text: str = "Great movie",
    *,
    movie_id: str = "movie-1",
    user_id: UserId | None = None,
    parent: Comment | None = None,
    parent_id: CommentId | None = None,
    minutes: int = 0,
    edited_minutes: int | None = None,
    comment_id: CommentId | None = None,
) -> Comment:
    """Build a comment row for tests.

    Args:
        text: Comment body
        movie_id: Movie the comment belongs to
        user_id: Author (random if omitted)
        parent: Comment replied to; its id wins over ``parent_id``
        parent_id: Raw parent id, for orphans and cycles
        minutes: Offset of ``created_at`` from BASE_TIME
        edited_minutes: Offset of ``updated_at`` if the comment was edited
        comment_id: Fixed id (random if omitted)
    """
    created_at = BASE_TIME + timedelta(minutes=minutes)
    updated_at = (
        BASE_TIME + timedelta(minutes=edited_minutes)
        if edited_minutes is not None
        else created_at
    )
    return Comment(
        id=comment_id or CommentId(uuid4()),
        movie_id=MovieId(movie_id),
        user_id=user_id or UserId(uuid4()),
        comment=text,
        parent_id=parent.id if parent else parent_id,
        created_at=created_at,
        updated_at=updated_at,
    )
