"""Shared request parsing and response shapes for comment use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from ngestream.domain.error import ValidationError
from ngestream.domain.model import Comment
from ngestream.domain.value import CommentId, MovieId


class CommentResponse(BaseModel):
    """A single comment row."""

    comment_id: str
    movie_id: str
    user_id: str
    comment: str
    parent_id: str | None
    created_at: datetime
    updated_at: datetime
    edited: bool

    @classmethod
    def from_domain(cls, comment: Comment) -> "CommentResponse":
        return cls(
            comment_id=str(comment.id),
            movie_id=comment.movie_id,
            user_id=str(comment.user_id),
            comment=comment.comment,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            edited=comment.is_edited,
        )


def parse_comment_id(raw: str) -> CommentId:
    try:
        return CommentId(UUID(raw))
    except ValueError as e:
        raise ValidationError(f"Invalid comment id: {raw}") from e


def parse_movie_id(raw: str) -> MovieId:
    movie_id = raw.strip()
    if not movie_id:
        raise ValidationError("Movie id cannot be empty")
    return MovieId(movie_id)


def normalize_text(text: str, max_length: int) -> str:
    """Trim a comment body and enforce its bounds.

    Raises:
        ValidationError: If the body is empty after trimming or too long
    """
    cleaned = text.strip()
    if not cleaned:
        raise ValidationError("Comment cannot be empty")
    if len(cleaned) > max_length:
        raise ValidationError(f"Comment must be at most {max_length} characters")
    return cleaned
