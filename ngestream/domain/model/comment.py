"""Comment entity.

Comments are stored flat: a row only knows its ``parent_id``. The threaded
view is derived in memory (see ``ngestream.domain.service.comment_tree``).
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from ngestream.domain.model.common import DomainModel
from ngestream.domain.value import CommentId, MovieId, UserId


class Comment(DomainModel):
    """A persisted comment row.

    - parent_id: None for a root comment, otherwise the comment replied to
    - updated_at: equal to created_at until the first edit
    """

    id: CommentId
    movie_id: MovieId
    user_id: UserId
    comment: str = Field(min_length=1)
    parent_id: Optional[CommentId] = None
    created_at: datetime
    updated_at: datetime

    @property
    def is_root(self) -> bool:
        return self.parent_id is None

    @property
    def is_edited(self) -> bool:
        """Whether the comment was edited after creation."""
        return self.updated_at != self.created_at


class NewComment(DomainModel):
    """Insert payload; the store assigns id and timestamps."""

    movie_id: MovieId
    user_id: UserId
    comment: str = Field(min_length=1)
    parent_id: Optional[CommentId] = None
