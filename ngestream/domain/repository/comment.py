"""Comment repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from ngestream.domain.model.comment import Comment, NewComment
from ngestream.domain.value import CommentId, MovieId, UserId


class CommentRepository(ABC):
    """Repository for Comment rows (the comment store).

    Implementations raise ``StoreError`` for any backend failure.
    Deleting a comment cascades to its replies.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_movie(self, movie_id: MovieId) -> List[Comment]:
        """Find every comment (roots and replies) for a movie.

        No ordering is guaranteed; the tree builder orders them.

        Args:
            movie_id: Subject the comments belong to

        Returns:
            Flat list of comments
        """
        pass

    @abstractmethod
    async def insert(self, new_comment: NewComment) -> Comment:
        """Insert a comment.

        The store assigns ``id``, ``created_at`` and ``updated_at``.

        Args:
            new_comment: Insert payload

        Returns:
            The stored comment
        """
        pass

    @abstractmethod
    async def update_text(
        self,
        comment_id: CommentId,
        user_id: UserId,
        comment: str,
        updated_at: datetime,
    ) -> Optional[Comment]:
        """Update the body of a comment, scoped to its author.

        Args:
            comment_id: Comment to update
            user_id: Acting identity; must match the row's user_id
            comment: New body
            updated_at: New modification timestamp

        Returns:
            Updated comment, or None if no row matched id AND user_id
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId, user_id: UserId) -> int:
        """Delete a comment and its replies, scoped to the author.

        Args:
            comment_id: Comment to delete
            user_id: Acting identity; must match the row's user_id

        Returns:
            Number of rows removed (0 when no row matched id AND user_id)
        """
        pass
