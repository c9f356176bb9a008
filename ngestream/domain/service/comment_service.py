"""Comment domain service."""

from datetime import datetime, timezone

import logfire

from ngestream.domain.error import NotAuthorOfComment
from ngestream.domain.model.comment import Comment, NewComment
from ngestream.domain.repository import CommentRepository
from ngestream.domain.value import CommentId, MovieId, UserId

from .base import StoreBackedService


class CommentService(StoreBackedService):
    """Domain service for comment store operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        store_timeout_seconds: float | None = None,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            store_timeout_seconds: Upper bound per store call (None = unbounded)
        """
        super().__init__(store_timeout_seconds)
        self.comment_repository = comment_repository

    async def get_comments_for_movie(self, movie_id: MovieId) -> list[Comment]:
        """Get every comment row for a movie, unordered.

        Args:
            movie_id: Movie ID

        Returns:
            Flat list of comments

        Raises:
            StoreError: If the store fails or times out
        """
        with logfire.span(
            "comment_service.get_comments_for_movie", movie_id=movie_id
        ):
            comments = await self._bounded(
                self.comment_repository.find_by_movie(movie_id), "Fetching comments"
            )
            logfire.info(
                "Comments retrieved for movie", movie_id=movie_id, count=len(comments)
            )
            return comments

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self._bounded(
                self.comment_repository.find_by_id(comment_id), "Fetching comment"
            )
            if comment:
                logfire.info("Comment found", comment_id=str(comment_id))
            else:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def create_comment(
        self,
        movie_id: MovieId,
        user_id: UserId,
        text: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Insert a root comment or a reply.

        Args:
            movie_id: Movie ID
            user_id: Author user ID
            text: Comment body, already validated
            parent_id: Comment replied to (None for a root comment)

        Returns:
            Stored comment with store-assigned id and timestamps

        Raises:
            StoreError: If the insert fails
        """
        with logfire.span(
            "comment_service.create_comment",
            movie_id=movie_id,
            user_id=str(user_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            saved = await self._bounded(
                self.comment_repository.insert(
                    NewComment(
                        movie_id=movie_id,
                        user_id=user_id,
                        comment=text,
                        parent_id=parent_id,
                    )
                ),
                "Inserting comment",
            )
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                movie_id=movie_id,
                is_reply=parent_id is not None,
            )
            return saved

    async def update_text(
        self, comment_id: CommentId, user_id: UserId, text: str
    ) -> Comment:
        """Replace a comment's body and bump ``updated_at``.

        Args:
            comment_id: Comment ID
            user_id: Acting identity (must be the author)
            text: New body, already validated

        Returns:
            Updated comment

        Raises:
            NotAuthorOfComment: If the store's author-scoped update matched nothing
            StoreError: If the update fails
        """
        with logfire.span(
            "comment_service.update_text",
            comment_id=str(comment_id),
            text_length=len(text),
        ):
            updated = await self._bounded(
                self.comment_repository.update_text(
                    comment_id, user_id, text, datetime.now(timezone.utc)
                ),
                "Updating comment",
            )
            if updated is None:
                logfire.warn(
                    "Scoped comment update matched no row",
                    comment_id=str(comment_id),
                    user_id=str(user_id),
                )
                raise NotAuthorOfComment(str(comment_id), str(user_id))

            logfire.info("Comment text updated", comment_id=str(comment_id))
            return updated

    async def delete_comment(self, comment_id: CommentId, user_id: UserId) -> int:
        """Delete a comment; the store cascades to its replies.

        Args:
            comment_id: Comment ID
            user_id: Acting identity (must be the author)

        Returns:
            Number of rows removed, replies included

        Raises:
            NotAuthorOfComment: If the store's author-scoped delete matched nothing
            StoreError: If the delete fails
        """
        with logfire.span(
            "comment_service.delete_comment", comment_id=str(comment_id)
        ):
            removed = await self._bounded(
                self.comment_repository.delete(comment_id, user_id),
                "Deleting comment",
            )
            if removed == 0:
                logfire.warn(
                    "Scoped comment delete matched no row",
                    comment_id=str(comment_id),
                    user_id=str(user_id),
                )
                raise NotAuthorOfComment(str(comment_id), str(user_id))

            logfire.info(
                "Comment deleted", comment_id=str(comment_id), removed=removed
            )
            return removed
