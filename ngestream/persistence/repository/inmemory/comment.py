"""In-memory comment repository for testing."""

from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from ngestream.domain.model import Comment, NewComment
from ngestream.domain.repository.comment import CommentRepository
from ngestream.domain.value import CommentId, MovieId, UserId

from .database import InMemoryDatabase


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self._db = database or InMemoryDatabase()

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._db.comments.get(comment_id)

    async def find_by_movie(self, movie_id: MovieId) -> list[Comment]:
        """Find all comments for a movie, in insertion order."""
        return [c for c in self._db.comments.values() if c.movie_id == movie_id]

    async def insert(self, new_comment: NewComment) -> Comment:
        """Insert a comment, assigning id and timestamps like the database."""
        now = datetime.now(timezone.utc)
        comment = Comment(
            id=CommentId(uuid4()),
            created_at=now,
            updated_at=now,
            **new_comment.model_dump(),
        )
        self._db.comments[comment.id] = comment
        return comment

    async def add(self, comment: Comment) -> Comment:
        """Store a fully formed row as-is (test seeding)."""
        self._db.comments[comment.id] = comment
        return comment

    async def update_text(
        self,
        comment_id: CommentId,
        user_id: UserId,
        comment: str,
        updated_at: datetime,
    ) -> Optional[Comment]:
        """Update a comment's body where id AND author match."""
        existing = self._db.comments.get(comment_id)
        if existing is None or existing.user_id != user_id:
            return None
        updated = existing.model_copy(
            update={"comment": comment, "updated_at": updated_at}
        )
        self._db.comments[comment_id] = updated
        return updated

    async def delete(self, comment_id: CommentId, user_id: UserId) -> int:
        """Delete a comment and, like ON DELETE CASCADE, all of its replies."""
        existing = self._db.comments.get(comment_id)
        if existing is None or existing.user_id != user_id:
            return 0

        doomed = {comment_id}
        frontier = [comment_id]
        while frontier:
            parent_id = frontier.pop()
            for c in self._db.comments.values():
                if c.parent_id == parent_id and c.id not in doomed:
                    doomed.add(c.id)
                    frontier.append(c.id)

        for doomed_id in doomed:
            del self._db.comments[doomed_id]
        return len(doomed)
