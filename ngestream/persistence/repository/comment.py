"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ngestream.domain.model import Comment, NewComment
from ngestream.domain.repository import CommentRepository
from ngestream.domain.value import CommentId, MovieId, UserId
from ngestream.persistence.database import store_errors
from ngestream.persistence.mappers import row_to_comment
from ngestream.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        async with store_errors(self.session, "Fetching comment"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_movie(self, movie_id: MovieId) -> List[Comment]:
        """Find all comments for a movie."""
        stmt = select(comments_table).where(comments_table.c.movie_id == movie_id)
        async with store_errors(self.session, "Fetching comments"):
            result = await self.session.execute(stmt)
            rows = result.fetchall()
        return [row_to_comment(row._asdict()) for row in rows]

    async def insert(self, new_comment: NewComment) -> Comment:
        """Insert a comment; id and timestamps come from column defaults."""
        stmt = (
            comments_table.insert()
            .values(**new_comment.model_dump())
            .returning(comments_table)
        )
        async with store_errors(self.session, "Inserting comment"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
        return row_to_comment(row._asdict())

    async def update_text(
        self,
        comment_id: CommentId,
        user_id: UserId,
        comment: str,
        updated_at: datetime,
    ) -> Optional[Comment]:
        """Update a comment's body where id AND author match."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.user_id == user_id)
            .values(comment=comment, updated_at=updated_at)
            .returning(comments_table)
        )
        async with store_errors(self.session, "Updating comment"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
            if row is None:
                return None
            await self.session.flush()
        return row_to_comment(row._asdict())

    async def delete(self, comment_id: CommentId, user_id: UserId) -> int:
        """Delete a comment where id AND author match.

        Replies are removed by the ON DELETE CASCADE foreign key; they are
        counted up front so the caller learns the full size of the removal.
        """
        subtree = (
            select(comments_table.c.id)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.user_id == user_id)
            .cte("subtree", recursive=True)
        )
        parent = subtree.alias()
        child = comments_table.alias()
        # UNION (not UNION ALL) so a corrupted parent cycle still terminates
        subtree = subtree.union(
            select(child.c.id).where(child.c.parent_id == parent.c.id)
        )
        count_stmt = select(func.count()).select_from(subtree)

        delete_stmt = (
            comments_table.delete()
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.user_id == user_id)
        )

        async with store_errors(self.session, "Deleting comment"):
            removed = (await self.session.execute(count_stmt)).scalar() or 0
            if removed == 0:
                return 0
            await self.session.execute(delete_stmt)
            await self.session.flush()
        return removed
