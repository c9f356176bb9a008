"""Get comment tree use case."""

from dataclasses import dataclass
from datetime import datetime

import logfire
from pydantic import BaseModel

from ngestream.domain.model import AuthorProfile
from ngestream.domain.service import (
    CommentNode,
    CommentService,
    ProfileService,
    build_forest,
    count_nodes,
)
from ngestream.domain.value import MovieId, UserId

from .common import parse_movie_id


@dataclass(frozen=True)
class ThreadSnapshot:
    """A forest together with the author data needed to render it."""

    movie_id: MovieId
    forest: list[CommentNode]
    authors: dict[UserId, AuthorProfile]

    @property
    def total(self) -> int:
        return count_nodes(self.forest)

    def author_of(self, node: CommentNode) -> AuthorProfile:
        user_id = node.comment.user_id
        return self.authors.get(user_id) or AuthorProfile.from_profile(user_id, None)


class CommentNodeResponse(BaseModel):
    """Comment with author data and nested replies.

    Recursive structure mirroring the domain tree.
    """

    comment_id: str
    user_id: str
    author_name: str
    author_avatar_url: str
    comment: str
    parent_id: str | None
    created_at: datetime
    updated_at: datetime
    edited: bool
    reply_count: int
    replies: list["CommentNodeResponse"]

    @classmethod
    def from_domain(
        cls, node: CommentNode, snapshot: ThreadSnapshot
    ) -> "CommentNodeResponse":
        """Convert a domain node (and its subtree) to a response model."""
        author = snapshot.author_of(node)
        comment = node.comment
        return cls(
            comment_id=str(comment.id),
            user_id=str(comment.user_id),
            author_name=author.display_name,
            author_avatar_url=author.avatar_url,
            comment=comment.comment,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            edited=comment.is_edited,
            reply_count=node.reply_count,
            replies=[cls.from_domain(reply, snapshot) for reply in node.replies],
        )


class GetCommentTreeRequest(BaseModel):
    """Get comment tree request."""

    movie_id: str


class GetCommentTreeResponse(BaseModel):
    """Get comment tree response."""

    movie_id: str
    comments: list[CommentNodeResponse]
    total: int


class GetCommentTreeUseCase:
    """Use case for reading a movie's comments as a threaded forest.

    Reads are open to every tier.
    """

    def __init__(
        self, comment_service: CommentService, profile_service: ProfileService
    ) -> None:
        """Initialize get comment tree use case.

        Args:
            comment_service: Comment domain service
            profile_service: Profile lookup service
        """
        self.comment_service = comment_service
        self.profile_service = profile_service

    async def load_snapshot(self, movie_id: MovieId) -> ThreadSnapshot:
        """Fetch rows and author profiles, then build the forest.

        Raises:
            StoreError: If either fetch fails; nothing partial is returned
        """
        with logfire.span("get_comment_tree.load_snapshot", movie_id=movie_id):
            rows = await self.comment_service.get_comments_for_movie(movie_id)
            authors = await self.profile_service.get_authors(
                row.user_id for row in rows
            )
            forest = build_forest(rows)
            logfire.info(
                "Comment tree built",
                movie_id=movie_id,
                rows=len(rows),
                roots=len(forest),
            )
            return ThreadSnapshot(movie_id=movie_id, forest=forest, authors=authors)

    async def execute(self, request: GetCommentTreeRequest) -> GetCommentTreeResponse:
        """Execute get comment tree flow.

        Args:
            request: Request with the movie id

        Returns:
            Roots newest first, replies oldest first, with total comment count
        """
        snapshot = await self.load_snapshot(parse_movie_id(request.movie_id))
        return GetCommentTreeResponse(
            movie_id=snapshot.movie_id,
            comments=[
                CommentNodeResponse.from_domain(root, snapshot)
                for root in snapshot.forest
            ],
            total=snapshot.total,
        )
