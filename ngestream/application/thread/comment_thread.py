"""Stateful comment thread engine.

A ``CommentThread`` is what a rendering layer holds for one movie's
discussion. It owns the current forest, the open edit/reply form, which
threads are expanded, and per-operation busy flags. Every mutation goes
entitlement check → store write → full resynchronization; the forest is
never patched locally.

Errors never escape the engine. They are recorded as ``Notice`` entries
(the toast equivalent) and the last good forest stays on screen.
"""

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Literal

import logfire

from ngestream.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentTreeUseCase,
    ThreadSnapshot,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from ngestream.config import CommentSettings
from ngestream.domain.error import DomainError, NotAuthorOfComment, PermissionDenied
from ngestream.domain.service import CommentNode, can_write, find_node
from ngestream.domain.value import Actor, CommentId, MovieId

from .focus import InteractionFocus
from .view import ThreadRow, iter_rows

DELETE_CONFIRMATION = (
    "Are you sure you want to delete this comment and all its replies?"
)

# Oldest notices are dropped once a long-lived thread has this many unread
MAX_NOTICES = 50


class Operation(str, Enum):
    """Mutations tracked by independent busy flags."""

    POST = "post"
    REPLY = "reply"
    EDIT = "edit"
    DELETE = "delete"


@dataclass(frozen=True)
class Notice:
    """A user-visible, non-fatal notification."""

    level: Literal["info", "error"]
    title: str
    message: str | None = None


class CommentThread:
    """Comment tree engine for one movie, seen by one actor."""

    def __init__(
        self,
        movie_id: MovieId,
        actor: Actor | None,
        get_comment_tree: GetCommentTreeUseCase,
        create_comment: CreateCommentUseCase,
        update_comment: UpdateCommentUseCase,
        delete_comment: DeleteCommentUseCase,
        settings: CommentSettings,
    ) -> None:
        self.movie_id = movie_id
        self.actor = actor
        self.settings = settings
        self._get_comment_tree = get_comment_tree
        self._create_comment = create_comment
        self._update_comment = update_comment
        self._delete_comment = delete_comment

        self.snapshot = ThreadSnapshot(movie_id=movie_id, forest=[], authors={})
        self.focus = InteractionFocus.none()
        self.expanded: set[CommentId] = set()
        self.notices: deque[Notice] = deque(maxlen=MAX_NOTICES)
        self.closed = False
        self._busy: set[Operation] = set()
        self._fetches_in_flight = 0

    # ------------------------------------------------------------------
    # Read side
    # ------------------------------------------------------------------

    @property
    def forest(self) -> list[CommentNode]:
        return self.snapshot.forest

    @property
    def total(self) -> int:
        return self.snapshot.total

    @property
    def can_write(self) -> bool:
        return self.actor is not None and can_write(self.actor.tier)

    @property
    def is_fetching(self) -> bool:
        return self._fetches_in_flight > 0

    def is_busy(self, operation: Operation) -> bool:
        return operation in self._busy

    def drain_notices(self) -> list[Notice]:
        """Return pending notices, oldest first, and clear them."""
        drained = list(self.notices)
        self.notices.clear()
        return drained

    def rows(self) -> list[ThreadRow]:
        """Visible comments in display order."""
        return list(
            iter_rows(
                self.snapshot,
                self.expanded,
                self.focus,
                self.actor,
                self.settings.max_render_depth,
            )
        )

    async def synchronize(self) -> bool:
        """Re-fetch rows and profiles and replace the forest.

        Concurrent calls are not deduplicated; whichever resolves last wins.
        Results arriving after ``close()`` are discarded.

        Returns:
            True if the forest was replaced
        """
        if self.closed:
            return False

        self._fetches_in_flight += 1
        try:
            snapshot = await self._get_comment_tree.load_snapshot(self.movie_id)
        except DomainError as e:
            logfire.warn(
                "Comment thread synchronization failed",
                movie_id=self.movie_id,
                error=str(e),
            )
            if not self.closed:
                self._notify("error", "Error", f"Failed to load comments: {e}")
            return False
        finally:
            self._fetches_in_flight -= 1

        if self.closed:
            logfire.info(
                "Discarding comments fetched after thread closed",
                movie_id=self.movie_id,
            )
            return False

        # Single assignment: readers never see a half-updated tree
        self.snapshot = snapshot
        return True

    def close(self) -> None:
        """Stop applying results; call when the view goes away."""
        self.closed = True

    # ------------------------------------------------------------------
    # Interaction state
    # ------------------------------------------------------------------

    def start_reply(self, comment_id: CommentId) -> None:
        """Open the reply form on a comment, closing any other open form."""
        self.focus = InteractionFocus.replying(comment_id)

    def start_edit(self, comment_id: CommentId) -> str | None:
        """Open the edit form on one of the actor's comments.

        Closes any other open form.

        Returns:
            Current body to prefill the form with, or None if the comment is
            unknown or not the actor's
        """
        node = find_node(self.forest, comment_id)
        if node is None or self.actor is None:
            return None
        if node.comment.user_id != self.actor.user_id:
            return None
        self.focus = InteractionFocus.editing(comment_id)
        return node.comment.comment

    def cancel(self) -> None:
        self.focus = InteractionFocus.none()

    def toggle_expanded(self, comment_id: CommentId) -> bool:
        """Expand or collapse a comment's replies.

        Returns:
            Whether the comment is now expanded
        """
        if comment_id in self.expanded:
            self.expanded.discard(comment_id)
            return False
        self.expanded.add(comment_id)
        return True

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    async def submit_root(self, body: str) -> bool:
        """Post a new top-level comment."""

        async def action(actor: Actor) -> None:
            await self._create_comment.execute(
                CreateCommentRequest(
                    movie_id=self.movie_id, actor=actor, comment=body, parent_id=None
                )
            )

        return await self._mutate(
            Operation.POST,
            action,
            success="Comment posted successfully",
            failure="Failed to post comment",
        )

    async def submit_reply(self, parent_id: CommentId, body: str) -> bool:
        """Reply to a comment; the parent is expanded on success.

        The parent does not need to be visible or expanded.
        """

        async def action(actor: Actor) -> None:
            await self._create_comment.execute(
                CreateCommentRequest(
                    movie_id=self.movie_id,
                    actor=actor,
                    comment=body,
                    parent_id=str(parent_id),
                )
            )

        def on_success() -> None:
            if self.focus.is_replying(parent_id):
                self.focus = InteractionFocus.none()
            self.expanded.add(parent_id)

        return await self._mutate(
            Operation.REPLY,
            action,
            success="Reply posted successfully",
            failure="Failed to post reply",
            on_success=on_success,
        )

    async def edit(self, comment_id: CommentId, body: str) -> bool:
        """Replace the body of one of the actor's comments."""

        async def action(actor: Actor) -> None:
            self._require_author(comment_id, actor)
            await self._update_comment.execute(
                UpdateCommentRequest(
                    movie_id=self.movie_id,
                    comment_id=str(comment_id),
                    actor=actor,
                    comment=body,
                )
            )

        def on_success() -> None:
            if self.focus.is_editing(comment_id):
                self.focus = InteractionFocus.none()

        return await self._mutate(
            Operation.EDIT,
            action,
            success="Comment updated successfully",
            failure="Failed to update comment",
            on_success=on_success,
        )

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete one of the actor's comments along with its replies.

        Callers should confirm with ``DELETE_CONFIRMATION`` first.
        """

        async def action(actor: Actor) -> None:
            self._require_author(comment_id, actor)
            await self._delete_comment.execute(
                DeleteCommentRequest(
                    movie_id=self.movie_id, comment_id=str(comment_id), actor=actor
                )
            )

        def on_success() -> None:
            self.expanded.discard(comment_id)
            if self.focus.targets(comment_id):
                self.focus = InteractionFocus.none()

        return await self._mutate(
            Operation.DELETE,
            action,
            success="Comment deleted successfully",
            failure="Failed to delete comment",
            on_success=on_success,
        )

    async def _mutate(
        self,
        operation: Operation,
        action: Callable[[Actor], Awaitable[None]],
        success: str,
        failure: str,
        on_success: Callable[[], None] | None = None,
    ) -> bool:
        if self.closed:
            return False
        if operation in self._busy:
            logfire.info(
                "Ignoring submission while one is in flight",
                operation=operation.value,
                movie_id=self.movie_id,
            )
            return False

        self._busy.add(operation)
        try:
            with logfire.span(
                "comment_thread.mutate",
                operation=operation.value,
                movie_id=self.movie_id,
            ):
                await action(self._require_writer())
        except DomainError as e:
            logfire.warn(
                "Comment mutation failed",
                operation=operation.value,
                movie_id=self.movie_id,
                error_type=type(e).__name__,
                error=str(e),
            )
            if not self.closed:
                self._notify("error", "Error", f"{failure}: {e}")
            return False
        finally:
            self._busy.discard(operation)

        if self.closed:
            return True

        if on_success:
            on_success()
        self._notify("info", success)
        await self.synchronize()
        return True

    def _require_writer(self) -> Actor:
        if self.actor is None:
            raise PermissionDenied("anonymous")
        if not can_write(self.actor.tier):
            raise PermissionDenied(self.actor.tier.value)
        return self.actor

    def _require_author(self, comment_id: CommentId, actor: Actor) -> None:
        # Only short-circuits on comments we can see; the store re-checks anyway
        node = find_node(self.forest, comment_id)
        if node is not None and node.comment.user_id != actor.user_id:
            raise NotAuthorOfComment(str(comment_id), str(actor.user_id))

    def _notify(
        self,
        level: Literal["info", "error"],
        title: str,
        message: str | None = None,
    ) -> None:
        self.notices.append(Notice(level=level, title=title, message=message))


class CommentThreadFactory:
    """Creates engines bound to the current request's use cases."""

    def __init__(
        self,
        get_comment_tree: GetCommentTreeUseCase,
        create_comment: CreateCommentUseCase,
        update_comment: UpdateCommentUseCase,
        delete_comment: DeleteCommentUseCase,
        settings: CommentSettings,
    ) -> None:
        self.get_comment_tree = get_comment_tree
        self.create_comment = create_comment
        self.update_comment = update_comment
        self.delete_comment = delete_comment
        self.settings = settings

    def create(self, movie_id: MovieId, actor: Actor | None) -> CommentThread:
        return CommentThread(
            movie_id=movie_id,
            actor=actor,
            get_comment_tree=self.get_comment_tree,
            create_comment=self.create_comment,
            update_comment=self.update_comment,
            delete_comment=self.delete_comment,
            settings=self.settings,
        )
