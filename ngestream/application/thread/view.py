"""Flattened, render-ready view of a comment thread."""

from dataclasses import dataclass
from typing import Iterator

from ngestream.application.usecase.comment import ThreadSnapshot
from ngestream.domain.model import AuthorProfile
from ngestream.domain.service import CommentNode, can_write
from ngestream.domain.value import Actor, CommentId

from .focus import InteractionFocus


@dataclass(frozen=True)
class ThreadRow:
    """One comment as the rendering layer should draw it."""

    node: CommentNode
    author: AuthorProfile
    depth: int  # true nesting depth, 0 for roots
    indent: int  # depth capped for display
    is_expanded: bool
    is_editing: bool
    is_replying: bool
    can_modify: bool  # actor wrote it (edit/delete controls)
    can_reply: bool

    @property
    def comment_id(self) -> CommentId:
        return self.node.id

    @property
    def edited(self) -> bool:
        return self.node.comment.is_edited

    @property
    def reply_label(self) -> str | None:
        count = self.node.reply_count
        if count == 0:
            return None
        return f"{count} {'reply' if count == 1 else 'replies'}"


def iter_rows(
    snapshot: ThreadSnapshot,
    expanded: set[CommentId],
    focus: InteractionFocus,
    actor: Actor | None,
    max_depth: int,
) -> Iterator[ThreadRow]:
    """Walk the forest in display order, skipping collapsed subtrees.

    Uses an explicit stack, so arbitrarily deep threads are safe; rows
    deeper than ``max_depth`` keep their true depth but are drawn at
    ``max_depth``.
    """
    writer = actor is not None and can_write(actor.tier)
    stack: list[tuple[CommentNode, int]] = [
        (root, 0) for root in reversed(snapshot.forest)
    ]
    while stack:
        node, depth = stack.pop()
        is_expanded = node.id in expanded
        yield ThreadRow(
            node=node,
            author=snapshot.author_of(node),
            depth=depth,
            indent=min(depth, max_depth),
            is_expanded=is_expanded,
            is_editing=focus.is_editing(node.id),
            is_replying=focus.is_replying(node.id),
            can_modify=actor is not None and node.comment.user_id == actor.user_id,
            can_reply=writer,
        )
        if is_expanded:
            stack.extend((reply, depth + 1) for reply in reversed(node.replies))
