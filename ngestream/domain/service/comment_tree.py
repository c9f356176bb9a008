"""Threaded comment tree construction.

Comments are persisted flat with a parent pointer. This module turns one
movie's rows into an ordered forest:

- roots are newest first, so fresh top-level comments surface at the top
- replies are oldest first, so a conversation reads chronologically
- ``reply_count`` counts every descendant, not only direct replies

Depth is user generated and unbounded, so traversal uses explicit stacks
rather than recursion.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, Iterator

import logfire

from ngestream.domain.model.comment import Comment
from ngestream.domain.value import CommentId


@dataclass
class CommentNode:
    """A comment together with its ordered replies.

    Built fresh on every synchronization and never patched in place.
    """

    comment: Comment
    replies: list["CommentNode"] = field(default_factory=list)
    reply_count: int = 0

    @property
    def id(self) -> CommentId:
        return self.comment.id

    @property
    def created_at(self) -> datetime:
        return self.comment.created_at


def _chronological(node: CommentNode) -> tuple[datetime, str]:
    # id breaks timestamp ties so rebuilding the same rows gives the same order
    return (node.comment.created_at, str(node.comment.id))


def _cycle_members(index: dict[CommentId, CommentNode]) -> set[CommentId]:
    """Ids whose parent chain loops back onto itself (self-parented included)."""
    on_walk, done = 1, 2
    state: dict[CommentId, int] = {}
    members: set[CommentId] = set()

    for start in index:
        if start in state:
            continue
        path: list[CommentId] = []
        current: CommentId | None = start
        while current is not None and current in index and current not in state:
            state[current] = on_walk
            path.append(current)
            current = index[current].comment.parent_id
        if current is not None and state.get(current) == on_walk:
            members.update(path[path.index(current) :])
        for comment_id in path:
            state[comment_id] = done

    return members


def iter_nodes(forest: Iterable[CommentNode]) -> Iterator[CommentNode]:
    """Yield every node in display (pre-)order."""
    stack = list(reversed(list(forest)))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.replies))


def build_forest(rows: Iterable[Comment]) -> list[CommentNode]:
    """Build the ordered comment forest for one subject.

    Algorithm:
    1. Index every row by id as a node with no replies
    2. Attach each node to its parent when the parent is present, otherwise
       keep it as a root (orphans degrade to roots instead of vanishing)
    3. Rows whose ancestor chain cycles back to themselves become roots
    4. Sort replies oldest first and count descendants, bottom-up
    5. Sort roots newest first

    Args:
        rows: Flat comment rows, in any order

    Returns:
        Root nodes; every input row appears exactly once in the forest
    """
    index: dict[CommentId, CommentNode] = {}
    for row in rows:
        index[row.id] = CommentNode(comment=row)

    cyclic = _cycle_members(index)
    if cyclic:
        logfire.warn(
            "Broke parent cycle while building comment tree",
            comment_ids=sorted(str(comment_id) for comment_id in cyclic),
        )

    roots: list[CommentNode] = []
    for node in index.values():
        parent_id = node.comment.parent_id
        if parent_id is None or parent_id not in index or node.id in cyclic:
            roots.append(node)
        else:
            index[parent_id].replies.append(node)

    # Reversed pre-order visits every child before its parent
    for node in reversed(list(iter_nodes(roots))):
        node.replies.sort(key=_chronological)
        node.reply_count = sum(1 + reply.reply_count for reply in node.replies)

    roots.sort(key=_chronological, reverse=True)
    return roots


def count_nodes(forest: Iterable[CommentNode]) -> int:
    """Total number of comments in a forest (roots and all replies)."""
    return sum(1 + root.reply_count for root in forest)


def find_node(
    forest: Iterable[CommentNode], comment_id: CommentId
) -> CommentNode | None:
    """Find a node anywhere in the forest."""
    for node in iter_nodes(forest):
        if node.id == comment_id:
            return node
    return None
