"""Comment thread engine."""

from .comment_thread import (
    DELETE_CONFIRMATION,
    MAX_NOTICES,
    CommentThread,
    CommentThreadFactory,
    Notice,
    Operation,
)
from .focus import FocusKind, InteractionFocus
from .view import ThreadRow, iter_rows

__all__ = [
    "DELETE_CONFIRMATION",
    "MAX_NOTICES",
    "CommentThread",
    "CommentThreadFactory",
    "FocusKind",
    "InteractionFocus",
    "Notice",
    "Operation",
    "ThreadRow",
    "iter_rows",
]
