"""Comment use cases."""

from .common import CommentResponse
from .create_comment import CreateCommentRequest, CreateCommentUseCase
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .get_comment_tree import (
    CommentNodeResponse,
    GetCommentTreeRequest,
    GetCommentTreeResponse,
    GetCommentTreeUseCase,
    ThreadSnapshot,
)
from .update_comment import UpdateCommentRequest, UpdateCommentUseCase

__all__ = [
    "CommentNodeResponse",
    "CommentResponse",
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "GetCommentTreeRequest",
    "GetCommentTreeResponse",
    "GetCommentTreeUseCase",
    "ThreadSnapshot",
    "UpdateCommentRequest",
    "UpdateCommentUseCase",
]
