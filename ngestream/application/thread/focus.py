"""Single-slot interaction focus for a comment thread."""

from dataclasses import dataclass
from enum import Enum

from ngestream.domain.value import CommentId


class FocusKind(str, Enum):
    NONE = "none"
    EDITING = "editing"
    REPLYING = "replying"


@dataclass(frozen=True)
class InteractionFocus:
    """Which comment, if any, has an open edit or reply form.

    One slot for the whole thread: opening a form anywhere closes any
    other open form, whatever its depth.
    """

    kind: FocusKind = FocusKind.NONE
    comment_id: CommentId | None = None

    @classmethod
    def none(cls) -> "InteractionFocus":
        return cls()

    @classmethod
    def editing(cls, comment_id: CommentId) -> "InteractionFocus":
        return cls(kind=FocusKind.EDITING, comment_id=comment_id)

    @classmethod
    def replying(cls, comment_id: CommentId) -> "InteractionFocus":
        return cls(kind=FocusKind.REPLYING, comment_id=comment_id)

    def is_editing(self, comment_id: CommentId) -> bool:
        return self.kind == FocusKind.EDITING and self.comment_id == comment_id

    def is_replying(self, comment_id: CommentId) -> bool:
        return self.kind == FocusKind.REPLYING and self.comment_id == comment_id

    def targets(self, comment_id: CommentId) -> bool:
        return self.kind != FocusKind.NONE and self.comment_id == comment_id
