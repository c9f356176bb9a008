"""Domain model entities for NgeStream."""

from ngestream.domain.model.comment import Comment, NewComment
from ngestream.domain.model.profile import AuthorProfile, UserProfile
from ngestream.domain.model.subscription import Subscription

__all__ = [
    "AuthorProfile",
    "Comment",
    "NewComment",
    "Subscription",
    "UserProfile",
]
