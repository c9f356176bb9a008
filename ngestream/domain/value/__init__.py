"""Domain value objects for NgeStream."""

from ngestream.domain.value.identifiers import CommentId, MovieId, UserId
from ngestream.domain.value.types import Actor, SubscriptionTier

__all__ = [
    # Identifiers
    "CommentId",
    "MovieId",
    "UserId",
    # Types
    "Actor",
    "SubscriptionTier",
]
