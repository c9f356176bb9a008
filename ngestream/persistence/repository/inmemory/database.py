"""Shared backing storage for in-memory repositories."""

from dataclasses import dataclass, field

from ngestream.domain.model import Comment, Subscription, UserProfile
from ngestream.domain.value import CommentId, UserId


@dataclass
class InMemoryDatabase:
    """Tables held in dicts.

    Repositories are cheap views over one of these, so several request
    scopes can share state the way they would share a real database.
    """

    comments: dict[CommentId, Comment] = field(default_factory=dict)
    profiles: dict[UserId, UserProfile] = field(default_factory=dict)
    subscriptions: list[Subscription] = field(default_factory=list)
