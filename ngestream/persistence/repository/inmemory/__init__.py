"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .database import InMemoryDatabase
from .profile import InMemoryProfileRepository
from .subscription import InMemorySubscriptionRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryDatabase",
    "InMemoryProfileRepository",
    "InMemorySubscriptionRepository",
]
