"""Repository interfaces for the NgeStream domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from ngestream.domain.repository.comment import CommentRepository
from ngestream.domain.repository.profile import ProfileRepository
from ngestream.domain.repository.subscription import SubscriptionRepository

__all__ = [
    "CommentRepository",
    "ProfileRepository",
    "SubscriptionRepository",
]
