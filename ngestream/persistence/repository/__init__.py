"""PostgreSQL repository implementations."""

from ngestream.persistence.repository.comment import PostgresCommentRepository
from ngestream.persistence.repository.profile import PostgresProfileRepository
from ngestream.persistence.repository.subscription import (
    PostgresSubscriptionRepository,
)

__all__ = [
    "PostgresCommentRepository",
    "PostgresProfileRepository",
    "PostgresSubscriptionRepository",
]
