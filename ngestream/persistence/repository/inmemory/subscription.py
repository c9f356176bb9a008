"""In-memory subscription repository for testing."""

from typing import Optional

from ngestream.domain.model import Subscription
from ngestream.domain.repository.subscription import SubscriptionRepository
from ngestream.domain.value import UserId

from .database import InMemoryDatabase


class InMemorySubscriptionRepository(SubscriptionRepository):
    """In-memory implementation of SubscriptionRepository for testing."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self._db = database or InMemoryDatabase()

    async def find_active_by_user(self, user_id: UserId) -> Optional[Subscription]:
        """Most recent active subscription for a user."""
        active = [
            s for s in self._db.subscriptions if s.user_id == user_id and s.is_active
        ]
        if not active:
            return None
        return max(active, key=lambda s: s.created_at)

    async def save(self, subscription: Subscription) -> Subscription:
        self._db.subscriptions = [
            s for s in self._db.subscriptions if s.id != subscription.id
        ]
        self._db.subscriptions.append(subscription)
        return subscription
