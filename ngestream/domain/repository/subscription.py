"""Subscription repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from ngestream.domain.model.subscription import Subscription
from ngestream.domain.value import UserId


class SubscriptionRepository(ABC):
    """Repository for user subscriptions."""

    @abstractmethod
    async def find_active_by_user(self, user_id: UserId) -> Optional[Subscription]:
        """Find the user's active subscription, if any.

        Args:
            user_id: User ID

        Returns:
            Most recent subscription flagged active, or None
        """
        pass

    @abstractmethod
    async def save(self, subscription: Subscription) -> Subscription:
        """Create or replace a subscription."""
        pass
