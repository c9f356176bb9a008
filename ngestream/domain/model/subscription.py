"""Subscription entity."""

from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from ngestream.domain.model.common import DomainModel
from ngestream.domain.value import SubscriptionTier, UserId


class Subscription(DomainModel):
    """A user's subscription to a tier."""

    id: UUID
    user_id: UserId
    tier: SubscriptionTier
    is_active: bool = True
    created_at: datetime
    expires_at: Optional[datetime] = None

    def is_current(self, now: datetime | None = None) -> bool:
        """Active and not past its expiry."""
        if not self.is_active:
            return False
        if self.expires_at is None:
            return True
        return self.expires_at > (now or datetime.now(timezone.utc))
