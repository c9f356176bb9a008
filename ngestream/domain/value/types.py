"""Domain value objects for NgeStream."""

from enum import Enum

from ngestream.domain.value.common import ValueObject
from ngestream.domain.value.identifiers import UserId


class SubscriptionTier(str, Enum):
    """Subscription tier of an account.

    Accounts without an active subscription are treated as FREE.
    """

    FREE = "free"
    BASIC = "basic"
    PREMIUM = "premium"


class Actor(ValueObject):
    """The acting identity, as read from the session.

    Carries the subscription tier so write entitlement can be decided
    without another store round trip.
    """

    user_id: UserId
    tier: SubscriptionTier = SubscriptionTier.FREE
