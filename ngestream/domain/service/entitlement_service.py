"""Subscription entitlement rules."""

from dataclasses import dataclass

import logfire

from ngestream.domain.error import PermissionDenied
from ngestream.domain.repository import SubscriptionRepository
from ngestream.domain.value import Actor, SubscriptionTier, UserId

from .base import Service


def can_write(tier: SubscriptionTier) -> bool:
    """Whether a tier may post, reply to, edit or delete comments.

    Reading is never gated.
    """
    return tier == SubscriptionTier.PREMIUM


@dataclass(frozen=True)
class Entitlements:
    """Capabilities granted by a subscription tier."""

    tier: SubscriptionTier

    @property
    def can_comment(self) -> bool:
        return can_write(self.tier)

    @property
    def can_like(self) -> bool:
        return self.tier != SubscriptionTier.FREE

    @property
    def can_wishlist(self) -> bool:
        return self.tier != SubscriptionTier.FREE

    @property
    def can_access_exclusive_content(self) -> bool:
        return self.tier == SubscriptionTier.PREMIUM


class EntitlementService(Service):
    """Domain service deciding what an account's subscription allows."""

    def __init__(self, subscription_repository: SubscriptionRepository) -> None:
        """Initialize entitlement service.

        Args:
            subscription_repository: Subscription repository
        """
        self.subscription_repository = subscription_repository

    async def get_tier(self, user_id: UserId) -> SubscriptionTier:
        """Current tier of a user.

        Accounts without an active, unexpired subscription are FREE.

        Args:
            user_id: User ID

        Returns:
            Subscription tier
        """
        with logfire.span("entitlement_service.get_tier", user_id=str(user_id)):
            subscription = await self.subscription_repository.find_active_by_user(
                user_id
            )
            if subscription is None or not subscription.is_current():
                logfire.info("No current subscription", user_id=str(user_id))
                return SubscriptionTier.FREE
            logfire.info(
                "Subscription found",
                user_id=str(user_id),
                tier=subscription.tier.value,
            )
            return subscription.tier

    def entitlements(self, tier: SubscriptionTier) -> Entitlements:
        return Entitlements(tier=tier)

    def require_write(self, actor: Actor) -> None:
        """Ensure the actor may write comments.

        Args:
            actor: Acting identity

        Raises:
            PermissionDenied: If the actor's tier may not write
        """
        if not can_write(actor.tier):
            logfire.warn(
                "Comment write denied by tier",
                user_id=str(actor.user_id),
                tier=actor.tier.value,
            )
            raise PermissionDenied(actor.tier.value)
