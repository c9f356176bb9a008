"""Get entitlements use case."""

from pydantic import BaseModel

from ngestream.domain.service import EntitlementService
from ngestream.domain.value import Actor, SubscriptionTier


class GetEntitlementsResponse(BaseModel):
    """What the actor's subscription allows."""

    user_id: str
    tier: SubscriptionTier
    can_comment: bool
    can_like: bool
    can_wishlist: bool
    can_access_exclusive_content: bool


class GetEntitlementsUseCase:
    """Use case for reporting the capability matrix of the acting user."""

    def __init__(self, entitlement_service: EntitlementService) -> None:
        self.entitlement_service = entitlement_service

    async def execute(self, actor: Actor) -> GetEntitlementsResponse:
        entitlements = self.entitlement_service.entitlements(actor.tier)
        return GetEntitlementsResponse(
            user_id=str(actor.user_id),
            tier=actor.tier,
            can_comment=entitlements.can_comment,
            can_like=entitlements.can_like,
            can_wishlist=entitlements.can_wishlist,
            can_access_exclusive_content=entitlements.can_access_exclusive_content,
        )
