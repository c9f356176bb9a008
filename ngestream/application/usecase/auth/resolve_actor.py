"""Resolve actor use case."""

from uuid import UUID

import logfire

from ngestream.domain.service import EntitlementService, JWTService
from ngestream.domain.value import Actor, UserId


class ResolveActorUseCase:
    """Use case turning a session token into the acting identity and tier."""

    def __init__(
        self, jwt_service: JWTService, entitlement_service: EntitlementService
    ) -> None:
        """Initialize resolve actor use case.

        Args:
            jwt_service: JWT service for verifying access tokens
            entitlement_service: Entitlement service for reading the tier
        """
        self.jwt_service = jwt_service
        self.entitlement_service = entitlement_service

    async def execute(self, token: str | None) -> Actor | None:
        """Execute resolve actor flow.

        Args:
            token: Access token from the session (optional)

        Returns:
            Actor, or None when the token is missing or invalid
        """
        user_id_str = self.jwt_service.get_user_id_from_token(token)
        if not user_id_str:
            return None

        try:
            user_id = UserId(UUID(user_id_str))
        except ValueError:
            logfire.warn("Token subject is not a user id", subject=user_id_str)
            return None

        tier = await self.entitlement_service.get_tier(user_id)
        return Actor(user_id=user_id, tier=tier)
