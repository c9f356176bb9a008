"""Domain layer DI providers."""

from dishka import Scope, provide

from ngestream.config import AuthSettings, CommentSettings
from ngestream.domain.repository import (
    CommentRepository,
    ProfileRepository,
    SubscriptionRepository,
)
from ngestream.domain.service import (
    CommentService,
    EntitlementService,
    JWTService,
    ProfileService,
)
from ngestream.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository, settings: CommentSettings
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            store_timeout_seconds=settings.store_timeout_seconds,
        )

    @provide
    def get_profile_service(
        self, profile_repository: ProfileRepository, settings: CommentSettings
    ) -> ProfileService:
        """Provide author profile lookup service."""
        return ProfileService(
            profile_repository=profile_repository,
            store_timeout_seconds=settings.store_timeout_seconds,
        )

    @provide
    def get_entitlement_service(
        self, subscription_repository: SubscriptionRepository
    ) -> EntitlementService:
        """Provide entitlement gate."""
        return EntitlementService(subscription_repository=subscription_repository)
