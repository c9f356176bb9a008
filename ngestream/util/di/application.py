"""Application layer DI providers."""

from dishka import Scope, provide

from ngestream.application.thread import CommentThreadFactory
from ngestream.application.usecase.auth import (
    GetEntitlementsUseCase,
    ResolveActorUseCase,
)
from ngestream.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentTreeUseCase,
    UpdateCommentUseCase,
)
from ngestream.config import CommentSettings
from ngestream.domain.service import (
    CommentService,
    EntitlementService,
    JWTService,
    ProfileService,
)
from ngestream.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_resolve_actor_use_case(
        self, jwt_service: JWTService, entitlement_service: EntitlementService
    ) -> ResolveActorUseCase:
        """Provide resolve actor use case."""
        return ResolveActorUseCase(
            jwt_service=jwt_service, entitlement_service=entitlement_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_entitlements_use_case(
        self, entitlement_service: EntitlementService
    ) -> GetEntitlementsUseCase:
        """Provide get entitlements use case."""
        return GetEntitlementsUseCase(entitlement_service=entitlement_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_get_comment_tree_use_case(
        self, comment_service: CommentService, profile_service: ProfileService
    ) -> GetCommentTreeUseCase:
        """Provide get comment tree use case."""
        return GetCommentTreeUseCase(
            comment_service=comment_service, profile_service=profile_service
        )

    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        entitlement_service: EntitlementService,
        settings: CommentSettings,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            entitlement_service=entitlement_service,
            comment_settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self,
        comment_service: CommentService,
        entitlement_service: EntitlementService,
        settings: CommentSettings,
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(
            comment_service=comment_service,
            entitlement_service=entitlement_service,
            comment_settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self,
        comment_service: CommentService,
        entitlement_service: EntitlementService,
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service, entitlement_service=entitlement_service
        )

    # Thread engine
    @provide(scope=Scope.REQUEST)
    def get_comment_thread_factory(
        self,
        get_comment_tree: GetCommentTreeUseCase,
        create_comment: CreateCommentUseCase,
        update_comment: UpdateCommentUseCase,
        delete_comment: DeleteCommentUseCase,
        settings: CommentSettings,
    ) -> CommentThreadFactory:
        """Provide comment thread engine factory."""
        return CommentThreadFactory(
            get_comment_tree=get_comment_tree,
            create_comment=create_comment,
            update_comment=update_comment,
            delete_comment=delete_comment,
            settings=settings,
        )
