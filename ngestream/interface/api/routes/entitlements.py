"""Entitlement routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header

from ngestream.application.usecase.auth import (
    GetEntitlementsResponse,
    GetEntitlementsUseCase,
    ResolveActorUseCase,
)
from ngestream.domain.error import DomainError
from ngestream.interface.api.session import require_actor
from ngestream.interface.error import InterfaceError, to_http_exception

router = APIRouter(prefix="/me", tags=["entitlements"], route_class=DishkaRoute)


@router.get("/entitlements", response_model=GetEntitlementsResponse)
async def get_entitlements(
    resolve_actor: FromDishka[ResolveActorUseCase],
    get_entitlements_use_case: FromDishka[GetEntitlementsUseCase],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> GetEntitlementsResponse:
    """Report what the current user's subscription tier allows.

    Raises:
        HTTPException: 401 if not authenticated
    """
    try:
        actor = await require_actor(
            resolve_actor, authorization, auth_token, "read entitlements"
        )
        return await get_entitlements_use_case.execute(actor)
    except (DomainError, InterfaceError) as e:
        raise to_http_exception(e) from e
