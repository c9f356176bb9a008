"""Session token extraction shared by routes."""

from ngestream.application.usecase.auth import ResolveActorUseCase
from ngestream.domain.value import Actor
from ngestream.interface.error import AuthenticationRequired

BEARER_PREFIX = "Bearer "


def session_token(authorization: str | None, auth_token: str | None) -> str | None:
    """Pick the access token from an Authorization header or the auth cookie.

    The header wins when both are present.
    """
    if authorization and authorization.startswith(BEARER_PREFIX):
        return authorization[len(BEARER_PREFIX) :].strip() or None
    return auth_token


async def require_actor(
    resolve_actor: ResolveActorUseCase,
    authorization: str | None,
    auth_token: str | None,
    action: str,
) -> Actor:
    """Resolve the acting user or fail with AuthenticationRequired."""
    actor = await resolve_actor.execute(session_token(authorization, auth_token))
    if actor is None:
        raise AuthenticationRequired(action)
    return actor
