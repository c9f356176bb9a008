"""Auth use cases."""

from .get_entitlements import GetEntitlementsResponse, GetEntitlementsUseCase
from .resolve_actor import ResolveActorUseCase

__all__ = [
    "GetEntitlementsResponse",
    "GetEntitlementsUseCase",
    "ResolveActorUseCase",
]
