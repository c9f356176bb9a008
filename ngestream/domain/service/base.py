"""Base classes for domain services."""

import asyncio
from typing import Awaitable, TypeVar

from ngestream.domain.error import StoreError

T = TypeVar("T")


class Service:
    """Marker base for domain services.

    Services hold rules that span entities and never talk to HTTP or SQL
    directly.
    """


class StoreBackedService(Service):
    """Service whose calls to an external store are time-bounded."""

    def __init__(self, store_timeout_seconds: float | None = None) -> None:
        self.store_timeout_seconds = store_timeout_seconds

    async def _bounded(self, awaitable: Awaitable[T], operation: str) -> T:
        """Await a store call; timeouts and network failures become StoreError."""
        try:
            return await asyncio.wait_for(awaitable, self.store_timeout_seconds)
        except asyncio.TimeoutError as e:
            raise StoreError(
                f"{operation} timed out after {self.store_timeout_seconds}s"
            ) from e
        except OSError as e:
            # Stores that do not translate their own driver errors
            raise StoreError(f"{operation} failed: {type(e).__name__}") from e
