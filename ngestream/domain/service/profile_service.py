"""Profile lookup domain service."""

from typing import Iterable

import logfire

from ngestream.domain.model.profile import AuthorProfile
from ngestream.domain.repository import ProfileRepository
from ngestream.domain.value import UserId

from .base import StoreBackedService


class ProfileService(StoreBackedService):
    """Resolves display data for comment authors."""

    def __init__(
        self,
        profile_repository: ProfileRepository,
        store_timeout_seconds: float | None = None,
    ) -> None:
        super().__init__(store_timeout_seconds)
        self.profile_repository = profile_repository

    async def get_authors(
        self, user_ids: Iterable[UserId]
    ) -> dict[UserId, AuthorProfile]:
        """Resolve display data for a set of users.

        Every requested user gets an entry; users without a stored profile
        get a name synthesized from their id.

        Args:
            user_ids: Users to resolve (duplicates are ignored)

        Returns:
            Mapping of user id to author display data

        Raises:
            StoreError: If the profile lookup fails
        """
        distinct = set(user_ids)
        if not distinct:
            return {}

        with logfire.span("profile_service.get_authors", count=len(distinct)):
            profiles = await self._bounded(
                self.profile_repository.find_by_user_ids(distinct), "Fetching profiles"
            )
            missing = len(distinct) - len(profiles)
            if missing:
                logfire.info("Profiles missing for authors", missing=missing)

            return {
                user_id: AuthorProfile.from_profile(user_id, profiles.get(user_id))
                for user_id in distinct
            }
