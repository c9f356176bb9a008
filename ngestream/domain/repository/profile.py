"""Profile repository interface."""

from abc import ABC, abstractmethod
from typing import Iterable

from ngestream.domain.model.profile import UserProfile
from ngestream.domain.value import UserId


class ProfileRepository(ABC):
    """Repository for user profiles (identity lookup)."""

    @abstractmethod
    async def find_by_user_ids(
        self, user_ids: Iterable[UserId]
    ) -> dict[UserId, UserProfile]:
        """Find profiles for a set of users.

        Args:
            user_ids: Users to look up

        Returns:
            Mapping of user id to profile; users without a profile are absent
        """
        pass

    @abstractmethod
    async def save(self, profile: UserProfile) -> UserProfile:
        """Create or replace a profile."""
        pass
