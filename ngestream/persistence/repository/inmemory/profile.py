"""In-memory profile repository for testing."""

from typing import Iterable

from ngestream.domain.model import UserProfile
from ngestream.domain.repository.profile import ProfileRepository
from ngestream.domain.value import UserId

from .database import InMemoryDatabase


class InMemoryProfileRepository(ProfileRepository):
    """In-memory implementation of ProfileRepository for testing."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self._db = database or InMemoryDatabase()

    async def find_by_user_ids(
        self, user_ids: Iterable[UserId]
    ) -> dict[UserId, UserProfile]:
        return {
            user_id: self._db.profiles[user_id]
            for user_id in set(user_ids)
            if user_id in self._db.profiles
        }

    async def save(self, profile: UserProfile) -> UserProfile:
        self._db.profiles[profile.user_id] = profile
        return profile
