"""PostgreSQL implementation of Profile repository."""

from typing import Iterable

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from ngestream.domain.model import UserProfile
from ngestream.domain.repository import ProfileRepository
from ngestream.domain.value import UserId
from ngestream.persistence.database import store_errors
from ngestream.persistence.mappers import profile_to_dict, row_to_profile
from ngestream.persistence.tables import user_profiles_table


class PostgresProfileRepository(ProfileRepository):
    """PostgreSQL implementation of ProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_user_ids(
        self, user_ids: Iterable[UserId]
    ) -> dict[UserId, UserProfile]:
        """Find profiles for the given users in one query."""
        ids = list(user_ids)
        if not ids:
            return {}

        stmt = select(user_profiles_table).where(
            user_profiles_table.c.user_id.in_(ids)
        )
        async with store_errors(self.session, "Fetching profiles"):
            result = await self.session.execute(stmt)
            rows = result.fetchall()

        profiles = (row_to_profile(row._asdict()) for row in rows)
        return {profile.user_id: profile for profile in profiles}

    async def save(self, profile: UserProfile) -> UserProfile:
        """Upsert a profile keyed by user_id."""
        values = profile_to_dict(profile)
        stmt = insert(user_profiles_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            constraint="uq_user_profiles_user_id",
            set_={
                "full_name": stmt.excluded.full_name,
                "avatar_url": stmt.excluded.avatar_url,
            },
        )
        async with store_errors(self.session, "Saving profile"):
            await self.session.execute(stmt)
            await self.session.flush()
        return profile
