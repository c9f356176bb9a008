"""User profile entities."""

from pydantic import Field

from ngestream.domain.model.common import DomainModel
from ngestream.domain.value import UserId

PLACEHOLDER_AVATAR = "/placeholder.svg"


class UserProfile(DomainModel):
    """Profile row as stored in ``user_profiles``."""

    user_id: UserId
    full_name: str | None = Field(default=None, max_length=255)
    avatar_url: str | None = None


class AuthorProfile(DomainModel):
    """Display data used to decorate a rendered comment.

    Always populated: authors without a stored profile get a name
    synthesized from their id.
    """

    user_id: UserId
    display_name: str
    avatar_url: str = PLACEHOLDER_AVATAR
    has_profile: bool = False

    @property
    def initial(self) -> str:
        """Upper-cased first character, for avatar fallbacks."""
        return self.display_name[:1].upper()

    @classmethod
    def from_profile(cls, user_id: UserId, profile: UserProfile | None) -> "AuthorProfile":
        if profile is None or not profile.full_name:
            return cls(
                user_id=user_id,
                display_name=f"User {str(user_id)[:8]}...",
                avatar_url=(profile.avatar_url if profile else None)
                or PLACEHOLDER_AVATAR,
                has_profile=profile is not None,
            )
        return cls(
            user_id=user_id,
            display_name=profile.full_name,
            avatar_url=profile.avatar_url or PLACEHOLDER_AVATAR,
            has_profile=True,
        )
