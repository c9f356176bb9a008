"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from ngestream.domain.model import Comment, Subscription, UserProfile
from ngestream.domain.value import (
    CommentId,
    MovieId,
    SubscriptionTier,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        movie_id=MovieId(str(row["movie_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        comment=row["comment"],
        parent_id=CommentId(_uuid(row["parent_id"])) if row.get("parent_id") else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def row_to_profile(row: Dict[str, Any]) -> UserProfile:
    """Convert database row to UserProfile domain model."""
    return UserProfile(
        user_id=UserId(_uuid(row["user_id"])),
        full_name=row.get("full_name"),
        avatar_url=row.get("avatar_url"),
    )


def profile_to_dict(profile: UserProfile) -> Dict[str, Any]:
    return profile.model_dump()


def row_to_subscription(row: Dict[str, Any]) -> Subscription:
    """Convert database row to Subscription domain model."""
    return Subscription(
        id=_uuid(row["id"]),
        user_id=UserId(_uuid(row["user_id"])),
        tier=SubscriptionTier(row["tier"]),
        is_active=row["is_active"],
        created_at=row["created_at"],
        expires_at=row.get("expires_at"),
    )


def subscription_to_dict(subscription: Subscription) -> Dict[str, Any]:
    data = subscription.model_dump()
    data["tier"] = subscription.tier.value
    return data
