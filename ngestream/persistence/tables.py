"""SQLAlchemy table definitions for NgeStream.

These mirror the Supabase schema (see the Alembic migrations). Auth users
live in Supabase's ``auth.users``; tables here only reference their ids.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("movie_id", String(64), nullable=False),
    Column("user_id", UUID, nullable=False),
    Column("comment", Text, nullable=False),
    # Deleting a comment deletes its replies
    Column(
        "parent_id", UUID, ForeignKey("comments.id", ondelete="CASCADE"), nullable=True
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("length(btrim(comment)) > 0", name="comment_not_blank"),
)

Index("idx_comments_movie_id", comments_table.c.movie_id)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_user_id", comments_table.c.user_id)

# ============================================================================
# USER PROFILES TABLE
# ============================================================================
user_profiles_table = Table(
    "user_profiles",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("user_id", UUID, nullable=False),
    Column("full_name", String(255), nullable=True),
    Column("avatar_url", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", name="uq_user_profiles_user_id"),
)

# ============================================================================
# SUBSCRIPTIONS TABLE
# ============================================================================
subscriptions_table = Table(
    "subscriptions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("user_id", UUID, nullable=False),
    Column("tier", String(16), nullable=False, server_default="free"),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint("tier IN ('free', 'basic', 'premium')", name="tier_valid"),
)

Index(
    "idx_subscriptions_user_active",
    subscriptions_table.c.user_id,
    subscriptions_table.c.is_active,
)
