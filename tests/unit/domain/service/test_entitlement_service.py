"""Unit tests for EntitlementService."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from ngestream.domain.error import PermissionDenied
from ngestream.domain.model import Subscription
from ngestream.domain.repository import SubscriptionRepository
from ngestream.domain.service import EntitlementService, can_write
from ngestream.domain.value import Actor, SubscriptionTier, UserId
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


def _subscription(user_id, tier, **overrides):
    values = dict(
        id=uuid4(),
        user_id=user_id,
        tier=tier,
        is_active=True,
        created_at=datetime.now(timezone.utc),
        expires_at=None,
    )
    values.update(overrides)
    return Subscription(**values)


class TestCanWrite:
    """Tests for the write entitlement rule."""

    @pytest.mark.parametrize(
        "tier,expected",
        [
            (SubscriptionTier.FREE, False),
            (SubscriptionTier.BASIC, False),
            (SubscriptionTier.PREMIUM, True),
        ],
    )
    def test_only_premium_writes(self, tier, expected):
        """Only the premium tier may write comments."""
        assert can_write(tier) is expected


class TestEntitlements:
    """Tests for the capability matrix."""

    @pytest.mark.asyncio
    async def test_basic_tier_matrix(self, unit_env):
        """Basic may like and wishlist but not comment or see exclusives."""
        # Arrange
        service = await unit_env.get(EntitlementService)

        # Act
        entitlements = service.entitlements(SubscriptionTier.BASIC)

        # Assert
        assert entitlements.can_comment is False
        assert entitlements.can_like is True
        assert entitlements.can_wishlist is True
        assert entitlements.can_access_exclusive_content is False

    @pytest.mark.asyncio
    async def test_free_tier_matrix(self, unit_env):
        """Free gets nothing beyond reading."""
        service = await unit_env.get(EntitlementService)

        entitlements = service.entitlements(SubscriptionTier.FREE)

        assert not any(
            [
                entitlements.can_comment,
                entitlements.can_like,
                entitlements.can_wishlist,
                entitlements.can_access_exclusive_content,
            ]
        )


class TestGetTier:
    """Tests for get_tier."""

    @pytest.mark.asyncio
    async def test_no_subscription_is_free(self, unit_env):
        """Users without a subscription row should be FREE."""
        service = await unit_env.get(EntitlementService)

        tier = await service.get_tier(UserId(uuid4()))

        assert tier == SubscriptionTier.FREE

    @pytest.mark.asyncio
    async def test_active_subscription_tier(self, unit_env):
        """An active subscription should determine the tier."""
        # Arrange
        service = await unit_env.get(EntitlementService)
        repo = await unit_env.get(SubscriptionRepository)
        user_id = UserId(uuid4())
        await repo.save(_subscription(user_id, SubscriptionTier.PREMIUM))

        # Act
        tier = await service.get_tier(user_id)

        # Assert
        assert tier == SubscriptionTier.PREMIUM

    @pytest.mark.asyncio
    async def test_expired_subscription_is_free(self, unit_env):
        """An expired subscription should fall back to FREE."""
        # Arrange
        service = await unit_env.get(EntitlementService)
        repo = await unit_env.get(SubscriptionRepository)
        user_id = UserId(uuid4())
        await repo.save(
            _subscription(
                user_id,
                SubscriptionTier.PREMIUM,
                expires_at=datetime.now(timezone.utc) - timedelta(days=1),
            )
        )

        # Act
        tier = await service.get_tier(user_id)

        # Assert
        assert tier == SubscriptionTier.FREE

    @pytest.mark.asyncio
    async def test_inactive_subscription_is_free(self, unit_env):
        """A cancelled subscription should not grant its tier."""
        service = await unit_env.get(EntitlementService)
        repo = await unit_env.get(SubscriptionRepository)
        user_id = UserId(uuid4())
        await repo.save(
            _subscription(user_id, SubscriptionTier.PREMIUM, is_active=False)
        )

        assert await service.get_tier(user_id) == SubscriptionTier.FREE


class TestRequireWrite:
    """Tests for require_write."""

    @pytest.mark.asyncio
    async def test_basic_actor_denied(self, unit_env):
        """Basic subscribers should be refused with PermissionDenied."""
        service = await unit_env.get(EntitlementService)
        actor = Actor(user_id=UserId(uuid4()), tier=SubscriptionTier.BASIC)

        with pytest.raises(PermissionDenied) as exc_info:
            service.require_write(actor)

        assert exc_info.value.tier == "basic"

    @pytest.mark.asyncio
    async def test_premium_actor_allowed(self, unit_env):
        """Premium subscribers should pass."""
        service = await unit_env.get(EntitlementService)
        actor = Actor(user_id=UserId(uuid4()), tier=SubscriptionTier.PREMIUM)

        service.require_write(actor)
