"""PostgreSQL implementation of Subscription repository."""

from typing import Optional

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from ngestream.domain.model import Subscription
from ngestream.domain.repository import SubscriptionRepository
from ngestream.domain.value import UserId
from ngestream.persistence.database import store_errors
from ngestream.persistence.mappers import row_to_subscription, subscription_to_dict
from ngestream.persistence.tables import subscriptions_table


class PostgresSubscriptionRepository(SubscriptionRepository):
    """PostgreSQL implementation of SubscriptionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_active_by_user(self, user_id: UserId) -> Optional[Subscription]:
        """Most recent active subscription for a user."""
        stmt = (
            select(subscriptions_table)
            .where(subscriptions_table.c.user_id == user_id)
            .where(subscriptions_table.c.is_active.is_(True))
            .order_by(desc(subscriptions_table.c.created_at))
            .limit(1)
        )
        async with store_errors(self.session, "Fetching subscription"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_subscription(row._asdict()) if row else None

    async def save(self, subscription: Subscription) -> Subscription:
        """Save a subscription (create or update)."""
        values = subscription_to_dict(subscription)
        existing_stmt = select(subscriptions_table.c.id).where(
            subscriptions_table.c.id == subscription.id
        )
        async with store_errors(self.session, "Saving subscription"):
            existing = (await self.session.execute(existing_stmt)).fetchone()
            if existing:
                stmt = (
                    subscriptions_table.update()
                    .where(subscriptions_table.c.id == subscription.id)
                    .values(**values)
                )
            else:
                stmt = subscriptions_table.insert().values(**values)
            await self.session.execute(stmt)
            await self.session.flush()
        return subscription
