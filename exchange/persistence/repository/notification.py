"""PostgreSQL implementation of Notification repository."""

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from exchange.domain.model import Notification
from exchange.domain.repository import NotificationRepository
from exchange.domain.value import UserId
from exchange.persistence.mappers import notification_to_dict, row_to_notification
from exchange.persistence.tables import notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, notification: Notification) -> Notification:
        """Insert a notification inside a savepoint.

        Args:
            notification: Notification to store

        Returns:
            Stored notification
        """
        stmt = insert(notifications_table).values(**notification_to_dict(notification))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return notification

    async def find_by_user(self, user_id: UserId) -> list[Notification]:
        stmt = (
            select(notifications_table)
            .where(notifications_table.c.user_id == user_id)
            .order_by(notifications_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_notification(dict(row)) for row in result.mappings().all()]
