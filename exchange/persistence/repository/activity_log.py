"""PostgreSQL implementation of ActivityLog repository."""

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from exchange.domain.model import ActivityLog
from exchange.domain.repository import ActivityLogRepository
from exchange.domain.value import UserId
from exchange.persistence.mappers import activity_log_to_dict, row_to_activity_log
from exchange.persistence.tables import activity_logs_table


class PostgresActivityLogRepository(ActivityLogRepository):
    """PostgreSQL implementation of ActivityLogRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, entry: ActivityLog) -> ActivityLog:
        """Insert an activity entry inside a savepoint."""
        stmt = insert(activity_logs_table).values(**activity_log_to_dict(entry))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return entry

    async def find_by_user(self, user_id: UserId) -> list[ActivityLog]:
        stmt = (
            select(activity_logs_table)
            .where(activity_logs_table.c.user_id == user_id)
            .order_by(activity_logs_table.c.timestamp.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_activity_log(dict(row)) for row in result.mappings().all()]
