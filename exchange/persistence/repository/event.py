"""PostgreSQL implementation of Event repository."""

from typing import Optional

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from exchange.domain.model import Event
from exchange.domain.repository import EventRepository
from exchange.domain.value import EventId
from exchange.persistence.mappers import event_to_dict, row_to_event
from exchange.persistence.tables import events_table


class PostgresEventRepository(EventRepository):
    """PostgreSQL implementation of EventRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, event_id: EventId) -> Optional[Event]:
        stmt = select(events_table).where(events_table.c.id == event_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_event(dict(row)) if row else None

    async def save(self, event: Event) -> Event:
        event_dict = event_to_dict(event)

        existing = await self.find_by_id(event.id)

        if existing:
            stmt = (
                update(events_table)
                .where(events_table.c.id == event.id)
                .values(**event_dict)
            )
        else:
            stmt = insert(events_table).values(**event_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return event
