"""SQLAlchemy unit of work."""

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from exchange.domain.repository import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """Commits the request-scoped session shared by the repositories."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize unit of work with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def commit(self) -> None:
        await self.session.commit()
        logfire.info("Unit of work committed")
