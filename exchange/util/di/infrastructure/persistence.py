"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from exchange.config import Settings
from exchange.domain.repository import (
    ActivityLogRepository,
    EventRepository,
    InvitationRepository,
    NotificationRepository,
    UnitOfWork,
    UserRepository,
)
from exchange.persistence.database import create_engine, create_session_factory
from exchange.persistence.repository import (
    PostgresActivityLogRepository,
    PostgresEventRepository,
    PostgresInvitationRepository,
    PostgresNotificationRepository,
    PostgresUserRepository,
)
from exchange.persistence.unit_of_work import SqlAlchemyUnitOfWork
from exchange.util.di.base import ProviderBase
from exchange.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        Committed at the end of the request if no exception occurred, rolled
        back otherwise. A registration whose identity was created but whose
        profile insert failed therefore leaves no partial rows behind.
        """
        async with session_factory() as session:
            try:
                yield session
                if not session.is_active:
                    # A failed flush already reported its error to the caller
                    logfire.warn("Session inactive, rolling back")
                    await session.rollback()
                    return
                await session.commit()
                logfire.info("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_event_repository(self, session: AsyncSession) -> EventRepository:
        """Provide Event repository."""
        return PostgresEventRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_invitation_repository(self, session: AsyncSession) -> InvitationRepository:
        """Provide Invitation repository."""
        return PostgresInvitationRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_notification_repository(
        self, session: AsyncSession
    ) -> NotificationRepository:
        """Provide Notification repository."""
        return PostgresNotificationRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_activity_log_repository(
        self, session: AsyncSession
    ) -> ActivityLogRepository:
        """Provide ActivityLog repository."""
        return PostgresActivityLogRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self, session: AsyncSession) -> UnitOfWork:
        """Provide unit of work over the request session."""
        return SqlAlchemyUnitOfWork(session)
