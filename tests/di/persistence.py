"""Mock persistence providers for testing."""

from dishka import Scope, provide

from exchange.domain.repository import (
    ActivityLogRepository,
    EventRepository,
    InvitationRepository,
    NotificationRepository,
    UnitOfWork,
    UserRepository,
)
from exchange.persistence.repository.inmemory import (
    InMemoryActivityLogRepository,
    InMemoryEventRepository,
    InMemoryInvitationRepository,
    InMemoryNotificationRepository,
    InMemoryUnitOfWork,
    InMemoryUserRepository,
)
from exchange.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    APP scope so that state survives across HTTP requests against one app.
    Each test builds its own container, which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_event_repository(self) -> EventRepository:
        """Provide in-memory event repository."""
        return InMemoryEventRepository()

    @provide(scope=Scope.APP)
    def get_invitation_repository(self) -> InvitationRepository:
        """Provide in-memory invitation repository."""
        return InMemoryInvitationRepository()

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_notification_repository(self) -> NotificationRepository:
        """Provide in-memory notification repository."""
        return InMemoryNotificationRepository()

    @provide(scope=Scope.APP)
    def get_activity_log_repository(self) -> ActivityLogRepository:
        """Provide in-memory activity log repository."""
        return InMemoryActivityLogRepository()

    @provide(scope=Scope.APP)
    def get_unit_of_work(self) -> UnitOfWork:
        """Provide in-memory unit of work."""
        return InMemoryUnitOfWork()
