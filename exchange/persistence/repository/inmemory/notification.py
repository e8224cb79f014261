"""In-memory notification repository for testing."""

from exchange.domain.model.notification import Notification
from exchange.domain.repository.notification import NotificationRepository
from exchange.domain.value import UserId


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self) -> None:
        self._notifications: list[Notification] = []

    async def save(self, notification: Notification) -> Notification:
        self._notifications.append(notification)
        return notification

    async def find_by_user(self, user_id: UserId) -> list[Notification]:
        matches = [n for n in self._notifications if n.user_id == user_id]
        return sorted(matches, key=lambda n: n.created_at, reverse=True)
