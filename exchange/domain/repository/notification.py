"""Notification repository interface."""

from abc import ABC, abstractmethod

from exchange.domain.model.notification import Notification
from exchange.domain.value import UserId


class NotificationRepository(ABC):
    """Repository for Notification entity."""

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Append a notification.

        Args:
            notification: The notification to store

        Returns:
            The stored notification
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> list[Notification]:
        """List a user's notifications, newest first.

        Args:
            user_id: The recipient

        Returns:
            List of notifications
        """
        pass
