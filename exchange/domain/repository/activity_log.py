"""Activity log repository interface."""

from abc import ABC, abstractmethod

from exchange.domain.model.activity_log import ActivityLog
from exchange.domain.value import UserId


class ActivityLogRepository(ABC):
    """Repository for ActivityLog entries."""

    @abstractmethod
    async def save(self, entry: ActivityLog) -> ActivityLog:
        """Append an activity log entry.

        Args:
            entry: The entry to store

        Returns:
            The stored entry
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> list[ActivityLog]:
        """List a user's activity, newest first.

        Args:
            user_id: The user

        Returns:
            List of entries
        """
        pass
