"""In-memory activity log repository for testing."""

from exchange.domain.model.activity_log import ActivityLog
from exchange.domain.repository.activity_log import ActivityLogRepository
from exchange.domain.value import UserId


class InMemoryActivityLogRepository(ActivityLogRepository):
    """In-memory implementation of ActivityLogRepository for testing."""

    def __init__(self) -> None:
        self._entries: list[ActivityLog] = []

    async def save(self, entry: ActivityLog) -> ActivityLog:
        self._entries.append(entry)
        return entry

    async def find_by_user(self, user_id: UserId) -> list[ActivityLog]:
        matches = [e for e in self._entries if e.user_id == user_id]
        return sorted(matches, key=lambda e: e.timestamp, reverse=True)
