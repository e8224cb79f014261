"""In-memory repository implementations for testing."""

from .activity_log import InMemoryActivityLogRepository
from .event import InMemoryEventRepository
from .invitation import InMemoryInvitationRepository
from .notification import InMemoryNotificationRepository
from .unit_of_work import InMemoryUnitOfWork
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryActivityLogRepository",
    "InMemoryEventRepository",
    "InMemoryInvitationRepository",
    "InMemoryNotificationRepository",
    "InMemoryUnitOfWork",
    "InMemoryUserRepository",
]
