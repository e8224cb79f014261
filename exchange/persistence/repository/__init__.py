"""PostgreSQL repository implementations."""

from exchange.persistence.repository.activity_log import PostgresActivityLogRepository
from exchange.persistence.repository.event import PostgresEventRepository
from exchange.persistence.repository.invitation import PostgresInvitationRepository
from exchange.persistence.repository.notification import (
    PostgresNotificationRepository,
)
from exchange.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresActivityLogRepository",
    "PostgresEventRepository",
    "PostgresInvitationRepository",
    "PostgresNotificationRepository",
    "PostgresUserRepository",
]
