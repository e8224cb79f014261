"""Repository interfaces for the gift exchange domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from exchange.domain.repository.activity_log import ActivityLogRepository
from exchange.domain.repository.event import EventRepository
from exchange.domain.repository.invitation import InvitationRepository
from exchange.domain.repository.notification import NotificationRepository
from exchange.domain.repository.unit_of_work import UnitOfWork
from exchange.domain.repository.user import UserRepository

__all__ = [
    "ActivityLogRepository",
    "EventRepository",
    "InvitationRepository",
    "NotificationRepository",
    "UnitOfWork",
    "UserRepository",
]
