"""Domain value objects for gift exchange accounts."""

from exchange.domain.value.identifiers import (
    ActivityLogId,
    EventId,
    InvitationId,
    NotificationId,
    UserId,
    WishlistItemId,
)
from exchange.domain.value.types import (
    ActivityAction,
    ErrorCode,
    EventStatus,
    IdentityAccount,
    InviteCode,
    NotificationType,
    Session,
    SessionEvent,
)

__all__ = [
    # Identifiers
    "UserId",
    "EventId",
    "InvitationId",
    "NotificationId",
    "ActivityLogId",
    "WishlistItemId",
    # Types
    "ActivityAction",
    "ErrorCode",
    "EventStatus",
    "IdentityAccount",
    "InviteCode",
    "NotificationType",
    "Session",
    "SessionEvent",
]
