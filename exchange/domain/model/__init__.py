"""Domain model entities for gift exchange accounts."""

from exchange.domain.model.activity_log import ActivityLog
from exchange.domain.model.event import Event
from exchange.domain.model.invitation import Invitation
from exchange.domain.model.notification import Notification
from exchange.domain.model.user import User, WishlistItem

__all__ = [
    "ActivityLog",
    "Event",
    "Invitation",
    "Notification",
    "User",
    "WishlistItem",
]
