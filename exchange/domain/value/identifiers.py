"""Strongly typed identifiers for gift exchange entities.

User ids are issued by the identity provider and shared between the
identity account and the application profile.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
InvitationId = NewType("InvitationId", UUID)
NotificationId = NewType("NotificationId", UUID)
ActivityLogId = NewType("ActivityLogId", UUID)
WishlistItemId = NewType("WishlistItemId", UUID)

# Events are keyed by a human-readable slug, e.g. "valentine-2026"
EventId = NewType("EventId", str)
