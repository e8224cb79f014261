"""Mappers for converting between database rows and domain models.

Rows arrive either from SQLAlchemy (native UUID/datetime values) or as JSON
from the REST data API (strings), so identifiers are coerced on the way in.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from exchange.domain.model import (
    ActivityLog,
    Event,
    Invitation,
    Notification,
    User,
    WishlistItem,
)
from exchange.domain.value import (
    ActivityAction,
    ActivityLogId,
    EventId,
    EventStatus,
    InvitationId,
    InviteCode,
    NotificationId,
    NotificationType,
    UserId,
    WishlistItemId,
)


def _uuid(value: Any) -> Optional[UUID]:
    if value is None:
        return None
    return UUID(value) if isinstance(value, str) else value


def row_to_wishlist_item(row: Dict[str, Any]) -> WishlistItem:
    """Convert database row to WishlistItem domain model."""
    user_id = _uuid(row.get("user_id"))
    return WishlistItem(
        id=WishlistItemId(_uuid(row["id"])),
        user_id=UserId(user_id) if user_id else None,
        name=row["name"],
        description=row.get("description"),
        link=row.get("link"),
        icon=row.get("icon"),
        display_order=row.get("display_order") or 0,
    )


def row_to_user(
    row: Dict[str, Any], wishlist_rows: Optional[list[Dict[str, Any]]] = None
) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict
        wishlist_rows: Wishlist item rows, if the caller loaded them

    Returns:
        User domain model with wishlist sorted by display_order
    """
    items = [row_to_wishlist_item(item) for item in wishlist_rows or []]
    items.sort(key=lambda item: item.display_order)

    fields: Dict[str, Any] = {
        "id": UserId(_uuid(row["id"])),
        "email": row["email"],
        "name": row.get("name"),
        "bio": row.get("bio"),
        "work": row.get("work"),
        "hobbies": row.get("hobbies"),
        "avatar_url": row.get("avatar_url"),
        "profile_complete": bool(row.get("profile_complete")),
        "last_login": row.get("last_login"),
        "wishlist": items,
    }
    # Timestamps are server defaults; let the model fill them when absent
    for key in ("created_at", "updated_at"):
        if row.get(key) is not None:
            fields[key] = row[key]
    return User(**fields)


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Wishlist items live in their own table and are never written here.
    """
    return user.model_dump(exclude={"wishlist"})


def row_to_event(row: Dict[str, Any]) -> Event:
    """Convert database row to Event domain model."""
    return Event(
        id=EventId(row["id"]),
        name=row.get("name") or "",
        status=EventStatus(row["status"]),
        registration_deadline=row.get("registration_deadline"),
        draw_date=row.get("draw_date"),
        event_date=row.get("event_date"),
        participant_count=row.get("participant_count") or 0,
        created_at=row["created_at"],
    )


def event_to_dict(event: Event) -> Dict[str, Any]:
    """Convert Event domain model to database dict."""
    data = event.model_dump()
    data["status"] = event.status.value
    return data


def row_to_invitation(row: Dict[str, Any]) -> Invitation:
    """Convert database row to Invitation domain model."""
    inviter_id = _uuid(row.get("inviter_id"))
    accepted_by = _uuid(row.get("accepted_by"))
    return Invitation(
        id=InvitationId(_uuid(row["id"])),
        invite_code=InviteCode(row["invite_code"]),
        inviter_id=UserId(inviter_id) if inviter_id else None,
        email=row.get("email"),
        accepted_by=UserId(accepted_by) if accepted_by else None,
        accepted_at=row.get("accepted_at"),
        expires_at=row.get("expires_at"),
        created_at=row["created_at"],
    )


def invitation_to_dict(invitation: Invitation) -> Dict[str, Any]:
    """Convert Invitation domain model to database dict."""
    data = invitation.model_dump()
    data["invite_code"] = invitation.invite_code.root
    return data


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model."""
    return Notification(
        id=NotificationId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        type=NotificationType(row["type"]),
        title=row.get("title"),
        message=row.get("message"),
        action_url=row.get("action_url"),
        data=row.get("data") or {},
        read=row["read"],
        sent=row["sent"],
        created_at=row["created_at"],
        read_at=row.get("read_at"),
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict."""
    data = notification.model_dump()
    data["type"] = notification.type.value
    return data


def row_to_activity_log(row: Dict[str, Any]) -> ActivityLog:
    """Convert database row to ActivityLog domain model."""
    user_id = _uuid(row.get("user_id"))
    event_id = row.get("event_id")
    return ActivityLog(
        id=ActivityLogId(_uuid(row["id"])),
        user_id=UserId(user_id) if user_id else None,
        action=ActivityAction(row["action"]),
        event_id=EventId(event_id) if event_id else None,
        metadata=row.get("metadata") or {},
        timestamp=row["timestamp"],
    )


def activity_log_to_dict(entry: ActivityLog) -> Dict[str, Any]:
    """Convert ActivityLog domain model to database dict."""
    data = entry.model_dump()
    data["action"] = entry.action.value
    return data
