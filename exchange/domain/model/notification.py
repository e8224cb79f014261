"""Notification entity. Append-only from this layer."""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from exchange.domain.model.common import DomainModel
from exchange.domain.value import NotificationId, NotificationType, UserId


class Notification(DomainModel):
    """In-app notification for a single user."""

    id: NotificationId
    user_id: UserId
    type: NotificationType
    title: Optional[str] = None
    message: Optional[str] = None
    action_url: Optional[str] = None
    data: dict[str, Any] = Field(default_factory=dict)
    read: bool = False
    sent: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    read_at: Optional[datetime] = None
