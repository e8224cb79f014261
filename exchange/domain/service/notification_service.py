"""Notification domain service."""

from uuid import uuid4

import logfire

from exchange.domain.model import Notification, User
from exchange.domain.repository import NotificationRepository
from exchange.domain.value import EventId, NotificationId, NotificationType, UserId

from .base import Service


class NotificationService(Service):
    """Domain service for registration notifications."""

    def __init__(self, notification_repository: NotificationRepository) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
        """
        self.notification_repository = notification_repository

    async def notify_welcome(
        self, user: User, event_id: EventId, event_name: str
    ) -> Notification:
        """Write the welcome notification for a new user.

        Args:
            user: The new user
            event_id: Event the user registered for
            event_name: Event display name

        Returns:
            Stored notification
        """
        with logfire.span("notification_service.notify_welcome", user_id=str(user.id)):
            notification = Notification(
                id=NotificationId(uuid4()),
                user_id=user.id,
                type=NotificationType.WELCOME,
                title=f"Welcome to {event_name}!",
                message="Complete your profile to participate in the draw.",
                data={"event_id": event_id},
            )
            return await self.notification_repository.save(notification)

    async def notify_friend_joined(self, inviter_id: UserId, friend: User) -> Notification:
        """Tell an inviter that someone joined with their code.

        Args:
            inviter_id: Owner of the redeemed invitation
            friend: The new user

        Returns:
            Stored notification
        """
        with logfire.span(
            "notification_service.notify_friend_joined",
            inviter_id=str(inviter_id),
            friend_id=str(friend.id),
        ):
            notification = Notification(
                id=NotificationId(uuid4()),
                user_id=inviter_id,
                type=NotificationType.FRIEND_JOINED,
                title="Friend Joined!",
                message=f"{friend.name} joined using your invite code!",
                data={"friend_id": str(friend.id), "friend_name": friend.name},
            )
            return await self.notification_repository.save(notification)
