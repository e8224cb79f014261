"""Unit tests for NotificationService and ActivityLogService."""

from uuid import uuid4

import pytest

from exchange.domain.model import User
from exchange.domain.repository import ActivityLogRepository, NotificationRepository
from exchange.domain.service import ActivityLogService, NotificationService
from exchange.domain.value import ActivityAction, NotificationType, UserId
from tests.conftest import EVENT_ID
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


def _user(name: str = "Ann") -> User:
    return User(id=UserId(uuid4()), email="a@x.com", name=name)


class TestNotifyWelcome:
    """Tests for notify_welcome method."""

    @pytest.mark.asyncio
    async def test_welcome_notification_written_for_user(self, unit_env):
        # Arrange
        notification_service = await unit_env.get(NotificationService)
        notification_repo = await unit_env.get(NotificationRepository)
        user = _user()

        # Act
        await notification_service.notify_welcome(user, EVENT_ID, "Valentine Exchange")

        # Assert
        [notification] = await notification_repo.find_by_user(user.id)
        assert notification.type == NotificationType.WELCOME
        assert notification.title == "Welcome to Valentine Exchange!"
        assert notification.message == "Complete your profile to participate in the draw."
        assert notification.data == {"event_id": EVENT_ID}
        assert notification.read is False
        assert notification.sent is False


class TestNotifyFriendJoined:
    """Tests for notify_friend_joined method."""

    @pytest.mark.asyncio
    async def test_inviter_told_who_joined(self, unit_env):
        notification_service = await unit_env.get(NotificationService)
        notification_repo = await unit_env.get(NotificationRepository)
        inviter_id = UserId(uuid4())
        friend = _user("Ann")

        await notification_service.notify_friend_joined(inviter_id, friend)

        [notification] = await notification_repo.find_by_user(inviter_id)
        assert notification.type == NotificationType.FRIEND_JOINED
        assert notification.title == "Friend Joined!"
        assert notification.message == "Ann joined using your invite code!"
        assert notification.data == {"friend_id": str(friend.id), "friend_name": "Ann"}
        assert await notification_repo.find_by_user(friend.id) == []


class TestRecordRegistration:
    """Tests for ActivityLogService.record_registration."""

    @pytest.mark.asyncio
    async def test_records_invite_code(self, unit_env):
        activity_service = await unit_env.get(ActivityLogService)
        activity_repo = await unit_env.get(ActivityLogRepository)
        user_id = UserId(uuid4())

        await activity_service.record_registration(user_id, EVENT_ID, "FRIEND42")

        [entry] = await activity_repo.find_by_user(user_id)
        assert entry.action == ActivityAction.USER_REGISTERED
        assert entry.event_id == EVENT_ID
        assert entry.metadata == {"invite_code": "FRIEND42"}

    @pytest.mark.asyncio
    async def test_records_missing_invite_code_as_none(self, unit_env):
        activity_service = await unit_env.get(ActivityLogService)
        activity_repo = await unit_env.get(ActivityLogRepository)
        user_id = UserId(uuid4())

        await activity_service.record_registration(user_id, EVENT_ID, "")

        [entry] = await activity_repo.find_by_user(user_id)
        assert entry.metadata == {"invite_code": None}
