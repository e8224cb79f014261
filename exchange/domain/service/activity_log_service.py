"""Activity log domain service."""

from uuid import uuid4

import logfire

from exchange.domain.model import ActivityLog
from exchange.domain.repository import ActivityLogRepository
from exchange.domain.value import ActivityAction, ActivityLogId, EventId, UserId

from .base import Service


class ActivityLogService(Service):
    """Domain service for the append-only activity log."""

    def __init__(self, activity_log_repository: ActivityLogRepository) -> None:
        self.activity_log_repository = activity_log_repository

    async def record_registration(
        self, user_id: UserId, event_id: EventId, invite_code: str | None
    ) -> ActivityLog:
        """Record that a user registered, and whether an invite code was used."""
        with logfire.span("activity_log_service.record_registration", user_id=str(user_id)):
            entry = ActivityLog(
                id=ActivityLogId(uuid4()),
                user_id=user_id,
                action=ActivityAction.USER_REGISTERED,
                event_id=event_id,
                metadata={"invite_code": invite_code or None},
            )
            return await self.activity_log_repository.save(entry)
