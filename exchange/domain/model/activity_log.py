"""Activity log entry. Append-only."""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from exchange.domain.model.common import DomainModel
from exchange.domain.value import ActivityAction, ActivityLogId, EventId, UserId


class ActivityLog(DomainModel):
    """Audit record of something a user did."""

    id: ActivityLogId
    user_id: Optional[UserId] = None
    action: ActivityAction
    event_id: Optional[EventId] = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    timestamp: datetime = Field(default_factory=datetime.now)
