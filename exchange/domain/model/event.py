"""Event entity.

An event is a single exchange instance. It is created and advanced through
its lifecycle by administrative tooling; registration only reads it.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from exchange.domain.model.common import DomainModel
from exchange.domain.value import EventId, EventStatus


class Event(DomainModel):
    """Exchange event.

    Business rules:
    - Registration is permitted only while status is REGISTRATION_OPEN
    - The registration deadline is a secondary gate, enforced when configured
    """

    id: EventId
    name: str = ""
    status: EventStatus = EventStatus.PENDING
    registration_deadline: Optional[datetime] = None
    draw_date: Optional[datetime] = None
    event_date: Optional[datetime] = None
    participant_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_registration_open(self) -> bool:
        """Whether the status admits new registrations."""
        return self.status == EventStatus.REGISTRATION_OPEN
