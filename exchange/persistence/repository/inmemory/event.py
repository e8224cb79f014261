"""In-memory event repository for testing."""

from typing import Optional

from exchange.domain.model.event import Event
from exchange.domain.repository.event import EventRepository
from exchange.domain.value import EventId


class InMemoryEventRepository(EventRepository):
    """In-memory implementation of EventRepository for testing."""

    def __init__(self) -> None:
        self._events: dict[EventId, Event] = {}

    async def find_by_id(self, event_id: EventId) -> Optional[Event]:
        """Find an event by ID."""
        return self._events.get(event_id)

    async def save(self, event: Event) -> Event:
        """Save an event (create or update)."""
        self._events[event.id] = event
        return event
