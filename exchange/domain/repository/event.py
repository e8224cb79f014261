"""Event repository interface."""

from abc import ABC, abstractmethod

from exchange.domain.model.event import Event
from exchange.domain.value import EventId


class EventRepository(ABC):
    """Repository for Event entity.

    Events are maintained by administrative tooling; registration only reads.
    """

    @abstractmethod
    async def find_by_id(self, event_id: EventId) -> Event | None:
        """Find an event by ID.

        Args:
            event_id: The event's identifier

        Returns:
            The event if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, event: Event) -> Event:
        """Save an event (create or update).

        Args:
            event: The event to save

        Returns:
            The saved event
        """
        pass
