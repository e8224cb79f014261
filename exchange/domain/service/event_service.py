"""Event domain service."""

from datetime import datetime, timezone

import logfire

from exchange.domain.error import RegistrationClosedError, ServerError
from exchange.domain.model.event import Event
from exchange.domain.repository import EventRepository
from exchange.domain.value import EventId

from .base import Service


class EventService(Service):
    """Domain service for event eligibility checks."""

    def __init__(self, event_repository: EventRepository) -> None:
        """Initialize event service.

        Args:
            event_repository: Event repository
        """
        self.event_repository = event_repository

    async def ensure_registration_open(
        self,
        event_id: EventId,
        enforce_deadline: bool,
        now: datetime | None = None,
    ) -> Event:
        """Check that an event currently accepts registrations.

        Args:
            event_id: Event to check
            enforce_deadline: Whether a passed deadline closes registration
            now: Current time (defaults to now, UTC)

        Returns:
            The open event

        Raises:
            ServerError: If the event cannot be loaded or has no deadline
            RegistrationClosedError: If the event is absent, not open, or
                past its deadline while the deadline is enforced
        """
        with logfire.span("event_service.ensure_registration_open", event_id=event_id):
            try:
                event = await self.event_repository.find_by_id(event_id)
            except Exception as e:
                logfire.error("Error fetching event", event_id=event_id, error=str(e))
                raise ServerError("Failed to load event") from e

            if event is None or not event.is_registration_open:
                logfire.info(
                    "Registration closed",
                    event_id=event_id,
                    status=event.status.value if event else None,
                )
                raise RegistrationClosedError(f"Registration closed for {event_id}")

            if event.registration_deadline is None:
                logfire.error("Event missing registration_deadline", event_id=event_id)
                raise ServerError("Event configuration error")

            now = now or datetime.now(timezone.utc)
            deadline = _as_utc(event.registration_deadline)
            past_deadline = now > deadline

            if past_deadline and enforce_deadline:
                logfire.info(
                    "Registration closed - deadline passed",
                    event_id=event_id,
                    deadline=deadline.isoformat(),
                )
                raise RegistrationClosedError(f"Registration deadline passed for {event_id}")

            if past_deadline:
                logfire.warn(
                    "Registration deadline passed but not enforced",
                    event_id=event_id,
                    deadline=deadline.isoformat(),
                )

            return event


def _as_utc(value: datetime) -> datetime:
    """Treat naive timestamps as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
