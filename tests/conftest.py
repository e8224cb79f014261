"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import logfire

from exchange.domain.model import Event, Invitation, User
from exchange.domain.value import (
    EventId,
    EventStatus,
    InvitationId,
    InviteCode,
    UserId,
)

# Logfire must be configured before the app module is imported
logfire.configure(send_to_logfire=False, console=False)

EVENT_ID = EventId("valentine-2026")


def make_event(
    status: EventStatus = EventStatus.REGISTRATION_OPEN,
    deadline: datetime | None = None,
    with_deadline: bool = True,
) -> Event:
    """Build the configured event, by default open with a future deadline."""
    if with_deadline and deadline is None:
        deadline = datetime.now(timezone.utc) + timedelta(days=7)
    return Event(
        id=EVENT_ID,
        name="Valentine Exchange",
        status=status,
        registration_deadline=deadline if with_deadline else None,
    )


def make_invitation(
    code: str = "FRIEND42",
    inviter_id: UserId | None = None,
    accepted_by: UserId | None = None,
) -> Invitation:
    """Build an invitation, unredeemed unless accepted_by is given."""
    return Invitation(
        id=InvitationId(uuid4()),
        invite_code=InviteCode(code),
        inviter_id=inviter_id,
        accepted_by=accepted_by,
        accepted_at=datetime.now(timezone.utc) if accepted_by else None,
    )


def make_user(email: str = "inviter@x.com", name: str | None = "Ivy") -> User:
    """Build a stored profile."""
    return User(id=UserId(uuid4()), email=email, name=name)
