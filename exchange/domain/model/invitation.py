"""Invitation entity.

Invitations are single-use referral codes. A code is redeemed exactly once,
by the registration that supplies it.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from exchange.domain.model.common import DomainModel
from exchange.domain.value import InvitationId, InviteCode, UserId


class Invitation(DomainModel):
    """Invitation entity.

    Business rules:
    - invite_code is unique
    - Once accepted_by is set the invitation is no longer redeemable
    - expires_at is recorded but not enforced
    """

    id: InvitationId
    invite_code: InviteCode
    inviter_id: Optional[UserId] = None
    email: Optional[str] = None  # Address the invitation was sent to, if any
    accepted_by: Optional[UserId] = None
    accepted_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_redeemed(self) -> bool:
        """Whether the invitation has already been used."""
        return self.accepted_by is not None
