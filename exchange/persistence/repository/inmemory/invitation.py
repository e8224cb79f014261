"""In-memory invitation repository for testing."""

from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError

from exchange.domain.model.invitation import Invitation
from exchange.domain.repository.invitation import InvitationRepository
from exchange.domain.value import InvitationId, InviteCode, UserId


class InMemoryInvitationRepository(InvitationRepository):
    """In-memory implementation of InvitationRepository for testing."""

    def __init__(self) -> None:
        self._invitations: list[Invitation] = []

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        """Find an invitation by ID."""
        for invitation in self._invitations:
            if invitation.id == invitation_id:
                return invitation
        return None

    async def find_unredeemed_by_code(self, code: InviteCode) -> Optional[Invitation]:
        """Find an unaccepted invitation by exact code."""
        for invitation in self._invitations:
            if invitation.invite_code == code and not invitation.is_redeemed:
                return invitation
        return None

    async def mark_accepted(
        self, invitation_id: InvitationId, user_id: UserId, accepted_at: datetime
    ) -> bool:
        """Accept the invitation only if it is still unaccepted."""
        for i, invitation in enumerate(self._invitations):
            if invitation.id == invitation_id:
                if invitation.is_redeemed:
                    return False
                self._invitations[i] = invitation.model_copy(
                    update={"accepted_by": user_id, "accepted_at": accepted_at}
                )
                return True
        return False

    async def save(self, invitation: Invitation) -> Invitation:
        """Save an invitation (create or update).

        Raises:
            IntegrityError: If another invitation already uses the code
        """
        for i, existing in enumerate(self._invitations):
            if existing.id == invitation.id:
                self._invitations[i] = invitation
                return invitation

        for existing in self._invitations:
            if existing.invite_code == invitation.invite_code:
                raise IntegrityError("Duplicate invite code", None, Exception())

        self._invitations.append(invitation)
        return invitation
