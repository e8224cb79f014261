"""Invitation repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime

from exchange.domain.model.invitation import Invitation
from exchange.domain.value import InvitationId, InviteCode, UserId


class InvitationRepository(ABC):
    """Repository for Invitation entity.

    Defines the contract for invitation persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, invitation_id: InvitationId) -> Invitation | None:
        """Find an invitation by ID.

        Args:
            invitation_id: The invitation's unique identifier

        Returns:
            The invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_unredeemed_by_code(self, code: InviteCode) -> Invitation | None:
        """Find an invitation by exact code that has not been accepted.

        Args:
            code: The invite code

        Returns:
            The invitation if found and unredeemed, None otherwise
        """
        pass

    @abstractmethod
    async def mark_accepted(
        self, invitation_id: InvitationId, user_id: UserId, accepted_at: datetime
    ) -> bool:
        """Conditionally mark an invitation as accepted.

        Sets accepted_by/accepted_at only where accepted_by is still null, so
        two registrations racing on one code cannot both redeem it.

        Args:
            invitation_id: Invitation to accept
            user_id: The newly registered user
            accepted_at: Acceptance timestamp

        Returns:
            True if this call redeemed the invitation, False if it was
            already redeemed
        """
        pass

    @abstractmethod
    async def save(self, invitation: Invitation) -> Invitation:
        """Save an invitation (create or update).

        Args:
            invitation: The invitation to save

        Returns:
            The saved invitation

        Raises:
            IntegrityError: If another invitation already uses the code
        """
        pass
