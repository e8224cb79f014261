"""Invitation domain service."""

from datetime import datetime, timezone

import logfire

from exchange.domain.error import InvalidInviteCodeError
from exchange.domain.model.invitation import Invitation
from exchange.domain.repository import InvitationRepository
from exchange.domain.value import InviteCode, UserId

from .base import Service


class InvitationService(Service):
    """Domain service for resolving and redeeming invite codes."""

    def __init__(self, invitation_repository: InvitationRepository) -> None:
        """Initialize invitation service.

        Args:
            invitation_repository: Invitation repository
        """
        self.invitation_repository = invitation_repository

    async def resolve_code(self, code: str) -> Invitation:
        """Resolve an invite code to an unredeemed invitation.

        Args:
            code: Invite code as supplied by the registrant

        Returns:
            The unredeemed invitation

        Raises:
            InvalidInviteCodeError: If the code is malformed, unknown, already
                used, or the lookup fails
        """
        with logfire.span("invitation_service.resolve_code", code=code[:4] + "..."):
            try:
                invitation = await self.invitation_repository.find_unredeemed_by_code(
                    InviteCode(code)
                )
            except Exception as e:
                logfire.warn("Invite code lookup failed", error=str(e))
                raise InvalidInviteCodeError("Invite code lookup failed") from e

            if invitation is None:
                logfire.info("Invite code not redeemable", code=code[:4] + "...")
                raise InvalidInviteCodeError("Invalid or already used invite code")

            logfire.info(
                "Invite code resolved",
                invitation_id=str(invitation.id),
                has_inviter=invitation.inviter_id is not None,
            )
            return invitation

    async def redeem(self, invitation: Invitation, user_id: UserId) -> bool:
        """Mark an invitation as accepted by a new user.

        Args:
            invitation: Invitation resolved earlier in the registration
            user_id: The newly registered user

        Returns:
            True if this call redeemed it, False if another registration
            redeemed it first
        """
        with logfire.span(
            "invitation_service.redeem",
            invitation_id=str(invitation.id),
            user_id=str(user_id),
        ):
            redeemed = await self.invitation_repository.mark_accepted(
                invitation.id, user_id, datetime.now(timezone.utc)
            )
            if redeemed:
                logfire.info("Invitation redeemed", invitation_id=str(invitation.id))
            else:
                logfire.warn(
                    "Invitation already redeemed by another registration",
                    invitation_id=str(invitation.id),
                    user_id=str(user_id),
                )
            return redeemed
