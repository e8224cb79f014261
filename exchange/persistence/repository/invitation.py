"""PostgreSQL implementation of Invitation repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import and_, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from exchange.domain.model import Invitation
from exchange.domain.repository import InvitationRepository
from exchange.domain.value import InvitationId, InviteCode, UserId
from exchange.persistence.mappers import invitation_to_dict, row_to_invitation
from exchange.persistence.tables import invitations_table


class PostgresInvitationRepository(InvitationRepository):
    """PostgreSQL implementation of InvitationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        """Find an invitation by ID.

        Args:
            invitation_id: Invitation ID to look up

        Returns:
            Invitation if found, None otherwise
        """
        stmt = select(invitations_table).where(invitations_table.c.id == invitation_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def find_unredeemed_by_code(self, code: InviteCode) -> Optional[Invitation]:
        """Find an unaccepted invitation by exact code.

        Args:
            code: Invite code to look up

        Returns:
            Invitation if found and not yet accepted, None otherwise
        """
        stmt = select(invitations_table).where(
            and_(
                invitations_table.c.invite_code == code.root,
                invitations_table.c.accepted_by.is_(None),
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def mark_accepted(
        self, invitation_id: InvitationId, user_id: UserId, accepted_at: datetime
    ) -> bool:
        """Accept the invitation if nobody has yet.

        Runs in a savepoint so a failure here does not poison the
        surrounding registration transaction.

        Returns:
            True if exactly one row was updated
        """
        stmt = (
            update(invitations_table)
            .where(
                and_(
                    invitations_table.c.id == invitation_id,
                    invitations_table.c.accepted_by.is_(None),
                )
            )
            .values(accepted_by=user_id, accepted_at=accepted_at)
        )
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
        return result.rowcount == 1

    async def save(self, invitation: Invitation) -> Invitation:
        """Save an invitation (create or update).

        Args:
            invitation: Invitation to save

        Returns:
            Saved invitation
        """
        invitation_dict = invitation_to_dict(invitation)

        existing = await self.find_by_id(invitation.id)

        if existing:
            stmt = (
                update(invitations_table)
                .where(invitations_table.c.id == invitation.id)
                .values(**invitation_dict)
            )
            await self.session.execute(stmt)
        else:
            stmt = insert(invitations_table).values(**invitation_dict)
            await self.session.execute(stmt)

        await self.session.flush()
        return invitation
