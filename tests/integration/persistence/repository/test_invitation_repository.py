"""Integration tests for PostgresInvitationRepository.

These tests verify the conditional accept and exact code matching against
a real database.
"""

from datetime import datetime, timezone
import os
from uuid import uuid4

import pytest

from exchange.domain.repository import InvitationRepository, UserRepository
from exchange.domain.value import InviteCode, UserId
from tests.conftest import make_invitation, make_user
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    not os.environ.get("DATABASE__URL"), reason="DATABASE__URL not set"
)

# Integration test fixture - real persistence, assumes postgres running
integration_env = create_env_fixture(unmock={"persistence"})


def _code() -> str:
    return f"IT-{uuid4().hex[:12].upper()}"


class TestInvitationRepositoryIntegration:
    @pytest.mark.asyncio
    async def test_find_unredeemed_by_code_extracts_root_value(self, integration_env):
        # Arrange
        invitation_repo = await integration_env.get(InvitationRepository)
        code = _code()
        invitation = await invitation_repo.save(make_invitation(code=code))

        # Act
        found = await invitation_repo.find_unredeemed_by_code(InviteCode(code))

        # Assert
        assert found is not None
        assert found.id == invitation.id
        assert found.invite_code.root == code

    @pytest.mark.asyncio
    async def test_code_match_is_case_sensitive(self, integration_env):
        invitation_repo = await integration_env.get(InvitationRepository)
        code = _code()
        await invitation_repo.save(make_invitation(code=code))

        found = await invitation_repo.find_unredeemed_by_code(InviteCode(code.lower()))

        assert found is None

    @pytest.mark.asyncio
    async def test_mark_accepted_only_once(self, integration_env):
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        invitation_repo = await integration_env.get(InvitationRepository)
        first = await user_repo.save(make_user(email=f"{uuid4().hex}@x.com"))
        second = await user_repo.save(make_user(email=f"{uuid4().hex}@x.com"))
        code = _code()
        invitation = await invitation_repo.save(make_invitation(code=code))
        now = datetime.now(timezone.utc)

        # Act
        won = await invitation_repo.mark_accepted(invitation.id, first.id, now)
        lost = await invitation_repo.mark_accepted(invitation.id, second.id, now)

        # Assert
        assert won is True
        assert lost is False
        stored = await invitation_repo.find_by_id(invitation.id)
        assert stored.accepted_by == UserId(first.id)
        assert await invitation_repo.find_unredeemed_by_code(InviteCode(code)) is None
