"""Unit tests for IdentityService."""

import pytest

from exchange.adapter.error import AuthProviderError
from exchange.adapter.identity import MockIdentityAdminClient
from exchange.domain.error import EmailAlreadyExistsError
from exchange.domain.service import IdentityAdminClient, IdentityService
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestCreateAccount:
    """Tests for create_account method."""

    @pytest.mark.asyncio
    async def test_creates_confirmed_account(self, unit_env):
        # Arrange
        identity_service = await unit_env.get(IdentityService)
        admin_client: MockIdentityAdminClient = await unit_env.get(IdentityAdminClient)

        # Act
        account = await identity_service.create_account("a@x.com", "pw123456")

        # Assert
        assert account.email == "a@x.com"
        assert admin_client.accounts["a@x.com"].account.id == account.id

    @pytest.mark.asyncio
    async def test_duplicate_email_maps_to_email_already_exists(self, unit_env):
        """The provider's duplicate error becomes EMAIL_ALREADY_EXISTS."""
        identity_service = await unit_env.get(IdentityService)
        await identity_service.create_account("a@x.com", "pw123456")

        with pytest.raises(EmailAlreadyExistsError):
            await identity_service.create_account("A@x.com", "other-password")

    @pytest.mark.asyncio
    async def test_other_provider_errors_propagate(self):
        """Provider failures that are not duplicates are not translated."""
        admin_client = MockIdentityAdminClient()
        admin_client.fail_with = AuthProviderError("boom", status_code=500)
        identity_service = IdentityService(admin_client=admin_client)

        with pytest.raises(AuthProviderError):
            await identity_service.create_account("a@x.com", "pw123456")
