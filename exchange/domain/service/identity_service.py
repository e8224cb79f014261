"""Identity domain service."""

import logfire

from exchange.domain.error import DuplicateIdentityError, EmailAlreadyExistsError
from exchange.domain.value import IdentityAccount

from .base import Service


class IdentityAdminClient:
    """Privileged identity provider interface used by the server."""

    async def create_account(
        self, email: str, password: str, email_confirm: bool = True
    ) -> IdentityAccount:
        """Create an identity account.

        Args:
            email: Account email
            password: Account password
            email_confirm: Mark the email as confirmed (no verification mail)

        Returns:
            The created account

        Raises:
            DuplicateIdentityError: If the email already has an account
            ProviderError: For any other provider failure
        """
        raise NotImplementedError


class IdentityService(Service):
    """Domain service for identity account creation."""

    def __init__(self, admin_client: IdentityAdminClient) -> None:
        """Initialize identity service.

        Args:
            admin_client: Identity provider admin client
        """
        self.admin_client = admin_client

    async def create_account(self, email: str, password: str) -> IdentityAccount:
        """Create a pre-confirmed identity account.

        Args:
            email: Account email
            password: Account password

        Returns:
            The created account

        Raises:
            EmailAlreadyExistsError: If the email already has an account
        """
        with logfire.span("identity_service.create_account", email=email):
            try:
                account = await self.admin_client.create_account(
                    email, password, email_confirm=True
                )
            except DuplicateIdentityError as e:
                logfire.info("Identity already exists", email=email)
                raise EmailAlreadyExistsError(str(e)) from e

            logfire.info("Identity created", user_id=str(account.id))
            return account
