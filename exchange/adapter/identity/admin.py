"""Identity provider admin client.

Creates accounts with the privileged service-role key. Used only by the
registration endpoint.
"""

from dataclasses import dataclass
from uuid import uuid4

import httpx
import logfire

from exchange.adapter.error import AuthProviderError
from exchange.domain.error import DuplicateIdentityError
from exchange.domain.service.identity_service import IdentityAdminClient
from exchange.domain.value import IdentityAccount, UserId

from .payload import error_code, error_message, parse_account

# Error codes GoTrue uses for an email that already has an account
_DUPLICATE_CODES = {"email_exists", "user_already_exists"}


class RealIdentityAdminClient(IdentityAdminClient):
    """GoTrue admin API client."""

    def __init__(
        self,
        url: str,
        service_role_key: str,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize admin client.

        Args:
            url: Identity provider base URL
            service_role_key: Privileged API key
            timeout: Seconds before an outbound call fails
            http_client: Optional shared client (a new one is opened per call
                otherwise)
        """
        self.users_url = f"{url.rstrip('/')}/auth/v1/admin/users"
        self.service_role_key = service_role_key
        self.timeout = timeout
        self._http_client = http_client

    async def create_account(
        self, email: str, password: str, email_confirm: bool = True
    ) -> IdentityAccount:
        """Create an account through the admin API.

        Raises:
            DuplicateIdentityError: If the email already has an account
            AuthProviderError: For any other provider failure
        """
        headers = {
            "apikey": self.service_role_key,
            "Authorization": f"Bearer {self.service_role_key}",
        }
        body = {"email": email, "password": password, "email_confirm": email_confirm}

        try:
            if self._http_client is not None:
                response = await self._http_client.post(
                    self.users_url, json=body, headers=headers, timeout=self.timeout
                )
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.post(
                        self.users_url, json=body, headers=headers
                    )
        except httpx.HTTPError as e:
            logfire.error("Identity admin request failed", error=str(e))
            raise AuthProviderError(f"Identity provider unavailable: {e}") from e

        if response.status_code in (200, 201):
            return parse_account(response.json())

        message = error_message(response)
        if error_code(response) in _DUPLICATE_CODES or (
            response.status_code == 422 and "already" in message.lower()
        ):
            raise DuplicateIdentityError(email)

        logfire.error(
            "Identity account creation failed",
            status_code=response.status_code,
            error=message,
        )
        raise AuthProviderError(message, status_code=response.status_code)


@dataclass
class MockAccount:
    """Account held by the mock identity provider."""

    account: IdentityAccount
    password: str


class MockIdentityAdminClient(IdentityAdminClient):
    """Mock admin client for testing.

    Accounts are kept in ``accounts`` keyed by lower-cased email, which a
    MockSessionClient can share to sign in with them.
    """

    def __init__(self, accounts: dict[str, MockAccount] | None = None):
        self.accounts: dict[str, MockAccount] = accounts if accounts is not None else {}
        self.fail_with: Exception | None = None

    async def create_account(
        self, email: str, password: str, email_confirm: bool = True
    ) -> IdentityAccount:
        if self.fail_with is not None:
            raise self.fail_with

        key = email.lower()
        if key in self.accounts:
            raise DuplicateIdentityError(email)

        account = IdentityAccount(id=UserId(uuid4()), email=email)
        self.accounts[key] = MockAccount(account=account, password=password)
        return account
