"""Client for the registration endpoint."""

from abc import ABC, abstractmethod

import httpx
import logfire
from pydantic import BaseModel

from exchange.domain.value import ErrorCode

from .error import RegistrationFailedError

GENERIC_ERROR_MESSAGE = "Something went wrong. Please try again."


class RegisteredAccount(BaseModel):
    """User returned by a successful registration."""

    id: str
    email: str
    name: str
    profile_complete: bool


class RegistrationClient(ABC):
    """Submits registrations to the server."""

    @abstractmethod
    async def register(
        self,
        email: str,
        password: str,
        name: str | None = None,
        invite_code: str | None = None,
    ) -> RegisteredAccount:
        """Register a new account.

        Raises:
            RegistrationFailedError: With the server's error code and message
        """
        pass


class HttpRegistrationClient(RegistrationClient):
    """Posts to ``/auth/register`` and unwraps the response envelope."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.register_url = f"{base_url.rstrip('/')}/auth/register"
        self.timeout = timeout
        self._http_client = http_client

    async def register(
        self,
        email: str,
        password: str,
        name: str | None = None,
        invite_code: str | None = None,
    ) -> RegisteredAccount:
        body = {
            "email": email,
            "password": password,
            "name": name,
            "inviteCode": invite_code,
        }

        try:
            if self._http_client is not None:
                response = await self._http_client.post(
                    self.register_url, json=body, timeout=self.timeout
                )
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.post(self.register_url, json=body)
        except httpx.HTTPError as e:
            logfire.error("Registration request failed", error=str(e))
            raise RegistrationFailedError(
                ErrorCode.SERVER_ERROR, GENERIC_ERROR_MESSAGE
            ) from e

        try:
            envelope = response.json()
        except ValueError as e:
            raise RegistrationFailedError(
                ErrorCode.SERVER_ERROR, GENERIC_ERROR_MESSAGE
            ) from e

        if not envelope.get("success"):
            error = envelope.get("error") or {}
            raise RegistrationFailedError(
                error.get("code", ErrorCode.SERVER_ERROR.value),
                error.get("message", GENERIC_ERROR_MESSAGE),
            )

        return RegisteredAccount.model_validate(envelope["data"]["user"])
