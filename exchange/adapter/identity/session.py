"""Identity provider session clients.

Hold the signed-in session in memory, refresh it when the access token has
expired and announce every change to subscribers.
"""

from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import uuid4

import httpx
import logfire

from exchange.adapter.error import AuthProviderError
from exchange.client.session import SessionClient
from exchange.domain.value import Session, SessionEvent

from .admin import MockAccount
from .payload import error_message, parse_session

# Statuses meaning the session is already gone on the provider side
_SESSION_GONE = {401, 403, 404}


class RealSessionClient(SessionClient):
    """GoTrue session client using the public anon key."""

    def __init__(
        self,
        url: str,
        anon_key: str,
        timeout: float = 30.0,
        session: Session | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize session client.

        Args:
            url: Identity provider base URL
            anon_key: Public API key
            timeout: Seconds before an outbound call fails
            session: Previously persisted session to resume, if any
            http_client: Optional shared client (a new one is opened per call
                otherwise)
        """
        super().__init__()
        self.auth_url = f"{url.rstrip('/')}/auth/v1"
        self.anon_key = anon_key
        self.timeout = timeout
        self._session = session
        self._http_client = http_client

    async def get_session(self) -> Session | None:
        """Return the current session, refreshing an expired access token.

        An invalid refresh token is not an error: the local session is
        cleared and SIGNED_OUT emitted.
        """
        if self._session is None or not self._session.is_expired:
            return self._session

        with logfire.span("session.refresh", user_id=str(self._session.user.id)):
            response = await self._post(
                "/token",
                params={"grant_type": "refresh_token"},
                json={"refresh_token": self._session.refresh_token},
            )

            if response.status_code == 200:
                session = parse_session(response.json())
                self._session = session
                await self._emit(SessionEvent.TOKEN_REFRESHED, session)
                return session

            if response.status_code in (400, 401):
                logfire.info(
                    "Refresh token rejected, clearing session",
                    error=error_message(response),
                )
                self._session = None
                await self._emit(SessionEvent.SIGNED_OUT, None)
                return None

            raise AuthProviderError(
                error_message(response), status_code=response.status_code
            )

    async def sign_in_with_password(self, email: str, password: str) -> Session:
        response = await self._post(
            "/token",
            params={"grant_type": "password"},
            json={"email": email, "password": password},
        )

        if response.status_code != 200:
            message = error_message(response)
            logfire.info(
                "Password sign-in rejected",
                status_code=response.status_code,
                error=message,
            )
            raise AuthProviderError(message, status_code=response.status_code)

        session = parse_session(response.json())
        self._session = session
        logfire.info("Signed in", user_id=str(session.user.id))
        # Listeners may sign out again before this returns
        await self._emit(SessionEvent.SIGNED_IN, session)
        return session

    async def sign_out(self) -> None:
        """Revoke the session and clear it locally.

        If the provider reports the session as already gone, it is cleared
        locally anyway. Other failures leave the local session in place.
        """
        if self._session is not None:
            response = await self._post(
                "/logout",
                headers={"Authorization": f"Bearer {self._session.access_token}"},
            )
            if response.status_code >= 400 and response.status_code not in _SESSION_GONE:
                raise AuthProviderError(
                    error_message(response), status_code=response.status_code
                )

        self._session = None
        await self._emit(SessionEvent.SIGNED_OUT, None)

    async def _post(
        self,
        path: str,
        params: dict[str, str] | None = None,
        json: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        url = f"{self.auth_url}{path}"
        request_headers = {"apikey": self.anon_key, **(headers or {})}

        try:
            if self._http_client is not None:
                return await self._http_client.post(
                    url,
                    params=params,
                    json=json,
                    headers=request_headers,
                    timeout=self.timeout,
                )
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                return await client.post(
                    url, params=params, json=json, headers=request_headers
                )
        except httpx.HTTPError as e:
            logfire.error("Identity provider request failed", path=path, error=str(e))
            raise AuthProviderError(f"Identity provider unavailable: {e}") from e


class MockSessionClient(SessionClient):
    """Mock session client for testing.

    Signs in against the accounts of a MockIdentityAdminClient.
    """

    def __init__(self, accounts: dict[str, MockAccount] | None = None):
        super().__init__()
        self.accounts: dict[str, MockAccount] = accounts if accounts is not None else {}
        self.session: Session | None = None
        self.sign_out_error: Exception | None = None
        self.sign_out_calls = 0

    async def get_session(self) -> Session | None:
        return self.session

    async def sign_in_with_password(self, email: str, password: str) -> Session:
        entry = self.accounts.get(email.lower())
        if entry is None or entry.password != password:
            raise AuthProviderError("Invalid login credentials", status_code=400)

        session = Session(
            access_token=f"access-{uuid4()}",
            refresh_token=f"refresh-{uuid4()}",
            expires_at=datetime.now(timezone.utc) + timedelta(hours=1),
            user=entry.account,
        )
        self.session = session
        await self._emit(SessionEvent.SIGNED_IN, session)
        return session

    async def sign_out(self) -> None:
        self.sign_out_calls += 1
        if self.sign_out_error is not None:
            raise self.sign_out_error
        self.session = None
        await self._emit(SessionEvent.SIGNED_OUT, None)

    async def change_session(self, event: SessionEvent, session: Session | None) -> None:
        """Simulate a provider-initiated session change."""
        self.session = session
        await self._emit(event, session)
