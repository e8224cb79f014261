"""Profile gateways used by the session synchronizer."""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any

import httpx
import logfire

from exchange.adapter.error import DataStoreError
from exchange.domain.error import NotFoundError
from exchange.domain.model import User
from exchange.domain.repository import UserRepository
from exchange.domain.value import Session, UserId
from exchange.persistence.mappers import row_to_user


class ProfileGateway(ABC):
    """Reads and writes the signed-in user's profile row."""

    @abstractmethod
    async def fetch_profile(self, session: Session) -> User | None:
        """Fetch the session user's profile including wishlist.

        Args:
            session: Active session (its token authorises the request)

        Returns:
            The profile, or None if no row exists
        """
        pass

    @abstractmethod
    async def update_profile(self, session: Session, fields: dict[str, Any]) -> None:
        """Write the given fields to the session user's profile row.

        Args:
            session: Active session
            fields: Column values to set
        """
        pass


class RestProfileGateway(ProfileGateway):
    """Profile access through the PostgREST data API.

    Row-level security on the API side restricts a token to its own row.
    """

    def __init__(
        self,
        url: str,
        anon_key: str,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.users_url = f"{url.rstrip('/')}/rest/v1/users"
        self.anon_key = anon_key
        self.timeout = timeout
        self._http_client = http_client

    async def fetch_profile(self, session: Session) -> User | None:
        params = {
            "id": f"eq.{session.user.id}",
            "select": "*,wishlist_items(*)",
            "wishlist_items.order": "display_order.asc",
        }
        response = await self._request("GET", session, params=params)
        rows = response.json()
        if not rows:
            return None

        row = rows[0]
        return row_to_user(row, row.get("wishlist_items") or [])

    async def update_profile(self, session: Session, fields: dict[str, Any]) -> None:
        values = {**fields, "updated_at": datetime.now(timezone.utc).isoformat()}
        await self._request(
            "PATCH",
            session,
            params={"id": f"eq.{session.user.id}"},
            json=values,
            headers={"Prefer": "return=minimal"},
        )

    async def _request(
        self,
        method: str,
        session: Session,
        params: dict[str, str],
        json: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        request_headers = {
            "apikey": self.anon_key,
            "Authorization": f"Bearer {session.access_token}",
            **(headers or {}),
        }

        try:
            if self._http_client is not None:
                response = await self._http_client.request(
                    method,
                    self.users_url,
                    params=params,
                    json=json,
                    headers=request_headers,
                    timeout=self.timeout,
                )
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.request(
                        method,
                        self.users_url,
                        params=params,
                        json=json,
                        headers=request_headers,
                    )
        except httpx.HTTPError as e:
            logfire.error("Data API request failed", method=method, error=str(e))
            raise DataStoreError(f"Data API unavailable: {e}") from e

        if response.status_code >= 400:
            raise DataStoreError(
                f"Data API returned {response.status_code}: {response.text}",
                status_code=response.status_code,
            )
        return response


class RepositoryProfileGateway(ProfileGateway):
    """Profile access straight through a UserRepository.

    For processes that share the server's data store.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def fetch_profile(self, session: Session) -> User | None:
        return await self.user_repository.find_profile(session.user.id)

    async def update_profile(self, session: Session, fields: dict[str, Any]) -> None:
        user_id = UserId(session.user.id)
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise NotFoundError("User", str(user_id))

        updated = user.model_copy(
            update={**fields, "updated_at": datetime.now(timezone.utc)}
        )
        await self.user_repository.save(updated)
