"""Unit tests for the identity admin client."""

import json
from uuid import uuid4

import httpx
import pytest

from exchange.adapter.error import AuthProviderError
from exchange.adapter.identity import RealIdentityAdminClient
from exchange.domain.error import DuplicateIdentityError


def _client(handler) -> RealIdentityAdminClient:
    return RealIdentityAdminClient(
        url="https://identity.test/",
        service_role_key="service-key",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


class TestCreateAccount:
    @pytest.mark.asyncio
    async def test_creates_confirmed_account(self):
        # Arrange
        user_id = str(uuid4())
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["auth"] = request.headers["Authorization"]
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"id": user_id, "email": "a@x.com"})

        # Act
        account = await _client(handler).create_account("a@x.com", "pw123456")

        # Assert
        assert str(account.id) == user_id
        assert seen["url"] == "https://identity.test/auth/v1/admin/users"
        assert seen["auth"] == "Bearer service-key"
        assert seen["body"] == {
            "email": "a@x.com",
            "password": "pw123456",
            "email_confirm": True,
        }

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "status,body",
        [
            (422, {"error_code": "email_exists", "msg": "Email address already exists"}),
            (400, {"code": "user_already_exists", "msg": "User already registered"}),
            (422, {"msg": "A user with this email address has already been registered"}),
        ],
    )
    async def test_duplicate_email(self, status, body):
        client = _client(lambda request: httpx.Response(status, json=body))

        with pytest.raises(DuplicateIdentityError):
            await client.create_account("a@x.com", "pw123456")

    @pytest.mark.asyncio
    async def test_other_failures_raise_provider_error(self):
        client = _client(
            lambda request: httpx.Response(500, json={"message": "database error"})
        )

        with pytest.raises(AuthProviderError) as exc_info:
            await client.create_account("a@x.com", "pw123456")

        assert exc_info.value.status_code == 500
        assert "database error" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_transport_failure_raises_provider_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectTimeout("timed out", request=request)

        with pytest.raises(AuthProviderError):
            await _client(handler).create_account("a@x.com", "pw123456")
