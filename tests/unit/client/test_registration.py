"""Unit tests for the registration endpoint client."""

import json

import httpx
import pytest

from exchange.client import HttpRegistrationClient, RegistrationFailedError
from exchange.client.registration import GENERIC_ERROR_MESSAGE
from exchange.domain.value import ErrorCode


def _client(handler) -> HttpRegistrationClient:
    return HttpRegistrationClient(
        base_url="https://api.test/",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


@pytest.mark.asyncio
async def test_success_returns_account():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["body"] = json.loads(request.content)
        return httpx.Response(
            200,
            json={
                "success": True,
                "data": {
                    "user": {
                        "id": "8a7c",
                        "email": "ann@x.com",
                        "name": "Ann",
                        "profile_complete": False,
                    }
                },
            },
        )

    account = await _client(handler).register(
        "ann@x.com", "pw123456", name="Ann", invite_code="FRIEND42"
    )

    assert seen["url"] == "https://api.test/auth/register"
    assert seen["body"] == {
        "email": "ann@x.com",
        "password": "pw123456",
        "name": "Ann",
        "inviteCode": "FRIEND42",
    }
    assert account.id == "8a7c"
    assert account.profile_complete is False


@pytest.mark.asyncio
async def test_error_envelope_raises_with_code():
    client = _client(
        lambda request: httpx.Response(
            409,
            json={
                "success": False,
                "error": {
                    "code": "EMAIL_ALREADY_EXISTS",
                    "message": "An account with this email already exists",
                },
            },
        )
    )

    with pytest.raises(RegistrationFailedError) as exc_info:
        await client.register("ann@x.com", "pw123456")

    assert exc_info.value.code == ErrorCode.EMAIL_ALREADY_EXISTS
    assert exc_info.value.message == "An account with this email already exists"


@pytest.mark.asyncio
async def test_non_json_response_is_server_error():
    client = _client(lambda request: httpx.Response(502, text="Bad gateway"))

    with pytest.raises(RegistrationFailedError) as exc_info:
        await client.register("ann@x.com", "pw123456")

    assert exc_info.value.code == ErrorCode.SERVER_ERROR
    assert exc_info.value.message == GENERIC_ERROR_MESSAGE


@pytest.mark.asyncio
async def test_unreachable_server_is_server_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(RegistrationFailedError) as exc_info:
        await _client(handler).register("ann@x.com", "pw123456")

    assert exc_info.value.code == ErrorCode.SERVER_ERROR
