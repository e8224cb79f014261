"""Helpers for GoTrue request and response bodies."""

from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import UUID

import httpx

from exchange.domain.value import IdentityAccount, Session, UserId


def error_message(response: httpx.Response) -> str:
    """Extract the provider's error message from a failed response.

    GoTrue has used several field names across versions.
    """
    try:
        body = response.json()
    except ValueError:
        return response.text or f"Identity provider returned {response.status_code}"

    if isinstance(body, dict):
        for key in ("error_description", "msg", "message", "error"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
    return f"Identity provider returned {response.status_code}"


def error_code(response: httpx.Response) -> str | None:
    """Return the machine-readable error code, if the provider sent one."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        code = body.get("error_code") or body.get("code")
        return code if isinstance(code, str) else None
    return None


def parse_account(payload: dict[str, Any]) -> IdentityAccount:
    """Build an IdentityAccount from a GoTrue user object."""
    return IdentityAccount(id=UserId(UUID(payload["id"])), email=payload["email"])


def parse_session(payload: dict[str, Any]) -> Session:
    """Build a Session from a GoTrue token response."""
    expires_at = None
    if payload.get("expires_at") is not None:
        expires_at = datetime.fromtimestamp(int(payload["expires_at"]), tz=timezone.utc)
    elif payload.get("expires_in") is not None:
        expires_at = datetime.now(timezone.utc) + timedelta(
            seconds=int(payload["expires_in"])
        )

    return Session(
        access_token=payload["access_token"],
        refresh_token=payload["refresh_token"],
        expires_at=expires_at,
        user=parse_account(payload["user"]),
    )
