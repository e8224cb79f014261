"""Domain value objects for gift exchange accounts.

Value objects are immutable and defined by their values, not identity.
"""

from datetime import datetime, timezone
from enum import Enum

from pydantic import field_validator

from exchange.domain.value.common import RootValueObject, ValueObject
from exchange.domain.value.identifiers import UserId


class EventStatus(str, Enum):
    """Lifecycle status of an exchange event."""

    PENDING = "PENDING"
    REGISTRATION_OPEN = "REGISTRATION_OPEN"
    REGISTRATION_CLOSED = "REGISTRATION_CLOSED"
    COMPLETED = "COMPLETED"


class NotificationType(str, Enum):
    """Kinds of in-app notifications written during registration."""

    WELCOME = "WELCOME"
    FRIEND_JOINED = "FRIEND_JOINED"


class ActivityAction(str, Enum):
    """Actions recorded in the activity log."""

    USER_REGISTERED = "USER_REGISTERED"


class ErrorCode(str, Enum):
    """Machine-readable registration failure kinds."""

    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    REGISTRATION_CLOSED = "REGISTRATION_CLOSED"
    INVALID_INVITE_CODE = "INVALID_INVITE_CODE"
    EMAIL_ALREADY_EXISTS = "EMAIL_ALREADY_EXISTS"
    SERVER_ERROR = "SERVER_ERROR"


class SessionEvent(str, Enum):
    """Session change events emitted by the identity provider."""

    SIGNED_IN = "SIGNED_IN"
    SIGNED_OUT = "SIGNED_OUT"
    TOKEN_REFRESHED = "TOKEN_REFRESHED"


class InviteCode(RootValueObject[str]):
    """Single-use referral code, matched exactly."""

    @field_validator("root")
    @classmethod
    def validate_code_format(cls, v: str) -> str:
        """Validate code is not empty."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Invite code must be 1-255 characters")
        return v


class IdentityAccount(ValueObject):
    """Identity provider account.

    The provider-issued id doubles as the application user id.
    """

    id: UserId
    email: str


class Session(ValueObject):
    """Authenticated session issued by the identity provider."""

    access_token: str
    refresh_token: str
    expires_at: datetime | None = None
    user: IdentityAccount

    @property
    def is_expired(self) -> bool:
        """Whether the access token has passed its expiry."""
        if self.expires_at is None:
            return False
        return datetime.now(timezone.utc) >= self.expires_at
