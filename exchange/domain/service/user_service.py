"""User domain service."""

from datetime import datetime, timezone

import logfire

from exchange.domain.error import NotFoundError
from exchange.domain.model import User
from exchange.domain.repository import UserRepository
from exchange.domain.value import IdentityAccount, UserId


def default_display_name(email: str) -> str:
    """Name used when the registrant gives none: the email's local part."""
    return email.split("@")[0]


class UserService:
    """Domain service for user profile operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def create_profile(self, account: IdentityAccount, name: str | None) -> User:
        """Create the application profile for a new identity account.

        Args:
            account: Freshly created identity account
            name: Display name, or None to derive it from the email

        Returns:
            The created profile (profile_complete is False)
        """
        with logfire.span("user_service.create_profile", user_id=str(account.id)):
            now = datetime.now(timezone.utc)
            user = User(
                id=account.id,
                email=account.email,
                name=name or default_display_name(account.email),
                profile_complete=False,
                created_at=now,
                updated_at=now,
            )
            saved = await self.user_repository.save(user)
            logfire.info("Profile created", user_id=str(saved.id))
            return saved

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user
