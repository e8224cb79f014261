"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from exchange.domain.model.user import User
from exchange.domain.value import UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID, without wishlist items.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_profile(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID together with their wishlist.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user with wishlist ordered by display_order, None if absent
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update). Wishlist items are not written.

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass
