"""In-memory user repository for testing."""

from typing import Optional

from exchange.domain.model.user import User, WishlistItem
from exchange.domain.repository.user import UserRepository
from exchange.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing.

    Wishlist items are held separately, as they are in the database, so
    saving a user never touches them.
    """

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}
        self._wishlists: dict[UserId, list[WishlistItem]] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_profile(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID with their wishlist."""
        user = self._users.get(user_id)
        if user is None:
            return None
        items = sorted(
            self._wishlists.get(user_id, []), key=lambda item: item.display_order
        )
        return user.model_copy(update={"wishlist": items})

    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        self._users[user.id] = user.model_copy(update={"wishlist": []})
        return user

    def add_wishlist_item(self, item: WishlistItem) -> None:
        """Attach a wishlist item to its owner."""
        self._wishlists.setdefault(item.user_id, []).append(item)
