"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from exchange.domain.model import User
from exchange.domain.repository import UserRepository
from exchange.domain.value import UserId
from exchange.persistence.mappers import row_to_user, user_to_dict
from exchange.persistence.tables import users_table, wishlist_items_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User without wishlist if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_profile(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID along with their wishlist items.

        Args:
            user_id: User ID to look up

        Returns:
            User with wishlist if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        if not row:
            return None

        items_stmt = (
            select(wishlist_items_table)
            .where(wishlist_items_table.c.user_id == user_id)
            .order_by(wishlist_items_table.c.display_order)
        )
        items_result = await self.session.execute(items_stmt)
        items = [dict(item) for item in items_result.mappings().all()]

        return row_to_user(dict(row), items)

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user
        """
        user_dict = user_to_dict(user)

        existing = await self.find_by_id(user.id)

        if existing:
            stmt = (
                update(users_table)
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
            await self.session.execute(stmt)
        else:
            stmt = insert(users_table).values(**user_dict)
            await self.session.execute(stmt)

        await self.session.flush()
        return user
