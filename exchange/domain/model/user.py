"""User profile aggregate.

The application-level record for a registered person, keyed by the identity
provider's account id. Every active session must have one.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from exchange.domain.model.common import DomainModel
from exchange.domain.value import UserId, WishlistItemId


class WishlistItem(DomainModel):
    """Gift idea attached to a profile. Read-only in this layer."""

    id: WishlistItemId
    user_id: Optional[UserId] = None
    name: str
    description: Optional[str] = None
    link: Optional[str] = None
    icon: Optional[str] = None
    display_order: int = 0


class User(DomainModel):
    """User profile aggregate root."""

    id: UserId
    email: str
    name: Optional[str] = None
    bio: Optional[str] = None
    work: Optional[str] = None
    hobbies: Optional[str] = None
    avatar_url: Optional[str] = None
    profile_complete: bool = False
    last_login: Optional[datetime] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    # Loaded only by profile fetches, ordered by display_order
    wishlist: list[WishlistItem] = Field(default_factory=list)
