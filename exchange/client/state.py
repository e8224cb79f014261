"""Client-side session and profile state."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from exchange.domain.model import User, WishlistItem
from exchange.domain.value import Session


class UserProfile(BaseModel):
    """Cached profile with optional text normalised to empty strings."""

    model_config = ConfigDict(frozen=True)

    id: str
    email: str
    name: str = ""
    bio: str = ""
    work: str = ""
    hobbies: str = ""
    avatar_url: str = ""
    profile_complete: bool = False
    wishlist: list[WishlistItem] = Field(default_factory=list)

    @classmethod
    def from_user(cls, user: User) -> "UserProfile":
        """Build the cached profile from a fetched user.

        Args:
            user: Profile loaded with its wishlist

        Returns:
            Profile with missing text fields set to ""
        """
        return cls(
            id=str(user.id),
            email=user.email,
            name=user.name or "",
            bio=user.bio or "",
            work=user.work or "",
            hobbies=user.hobbies or "",
            avatar_url=user.avatar_url or "",
            profile_complete=user.profile_complete,
            wishlist=list(user.wishlist or []),
        )


class SessionState(BaseModel):
    """Immutable snapshot published to subscribers on every change."""

    model_config = ConfigDict(frozen=True)

    profile: Optional[UserProfile] = None
    session: Optional[Session] = None
    is_loading: bool = True

    @property
    def is_authenticated(self) -> bool:
        """Whether a session is present."""
        return self.session is not None


class ProfileUpdate(BaseModel):
    """Partial profile update. Only fields explicitly set are written."""

    name: Optional[str] = None
    bio: Optional[str] = None
    work: Optional[str] = None
    hobbies: Optional[str] = None
    avatar_url: Optional[str] = None
    profile_complete: Optional[bool] = None

    def to_fields(self) -> dict:
        """Column values to write.

        Returns:
            Only the fields the caller set explicitly
        """
        return self.model_dump(exclude_unset=True)
