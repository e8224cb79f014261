"""SQLAlchemy table definitions for gift exchange accounts.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# USERS TABLE (id shared with the identity provider account)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("email", String(255), nullable=False),
    Column("name", String(255), nullable=True),
    Column("avatar_url", Text, nullable=True),
    Column("bio", Text, nullable=True),
    Column("work", Text, nullable=True),
    Column("hobbies", Text, nullable=True),
    Column("profile_complete", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("last_login", TIMESTAMP(timezone=True), nullable=True),
)

Index("idx_users_email", users_table.c.email, unique=True)

# ============================================================================
# EVENTS TABLE
# ============================================================================
events_table = Table(
    "events",
    metadata,
    Column("id", String(100), primary_key=True),
    Column("name", String(255), nullable=False),
    Column("registration_deadline", TIMESTAMP(timezone=True), nullable=True),
    Column("draw_date", TIMESTAMP(timezone=True), nullable=True),
    Column("event_date", TIMESTAMP(timezone=True), nullable=True),
    Column("status", String(50), nullable=False, server_default="PENDING"),
    Column("participant_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# WISHLIST ITEMS TABLE
# ============================================================================
wishlist_items_table = Table(
    "wishlist_items",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("name", String(255), nullable=False),
    Column("description", Text, nullable=True),
    Column("link", Text, nullable=True),
    Column("icon", String(50), nullable=True),
    Column("display_order", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_wishlist_items_user_order",
    wishlist_items_table.c.user_id,
    wishlist_items_table.c.display_order,
)

# ============================================================================
# INVITATIONS TABLE
# ============================================================================
invitations_table = Table(
    "invitations",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "inviter_id", UUID, ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    ),
    Column("invite_code", String(255), nullable=False),
    Column("email", String(255), nullable=True),
    Column(
        "accepted_by", UUID, ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    ),
    Column("accepted_at", TIMESTAMP(timezone=True), nullable=True),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_invitations_invite_code", invitations_table.c.invite_code, unique=True)
Index("idx_invitations_inviter_id", invitations_table.c.inviter_id)

# ============================================================================
# NOTIFICATIONS TABLE
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("type", String(50), nullable=False),
    Column("title", String(255), nullable=True),
    Column("message", Text, nullable=True),
    Column("action_url", Text, nullable=True),
    Column("data", JSONB, nullable=True),
    Column("read", Boolean, nullable=False, server_default="false"),
    Column("sent", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("read_at", TIMESTAMP(timezone=True), nullable=True),
)

Index("idx_notifications_user_id", notifications_table.c.user_id)

# ============================================================================
# ACTIVITY LOGS TABLE
# ============================================================================
activity_logs_table = Table(
    "activity_logs",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="SET NULL"), nullable=True),
    Column("action", String(100), nullable=False),
    Column("event_id", String(100), ForeignKey("events.id"), nullable=True),
    Column("metadata", JSONB, nullable=True),
    Column(
        "timestamp", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_activity_logs_user_id", activity_logs_table.c.user_id)
