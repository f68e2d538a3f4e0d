# 📄 File: app/modules/user_management/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# This file defines how user information is stored in the database: accounts, the
# devices they are signed in on (session tokens) and the topics they are interested in.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models for the user management tables, mapping the User domain model
# to portable column types (PostgreSQL in production, SQLite in tests).
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - app.shared.infrastructure.database.connection (declarative Base)
#
# 🔄 Connected Modules / Calls From:
# - user_repository_impl.py (CRUD operations)
# - migrations/versions (schema generation)

"""
SQLAlchemy Models for User Management

Models:
- UserModel: Account, profile and role flags
- UserTokenModel: One row per active session token
- ModeratorInvitationModel: Pending moderator invitations held by a user
- user_interests: Association between users and categories
"""

from uuid import uuid4

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    Float,
    ForeignKey,
    String,
    Table,
    Text,
    Uuid,
)

from app.shared.infrastructure.database.connection import Base
from app.shared.utils.helpers import utcnow


user_interests = Table(
    "user_interests",
    Base.metadata,
    Column("user_id", Uuid, ForeignKey("users.user_id", ondelete="CASCADE"), primary_key=True),
    Column("category_id", Uuid, ForeignKey("categories.category_id", ondelete="CASCADE"), primary_key=True),
)


# =============================================================================
# USER MODEL
# =============================================================================

class UserModel(Base):
    """
    SQLAlchemy model for user accounts.
    """
    __tablename__ = "users"

    user_id = Column(
        Uuid,
        primary_key=True,
        default=uuid4,
        nullable=False,
        comment="Unique identifier for each user"
    )
    full_name = Column(String(100), nullable=False)
    email = Column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
        comment="Lowercased login email"
    )
    unique_url = Column(String(160), unique=True, nullable=False, index=True)
    bio = Column(Text, nullable=True)
    password_hash = Column(
        String(255),
        nullable=True,
        comment="bcrypt hash, NULL for OAuth-only accounts"
    )
    gender = Column(String(20), nullable=False, default="prefer not to say")

    # Role flags
    is_admin = Column(Boolean, nullable=False, default=False)
    is_verified = Column(Boolean, nullable=False, default=False)
    is_active = Column(Boolean, nullable=False, default=True)
    is_email_confirmed = Column(Boolean, nullable=False, default=False)

    # Profile photo reference
    photo_provider = Column(String(20), nullable=True)
    photo_key = Column(String(500), nullable=True)
    photo_url = Column(String(1000), nullable=True)

    # Home location
    location_city = Column(String(120), nullable=True)
    location_lat = Column(Float, nullable=True)
    location_lng = Column(Float, nullable=True)

    birthday = Column(Date, nullable=True)

    # One-time tokens
    email_confirm_token = Column(String(512), nullable=True)
    password_reset_token = Column(String(512), nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    def __repr__(self) -> str:
        return f"<UserModel(user_id={self.user_id}, email={self.email})>"


class UserTokenModel(Base):
    """
    Active session token. A bearer token is valid only while its row exists.
    """
    __tablename__ = "user_tokens"

    token_id = Column(Uuid, primary_key=True, default=uuid4)
    user_id = Column(
        Uuid,
        ForeignKey("users.user_id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    token = Column(String(512), nullable=False, unique=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)


class ModeratorInvitationModel(Base):
    """
    Pending invitation for a user to moderate a group. At most one per pair.
    """
    __tablename__ = "moderator_invitations"

    user_id = Column(
        Uuid,
        ForeignKey("users.user_id", ondelete="CASCADE"),
        primary_key=True
    )
    group_id = Column(
        Uuid,
        ForeignKey("groups.group_id", ondelete="CASCADE"),
        primary_key=True
    )
    sent_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
