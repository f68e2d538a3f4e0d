# 📄 File: app/modules/groups/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# This file defines how clubs are stored in the database, along with their topic tags,
# who belongs to each club and the diary of what happened in it.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models for groups, group topics, the single-row-per-pair membership
# relation and the append-only activity log.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - app.shared.infrastructure.database.connection (declarative Base)
#
# 🔄 Connected Modules / Calls From:
# - groups repository implementations
# - search repository (full-text and geo queries over groups)
# - migrations/versions (schema generation)

"""
SQLAlchemy Models for Groups

Models:
- GroupModel: Club profile, owner, banner and location
- GroupTopicModel: Topic tags, ordered
- GroupMembershipModel: (group, user) -> requested | member | moderator | banned
- ActivityLogModel: Append-only membership and content audit trail
"""

from uuid import uuid4

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    Uuid,
)

from app.shared.infrastructure.database.connection import Base
from app.shared.utils.helpers import utcnow


# =============================================================================
# GROUP MODEL
# =============================================================================

class GroupModel(Base):
    """
    SQLAlchemy model for groups.
    """
    __tablename__ = "groups"

    group_id = Column(Uuid, primary_key=True, default=uuid4, nullable=False)
    unique_url = Column(String(120), unique=True, nullable=False, index=True)
    owner_id = Column(
        Uuid,
        ForeignKey("users.user_id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    title = Column(String(50), unique=True, nullable=False)
    tagline = Column(String(150), nullable=True)
    description = Column(String(500), nullable=True)

    # Banner reference
    banner_provider = Column(String(20), nullable=True)
    banner_key = Column(String(500), nullable=True)
    banner_url = Column(String(1000), nullable=True)

    # Geocoded place
    location_place_id = Column(String(255), nullable=True)
    location_address = Column(String(500), nullable=True)
    location_name = Column(String(255), nullable=True)
    location_types = Column(JSON, nullable=True)
    location_lat = Column(Float, nullable=True)
    location_lng = Column(Float, nullable=True)

    permission_required = Column(
        Boolean,
        nullable=False,
        default=False,
        comment="Exposed as isPrivate; joins become requests"
    )
    deactivated = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    __table_args__ = (
        Index("ix_groups_location", "location_lat", "location_lng"),
    )

    def __repr__(self) -> str:
        return f"<GroupModel(group_id={self.group_id}, unique_url={self.unique_url})>"


class GroupTopicModel(Base):
    __tablename__ = "group_topics"

    group_id = Column(
        Uuid,
        ForeignKey("groups.group_id", ondelete="CASCADE"),
        primary_key=True
    )
    topic = Column(String(60), primary_key=True)
    position = Column(Integer, nullable=False, default=0)


# =============================================================================
# MEMBERSHIP
# =============================================================================

class GroupMembershipModel(Base):
    """
    One row per (group, user). The primary key makes the states mutually exclusive.
    """
    __tablename__ = "group_memberships"

    group_id = Column(
        Uuid,
        ForeignKey("groups.group_id", ondelete="CASCADE"),
        primary_key=True
    )
    user_id = Column(
        Uuid,
        ForeignKey("users.user_id", ondelete="CASCADE"),
        primary_key=True,
        index=True
    )
    state = Column(String(20), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    __table_args__ = (
        Index("ix_group_memberships_group_state", "group_id", "state"),
    )


# =============================================================================
# ACTIVITY LOG
# =============================================================================

class ActivityLogModel(Base):
    __tablename__ = "activity_logs"

    log_id = Column(Uuid, primary_key=True, default=uuid4)
    group_id = Column(
        Uuid,
        ForeignKey("groups.group_id", ondelete="CASCADE"),
        nullable=False
    )
    user_id = Column(
        Uuid,
        ForeignKey("users.user_id", ondelete="CASCADE"),
        nullable=False
    )
    action = Column(String(40), nullable=False)
    comment_id = Column(
        Uuid,
        ForeignKey("comments.comment_id", ondelete="SET NULL"),
        nullable=True
    )
    event_id = Column(
        Uuid,
        ForeignKey("events.event_id", ondelete="SET NULL"),
        nullable=True
    )
    timestamp = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    __table_args__ = (
        Index("ix_activity_logs_group_action_user", "group_id", "action", "user_id"),
    )
