# 📄 File: app/modules/events/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# How club events and their guest lists are stored in the database.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models for events and the event_attendees association.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM, shared declarative Base
#
# 🔄 Connected Modules / Calls From:
# - event_repository_impl.py, shared models registry, migrations

from uuid import uuid4

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    Date,
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


class EventModel(Base):
    __tablename__ = "events"

    event_id = Column(Uuid, primary_key=True, default=uuid4, nullable=False)
    unique_url = Column(String(120), unique=True, nullable=False, index=True)
    creator_id = Column(
        Uuid,
        ForeignKey("users.user_id", ondelete="CASCADE"),
        nullable=False
    )
    group_id = Column(
        Uuid,
        ForeignKey("groups.group_id", ondelete="CASCADE"),
        nullable=False
    )
    name = Column(String(50), nullable=False)
    description = Column(String(500), nullable=True)

    banner_provider = Column(String(20), nullable=True)
    banner_key = Column(String(500), nullable=True)
    banner_url = Column(String(1000), nullable=True)

    location_place_id = Column(String(255), nullable=True)
    location_address = Column(String(500), nullable=True)
    location_name = Column(String(255), nullable=True)
    location_types = Column(JSON, nullable=True)
    location_lat = Column(Float, nullable=True)
    location_lng = Column(Float, nullable=True)

    event_date = Column(Date, nullable=False)
    start_time = Column(String(20), nullable=False)
    end_time = Column(String(20), nullable=False)
    slots = Column(Integer, nullable=False)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    __table_args__ = (
        Index("ix_events_group_date", "group_id", "event_date"),
    )

    def __repr__(self) -> str:
        return f"<EventModel(event_id={self.event_id}, unique_url={self.unique_url})>"


class EventAttendeeModel(Base):
    __tablename__ = "event_attendees"

    event_id = Column(
        Uuid,
        ForeignKey("events.event_id", ondelete="CASCADE"),
        primary_key=True
    )
    user_id = Column(
        Uuid,
        ForeignKey("users.user_id", ondelete="CASCADE"),
        primary_key=True
    )
    attended = Column(Boolean, nullable=False, default=False)
    registered_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
