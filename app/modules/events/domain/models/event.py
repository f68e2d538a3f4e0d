# 📄 File: app/modules/events/domain/models/event.py
# 🧭 Purpose (Layman Explanation):
# Defines a meetup that a club organises: when and where it happens, how many places
# it has and who is coming.
# 🧪 Purpose (Technical Summary):
# Event domain model owned by a group, with a bounded attendee list.
# 🔗 Dependencies:
# pydantic, app.shared.core.value_objects, app.shared.utils.helpers
# 🔄 Connected Modules / Calls From:
# event_service.py, event repositories, event schemas

import uuid
from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from app.shared.core.value_objects import ImageRef, Place
from app.shared.utils.helpers import generate_unique_url, utcnow

NAME_MAX_LENGTH = 50
DESCRIPTION_MAX_LENGTH = 500


class Attendee(BaseModel):
    user_id: uuid.UUID
    attended: bool = False
    registered_at: datetime = Field(default_factory=utcnow)


class Event(BaseModel):
    """
    Event domain model.

    ``slots`` bounds the attendee list; attendees are loaded with the event.
    """

    event_id: uuid.UUID = Field(default_factory=uuid.uuid4)
    unique_url: str
    creator_id: uuid.UUID
    group_id: uuid.UUID
    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)
    description: Optional[str] = Field(None, max_length=DESCRIPTION_MAX_LENGTH)
    banner: Optional[ImageRef] = None
    location: Optional[Place] = None
    event_date: date
    start_time: str = Field(..., min_length=1, max_length=20)
    end_time: str = Field(..., min_length=1, max_length=20)
    slots: int = Field(..., ge=1)
    attendees: List[Attendee] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @classmethod
    def create_new_event(
        cls,
        creator_id: uuid.UUID,
        group_id: uuid.UUID,
        name: str,
        event_date: date,
        start_time: str,
        end_time: str,
        slots: int,
        description: Optional[str] = None,
        location: Optional[Place] = None,
    ) -> "Event":
        now = utcnow()
        name = name.strip()
        return cls(
            unique_url=generate_unique_url(name, now),
            creator_id=creator_id,
            group_id=group_id,
            name=name,
            description=description,
            location=location,
            event_date=event_date,
            start_time=start_time,
            end_time=end_time,
            slots=slots,
            created_at=now,
            updated_at=now,
        )

    @property
    def attendee_count(self) -> int:
        return len(self.attendees)

    @property
    def is_full(self) -> bool:
        return self.attendee_count >= self.slots

    def is_attending(self, user_id: uuid.UUID) -> bool:
        return any(a.user_id == user_id for a in self.attendees)

    def touch(self) -> None:
        self.updated_at = utcnow()
