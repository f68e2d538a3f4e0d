# 📄 File: app/modules/events/presentation/api/schemas/event_schemas.py
# 🧭 Purpose (Layman Explanation):
# The shape of event details people send when organising a meetup, and what the app
# shows back, including who is coming.
#
# 🧪 Purpose (Technical Summary):
# Pydantic v2 request/response schemas for event endpoints, serialized in camelCase.
#
# 🔗 Dependencies:
# - pydantic, app.shared.core.schemas, events domain, group PlaceSchema
#
# 🔄 Connected Modules / Calls From:
# - app.modules.events.presentation.api.v1.events

from datetime import date, datetime
from typing import List, Optional
from uuid import UUID

from pydantic import Field, field_validator

from app.modules.events.domain.models.event import (
    DESCRIPTION_MAX_LENGTH,
    NAME_MAX_LENGTH,
    Attendee,
    Event,
)
from app.modules.groups.presentation.api.schemas.group_schemas import PlaceSchema
from app.shared.core.schemas import CamelModel
from app.shared.core.value_objects import ImageRef

# camelCase keys accepted by PATCH /events/{id}
EVENT_UPDATE_KEYS = {"name", "description", "eventDate", "startTime", "endTime", "slots"}


class CreateEventRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)
    description: Optional[str] = Field(None, max_length=DESCRIPTION_MAX_LENGTH)
    event_date: date
    start_time: str = Field(..., min_length=1, max_length=20)
    end_time: str = Field(..., min_length=1, max_length=20)
    slots: int = Field(..., ge=1)
    location: Optional[PlaceSchema] = None
    banner: Optional[str] = Field(None, description="Base64 banner image")
    banner_file_name: str = Field("banner.jpg", max_length=255)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name cannot be blank")
        return v.strip()


class UpdateEventRequest(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=NAME_MAX_LENGTH)
    description: Optional[str] = Field(None, max_length=DESCRIPTION_MAX_LENGTH)
    event_date: Optional[date] = None
    start_time: Optional[str] = Field(None, min_length=1, max_length=20)
    end_time: Optional[str] = Field(None, min_length=1, max_length=20)
    slots: Optional[int] = Field(None, ge=1)


class EventBannerRequest(CamelModel):
    image: str = Field(..., min_length=1)
    file_name: str = Field("banner.jpg", max_length=255)


class AttendeeResponse(CamelModel):
    user_id: UUID
    attended: bool
    registered_at: datetime

    @classmethod
    def from_domain(cls, attendee: Attendee) -> "AttendeeResponse":
        return cls(
            user_id=attendee.user_id,
            attended=attendee.attended,
            registered_at=attendee.registered_at,
        )


class EventResponse(CamelModel):
    id: UUID
    unique_url: str = Field(alias="uniqueURL")
    creator_id: UUID
    group_id: UUID
    name: str
    description: Optional[str] = None
    banner: Optional[ImageRef] = None
    location: Optional[PlaceSchema] = None
    event_date: date
    start_time: str
    end_time: str
    slots: int
    slots_left: int
    attendees: List[AttendeeResponse] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, event: Event) -> "EventResponse":
        return cls(
            id=event.event_id,
            unique_url=event.unique_url,
            creator_id=event.creator_id,
            group_id=event.group_id,
            name=event.name,
            description=event.description,
            banner=event.banner,
            location=PlaceSchema.from_domain(event.location),
            event_date=event.event_date,
            start_time=event.start_time,
            end_time=event.end_time,
            slots=event.slots,
            slots_left=max(event.slots - event.attendee_count, 0),
            attendees=[AttendeeResponse.from_domain(a) for a in event.attendees],
            created_at=event.created_at,
            updated_at=event.updated_at,
        )
