from .event_schemas import (
    EVENT_UPDATE_KEYS,
    AttendeeResponse,
    CreateEventRequest,
    EventBannerRequest,
    EventResponse,
    UpdateEventRequest,
)

__all__ = [
    "EVENT_UPDATE_KEYS",
    "AttendeeResponse",
    "CreateEventRequest",
    "EventBannerRequest",
    "EventResponse",
    "UpdateEventRequest",
]
