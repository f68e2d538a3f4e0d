# 📄 File: app/modules/events/presentation/api/v1/events.py
# 🧭 Purpose (Layman Explanation):
# The web addresses for club events: organising one, editing it, changing its banner,
# seeing who is coming and signing up.
#
# 🧪 Purpose (Technical Summary):
# FastAPI event endpoints delegating to EventService.
#
# 🔗 Dependencies:
# - FastAPI router, EventService, auth gate, group resolver
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted at / and /api/v1)

from typing import Any, Dict, List
from uuid import UUID

from fastapi import APIRouter, Body, Depends, status

from app.modules.events.domain.services.event_service import EventService
from app.modules.events.presentation.api.schemas.event_schemas import (
    EVENT_UPDATE_KEYS,
    CreateEventRequest,
    EventBannerRequest,
    EventResponse,
    UpdateEventRequest,
)
from app.modules.groups.domain.models.group import Group
from app.modules.groups.presentation.dependencies import get_group
from app.modules.user_management.domain.models.user import User
from app.modules.user_management.presentation.dependencies import get_current_user
from app.shared.core.schemas import parse_update_payload

events_router = APIRouter(tags=["Events"])


@events_router.post("/events/{group_ref}", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
async def create_event(
    payload: CreateEventRequest,
    group: Group = Depends(get_group),
    current_user: User = Depends(get_current_user),
    event_service: EventService = Depends(),
) -> EventResponse:
    """Owner or moderator creates an event for the group."""
    event = await event_service.create_event(
        actor=current_user,
        group=group,
        name=payload.name,
        event_date=payload.event_date,
        start_time=payload.start_time,
        end_time=payload.end_time,
        slots=payload.slots,
        description=payload.description,
        location=payload.location.to_domain() if payload.location else None,
        banner_base64=payload.banner,
        banner_file_name=payload.banner_file_name,
    )
    return EventResponse.from_domain(event)


@events_router.get("/events/{event_id}", response_model=EventResponse)
async def read_event(event_id: UUID, event_service: EventService = Depends()) -> EventResponse:
    return EventResponse.from_domain(await event_service.get(event_id))


@events_router.patch("/events/{event_id}", response_model=EventResponse)
async def update_event(
    event_id: UUID,
    payload: Dict[str, Any] = Body(...),
    current_user: User = Depends(get_current_user),
    event_service: EventService = Depends(),
) -> EventResponse:
    updates = parse_update_payload(UpdateEventRequest, payload, EVENT_UPDATE_KEYS)
    event = await event_service.get(event_id)
    event = await event_service.update_event(current_user, event, updates)
    return EventResponse.from_domain(event)


@events_router.patch("/events/{event_id}/banner", response_model=EventResponse)
async def change_event_banner(
    event_id: UUID,
    payload: EventBannerRequest,
    current_user: User = Depends(get_current_user),
    event_service: EventService = Depends(),
) -> EventResponse:
    event = await event_service.get(event_id)
    event = await event_service.change_banner(current_user, event, payload.image, payload.file_name)
    return EventResponse.from_domain(event)


@events_router.get("/groups/{group_ref}/events", response_model=List[EventResponse])
async def list_group_events(
    group: Group = Depends(get_group),
    event_service: EventService = Depends(),
) -> List[EventResponse]:
    return [EventResponse.from_domain(e) for e in await event_service.list_group_events(group)]


@events_router.post("/events/{event_id}/attend", response_model=EventResponse)
async def attend_event(
    event_id: UUID,
    current_user: User = Depends(get_current_user),
    event_service: EventService = Depends(),
) -> EventResponse:
    """Take a place; 409 when the event is full."""
    return EventResponse.from_domain(await event_service.attend(current_user, event_id))


@events_router.delete("/events/{event_id}/attend", response_model=EventResponse)
async def cancel_attendance(
    event_id: UUID,
    current_user: User = Depends(get_current_user),
    event_service: EventService = Depends(),
) -> EventResponse:
    return EventResponse.from_domain(await event_service.cancel_attendance(current_user, event_id))
