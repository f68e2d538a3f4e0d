# 📄 File: app/modules/events/infrastructure/database/event_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Saves club events and their guest lists to the database and reads them back.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of EventRepository. Attendee rows are keyed by
# (event_id, user_id); a duplicate insert surfaces as a 409.
#
# 🔗 Dependencies:
# - SQLAlchemy async ORM, events domain
#
# 🔄 Connected Modules / Calls From:
# - app.main dependency override for EventRepository

import logging
from typing import Dict, List, Optional, Sequence
from uuid import UUID

from fastapi import Depends
from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.events.domain.models.event import Attendee, Event
from app.modules.events.domain.repositories.event_repository import EventRepository
from app.modules.events.infrastructure.database.models import EventAttendeeModel, EventModel
from app.shared.core.exceptions import ConflictError, NotFoundError
from app.shared.core.value_objects import ImageProvider, ImageRef, Place
from app.shared.infrastructure.database.session import get_db_session
from app.shared.utils.helpers import ensure_utc, utcnow

logger = logging.getLogger(__name__)


class EventRepositoryImpl(EventRepository):

    def __init__(self, session: AsyncSession = Depends(get_db_session)):
        self._session = session

    async def create(self, event: Event) -> Event:
        model = EventModel(event_id=event.event_id, created_at=event.created_at)
        _apply_event(model, event)
        self._session.add(model)
        await self._session.flush()
        logger.info(f"Created event with ID: {event.event_id}")
        return _model_to_event(model, [])

    async def get_by_id(self, event_id: UUID, for_update: bool = False) -> Optional[Event]:
        stmt = select(EventModel).where(EventModel.event_id == event_id)
        if for_update:
            stmt = stmt.with_for_update()
        model = (await self._session.execute(stmt)).scalar_one_or_none()
        if model is None:
            return None
        attendees = await self._load_attendees([model.event_id])
        return _model_to_event(model, attendees.get(model.event_id, []))

    async def list_for_group(self, group_id: UUID) -> List[Event]:
        stmt = (
            select(EventModel)
            .where(EventModel.group_id == group_id)
            .order_by(EventModel.event_date, EventModel.start_time, EventModel.event_id)
        )
        models = (await self._session.execute(stmt)).scalars().all()
        attendees = await self._load_attendees([m.event_id for m in models])
        return [_model_to_event(m, attendees.get(m.event_id, [])) for m in models]

    async def update(self, event: Event) -> Event:
        model = await self._session.get(EventModel, event.event_id)
        if model is None:
            raise NotFoundError("Event", str(event.event_id))
        _apply_event(model, event)
        await self._session.flush()
        return _model_to_event(model, event.attendees)

    async def add_attendee(self, event_id: UUID, user_id: UUID) -> None:
        self._session.add(EventAttendeeModel(event_id=event_id, user_id=user_id, registered_at=utcnow()))
        try:
            await self._session.flush()
        except IntegrityError as e:
            raise ConflictError("You are already attending this event", "ALREADY_ATTENDING") from e

    async def remove_attendee(self, event_id: UUID, user_id: UUID) -> bool:
        result = await self._session.execute(
            delete(EventAttendeeModel).where(
                EventAttendeeModel.event_id == event_id,
                EventAttendeeModel.user_id == user_id,
            )
        )
        return result.rowcount > 0

    async def _load_attendees(self, event_ids: Sequence[UUID]) -> Dict[UUID, List[Attendee]]:
        if not event_ids:
            return {}
        stmt = (
            select(EventAttendeeModel)
            .where(EventAttendeeModel.event_id.in_(list(event_ids)))
            .order_by(EventAttendeeModel.registered_at, EventAttendeeModel.user_id)
        )
        attendees: Dict[UUID, List[Attendee]] = {}
        for row in (await self._session.execute(stmt)).scalars().all():
            attendees.setdefault(row.event_id, []).append(Attendee(
                user_id=row.user_id,
                attended=row.attended,
                registered_at=ensure_utc(row.registered_at),
            ))
        return attendees


def _model_to_event(model: EventModel, attendees: List[Attendee]) -> Event:
    banner = None
    if model.banner_url:
        banner = ImageRef(
            provider=ImageProvider(model.banner_provider),
            key=model.banner_key,
            url=model.banner_url,
        )

    location = None
    if model.location_address or model.location_lat is not None or model.location_name:
        location = Place(
            place_id=model.location_place_id,
            formatted_address=model.location_address,
            name=model.location_name,
            types=model.location_types or [],
            lat=model.location_lat,
            lng=model.location_lng,
        )

    return Event(
        event_id=model.event_id,
        unique_url=model.unique_url,
        creator_id=model.creator_id,
        group_id=model.group_id,
        name=model.name,
        description=model.description,
        banner=banner,
        location=location,
        event_date=model.event_date,
        start_time=model.start_time,
        end_time=model.end_time,
        slots=model.slots,
        attendees=list(attendees),
        created_at=ensure_utc(model.created_at),
        updated_at=ensure_utc(model.updated_at),
    )


def _apply_event(model: EventModel, event: Event) -> None:
    model.unique_url = event.unique_url
    model.creator_id = event.creator_id
    model.group_id = event.group_id
    model.name = event.name
    model.description = event.description
    model.banner_provider = event.banner.provider.value if event.banner else None
    model.banner_key = event.banner.key if event.banner else None
    model.banner_url = event.banner.url if event.banner else None

    place = event.location
    model.location_place_id = place.place_id if place else None
    model.location_address = place.formatted_address if place else None
    model.location_name = place.name if place else None
    model.location_types = list(place.types) if place else None
    model.location_lat = place.lat if place else None
    model.location_lng = place.lng if place else None

    model.event_date = event.event_date
    model.start_time = event.start_time
    model.end_time = event.end_time
    model.slots = event.slots
    model.updated_at = event.updated_at
