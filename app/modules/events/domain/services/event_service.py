# 📄 File: app/modules/events/domain/services/event_service.py
# 🧭 Purpose (Layman Explanation):
# Runs club events: organisers create and edit them, and members sign up for a place
# until the event is full.
# 🧪 Purpose (Technical Summary):
# Domain service for events. Creation and edits are limited to the group owner or a
# moderator; attendance is limited to group members and bounded by ``slots`` under a
# row lock on the event.
# 🔗 Dependencies:
# EventRepository, GroupRepository, MembershipService, storage client
# 🔄 Connected Modules / Calls From:
# events API endpoints

from datetime import date
from typing import Any, Dict, List, Optional
from uuid import UUID

from fastapi import Depends

from app.modules.events.domain.models.event import Event
from app.modules.events.domain.repositories.event_repository import EventRepository
from app.modules.groups.domain.models.group import Group
from app.modules.groups.domain.repositories.group_repository import GroupRepository
from app.modules.groups.domain.services.membership_service import MembershipService
from app.modules.user_management.domain.models.user import User
from app.shared.core.exceptions import ConflictError, NotFoundError, ValidationError
from app.shared.core.value_objects import Place
from app.shared.infrastructure.storage.supabase_storage import (
    SupabaseStorageClient,
    get_storage_client,
)
from app.shared.utils.logging import get_logger
from app.shared.utils.validators import validate_allowed_updates

logger = get_logger(__name__)

EVENT_UPDATABLE_FIELDS = {"name", "description", "event_date", "start_time", "end_time", "slots"}

BANNER_FOLDER = "event-banners"


class EventService:
    """
    Domain service for group events.

    Business rules:
    - Only the group owner or a moderator may create or edit events
    - Only group members may attend, once each
    - Attendance never exceeds ``slots``, and ``slots`` can't drop below it
    """

    def __init__(
        self,
        event_repository: EventRepository = Depends(),
        group_repository: GroupRepository = Depends(),
        membership_service: MembershipService = Depends(),
        storage: SupabaseStorageClient = Depends(get_storage_client),
    ):
        self.events = event_repository
        self.groups = group_repository
        self.membership = membership_service
        self.storage = storage

    async def get(self, event_id: UUID, for_update: bool = False) -> Event:
        event = await self.events.get_by_id(event_id, for_update=for_update)
        if event is None:
            raise NotFoundError("Event", str(event_id))
        return event

    async def group_of(self, event: Event) -> Group:
        group = await self.groups.get_by_id(event.group_id)
        if group is None:
            raise NotFoundError("Group", str(event.group_id))
        return group

    async def create_event(
        self,
        actor: User,
        group: Group,
        name: str,
        event_date: date,
        start_time: str,
        end_time: str,
        slots: int,
        description: Optional[str] = None,
        location: Optional[Place] = None,
        banner_base64: Optional[str] = None,
        banner_file_name: str = "banner.jpg",
    ) -> Event:
        await self.membership.require_privileged(group, actor)

        event = Event.create_new_event(
            creator_id=actor.user_id,
            group_id=group.group_id,
            name=name,
            event_date=event_date,
            start_time=start_time,
            end_time=end_time,
            slots=slots,
            description=description,
            location=location,
        )
        if banner_base64:
            event.banner = await self.storage.upload_image(banner_base64, banner_file_name, BANNER_FOLDER)

        event = await self.events.create(event)
        logger.log_business_event(
            event_type="event.created",
            description=f"Event created: {event.unique_url}",
            entity_id=str(event.event_id),
            entity_type="event",
            extra={"group_id": str(group.group_id), "creator_id": str(actor.user_id)},
        )
        return event

    async def update_event(self, actor: User, event: Event, updates: Dict[str, Any]) -> Event:
        """
        Apply a whitelisted edit.

        Raises:
            AuthorizationError: If the actor is neither owner nor moderator of the event's group
            ValidationError: For keys outside the whitelist, or slots below the attendee count
        """
        await self.membership.require_privileged(await self.group_of(event), actor)
        validate_allowed_updates(updates, EVENT_UPDATABLE_FIELDS)

        for field, value in updates.items():
            if value is None and field != "description":
                raise ValidationError(f"{field} cannot be empty", field=field)
        if "slots" in updates and updates["slots"] < event.attendee_count:
            raise ValidationError(
                f"Slots cannot be fewer than the {event.attendee_count} registered attendees",
                field="slots",
            )
        for field, value in updates.items():
            if field == "name":
                value = value.strip()
                if not value:
                    raise ValidationError("Name cannot be empty", field="name")
            setattr(event, field, value)

        event.touch()
        event = await self.events.update(event)
        logger.info(f"Event edited: {event.event_id}", fields=sorted(updates))
        return event

    async def change_banner(self, actor: User, event: Event, image_base64: str, file_name: str) -> Event:
        await self.membership.require_privileged(await self.group_of(event), actor)
        event.banner = await self.storage.replace_image(event.banner, image_base64, file_name, BANNER_FOLDER)
        event.touch()
        return await self.events.update(event)

    async def list_group_events(self, group: Group) -> List[Event]:
        return await self.events.list_for_group(group.group_id)

    # =========================================================================
    # ATTENDANCE
    # =========================================================================

    async def attend(self, user: User, event_id: UUID) -> Event:
        """
        Take a place at the event.

        Raises:
            AuthorizationError: If the user is not a member of the event's group
            ConflictError: If already attending or the event is full
        """
        event = await self.get(event_id, for_update=True)
        await self.membership.require_member(await self.group_of(event), user)

        if event.is_attending(user.user_id):
            raise ConflictError("You are already attending this event", "ALREADY_ATTENDING")
        if event.is_full:
            raise ConflictError("This event is full", "EVENT_FULL")

        await self.events.add_attendee(event.event_id, user.user_id)
        logger.log_user_action("event.attend", str(user.user_id), resource=str(event.event_id))
        return await self.get(event.event_id)

    async def cancel_attendance(self, user: User, event_id: UUID) -> Event:
        event = await self.get(event_id, for_update=True)
        if not await self.events.remove_attendee(event.event_id, user.user_id):
            raise ConflictError("You are not attending this event", "NOT_ATTENDING")
        logger.log_user_action("event.cancel_attendance", str(user.user_id), resource=str(event.event_id))
        return await self.get(event.event_id)
