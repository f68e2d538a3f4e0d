# 📄 File: app/modules/events/domain/repositories/event_repository.py
# 🧭 Purpose (Layman Explanation):
# Describes how club events and their guest lists are saved and read.
# 🧪 Purpose (Technical Summary):
# Abstract repository interface for Event entities and attendance.
# 🔗 Dependencies:
# abc, uuid, Event domain model
# 🔄 Connected Modules / Calls From:
# event_service.py, event_repository_impl.py

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from app.modules.events.domain.models.event import Event


class EventRepository(ABC):

    @abstractmethod
    async def create(self, event: Event) -> Event:
        pass

    @abstractmethod
    async def get_by_id(self, event_id: UUID, for_update: bool = False) -> Optional[Event]:
        """
        Load an event with its attendees.

        ``for_update`` locks the event row so capacity checks and attendee
        writes see a stable attendee count.
        """

    @abstractmethod
    async def list_for_group(self, group_id: UUID) -> List[Event]:
        """Group events, soonest first."""

    @abstractmethod
    async def update(self, event: Event) -> Event:
        """Persist scalar fields and the banner. Attendees are not touched."""

    @abstractmethod
    async def add_attendee(self, event_id: UUID, user_id: UUID) -> None:
        pass

    @abstractmethod
    async def remove_attendee(self, event_id: UUID, user_id: UUID) -> bool:
        pass
