from .event_service import EVENT_UPDATABLE_FIELDS, EventService

__all__ = ["EVENT_UPDATABLE_FIELDS", "EventService"]
