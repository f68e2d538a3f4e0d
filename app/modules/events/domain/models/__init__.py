# 📄 File: app/modules/events/domain/models/__init__.py
# 🧪 Purpose (Technical Summary):
# Re-exports the Event model.

from .event import DESCRIPTION_MAX_LENGTH, NAME_MAX_LENGTH, Attendee, Event

__all__ = ["DESCRIPTION_MAX_LENGTH", "NAME_MAX_LENGTH", "Attendee", "Event"]
