# 📄 File: app/modules/events/infrastructure/database/__init__.py
# 🧪 Purpose (Technical Summary):
# SQLAlchemy models and repository implementation for events.
# 🔄 Connected Modules / Calls From:
# app.main, app.shared.infrastructure.database.models (table registry)

from .event_repository_impl import EventRepositoryImpl
from .models import EventAttendeeModel, EventModel

__all__ = ["EventRepositoryImpl", "EventAttendeeModel", "EventModel"]
