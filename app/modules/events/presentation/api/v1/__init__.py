from .events import events_router

__all__ = ["events_router"]
