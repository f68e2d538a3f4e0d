"""
Database infrastructure: async engine management, declarative base and
request-scoped sessions.
"""

from .connection import Base, db_manager, init_database, close_database
from .session import get_db_session, session_manager

__all__ = [
    "Base",
    "db_manager",
    "init_database",
    "close_database",
    "get_db_session",
    "session_manager",
]
