"""
Core utilities package for the Clubbera API.
Provides the exception hierarchy, security helpers and shared dependencies.
"""

from .exceptions import (
    ClubberaException,
    AuthenticationError,
    AuthorizationError,
    ValidationError,
    NotFoundError,
    ConflictError,
    DatabaseError,
    ExternalServiceError,
    StorageError,
)

__all__ = [
    "ClubberaException",
    "AuthenticationError",
    "AuthorizationError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "DatabaseError",
    "ExternalServiceError",
    "StorageError",
]
