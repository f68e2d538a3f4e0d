# 📄 File: app/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# This file defines all the special error types Clubbera uses to say what went wrong
# in a clear, organized way instead of generic error messages.
# 🧪 Purpose (Technical Summary):
# Custom exception hierarchy providing specific error types with HTTP status codes,
# error codes and details, rendered by the application exception handlers as a
# uniform {"error", "code"} JSON body.
# 🔗 Dependencies:
# FastAPI status constants, typing
# 🔄 Connected Modules / Calls From:
# All modules for error handling, app.main exception handlers, API endpoints, domain services

from typing import Any, Dict, Optional
from fastapi import status


class ClubberaException(Exception):
    """
    Base exception class for the Clubbera API.
    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.error_code = error_code or self.__class__.__name__.upper()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to the public error body."""
        body: Dict[str, Any] = {
            "error": self.message,
            "code": self.error_code,
        }
        if self.details:
            body["details"] = self.details
        return body


# =============================================================================
# AUTHENTICATION & AUTHORIZATION EXCEPTIONS
# =============================================================================

class AuthenticationError(ClubberaException):
    """
    Raised when a bearer token is missing, malformed or unknown.
    The message never reveals which of those it was.
    """

    def __init__(self, message: str = "Please authenticate"):
        super().__init__(
            message=message,
            status_code=status.HTTP_401_UNAUTHORIZED,
            error_code="AUTHENTICATION_ERROR"
        )


class AuthorizationError(ClubberaException):
    """
    Raised when an authenticated user lacks the role or ownership
    required for an action.
    """

    def __init__(
        self,
        message: str = "Access denied",
        required_role: Optional[str] = None,
        error_code: str = "AUTHORIZATION_ERROR"
    ):
        details = {"required_role": required_role} if required_role else None
        super().__init__(
            message=message,
            status_code=status.HTTP_403_FORBIDDEN,
            details=details,
            error_code=error_code
        )


# =============================================================================
# REQUEST & RESOURCE EXCEPTIONS
# =============================================================================

class ValidationError(ClubberaException):
    """
    Exception raised for malformed or disallowed input.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        details = dict(details or {})
        if field:
            details["field"] = field

        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details,
            error_code="VALIDATION_ERROR"
        )


class NotFoundError(ClubberaException):
    """
    Exception raised when an id or slug does not resolve to an entity.
    """

    def __init__(
        self,
        resource_type: str = "Resource",
        resource_id: Optional[str] = None,
        message: Optional[str] = None
    ):
        if not message:
            message = f"{resource_type} not found"
        details = {"resource_id": str(resource_id)} if resource_id else None

        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details=details,
            error_code="NOT_FOUND"
        )


class ConflictError(ClubberaException):
    """
    Exception raised when an action conflicts with the current state
    (duplicate email or category, already a member, already banned).
    """

    def __init__(self, message: str = "Resource conflict", error_code: str = "CONFLICT_ERROR"):
        super().__init__(
            message=message,
            status_code=status.HTTP_409_CONFLICT,
            error_code=error_code
        )


# =============================================================================
# MEMBERSHIP EXCEPTIONS
# =============================================================================

class AlreadyMemberError(ConflictError):
    def __init__(self):
        super().__init__("You are already a member of this group", "ALREADY_MEMBER")


class AlreadyRequestedError(ConflictError):
    def __init__(self):
        super().__init__("You have already requested to join this group", "ALREADY_REQUESTED")


class NotAMemberError(ConflictError):
    def __init__(self, message: str = "User is not a member of this group"):
        super().__init__(message, "NOT_A_MEMBER")


class NotRequestedError(ConflictError):
    def __init__(self):
        super().__init__("User has not requested to join this group", "NOT_REQUESTED")


class AlreadyBannedError(ConflictError):
    def __init__(self):
        super().__init__("User is already banned from this group", "ALREADY_BANNED")


class NotBannedError(ConflictError):
    def __init__(self):
        super().__init__("User is not banned from this group", "NOT_BANNED")


class CannotBanPrivilegedError(ConflictError):
    def __init__(self):
        super().__init__("The owner or a moderator cannot be banned", "CANNOT_BAN_PRIVILEGED")


class InvitationAlreadyPendingError(ConflictError):
    def __init__(self):
        super().__init__(
            "A moderator invitation for this group is already pending",
            "INVITATION_ALREADY_PENDING"
        )


class NoPendingInvitationError(ConflictError):
    def __init__(self):
        super().__init__(
            "No pending moderator invitation for this group",
            "NO_PENDING_INVITATION"
        )


class NotAModeratorError(ConflictError):
    def __init__(self):
        super().__init__("User is not a moderator of this group", "NOT_A_MODERATOR")


class AlreadyModeratorError(ConflictError):
    def __init__(self):
        super().__init__("User is already a moderator of this group", "ALREADY_MODERATOR")


class OwnerCannotLeaveError(ConflictError):
    def __init__(self):
        super().__init__("The owner cannot leave their own group", "OWNER_CANNOT_LEAVE")


class UserBannedError(AuthorizationError):
    def __init__(self):
        super().__init__("You are banned from this group", error_code="USER_BANNED")


# =============================================================================
# INFRASTRUCTURE EXCEPTIONS
# =============================================================================

class DatabaseError(ClubberaException):
    """
    Exception raised for database operation failures.
    """

    def __init__(
        self,
        message: str = "Database operation failed",
        operation: Optional[str] = None,
        table: Optional[str] = None
    ):
        details = {}
        if operation:
            details["operation"] = operation
        if table:
            details["table"] = table

        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
            error_code="DATABASE_ERROR"
        )


class TransactionError(DatabaseError):
    """Raised when a unit of work cannot be committed."""

    def __init__(self, message: str = "Transaction failed", operation: Optional[str] = None):
        super().__init__(message=message, operation=operation)
        self.error_code = "TRANSACTION_ERROR"


class ExternalServiceError(ClubberaException):
    """
    Exception raised when a managed service (OAuth, SMTP, storage) fails.
    """

    def __init__(
        self,
        service_name: str,
        message: Optional[str] = None,
        error_code: str = "EXTERNAL_SERVICE_ERROR"
    ):
        if not message:
            message = f"{service_name} service unavailable"

        super().__init__(
            message=message,
            status_code=status.HTTP_502_BAD_GATEWAY,
            details={"service": service_name},
            error_code=error_code
        )


class StorageError(ExternalServiceError):
    """Raised when object storage rejects an upload or delete."""

    def __init__(self, message: str = "File storage operation failed"):
        super().__init__("storage", message=message, error_code="FILE_STORAGE_ERROR")


class InvalidImageError(ValidationError):
    """Raised when an uploaded image cannot be decoded or is too large."""

    def __init__(self, message: str = "Invalid image data"):
        super().__init__(message=message, field="image")
        self.error_code = "INVALID_IMAGE"
