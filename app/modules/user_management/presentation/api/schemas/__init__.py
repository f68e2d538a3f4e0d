# 📄 File: app/modules/user_management/presentation/api/schemas/__init__.py
# 🧭 Purpose (Layman Explanation):
# Collects the shapes of the user and sign-in data the API accepts and returns.
# 🧪 Purpose (Technical Summary):
# Re-exports the user management request/response schemas.
# 🔗 Dependencies:
# auth_schemas, user_schemas
# 🔄 Connected Modules / Calls From:
# user management API endpoints, group member listings

from app.modules.user_management.presentation.api.schemas.auth_schemas import (
    AuthResponse,
    ChangePasswordRequest,
    GoogleAuthRequest,
    LoginRequest,
    LogoutAllResponse,
    PasswordResetRequest,
    ResetPasswordRequest,
    SignupRequest,
)
from app.modules.user_management.presentation.api.schemas.user_schemas import (
    FindUsersResponse,
    ModeratorInvitationResponse,
    ProfilePhotoRequest,
    PublicUserResponse,
    UpdateProfileRequest,
    UserResponse,
    UserSummaryResponse,
)

__all__ = [
    "AuthResponse",
    "ChangePasswordRequest",
    "GoogleAuthRequest",
    "LoginRequest",
    "LogoutAllResponse",
    "PasswordResetRequest",
    "ResetPasswordRequest",
    "SignupRequest",
    "FindUsersResponse",
    "ModeratorInvitationResponse",
    "ProfilePhotoRequest",
    "PublicUserResponse",
    "UpdateProfileRequest",
    "UserResponse",
    "UserSummaryResponse",
]
