# 📄 File: app/modules/user_management/presentation/api/schemas/auth_schemas.py
# 🧭 Purpose (Layman Explanation):
# Describes the information people send when they sign up, log in, reset a forgotten
# password or sign in with Google, and what the app sends back.
#
# 🧪 Purpose (Technical Summary):
# Request/response schemas for the authentication endpoints. Emails are validated with
# email-validator (via EmailStr) and normalized to lowercase.
#
# 🔗 Dependencies:
# - pydantic (EmailStr requires email-validator)
# - app.modules.user_management.presentation.api.schemas.user_schemas
#
# 🔄 Connected Modules / Calls From:
# - app.modules.user_management.presentation.api.v1.auth

from pydantic import EmailStr, Field, field_validator

from app.modules.user_management.domain.models.user import Gender
from app.modules.user_management.presentation.api.schemas.user_schemas import UserResponse
from app.shared.core.schemas import CamelModel


class SignupRequest(CamelModel):
    full_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=128)
    gender: Gender = Gender.UNSPECIFIED

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.lower()

    @field_validator("full_name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Full name cannot be blank")
        return v.strip()


class LoginRequest(CamelModel):
    email: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class AuthResponse(CamelModel):
    """Returned by signup, login and Google sign-in."""
    user: UserResponse
    token: str


class PasswordResetRequest(CamelModel):
    email: EmailStr


class ResetPasswordRequest(CamelModel):
    password: str = Field(..., min_length=1, max_length=128)


class ChangePasswordRequest(CamelModel):
    current_password: str = Field(..., min_length=1, max_length=128)
    new_password: str = Field(..., min_length=1, max_length=128)


class GoogleAuthRequest(CamelModel):
    code: str = Field(..., min_length=1, description="Authorization code from Google")


class LogoutAllResponse(CamelModel):
    message: str
    sessions_revoked: int
