# 📄 File: app/modules/user_management/presentation/api/schemas/user_schemas.py
# 🧭 Purpose (Layman Explanation):
# Describes what a person's profile looks like when the app sends it out, and what
# someone may send in when they edit their own profile.
#
# 🧪 Purpose (Technical Summary):
# Pydantic v2 response and request schemas for user profiles. Responses never
# carry the password hash, session tokens or one-time email tokens.
#
# 🔗 Dependencies:
# - pydantic, app.shared.core.schemas (camelCase base)
# - app.modules.user_management.domain.models.user
#
# 🔄 Connected Modules / Calls From:
# - users.py and auth.py endpoints
# - group member listings reuse UserSummaryResponse

from datetime import date, datetime
from typing import List, Optional
from uuid import UUID

from pydantic import Field

from app.modules.user_management.domain.models.user import Gender, User, UserLocation
from app.shared.core.schemas import CamelModel
from app.shared.core.value_objects import ImageRef

# camelCase keys accepted by PATCH /edit-users-profile
PROFILE_UPDATE_KEYS = {"fullName", "bio", "gender", "location", "birthday", "interests"}


class LocationSchema(CamelModel):
    city: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None


class UserSummaryResponse(CamelModel):
    """Compact user card used inside other resources."""
    id: UUID
    full_name: str
    unique_url: str = Field(alias="uniqueURL")
    profile_photo: Optional[ImageRef] = None

    @classmethod
    def from_domain(cls, user: User) -> "UserSummaryResponse":
        return cls(
            id=user.user_id,
            full_name=user.full_name,
            unique_url=user.unique_url,
            profile_photo=user.profile_photo,
        )


class PublicUserResponse(UserSummaryResponse):
    """Profile as seen by other people."""
    bio: Optional[str] = None
    gender: Gender
    is_verified: bool
    location: Optional[LocationSchema] = None
    interests: List[UUID] = Field(default_factory=list)
    created_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> "PublicUserResponse":
        return cls(
            id=user.user_id,
            full_name=user.full_name,
            unique_url=user.unique_url,
            profile_photo=user.profile_photo,
            bio=user.bio,
            gender=user.gender,
            is_verified=user.is_verified,
            location=LocationSchema(**user.location.model_dump()) if user.location else None,
            interests=user.interests,
            created_at=user.created_at,
        )


class UserResponse(PublicUserResponse):
    """Full profile of the authenticated user."""
    email: str
    is_admin: bool
    is_active: bool
    is_email_confirmed: bool
    birthday: Optional[date] = None
    updated_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        public = PublicUserResponse.from_domain(user)
        return cls(
            **public.model_dump(),
            email=user.email,
            is_admin=user.is_admin,
            is_active=user.is_active,
            is_email_confirmed=user.is_email_confirmed,
            birthday=user.birthday,
            updated_at=user.updated_at,
        )


class UpdateProfileRequest(CamelModel):
    """Partial profile update; only keys present in the body are applied."""
    full_name: Optional[str] = Field(None, min_length=1, max_length=100)
    bio: Optional[str] = Field(None, max_length=1000)
    gender: Optional[Gender] = None
    location: Optional[UserLocation] = None
    birthday: Optional[date] = None
    interests: Optional[List[UUID]] = None


class ProfilePhotoRequest(CamelModel):
    image: str = Field(..., min_length=1, description="Base64 image, data-URL prefix allowed")
    file_name: str = Field("profile.jpg", max_length=255)


class FindUsersResponse(CamelModel):
    users: List[PublicUserResponse]
    page: int
    total_pages: int


class ModeratorInvitationResponse(CamelModel):
    group_id: UUID
    sent_at: datetime
