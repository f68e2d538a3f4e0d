# 📄 File: app/modules/user_management/domain/models/user.py
# 🧭 Purpose (Layman Explanation):
# Defines what a "user" is in Clubbera - their name, email, profile details and account
# flags that form the core of a member's identity.
# 🧪 Purpose (Technical Summary):
# Domain model for the User entity with profile value objects, role flags, pending
# moderator invitations and lifecycle helpers used by the auth and profile services.
# 🔗 Dependencies:
# pydantic, datetime, typing, uuid, app.shared.core.value_objects
# 🔄 Connected Modules / Calls From:
# user_service.py, auth_service.py, user_repository.py, presentation dependencies

import uuid
from datetime import date, datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from app.shared.core.value_objects import ImageRef
from app.shared.utils.helpers import generate_unique_url, utcnow


class Gender(str, Enum):
    """Gender options offered on the profile form"""
    MALE = "male"
    FEMALE = "female"
    UNSPECIFIED = "prefer not to say"


class UserLocation(BaseModel):
    """Home city with optional coordinates"""
    city: Optional[str] = Field(None, max_length=120)
    lat: Optional[float] = Field(None, ge=-90, le=90)
    lng: Optional[float] = Field(None, ge=-180, le=180)


class ModeratorInvitation(BaseModel):
    """A pending offer to moderate a group"""
    group_id: uuid.UUID
    sent_at: datetime


class User(BaseModel):
    """
    User domain model representing a Clubbera account.

    Credentials (password hash, one-time email tokens) live on the model;
    active session tokens are stored separately and only reachable
    through the repository.
    """

    user_id: uuid.UUID = Field(default_factory=uuid.uuid4)
    full_name: str
    email: str
    unique_url: str
    bio: Optional[str] = None
    password_hash: Optional[str] = None
    gender: Gender = Gender.UNSPECIFIED

    # Role flags
    is_admin: bool = False
    is_verified: bool = False
    is_active: bool = True
    is_email_confirmed: bool = False

    profile_photo: Optional[ImageRef] = None
    location: Optional[UserLocation] = None
    birthday: Optional[date] = None
    interests: List[uuid.UUID] = Field(default_factory=list)
    moderator_invitations: List[ModeratorInvitation] = Field(default_factory=list)

    email_confirm_token: Optional[str] = None
    password_reset_token: Optional[str] = None

    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @classmethod
    def create_new_user(
        cls,
        full_name: str,
        email: str,
        password_hash: Optional[str] = None,
        gender: Gender = Gender.UNSPECIFIED,
        is_email_confirmed: bool = False,
        profile_photo: Optional[ImageRef] = None,
    ) -> "User":
        """
        Create a new user with a normalized email and a fresh uniqueURL.

        Args:
            full_name: Display name
            email: Login email (stored lowercased)
            password_hash: bcrypt hash, None for OAuth-only accounts
            gender: Profile gender option
            is_email_confirmed: True for accounts whose provider vouches for the email
            profile_photo: Initial photo reference

        Returns:
            New User instance (not yet persisted)
        """
        now = utcnow()
        return cls(
            full_name=full_name.strip(),
            email=email.strip().lower(),
            unique_url=generate_unique_url(full_name, now),
            password_hash=password_hash,
            gender=gender,
            is_email_confirmed=is_email_confirmed,
            profile_photo=profile_photo,
            created_at=now,
            updated_at=now,
        )

    def confirm_email(self) -> None:
        self.is_email_confirmed = True
        self.email_confirm_token = None
        self.updated_at = utcnow()

    def touch(self) -> None:
        self.updated_at = utcnow()
