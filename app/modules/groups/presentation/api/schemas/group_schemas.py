# 📄 File: app/modules/groups/presentation/api/schemas/group_schemas.py
# 🧭 Purpose (Layman Explanation):
# Describes the club information people send when they start or edit a club, and what
# the app sends back for club pages, member lists and join requests.
#
# 🧪 Purpose (Technical Summary):
# Pydantic v2 request/response schemas for group endpoints, serialized in camelCase.
#
# 🔗 Dependencies:
# - pydantic, app.shared.core.schemas, groups domain models
#
# 🔄 Connected Modules / Calls From:
# - app.modules.groups.presentation.api.v1.groups
# - search endpoints (GroupResponse)

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import Field, field_validator

from app.modules.groups.domain.models.activity import ActivityLog
from app.modules.groups.domain.models.group import (
    DESCRIPTION_MAX_LENGTH,
    TITLE_MAX_LENGTH,
    ButtonAction,
    Group,
    MembershipState,
)
from app.modules.groups.domain.services.group_service import GroupDetail, MemberEntry, RequestEntry
from app.shared.core.schemas import CamelModel
from app.shared.core.value_objects import ImageRef, Place

# camelCase keys accepted by PATCH /group/{id}/edit
GROUP_UPDATE_KEYS = {"title", "tagline", "description", "location", "topics", "isPrivate"}


class PlaceSchema(CamelModel):
    place_id: Optional[str] = Field(None, max_length=255)
    formatted_address: Optional[str] = Field(None, max_length=500)
    name: Optional[str] = Field(None, max_length=255)
    types: List[str] = Field(default_factory=list)
    lat: Optional[float] = Field(None, ge=-90, le=90)
    lng: Optional[float] = Field(None, ge=-180, le=180)

    @classmethod
    def from_domain(cls, place: Optional[Place]) -> Optional["PlaceSchema"]:
        return cls(**place.model_dump()) if place else None

    def to_domain(self) -> Place:
        return Place(**self.model_dump())


# =============================================================================
# REQUESTS
# =============================================================================

class CreateGroupRequest(CamelModel):
    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH)
    tagline: Optional[str] = Field(None, max_length=150)
    description: Optional[str] = Field(None, max_length=DESCRIPTION_MAX_LENGTH)
    location: Optional[PlaceSchema] = None
    topics: List[str] = Field(default_factory=list, max_length=20)
    is_private: bool = False
    banner: Optional[str] = Field(None, description="Base64 banner image")
    banner_file_name: str = Field("banner.jpg", max_length=255)

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Title cannot be blank")
        return v.strip()


class UpdateGroupRequest(CamelModel):
    title: Optional[str] = Field(None, min_length=1, max_length=TITLE_MAX_LENGTH)
    tagline: Optional[str] = Field(None, max_length=150)
    description: Optional[str] = Field(None, max_length=DESCRIPTION_MAX_LENGTH)
    location: Optional[PlaceSchema] = None
    topics: Optional[List[str]] = Field(None, max_length=20)
    is_private: Optional[bool] = None


class BannerRequest(CamelModel):
    image: str = Field(..., min_length=1, description="Base64 image, data-URL prefix allowed")
    file_name: str = Field("banner.jpg", max_length=255)


# =============================================================================
# RESPONSES
# =============================================================================

class GroupResponse(CamelModel):
    id: UUID
    unique_url: str = Field(alias="uniqueURL")
    owner_id: UUID
    title: str
    tagline: Optional[str] = None
    description: Optional[str] = None
    banner: Optional[ImageRef] = None
    location: Optional[PlaceSchema] = None
    topics: List[str] = Field(default_factory=list)
    is_private: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, group: Group) -> "GroupResponse":
        return cls(**_group_fields(group))


class GroupDetailResponse(GroupResponse):
    member_count: int
    button_action: ButtonAction
    membership_state: MembershipState

    @classmethod
    def from_detail(cls, detail: GroupDetail) -> "GroupDetailResponse":
        return cls(
            **_group_fields(detail.group),
            member_count=detail.member_count,
            button_action=detail.button_action,
            membership_state=detail.viewer_state,
        )


class MemberResponse(CamelModel):
    id: UUID
    full_name: str
    unique_url: str = Field(alias="uniqueURL")
    profile_photo: Optional[ImageRef] = None
    role: str
    date_joined: Optional[datetime] = None

    @classmethod
    def from_entry(cls, entry: MemberEntry) -> "MemberResponse":
        return cls(
            id=entry.user.user_id,
            full_name=entry.user.full_name,
            unique_url=entry.user.unique_url,
            profile_photo=entry.user.profile_photo,
            role=entry.role,
            date_joined=entry.date_joined,
        )


class MembersResponse(CamelModel):
    members: List[MemberResponse]


class JoinRequestResponse(CamelModel):
    id: UUID
    full_name: str
    unique_url: str = Field(alias="uniqueURL")
    profile_photo: Optional[ImageRef] = None
    requested_at: Optional[datetime] = None
    request_sent: Optional[str] = None

    @classmethod
    def from_entry(cls, entry: RequestEntry) -> "JoinRequestResponse":
        return cls(
            id=entry.user.user_id,
            full_name=entry.user.full_name,
            unique_url=entry.user.unique_url,
            profile_photo=entry.user.profile_photo,
            requested_at=entry.requested_at,
            request_sent=entry.request_sent,
        )


class MembershipResponse(CamelModel):
    message: str
    membership_state: MembershipState


class ActivityLogResponse(CamelModel):
    id: UUID
    user_id: UUID
    action: str
    comment_id: Optional[UUID] = None
    event_id: Optional[UUID] = None
    timestamp: datetime

    @classmethod
    def from_domain(cls, entry: ActivityLog) -> "ActivityLogResponse":
        return cls(
            id=entry.log_id,
            user_id=entry.user_id,
            action=entry.action.value,
            comment_id=entry.comment_id,
            event_id=entry.event_id,
            timestamp=entry.timestamp,
        )


def _group_fields(group: Group) -> dict:
    return {
        "id": group.group_id,
        "unique_url": group.unique_url,
        "owner_id": group.owner_id,
        "title": group.title,
        "tagline": group.tagline,
        "description": group.description,
        "banner": group.banner,
        "location": PlaceSchema.from_domain(group.location),
        "topics": group.topics,
        "is_private": group.permission_required,
        "created_at": group.created_at,
        "updated_at": group.updated_at,
    }
