# 📄 File: app/modules/user_management/presentation/api/v1/users.py
# 🧭 Purpose (Layman Explanation):
# The web addresses for looking at and editing profiles: your own profile, other
# people's public profiles, your profile photo and finding people by name.
#
# 🧪 Purpose (Technical Summary):
# FastAPI user/profile endpoints delegating to UserService, guarded by the auth gate.
#
# 🔗 Dependencies:
# - FastAPI router, UserService, auth gate dependencies, user schemas
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted at / and /api/v1)

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, Query

from app.modules.user_management.domain.models.user import User
from app.modules.user_management.domain.services.user_service import UserService
from app.modules.user_management.presentation.api.schemas.user_schemas import (
    PROFILE_UPDATE_KEYS,
    FindUsersResponse,
    ModeratorInvitationResponse,
    ProfilePhotoRequest,
    PublicUserResponse,
    UpdateProfileRequest,
    UserResponse,
)
from app.modules.user_management.presentation.dependencies import get_current_user
from app.shared.config.settings import get_settings
from app.shared.core.schemas import parse_update_payload

users_router = APIRouter(tags=["Users"])

_settings = get_settings()


@users_router.get("/me", response_model=UserResponse, summary="Current user's profile")
async def read_me(current_user: User = Depends(get_current_user)) -> UserResponse:
    return UserResponse.from_domain(current_user)


@users_router.patch("/edit-users-profile", response_model=UserResponse)
async def edit_profile(
    payload: Dict[str, Any] = Body(...),
    current_user: User = Depends(get_current_user),
    user_service: UserService = Depends(),
) -> UserResponse:
    """
    Update the caller's profile. Only fullName, bio, gender, location,
    birthday and interests may be changed.
    """
    updates = parse_update_payload(UpdateProfileRequest, payload, PROFILE_UPDATE_KEYS)
    user = await user_service.update_profile(current_user, updates)
    return UserResponse.from_domain(user)


@users_router.post("/me/profile-photo", response_model=UserResponse)
async def upload_profile_photo(
    payload: ProfilePhotoRequest,
    current_user: User = Depends(get_current_user),
    user_service: UserService = Depends(),
) -> UserResponse:
    user = await user_service.upload_profile_photo(current_user, payload.image, payload.file_name)
    return UserResponse.from_domain(user)


@users_router.get("/me/moderator-invitations", response_model=List[ModeratorInvitationResponse])
async def list_moderator_invitations(
    current_user: User = Depends(get_current_user),
) -> List[ModeratorInvitationResponse]:
    return [
        ModeratorInvitationResponse(group_id=inv.group_id, sent_at=inv.sent_at)
        for inv in current_user.moderator_invitations
    ]


@users_router.get("/find-users", response_model=FindUsersResponse)
async def find_users(
    query: str = Query(..., min_length=1),
    page: int = Query(1, ge=1),
    limit: int = Query(_settings.DEFAULT_PAGE_SIZE, ge=1, le=_settings.MAX_PAGE_SIZE),
    user_service: UserService = Depends(),
) -> FindUsersResponse:
    users, pages = await user_service.find_users(query, page, limit)
    return FindUsersResponse(
        users=[PublicUserResponse.from_domain(u) for u in users],
        page=page,
        total_pages=pages,
    )


@users_router.get("/users/{unique_url}", response_model=PublicUserResponse)
async def read_user(unique_url: str, user_service: UserService = Depends()) -> PublicUserResponse:
    user = await user_service.get_by_unique_url(unique_url)
    return PublicUserResponse.from_domain(user)
