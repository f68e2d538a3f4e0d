# 📄 File: app/modules/groups/presentation/api/v1/groups.py
# 🧭 Purpose (Layman Explanation):
# The web addresses for clubs: starting and editing a club, viewing its page and
# members, joining and leaving, and every moderation action.
#
# 🧪 Purpose (Technical Summary):
# FastAPI group endpoints delegating to GroupService and MembershipService. Moderation
# endpoints additionally require a confirmed email.
#
# 🔗 Dependencies:
# - FastAPI router, groups services and schemas, auth gate dependencies
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted at / and /api/v1)

from typing import Any, Dict, List, Optional
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Query, status
from fastapi.responses import JSONResponse

from app.modules.groups.domain.models.group import Group
from app.modules.groups.domain.services.group_service import GroupService
from app.modules.groups.domain.services.membership_service import MembershipService
from app.modules.groups.presentation.api.schemas.group_schemas import (
    GROUP_UPDATE_KEYS,
    ActivityLogResponse,
    BannerRequest,
    CreateGroupRequest,
    GroupDetailResponse,
    GroupResponse,
    JoinRequestResponse,
    MemberResponse,
    MembershipResponse,
    MembersResponse,
    UpdateGroupRequest,
)
from app.modules.groups.presentation.dependencies import get_group
from app.modules.user_management.domain.models.user import User
from app.modules.user_management.presentation.api.schemas.user_schemas import UserSummaryResponse
from app.modules.user_management.presentation.dependencies import (
    get_current_user,
    get_optional_user,
    require_email_confirmed,
)
from app.shared.core.exceptions import NotAMemberError
from app.shared.core.schemas import MessageResponse, parse_update_payload

groups_router = APIRouter(tags=["Groups"])


# =========================================================================
# GROUP LIFECYCLE
# =========================================================================

@groups_router.post("/group", response_model=GroupResponse, status_code=status.HTTP_201_CREATED)
@groups_router.post(
    "/creategroup",
    response_model=GroupResponse,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
async def create_group(
    payload: CreateGroupRequest,
    current_user: User = Depends(get_current_user),
    group_service: GroupService = Depends(),
) -> GroupResponse:
    """Create a group owned by the caller."""
    group = await group_service.create_group(
        owner=current_user,
        title=payload.title,
        tagline=payload.tagline,
        description=payload.description,
        location=payload.location.to_domain() if payload.location else None,
        topics=payload.topics,
        is_private=payload.is_private,
        banner_base64=payload.banner,
        banner_file_name=payload.banner_file_name,
    )
    return GroupResponse.from_domain(group)


@groups_router.get("/groups/{group_ref}", response_model=GroupDetailResponse)
async def read_group(
    group: Group = Depends(get_group),
    viewer: Optional[User] = Depends(get_optional_user),
    group_service: GroupService = Depends(),
) -> GroupDetailResponse:
    detail = await group_service.get_detail(group, viewer)
    return GroupDetailResponse.from_detail(detail)


@groups_router.patch("/group/{group_ref}/edit", response_model=GroupResponse)
async def edit_group(
    payload: Dict[str, Any] = Body(...),
    group: Group = Depends(get_group),
    current_user: User = Depends(get_current_user),
    group_service: GroupService = Depends(),
) -> GroupResponse:
    """
    Owner or moderator edit. Only title, tagline, description, location,
    topics and isPrivate may be changed.
    """
    updates = parse_update_payload(UpdateGroupRequest, payload, GROUP_UPDATE_KEYS)
    group = await group_service.edit_group(current_user, group, updates)
    return GroupResponse.from_domain(group)


@groups_router.patch("/group/{group_ref}/banner", response_model=GroupResponse)
@groups_router.patch("/group/{group_ref}/changebanner", response_model=GroupResponse, include_in_schema=False)
async def change_banner(
    payload: BannerRequest,
    group: Group = Depends(get_group),
    current_user: User = Depends(get_current_user),
    group_service: GroupService = Depends(),
) -> GroupResponse:
    group = await group_service.change_banner(current_user, group, payload.image, payload.file_name)
    return GroupResponse.from_domain(group)


@groups_router.delete("/group/{group_ref}", response_model=MessageResponse)
async def delete_group(
    group: Group = Depends(get_group),
    current_user: User = Depends(get_current_user),
    group_service: GroupService = Depends(),
) -> MessageResponse:
    await group_service.delete_group(current_user, group)
    return MessageResponse(message="Group deleted")


# =========================================================================
# LISTINGS
# =========================================================================

@groups_router.get("/groups/{group_ref}/members", response_model=MembersResponse)
async def list_members(
    group: Group = Depends(get_group),
    group_service: GroupService = Depends(),
) -> MembersResponse:
    entries = await group_service.list_members(group)
    return MembersResponse(members=[MemberResponse.from_entry(e) for e in entries])


@groups_router.get("/groups/{group_ref}/requests", response_model=List[JoinRequestResponse])
async def list_requests(
    group: Group = Depends(get_group),
    current_user: User = Depends(get_current_user),
    group_service: GroupService = Depends(),
) -> List[JoinRequestResponse]:
    entries = await group_service.list_requests(current_user, group)
    return [JoinRequestResponse.from_entry(e) for e in entries]


@groups_router.get("/groups/{group_ref}/banned", response_model=List[UserSummaryResponse])
async def list_banned(
    group: Group = Depends(get_group),
    current_user: User = Depends(get_current_user),
    group_service: GroupService = Depends(),
) -> List[UserSummaryResponse]:
    users = await group_service.list_banned(current_user, group)
    return [UserSummaryResponse.from_domain(u) for u in users]


@groups_router.get("/groups/{group_ref}/activity", response_model=List[ActivityLogResponse])
async def list_activity(
    limit: int = Query(50, ge=1, le=200),
    group: Group = Depends(get_group),
    current_user: User = Depends(get_current_user),
    group_service: GroupService = Depends(),
) -> List[ActivityLogResponse]:
    entries = await group_service.recent_activity(current_user, group, limit)
    return [ActivityLogResponse.from_domain(e) for e in entries]


# =========================================================================
# SELF-SERVICE MEMBERSHIP
# =========================================================================

@groups_router.post("/group/{group_ref}/join", response_model=MembershipResponse)
async def join_group(
    group: Group = Depends(get_group),
    current_user: User = Depends(get_current_user),
    membership_service: MembershipService = Depends(),
) -> MembershipResponse:
    state = await membership_service.join(current_user, group)
    message = "Join request sent" if group.permission_required else "Joined group"
    return MembershipResponse(message=message, membership_state=state)


@groups_router.post("/group/{group_ref}/leave", response_model=MessageResponse)
async def leave_group(
    group: Group = Depends(get_group),
    current_user: User = Depends(get_current_user),
    membership_service: MembershipService = Depends(),
) -> MessageResponse:
    await membership_service.leave(current_user, group)
    return MessageResponse(message="Left group")


@groups_router.post("/group/{group_ref}/accept-moderator-invitation", response_model=MessageResponse)
async def accept_moderator_invitation(
    group: Group = Depends(get_group),
    current_user: User = Depends(get_current_user),
    membership_service: MembershipService = Depends(),
):
    promoted = await membership_service.accept_moderator_invitation(current_user, group)
    if not promoted:
        # Returned rather than raised so the discarded invitation is committed
        error = NotAMemberError("You are no longer a member of this group")
        return JSONResponse(status_code=error.status_code, content=error.to_dict())
    return MessageResponse(message="You are now a moderator")


@groups_router.post("/group/{group_ref}/reject-moderator-invitation", response_model=MessageResponse)
async def reject_moderator_invitation(
    group: Group = Depends(get_group),
    current_user: User = Depends(get_current_user),
    membership_service: MembershipService = Depends(),
) -> MessageResponse:
    await membership_service.reject_moderator_invitation(current_user, group)
    return MessageResponse(message="Moderator invitation declined")


# =========================================================================
# MODERATION
# =========================================================================

@groups_router.post("/group/{group_ref}/accept-request/{user_id}", response_model=MessageResponse)
async def accept_request(
    user_id: UUID,
    group: Group = Depends(get_group),
    current_user: User = Depends(require_email_confirmed),
    membership_service: MembershipService = Depends(),
) -> MessageResponse:
    await membership_service.accept_request(current_user, group, user_id)
    return MessageResponse(message="Request accepted")


@groups_router.post("/group/{group_ref}/reject-request/{user_id}", response_model=MessageResponse)
async def reject_request(
    user_id: UUID,
    group: Group = Depends(get_group),
    current_user: User = Depends(require_email_confirmed),
    membership_service: MembershipService = Depends(),
) -> MessageResponse:
    await membership_service.reject_request(current_user, group, user_id)
    return MessageResponse(message="Request rejected")


@groups_router.post("/group/{group_ref}/ban-user/{user_id}", response_model=MessageResponse)
async def ban_user(
    user_id: UUID,
    group: Group = Depends(get_group),
    current_user: User = Depends(require_email_confirmed),
    membership_service: MembershipService = Depends(),
) -> MessageResponse:
    await membership_service.ban_user(current_user, group, user_id)
    return MessageResponse(message="User banned")


@groups_router.post("/group/{group_ref}/unban-user/{user_id}", response_model=MessageResponse)
async def unban_user(
    user_id: UUID,
    group: Group = Depends(get_group),
    current_user: User = Depends(require_email_confirmed),
    membership_service: MembershipService = Depends(),
) -> MessageResponse:
    await membership_service.unban_user(current_user, group, user_id)
    return MessageResponse(message="User unbanned")


@groups_router.post("/group/{group_ref}/remove-member/{user_id}", response_model=MessageResponse)
async def remove_member(
    user_id: UUID,
    group: Group = Depends(get_group),
    current_user: User = Depends(require_email_confirmed),
    membership_service: MembershipService = Depends(),
) -> MessageResponse:
    await membership_service.remove_member(current_user, group, user_id)
    return MessageResponse(message="Member removed")


@groups_router.post("/group/{group_ref}/add-moderator/{user_id}", response_model=MessageResponse)
async def add_moderator(
    user_id: UUID,
    group: Group = Depends(get_group),
    current_user: User = Depends(require_email_confirmed),
    membership_service: MembershipService = Depends(),
) -> MessageResponse:
    """Send a moderator invitation; the user becomes a moderator once they accept."""
    await membership_service.invite_moderator(current_user, group, user_id)
    return MessageResponse(message="Moderator invitation sent")


@groups_router.post("/group/{group_ref}/remove-moderator/{user_id}", response_model=MessageResponse)
async def remove_moderator(
    user_id: UUID,
    group: Group = Depends(get_group),
    current_user: User = Depends(require_email_confirmed),
    membership_service: MembershipService = Depends(),
) -> MessageResponse:
    await membership_service.remove_moderator(current_user, group, user_id)
    return MessageResponse(message="Moderator removed")
