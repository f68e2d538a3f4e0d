# 📄 File: app/modules/groups/presentation/api/schemas/__init__.py
# 🧭 Purpose (Layman Explanation):
# The shapes of club data the API accepts and returns.
# 🧪 Purpose (Technical Summary):
# Re-exports the group request/response schemas.
# 🔗 Dependencies:
# group_schemas.py
# 🔄 Connected Modules / Calls From:
# groups and search endpoints

from .group_schemas import (
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
    PlaceSchema,
    UpdateGroupRequest,
)

__all__ = [
    "GROUP_UPDATE_KEYS",
    "ActivityLogResponse",
    "BannerRequest",
    "CreateGroupRequest",
    "GroupDetailResponse",
    "GroupResponse",
    "JoinRequestResponse",
    "MemberResponse",
    "MembershipResponse",
    "MembersResponse",
    "PlaceSchema",
    "UpdateGroupRequest",
]
