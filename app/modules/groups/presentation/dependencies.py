# 📄 File: app/modules/groups/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Finds the club a web address is talking about, whether the address uses the club's
# id or its readable name.
# 🧪 Purpose (Technical Summary):
# FastAPI dependency resolving the {group_ref} path segment (UUID or uniqueURL) to a Group.
# 🔗 Dependencies:
# GroupService
# 🔄 Connected Modules / Calls From:
# groups, comments and events endpoints

from fastapi import Depends, Path

from app.modules.groups.domain.models.group import Group
from app.modules.groups.domain.services.group_service import GroupService


async def get_group(
    group_ref: str = Path(..., description="Group id or uniqueURL"),
    group_service: GroupService = Depends(),
) -> Group:
    return await group_service.resolve(group_ref)
