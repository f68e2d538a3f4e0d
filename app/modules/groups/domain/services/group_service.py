# 📄 File: app/modules/groups/domain/services/group_service.py
# 🧭 Purpose (Layman Explanation):
# Looks after the clubs themselves: starting one, editing its details and banner,
# showing its page, member list and join requests, and closing it down.
# 🧪 Purpose (Technical Summary):
# Domain service for the Group aggregate: creation (owner recorded as MEMBER), whitelisted
# edits, banner replacement, detail view with memberCount/buttonAction, member and
# request listings built from the activity log, and guarded deletion.
# 🔗 Dependencies:
# GroupRepository, MembershipService, ActivityLogRepository, UserRepository,
# storage client, app.shared.utils (validators, formatters)
# 🔄 Connected Modules / Calls From:
# groups API endpoints, group path dependency, events and comments modules

import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional

from fastapi import Depends

from app.modules.groups.domain.models.activity import ActivityAction, ActivityLog
from app.modules.groups.domain.models.group import (
    MEMBER_STATES,
    ButtonAction,
    Group,
    MembershipState,
    normalize_topics,
)
from app.modules.groups.domain.repositories.activity_log_repository import ActivityLogRepository
from app.modules.groups.domain.repositories.group_repository import GroupRepository
from app.modules.groups.domain.services.membership_service import MembershipService
from app.modules.user_management.domain.models.user import User
from app.modules.user_management.domain.repositories.user_repository import UserRepository
from app.shared.core.exceptions import ConflictError, NotFoundError, ValidationError
from app.shared.core.value_objects import ImageProvider, Place
from app.shared.infrastructure.storage.supabase_storage import (
    SupabaseStorageClient,
    get_storage_client,
)
from app.shared.utils.formatters import format_time_diff
from app.shared.utils.helpers import utcnow
from app.shared.utils.logging import get_logger
from app.shared.utils.validators import validate_allowed_updates

logger = get_logger(__name__)

GROUP_UPDATABLE_FIELDS = {"title", "tagline", "description", "location", "topics", "is_private"}


@dataclass
class GroupDetail:
    group: Group
    member_count: int
    button_action: ButtonAction
    viewer_state: MembershipState


@dataclass
class MemberEntry:
    user: User
    role: str
    date_joined: Optional[datetime]


@dataclass
class RequestEntry:
    user: User
    requested_at: Optional[datetime]
    request_sent: Optional[str]


class GroupService:
    """
    Domain service for group business logic.

    Business rules:
    - Titles are unique (case-insensitive) and at most 50 characters
    - The creator owns the group and is recorded as its first member
    - Only the owner or a moderator may edit the group or its banner
    - Only the owner may delete, and only when nobody else is a member
    """

    def __init__(
        self,
        group_repository: GroupRepository = Depends(),
        user_repository: UserRepository = Depends(),
        activity_repository: ActivityLogRepository = Depends(),
        membership_service: MembershipService = Depends(),
        storage: SupabaseStorageClient = Depends(get_storage_client),
    ):
        self.groups = group_repository
        self.users = user_repository
        self.activity = activity_repository
        self.membership = membership_service
        self.storage = storage

    # =========================================================================
    # LOOKUP
    # =========================================================================

    async def resolve(self, identifier: str) -> Group:
        """
        Find a group by id or uniqueURL.

        Raises:
            NotFoundError: If neither matches
        """
        group = None
        try:
            group = await self.groups.get_by_id(uuid.UUID(identifier))
        except ValueError:
            pass
        if group is None:
            group = await self.groups.get_by_unique_url(identifier)
        if group is None or group.deactivated:
            raise NotFoundError("Group", identifier)
        return group

    async def get_detail(self, group: Group, viewer: Optional[User]) -> GroupDetail:
        state = await self.membership.get_state(group, viewer.user_id if viewer else None)
        member_count = await self.membership.memberships.count(group.group_id, MEMBER_STATES)
        return GroupDetail(
            group=group,
            member_count=member_count,
            button_action=ButtonAction.for_state(state),
            viewer_state=state,
        )

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    async def create_group(
        self,
        owner: User,
        title: str,
        tagline: Optional[str] = None,
        description: Optional[str] = None,
        location: Optional[Place] = None,
        topics: Optional[List[str]] = None,
        is_private: bool = False,
        banner_base64: Optional[str] = None,
        banner_file_name: str = "banner.jpg",
    ) -> Group:
        """
        Create a group owned by ``owner`` and record the owner as a member.

        Raises:
            ConflictError: If the title is taken
        """
        await self._ensure_title_available(title)

        group = Group.create_new_group(
            owner_id=owner.user_id,
            title=title,
            tagline=tagline,
            description=description,
            location=location,
            topics=topics,
            permission_required=is_private,
        )
        if banner_base64:
            group.banner = await self.storage.upload_image(banner_base64, banner_file_name, "group-banners")

        group = await self.groups.create(group)
        await self.membership.memberships.set_state(group.group_id, owner.user_id, MembershipState.MEMBER)
        await self.activity.append(
            ActivityLog(group_id=group.group_id, user_id=owner.user_id, action=ActivityAction.JOINED)
        )

        logger.log_business_event(
            event_type="group.created",
            description=f"✅ Group created: {group.unique_url}",
            entity_id=str(group.group_id),
            entity_type="group",
            extra={"owner_id": str(owner.user_id)},
        )
        return group

    async def edit_group(self, actor: User, group: Group, updates: Dict[str, Any]) -> Group:
        """
        Apply a whitelisted edit.

        Raises:
            ValidationError: For keys outside the whitelist or invalid values
            AuthorizationError: If the actor is neither owner nor moderator
        """
        await self.membership.require_privileged(group, actor)
        validate_allowed_updates(updates, GROUP_UPDATABLE_FIELDS)

        for field, value in updates.items():
            if field == "title":
                if not value or not str(value).strip():
                    raise ValidationError("Title cannot be empty", field="title")
                if str(value).strip().lower() != group.title.lower():
                    await self._ensure_title_available(value)
                group.title = str(value).strip()
            elif field == "is_private":
                group.permission_required = bool(value)
            elif field == "topics":
                group.topics = normalize_topics(value or [])
            elif field == "location":
                group.location = Place(**value) if isinstance(value, dict) else value
            else:
                setattr(group, field, value)

        group.touch()
        group = await self.groups.update(group)
        await self.activity.append(
            ActivityLog(group_id=group.group_id, user_id=actor.user_id, action=ActivityAction.EDITED_GROUP)
        )
        logger.info(f"Group edited: {group.group_id}", fields=sorted(updates))
        return group

    async def change_banner(self, actor: User, group: Group, image_base64: str, file_name: str) -> Group:
        await self.membership.require_privileged(group, actor)
        group.banner = await self.storage.replace_image(group.banner, image_base64, file_name, "group-banners")
        group.touch()
        return await self.groups.update(group)

    async def delete_group(self, actor: User, group: Group) -> None:
        """
        Delete a group whose only member is its owner.

        Raises:
            AuthorizationError: If the actor is not the owner
            ConflictError: If anyone besides the owner is still a member
        """
        self.membership.require_owner(group, actor)
        member_ids = await self.membership.memberships.list_user_ids(group.group_id, MEMBER_STATES)
        if any(uid != group.owner_id for uid in member_ids):
            raise ConflictError(
                "A group can only be deleted when the owner is its only member",
                "GROUP_NOT_EMPTY",
            )

        await self.groups.delete(group.group_id)
        if group.banner and group.banner.provider == ImageProvider.SUPABASE and group.banner.key:
            await self.storage.delete_file(group.banner.key)

        logger.log_business_event(
            event_type="group.deleted",
            description=f"Group deleted: {group.unique_url}",
            entity_id=str(group.group_id),
            entity_type="group",
        )

    # =========================================================================
    # LISTINGS
    # =========================================================================

    async def list_members(self, group: Group) -> List[MemberEntry]:
        """Members and moderators with the date of their latest join."""
        user_ids = await self.membership.memberships.list_user_ids(group.group_id, MEMBER_STATES)
        moderators = set(
            await self.membership.memberships.list_user_ids(group.group_id, [MembershipState.MODERATOR])
        )
        joined = await self.activity.latest_timestamps(group.group_id, user_ids, ActivityAction.JOINED)
        users = await self.users.get_many(user_ids)

        entries = []
        for user in users:
            if group.is_owner(user.user_id):
                role = "owner"
            elif user.user_id in moderators:
                role = "moderator"
            else:
                role = "member"
            entries.append(MemberEntry(user=user, role=role, date_joined=joined.get(user.user_id)))
        return entries

    async def list_requests(self, actor: User, group: Group) -> List[RequestEntry]:
        """Pending join requests with how long ago each was sent."""
        await self.membership.require_privileged(group, actor)
        user_ids = await self.membership.memberships.list_user_ids(group.group_id, [MembershipState.REQUESTED])
        sent = await self.activity.latest_timestamps(group.group_id, user_ids, ActivityAction.REQUEST_SENT)
        users = await self.users.get_many(user_ids)

        now = utcnow()
        entries = []
        for user in users:
            requested_at = sent.get(user.user_id)
            entries.append(RequestEntry(
                user=user,
                requested_at=requested_at,
                request_sent=format_time_diff(requested_at, now) if requested_at else None,
            ))
        return entries

    async def list_banned(self, actor: User, group: Group) -> List[User]:
        await self.membership.require_privileged(group, actor)
        user_ids = await self.membership.memberships.list_user_ids(group.group_id, [MembershipState.BANNED])
        return await self.users.get_many(user_ids)

    async def recent_activity(self, actor: User, group: Group, limit: int = 50) -> List[ActivityLog]:
        await self.membership.require_privileged(group, actor)
        return await self.activity.list_for_group(group.group_id, limit)

    async def _ensure_title_available(self, title: str) -> None:
        if await self.groups.get_by_title(title.strip()):
            raise ConflictError("A group with this title already exists", "GROUP_TITLE_TAKEN")
