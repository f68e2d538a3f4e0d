# 📄 File: app/modules/groups/domain/services/membership_service.py
# 🧭 Purpose (Layman Explanation):
# The rulebook for joining and leaving clubs: asking to join, being let in or turned
# away, being banned and unbanned, and being invited to help moderate.
# 🧪 Purpose (Technical Summary):
# Membership lifecycle engine. Every transition reads the (group, user) state, checks
# the actor's authority and the state preconditions, writes the new state and appends
# the matching activity-log entry inside the request's single transaction.
# 🔗 Dependencies:
# MembershipRepository, ActivityLogRepository, UserRepository (target lookups),
# groups domain models,
# app.shared.core.exceptions (membership conflict errors)
# 🔄 Connected Modules / Calls From:
# groups API endpoints, comment and event services (membership checks)

"""
Membership lifecycle.

    NONE -> REQUESTED -> MEMBER -> MODERATOR
    NONE | REQUESTED | MEMBER -> BANNED -> (unban) -> NONE

The owner is stored as MEMBER, is privileged without being a MODERATOR,
cannot leave and can never be banned or removed.
"""

from typing import Optional
from uuid import UUID

from fastapi import Depends

from app.modules.groups.domain.models.activity import ActivityAction, ActivityLog
from app.modules.groups.domain.models.group import Group, MembershipState
from app.modules.groups.domain.repositories.activity_log_repository import ActivityLogRepository
from app.modules.groups.domain.repositories.membership_repository import MembershipRepository
from app.modules.user_management.domain.models.user import User
from app.modules.user_management.domain.repositories.user_repository import UserRepository
from app.shared.core.exceptions import (
    AlreadyBannedError,
    AlreadyMemberError,
    AlreadyModeratorError,
    AlreadyRequestedError,
    AuthorizationError,
    CannotBanPrivilegedError,
    InvitationAlreadyPendingError,
    NoPendingInvitationError,
    NotAMemberError,
    NotAModeratorError,
    NotBannedError,
    NotFoundError,
    NotRequestedError,
    OwnerCannotLeaveError,
    UserBannedError,
)
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)


class MembershipService:
    """
    Domain service enforcing membership transitions and moderation authority.
    """

    def __init__(
        self,
        membership_repository: MembershipRepository = Depends(),
        activity_repository: ActivityLogRepository = Depends(),
        user_repository: UserRepository = Depends(),
    ):
        self.memberships = membership_repository
        self.activity = activity_repository
        self.users = user_repository

    # =========================================================================
    # QUERIES
    # =========================================================================

    async def get_state(self, group: Group, user_id: Optional[UUID]) -> MembershipState:
        if user_id is None:
            return MembershipState.NONE
        return await self.memberships.get_state(group.group_id, user_id)

    async def is_privileged(self, group: Group, user_id: UUID) -> bool:
        """Owner or moderator."""
        if group.is_owner(user_id):
            return True
        return await self.memberships.get_state(group.group_id, user_id) == MembershipState.MODERATOR

    async def require_privileged(self, group: Group, actor: User) -> None:
        if not await self.is_privileged(group, actor.user_id):
            raise AuthorizationError("Only the group owner or a moderator can do this")

    async def require_member(self, group: Group, user: User) -> None:
        state = await self.memberships.get_state(group.group_id, user.user_id)
        if state == MembershipState.BANNED:
            raise UserBannedError()
        if not state.is_member:
            raise AuthorizationError(
                "You must be a member of this group",
                error_code="MEMBERSHIP_REQUIRED",
            )

    def require_owner(self, group: Group, actor: User) -> None:
        if not group.is_owner(actor.user_id):
            raise AuthorizationError("Only the group owner can do this", required_role="owner")

    # =========================================================================
    # SELF-SERVICE TRANSITIONS
    # =========================================================================

    async def join(self, user: User, group: Group) -> MembershipState:
        """
        Join an open group, or request to join one that needs permission.

        Raises:
            UserBannedError: If the user is banned
            AlreadyMemberError / AlreadyRequestedError: If already in the group
        """
        state = await self.memberships.get_state(group.group_id, user.user_id, for_update=True)
        if state == MembershipState.BANNED:
            raise UserBannedError()
        if state.is_member:
            raise AlreadyMemberError()
        if state == MembershipState.REQUESTED:
            raise AlreadyRequestedError()

        if group.permission_required:
            new_state, action = MembershipState.REQUESTED, ActivityAction.REQUEST_SENT
        else:
            new_state, action = MembershipState.MEMBER, ActivityAction.JOINED

        await self.memberships.set_state(group.group_id, user.user_id, new_state)
        await self._record(group, user.user_id, action)
        return new_state

    async def leave(self, user: User, group: Group) -> None:
        """Leave the group, or retract a pending join request."""
        if group.is_owner(user.user_id):
            raise OwnerCannotLeaveError()

        state = await self.memberships.get_state(group.group_id, user.user_id, for_update=True)
        if state.is_member:
            action = ActivityAction.LEFT
        elif state == MembershipState.REQUESTED:
            action = ActivityAction.RETRACTED_REQUEST
        else:
            raise NotAMemberError("You are not a member of this group")

        await self.memberships.remove(group.group_id, user.user_id)
        await self.memberships.remove_invitation(group.group_id, user.user_id)
        await self._record(group, user.user_id, action)

    # =========================================================================
    # MODERATION (OWNER OR MODERATOR)
    # =========================================================================

    async def accept_request(self, actor: User, group: Group, target_id: UUID) -> None:
        await self.require_privileged(group, actor)
        state = await self.memberships.get_state(group.group_id, target_id, for_update=True)
        if state != MembershipState.REQUESTED:
            raise NotRequestedError()

        await self.memberships.set_state(group.group_id, target_id, MembershipState.MEMBER)
        await self._record(group, target_id, ActivityAction.REQUEST_APPROVED, actor=actor)
        await self._record(group, target_id, ActivityAction.JOINED)

    async def reject_request(self, actor: User, group: Group, target_id: UUID) -> None:
        await self.require_privileged(group, actor)
        state = await self.memberships.get_state(group.group_id, target_id, for_update=True)
        if state != MembershipState.REQUESTED:
            raise NotRequestedError()

        await self.memberships.remove(group.group_id, target_id)
        await self._record(group, target_id, ActivityAction.REQUEST_DENIED, actor=actor)

    async def ban_user(self, actor: User, group: Group, target_id: UUID) -> None:
        """Ban a non-privileged user, dropping any membership or request they had."""
        await self.require_privileged(group, actor)
        await self._require_user(target_id)
        if group.is_owner(target_id):
            raise CannotBanPrivilegedError()

        state = await self.memberships.get_state(group.group_id, target_id, for_update=True)
        if state == MembershipState.MODERATOR:
            raise CannotBanPrivilegedError()
        if state == MembershipState.BANNED:
            raise AlreadyBannedError()

        await self.memberships.set_state(group.group_id, target_id, MembershipState.BANNED)
        await self.memberships.remove_invitation(group.group_id, target_id)
        await self._record(group, target_id, ActivityAction.BANNED, actor=actor)

    async def unban_user(self, actor: User, group: Group, target_id: UUID) -> None:
        """Lift a ban. Membership is not restored."""
        await self.require_privileged(group, actor)
        state = await self.memberships.get_state(group.group_id, target_id, for_update=True)
        if state != MembershipState.BANNED:
            raise NotBannedError()

        await self.memberships.remove(group.group_id, target_id)
        await self._record(group, target_id, ActivityAction.UNBANNED, actor=actor)

    async def remove_member(self, actor: User, group: Group, target_id: UUID) -> None:
        await self.require_privileged(group, actor)
        if group.is_owner(target_id):
            raise AuthorizationError("The group owner cannot be removed")

        state = await self.memberships.get_state(group.group_id, target_id, for_update=True)
        if state == MembershipState.MODERATOR:
            raise AuthorizationError("Remove the user's moderator role first")
        if state != MembershipState.MEMBER:
            raise NotAMemberError()

        await self.memberships.remove(group.group_id, target_id)
        await self.memberships.remove_invitation(group.group_id, target_id)
        await self._record(group, target_id, ActivityAction.REMOVED, actor=actor)

    # =========================================================================
    # MODERATOR ROLE (OWNER)
    # =========================================================================

    async def invite_moderator(self, actor: User, group: Group, target_id: UUID) -> None:
        """
        Offer a current member the moderator role.

        Raises:
            AuthorizationError: If the actor is not the owner
            NotFoundError: If the target user does not exist
            AlreadyModeratorError: If the target is the owner or already a moderator
            NotAMemberError: If the target is not a member
            InvitationAlreadyPendingError: If an invitation is already waiting
        """
        self.require_owner(group, actor)
        await self._require_user(target_id)
        if group.is_owner(target_id):
            raise AlreadyModeratorError()

        state = await self.memberships.get_state(group.group_id, target_id)
        if state == MembershipState.MODERATOR:
            raise AlreadyModeratorError()
        if state != MembershipState.MEMBER:
            raise NotAMemberError()
        if await self.memberships.has_invitation(group.group_id, target_id):
            raise InvitationAlreadyPendingError()

        await self.memberships.add_invitation(group.group_id, target_id)
        await self._record(group, target_id, ActivityAction.MODERATOR_INVITED, actor=actor)

    async def accept_moderator_invitation(self, user: User, group: Group) -> bool:
        """
        Accept a pending invitation.

        Returns:
            True when the user became a moderator, False when the invitation was
            discarded because the user is no longer a member

        Raises:
            NoPendingInvitationError: If there is no invitation for this group
        """
        if not await self.memberships.remove_invitation(group.group_id, user.user_id):
            raise NoPendingInvitationError()

        state = await self.memberships.get_state(group.group_id, user.user_id, for_update=True)
        if state != MembershipState.MEMBER:
            logger.info(
                f"Discarded stale moderator invitation for user {user.user_id}",
                group_id=str(group.group_id),
                state=state.value,
            )
            return False

        await self.memberships.set_state(group.group_id, user.user_id, MembershipState.MODERATOR)
        await self._record(group, user.user_id, ActivityAction.MODERATOR_ADDED)
        return True

    async def reject_moderator_invitation(self, user: User, group: Group) -> None:
        if not await self.memberships.remove_invitation(group.group_id, user.user_id):
            raise NoPendingInvitationError()
        await self._record(group, user.user_id, ActivityAction.MODERATOR_DECLINED)

    async def remove_moderator(self, actor: User, group: Group, target_id: UUID) -> None:
        """Demote a moderator back to a plain member."""
        self.require_owner(group, actor)
        state = await self.memberships.get_state(group.group_id, target_id, for_update=True)
        if state != MembershipState.MODERATOR:
            raise NotAModeratorError()

        await self.memberships.set_state(group.group_id, target_id, MembershipState.MEMBER)
        await self._record(group, target_id, ActivityAction.MODERATOR_REMOVED, actor=actor)

    # =========================================================================
    # HELPERS
    # =========================================================================

    async def _require_user(self, user_id: UUID) -> User:
        user = await self.users.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User", str(user_id))
        return user

    async def _record(
        self,
        group: Group,
        user_id: UUID,
        action: ActivityAction,
        actor: Optional[User] = None,
    ) -> None:
        await self.activity.append(ActivityLog(group_id=group.group_id, user_id=user_id, action=action))
        logger.log_business_event(
            event_type=f"membership.{action.value}",
            description=f"Membership {action.value}: user {user_id} in group {group.group_id}",
            entity_id=str(group.group_id),
            entity_type="group",
            extra={
                "user_id": str(user_id),
                "actor_id": str(actor.user_id) if actor else str(user_id),
            },
        )
