"""
Unit tests for the membership lifecycle, run against in-memory repositories.
"""

from typing import Dict, Iterable, List, Optional, Set, Tuple
from uuid import UUID, uuid4

import pytest

from app.modules.groups.domain.models.activity import ActivityAction, ActivityLog
from app.modules.groups.domain.models.group import Group, Membership, MembershipState
from app.modules.groups.domain.repositories.activity_log_repository import ActivityLogRepository
from app.modules.groups.domain.repositories.membership_repository import MembershipRepository
from app.modules.groups.domain.services.membership_service import MembershipService
from app.modules.user_management.domain.models.user import User
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


class InMemoryMemberships(MembershipRepository):

    def __init__(self):
        self.rows: Dict[Tuple[UUID, UUID], Membership] = {}
        self.invitations: Set[Tuple[UUID, UUID]] = set()

    async def get_state(self, group_id: UUID, user_id: UUID, for_update: bool = False) -> MembershipState:
        row = self.rows.get((group_id, user_id))
        return row.state if row else MembershipState.NONE

    async def get(self, group_id: UUID, user_id: UUID) -> Optional[Membership]:
        return self.rows.get((group_id, user_id))

    async def set_state(self, group_id: UUID, user_id: UUID, state: MembershipState) -> Membership:
        row = Membership(group_id=group_id, user_id=user_id, state=state)
        self.rows[(group_id, user_id)] = row
        return row

    async def remove(self, group_id: UUID, user_id: UUID) -> bool:
        return self.rows.pop((group_id, user_id), None) is not None

    async def list_user_ids(self, group_id: UUID, states: Iterable[MembershipState]) -> List[UUID]:
        wanted = set(states)
        return [uid for (gid, uid), row in self.rows.items() if gid == group_id and row.state in wanted]

    async def count(self, group_id: UUID, states: Iterable[MembershipState]) -> int:
        return len(await self.list_user_ids(group_id, states))

    async def add_invitation(self, group_id: UUID, user_id: UUID) -> None:
        self.invitations.add((group_id, user_id))

    async def has_invitation(self, group_id: UUID, user_id: UUID) -> bool:
        return (group_id, user_id) in self.invitations

    async def remove_invitation(self, group_id: UUID, user_id: UUID) -> bool:
        if (group_id, user_id) in self.invitations:
            self.invitations.discard((group_id, user_id))
            return True
        return False


class InMemoryActivity(ActivityLogRepository):

    def __init__(self):
        self.entries: List[ActivityLog] = []

    async def append(self, entry: ActivityLog) -> ActivityLog:
        self.entries.append(entry)
        return entry

    async def latest_timestamps(self, group_id, user_ids, action):
        return {
            e.user_id: e.timestamp
            for e in self.entries
            if e.group_id == group_id and e.action == action and e.user_id in user_ids
        }

    async def list_for_group(self, group_id: UUID, limit: int = 50) -> List[ActivityLog]:
        return [e for e in reversed(self.entries) if e.group_id == group_id][:limit]

    def actions(self) -> List[ActivityAction]:
        return [e.action for e in self.entries]


class UserDirectory:
    """Only the lookup the membership engine needs."""

    def __init__(self):
        self.users: Dict[UUID, User] = {}

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        return self.users.get(user_id)


KNOWN_USERS = UserDirectory()


def make_user(name: str = "Someone") -> User:
    user = User.create_new_user(full_name=name, email=f"{uuid4().hex[:8]}@example.com")
    KNOWN_USERS.users[user.user_id] = user
    return user


@pytest.fixture
def memberships():
    return InMemoryMemberships()


@pytest.fixture
def activity():
    return InMemoryActivity()


@pytest.fixture
def service(memberships, activity):
    return MembershipService(
        membership_repository=memberships,
        activity_repository=activity,
        user_repository=KNOWN_USERS,
    )


@pytest.fixture
def owner():
    return make_user("Owner")


@pytest.fixture
async def group(owner, memberships):
    group = Group.create_new_group(owner_id=owner.user_id, title="Chess Club")
    await memberships.set_state(group.group_id, owner.user_id, MembershipState.MEMBER)
    return group


@pytest.fixture
async def private_group(owner, memberships):
    group = Group.create_new_group(owner_id=owner.user_id, title="Secret Club", permission_required=True)
    await memberships.set_state(group.group_id, owner.user_id, MembershipState.MEMBER)
    return group


class TestJoinAndLeave:

    async def test_join_open_group(self, service, group, activity):
        user = make_user()

        state = await service.join(user, group)

        assert state == MembershipState.MEMBER
        assert await service.get_state(group, user.user_id) == MembershipState.MEMBER
        assert activity.actions() == [ActivityAction.JOINED]

    async def test_join_private_group_creates_request(self, service, private_group, activity):
        user = make_user()

        state = await service.join(user, private_group)

        assert state == MembershipState.REQUESTED
        assert activity.actions() == [ActivityAction.REQUEST_SENT]

    async def test_join_twice(self, service, group, private_group):
        user = make_user()
        await service.join(user, group)
        await service.join(user, private_group)

        with pytest.raises(AlreadyMemberError):
            await service.join(user, group)
        with pytest.raises(AlreadyRequestedError):
            await service.join(user, private_group)

    async def test_banned_user_cannot_join(self, service, group, owner):
        user = make_user()
        await service.ban_user(owner, group, user.user_id)

        with pytest.raises(UserBannedError):
            await service.join(user, group)

    async def test_join_succeeds_again_after_unban(self, service, group, owner, activity):
        user = make_user()
        await service.join(user, group)
        await service.ban_user(owner, group, user.user_id)

        with pytest.raises(UserBannedError):
            await service.join(user, group)

        await service.unban_user(owner, group, user.user_id)
        state = await service.join(user, group)

        assert state == MembershipState.MEMBER
        assert activity.actions()[-3:] == [
            ActivityAction.BANNED,
            ActivityAction.UNBANNED,
            ActivityAction.JOINED,
        ]

    async def test_owner_cannot_leave(self, service, group, owner):
        with pytest.raises(OwnerCannotLeaveError):
            await service.leave(owner, group)

    async def test_leave_retracts_request(self, service, private_group, activity):
        user = make_user()
        await service.join(user, private_group)

        await service.leave(user, private_group)

        assert await service.get_state(private_group, user.user_id) == MembershipState.NONE
        assert activity.actions()[-1] == ActivityAction.RETRACTED_REQUEST

    async def test_leave_discards_pending_invitation(self, service, group, owner, memberships):
        user = make_user()
        await service.join(user, group)
        await service.invite_moderator(owner, group, user.user_id)

        await service.leave(user, group)

        assert not await memberships.has_invitation(group.group_id, user.user_id)

    async def test_leave_when_not_member(self, service, group):
        with pytest.raises(NotAMemberError):
            await service.leave(make_user(), group)


class TestModeration:

    async def test_accept_request(self, service, private_group, owner, activity):
        user = make_user()
        await service.join(user, private_group)

        await service.accept_request(owner, private_group, user.user_id)

        assert await service.get_state(private_group, user.user_id) == MembershipState.MEMBER
        assert activity.actions()[-2:] == [ActivityAction.REQUEST_APPROVED, ActivityAction.JOINED]

    async def test_accept_without_request(self, service, private_group, owner):
        with pytest.raises(NotRequestedError):
            await service.accept_request(owner, private_group, uuid4())

    async def test_reject_request_leaves_no_row(self, service, private_group, owner, memberships):
        user = make_user()
        await service.join(user, private_group)

        await service.reject_request(owner, private_group, user.user_id)

        assert await memberships.get(private_group.group_id, user.user_id) is None

    async def test_plain_member_cannot_moderate(self, service, private_group):
        member, requester = make_user(), make_user()
        await service.memberships.set_state(private_group.group_id, member.user_id, MembershipState.MEMBER)
        await service.join(requester, private_group)

        with pytest.raises(AuthorizationError):
            await service.accept_request(member, private_group, requester.user_id)

    async def test_moderator_can_ban_member(self, service, group, owner):
        moderator, member = make_user(), make_user()
        await service.join(moderator, group)
        await service.join(member, group)
        await service.invite_moderator(owner, group, moderator.user_id)
        await service.accept_moderator_invitation(moderator, group)

        await service.ban_user(moderator, group, member.user_id)

        assert await service.get_state(group, member.user_id) == MembershipState.BANNED

    async def test_privileged_users_cannot_be_banned(self, service, group, owner):
        moderator = make_user()
        await service.join(moderator, group)
        await service.invite_moderator(owner, group, moderator.user_id)
        await service.accept_moderator_invitation(moderator, group)

        with pytest.raises(CannotBanPrivilegedError):
            await service.ban_user(owner, group, moderator.user_id)
        with pytest.raises(CannotBanPrivilegedError):
            await service.ban_user(moderator, group, owner.user_id)

    async def test_ban_twice_and_unban(self, service, group, owner):
        user = make_user()
        await service.ban_user(owner, group, user.user_id)

        with pytest.raises(AlreadyBannedError):
            await service.ban_user(owner, group, user.user_id)

        await service.unban_user(owner, group, user.user_id)
        assert await service.get_state(group, user.user_id) == MembershipState.NONE

        with pytest.raises(NotBannedError):
            await service.unban_user(owner, group, user.user_id)

    async def test_ban_unknown_user(self, service, group, owner, memberships):
        missing = uuid4()

        with pytest.raises(NotFoundError):
            await service.ban_user(owner, group, missing)
        assert await memberships.get(group.group_id, missing) is None

    async def test_remove_member(self, service, group, owner):
        user = make_user()
        await service.join(user, group)

        await service.remove_member(owner, group, user.user_id)

        assert await service.get_state(group, user.user_id) == MembershipState.NONE

    async def test_remove_member_refuses_owner_and_moderators(self, service, group, owner):
        moderator = make_user()
        await service.join(moderator, group)
        await service.invite_moderator(owner, group, moderator.user_id)
        await service.accept_moderator_invitation(moderator, group)

        with pytest.raises(AuthorizationError):
            await service.remove_member(moderator, group, owner.user_id)
        with pytest.raises(AuthorizationError):
            await service.remove_member(owner, group, moderator.user_id)


class TestModeratorRole:

    async def test_invitation_round_trip(self, service, group, owner, activity):
        user = make_user()
        await service.join(user, group)

        await service.invite_moderator(owner, group, user.user_id)
        promoted = await service.accept_moderator_invitation(user, group)

        assert promoted is True
        assert await service.is_privileged(group, user.user_id)
        assert ActivityAction.MODERATOR_ADDED in activity.actions()

    async def test_only_owner_invites(self, service, group, owner):
        moderator, member = make_user(), make_user()
        await service.join(moderator, group)
        await service.join(member, group)
        await service.invite_moderator(owner, group, moderator.user_id)
        await service.accept_moderator_invitation(moderator, group)

        with pytest.raises(AuthorizationError):
            await service.invite_moderator(moderator, group, member.user_id)

    async def test_invite_requires_plain_member(self, service, group, owner):
        with pytest.raises(AlreadyModeratorError):
            await service.invite_moderator(owner, group, owner.user_id)
        with pytest.raises(NotAMemberError):
            await service.invite_moderator(owner, group, make_user().user_id)

    async def test_invite_unknown_user(self, service, group, owner, memberships):
        missing = uuid4()

        with pytest.raises(NotFoundError):
            await service.invite_moderator(owner, group, missing)
        assert not await memberships.has_invitation(group.group_id, missing)

    async def test_duplicate_invitation(self, service, group, owner):
        user = make_user()
        await service.join(user, group)
        await service.invite_moderator(owner, group, user.user_id)

        with pytest.raises(InvitationAlreadyPendingError):
            await service.invite_moderator(owner, group, user.user_id)

    async def test_stale_invitation_is_discarded(self, service, group, owner, memberships):
        user = make_user()
        await service.join(user, group)
        await service.invite_moderator(owner, group, user.user_id)
        # Membership vanished without going through leave()
        await memberships.remove(group.group_id, user.user_id)

        promoted = await service.accept_moderator_invitation(user, group)

        assert promoted is False
        assert not await memberships.has_invitation(group.group_id, user.user_id)
        assert await service.get_state(group, user.user_id) == MembershipState.NONE

    async def test_accept_without_invitation(self, service, group):
        with pytest.raises(NoPendingInvitationError):
            await service.accept_moderator_invitation(make_user(), group)

    async def test_reject_invitation(self, service, group, owner, activity):
        user = make_user()
        await service.join(user, group)
        await service.invite_moderator(owner, group, user.user_id)

        await service.reject_moderator_invitation(user, group)

        assert await service.get_state(group, user.user_id) == MembershipState.MEMBER
        assert activity.actions()[-1] == ActivityAction.MODERATOR_DECLINED

    async def test_remove_moderator_demotes_to_member(self, service, group, owner):
        user = make_user()
        await service.join(user, group)
        await service.invite_moderator(owner, group, user.user_id)
        await service.accept_moderator_invitation(user, group)

        await service.remove_moderator(owner, group, user.user_id)

        assert await service.get_state(group, user.user_id) == MembershipState.MEMBER
        with pytest.raises(NotAModeratorError):
            await service.remove_moderator(owner, group, user.user_id)


class TestMembershipChecks:

    async def test_require_member(self, service, group, owner):
        outsider, banned = make_user(), make_user()
        await service.ban_user(owner, group, banned.user_id)

        await service.require_member(group, owner)
        with pytest.raises(AuthorizationError) as exc_info:
            await service.require_member(group, outsider)
        assert exc_info.value.error_code == "MEMBERSHIP_REQUIRED"
        with pytest.raises(UserBannedError):
            await service.require_member(group, banned)

    async def test_anonymous_viewer_has_no_state(self, service, group):
        assert await service.get_state(group, None) == MembershipState.NONE
