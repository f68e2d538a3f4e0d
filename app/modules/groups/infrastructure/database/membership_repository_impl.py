# 📄 File: app/modules/groups/infrastructure/database/membership_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Records in the database how each person relates to each club, and keeps track of
# pending invitations to moderate.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of MembershipRepository over group_memberships and
# moderator_invitations. Reads can take a row lock (SELECT ... FOR UPDATE) on
# databases that support it; concurrent inserts of the same pair surface as 409.
#
# 🔗 Dependencies:
# - SQLAlchemy async ORM
# - groups and user_management database models
#
# 🔄 Connected Modules / Calls From:
# - app.main dependency override for MembershipRepository

import logging
from typing import Iterable, List, Optional
from uuid import UUID

from fastapi import Depends
from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.groups.domain.models.group import Membership, MembershipState
from app.modules.groups.domain.repositories.membership_repository import MembershipRepository
from app.modules.groups.infrastructure.database.models import GroupMembershipModel
from app.modules.user_management.infrastructure.database.models import ModeratorInvitationModel
from app.shared.core.exceptions import ConflictError
from app.shared.infrastructure.database.session import get_db_session
from app.shared.utils.helpers import ensure_utc, utcnow

logger = logging.getLogger(__name__)


class MembershipRepositoryImpl(MembershipRepository):
    """
    SQLAlchemy implementation of the MembershipRepository interface.
    """

    def __init__(self, session: AsyncSession = Depends(get_db_session)):
        self._session = session

    async def get_state(self, group_id: UUID, user_id: UUID, for_update: bool = False) -> MembershipState:
        row = await self._get_model(group_id, user_id, for_update=for_update)
        return MembershipState(row.state) if row else MembershipState.NONE

    async def get(self, group_id: UUID, user_id: UUID) -> Optional[Membership]:
        row = await self._get_model(group_id, user_id)
        if row is None:
            return None
        return Membership(
            group_id=row.group_id,
            user_id=row.user_id,
            state=MembershipState(row.state),
            created_at=ensure_utc(row.created_at),
            updated_at=ensure_utc(row.updated_at),
        )

    async def set_state(self, group_id: UUID, user_id: UUID, state: MembershipState) -> Membership:
        if state == MembershipState.NONE:
            raise ValueError("NONE is represented by removing the membership")

        row = await self._get_model(group_id, user_id)
        now = utcnow()
        if row is None:
            row = GroupMembershipModel(
                group_id=group_id,
                user_id=user_id,
                state=state.value,
                created_at=now,
                updated_at=now,
            )
            self._session.add(row)
        else:
            row.state = state.value
            row.updated_at = now

        try:
            await self._session.flush()
        except IntegrityError as e:
            logger.warning(f"Concurrent membership change for group {group_id}, user {user_id}")
            raise ConflictError(
                "Membership changed concurrently, please retry",
                "MEMBERSHIP_CONFLICT",
            ) from e

        return Membership(
            group_id=group_id,
            user_id=user_id,
            state=state,
            created_at=ensure_utc(row.created_at),
            updated_at=ensure_utc(row.updated_at),
        )

    async def remove(self, group_id: UUID, user_id: UUID) -> bool:
        row = await self._get_model(group_id, user_id)
        if row is None:
            return False
        await self._session.delete(row)
        await self._session.flush()
        return True

    async def list_user_ids(self, group_id: UUID, states: Iterable[MembershipState]) -> List[UUID]:
        stmt = (
            select(GroupMembershipModel.user_id)
            .where(
                GroupMembershipModel.group_id == group_id,
                GroupMembershipModel.state.in_([s.value for s in states]),
            )
            .order_by(GroupMembershipModel.created_at, GroupMembershipModel.user_id)
        )
        return list((await self._session.execute(stmt)).scalars().all())

    async def count(self, group_id: UUID, states: Iterable[MembershipState]) -> int:
        stmt = (
            select(func.count())
            .select_from(GroupMembershipModel)
            .where(
                GroupMembershipModel.group_id == group_id,
                GroupMembershipModel.state.in_([s.value for s in states]),
            )
        )
        return (await self._session.execute(stmt)).scalar_one()

    # =========================================================================
    # MODERATOR INVITATIONS
    # =========================================================================

    async def add_invitation(self, group_id: UUID, user_id: UUID) -> None:
        self._session.add(ModeratorInvitationModel(user_id=user_id, group_id=group_id, sent_at=utcnow()))
        try:
            await self._session.flush()
        except IntegrityError as e:
            raise ConflictError(
                "A moderator invitation for this group is already pending",
                "INVITATION_ALREADY_PENDING",
            ) from e

    async def has_invitation(self, group_id: UUID, user_id: UUID) -> bool:
        return await self._session.get(ModeratorInvitationModel, (user_id, group_id)) is not None

    async def remove_invitation(self, group_id: UUID, user_id: UUID) -> bool:
        result = await self._session.execute(
            delete(ModeratorInvitationModel).where(
                ModeratorInvitationModel.user_id == user_id,
                ModeratorInvitationModel.group_id == group_id,
            )
        )
        return result.rowcount > 0

    async def _get_model(
        self,
        group_id: UUID,
        user_id: UUID,
        for_update: bool = False
    ) -> Optional[GroupMembershipModel]:
        stmt = select(GroupMembershipModel).where(
            GroupMembershipModel.group_id == group_id,
            GroupMembershipModel.user_id == user_id,
        )
        if for_update:
            stmt = stmt.with_for_update()
        return (await self._session.execute(stmt)).scalar_one_or_none()
