# 📄 File: app/modules/groups/domain/repositories/membership_repository.py
# 🧭 Purpose (Layman Explanation):
# Describes how we record who has asked to join a club, who is in it, who moderates it
# and who is banned, plus pending invitations to become a moderator.
# 🧪 Purpose (Technical Summary):
# Abstract repository for the (group, user) -> MembershipState relation and the
# moderator invitation records held by users.
# 🔗 Dependencies:
# abc, uuid, groups domain models
# 🔄 Connected Modules / Calls From:
# membership_service.py, group_service.py, comment and event services,
# membership_repository_impl.py

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional
from uuid import UUID

from app.modules.groups.domain.models.group import Membership, MembershipState


class MembershipRepository(ABC):
    """
    Abstract repository interface for group memberships.

    A user has at most one row per group, so the states are mutually
    exclusive by construction. A missing row reads as MembershipState.NONE.
    """

    @abstractmethod
    async def get_state(self, group_id: UUID, user_id: UUID, for_update: bool = False) -> MembershipState:
        """
        Current state of the pair.

        Args:
            for_update: Lock the row for the rest of the transaction where the
                database supports it
        """

    @abstractmethod
    async def get(self, group_id: UUID, user_id: UUID) -> Optional[Membership]:
        pass

    @abstractmethod
    async def set_state(self, group_id: UUID, user_id: UUID, state: MembershipState) -> Membership:
        """
        Insert or replace the pair's row.

        Raises:
            ConflictError: If a concurrent request changed the same pair
        """

    @abstractmethod
    async def remove(self, group_id: UUID, user_id: UUID) -> bool:
        """Delete the pair's row (back to NONE)."""

    @abstractmethod
    async def list_user_ids(self, group_id: UUID, states: Iterable[MembershipState]) -> List[UUID]:
        """User ids in any of ``states``, oldest row first."""

    @abstractmethod
    async def count(self, group_id: UUID, states: Iterable[MembershipState]) -> int:
        pass

    # =========================================================================
    # MODERATOR INVITATIONS
    # =========================================================================

    @abstractmethod
    async def add_invitation(self, group_id: UUID, user_id: UUID) -> None:
        pass

    @abstractmethod
    async def has_invitation(self, group_id: UUID, user_id: UUID) -> bool:
        pass

    @abstractmethod
    async def remove_invitation(self, group_id: UUID, user_id: UUID) -> bool:
        pass
