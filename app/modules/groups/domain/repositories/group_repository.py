# 📄 File: app/modules/groups/domain/repositories/group_repository.py
# 🧭 Purpose (Layman Explanation):
# Describes how clubs are saved, found and removed, without tying the app to a database.
# 🧪 Purpose (Technical Summary):
# Abstract repository interface for the Group aggregate.
# 🔗 Dependencies:
# abc, uuid, Group domain model
# 🔄 Connected Modules / Calls From:
# group_service.py, event and comment services, group_repository_impl.py

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from app.modules.groups.domain.models.group import Group


class GroupRepository(ABC):
    """
    Abstract repository interface for Group entity operations.
    """

    @abstractmethod
    async def create(self, group: Group) -> Group:
        """
        Persist a new group.

        Raises:
            ConflictError: If the title is already taken
        """

    @abstractmethod
    async def get_by_id(self, group_id: UUID) -> Optional[Group]:
        pass

    @abstractmethod
    async def get_by_unique_url(self, unique_url: str) -> Optional[Group]:
        pass

    @abstractmethod
    async def get_by_title(self, title: str) -> Optional[Group]:
        """Case-insensitive title lookup."""

    @abstractmethod
    async def update(self, group: Group) -> Group:
        """
        Persist every mutable field including topics.

        Raises:
            NotFoundError: If the group no longer exists
            ConflictError: If the new title is already taken
        """

    @abstractmethod
    async def delete(self, group_id: UUID) -> bool:
        """Delete the group and everything that cascades from it."""
