# 📄 File: app/modules/groups/domain/repositories/activity_log_repository.py
# 🧭 Purpose (Layman Explanation):
# Describes how entries are added to a group's activity diary and how we look up when
# something last happened.
# 🧪 Purpose (Technical Summary):
# Append-only repository interface for ActivityLog entries.
# 🔗 Dependencies:
# abc, uuid, ActivityLog model
# 🔄 Connected Modules / Calls From:
# membership_service.py, comment_service.py, group_service.py

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Dict, List, Sequence
from uuid import UUID

from app.modules.groups.domain.models.activity import ActivityAction, ActivityLog


class ActivityLogRepository(ABC):
    """Entries are only ever appended; there is no update or delete."""

    @abstractmethod
    async def append(self, entry: ActivityLog) -> ActivityLog:
        pass

    @abstractmethod
    async def latest_timestamps(
        self,
        group_id: UUID,
        user_ids: Sequence[UUID],
        action: ActivityAction,
    ) -> Dict[UUID, datetime]:
        """Most recent ``action`` timestamp per user; users without one are absent."""

    @abstractmethod
    async def list_for_group(self, group_id: UUID, limit: int = 50) -> List[ActivityLog]:
        """Newest first."""
