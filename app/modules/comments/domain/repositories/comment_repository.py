# 📄 File: app/modules/comments/domain/repositories/comment_repository.py
# 🧭 Purpose (Layman Explanation):
# Describes how comments and replies are saved, listed and removed.
# 🧪 Purpose (Technical Summary):
# Abstract repository interface for Comment entities and their reply threads.
# 🔗 Dependencies:
# abc, uuid, Comment domain model
# 🔄 Connected Modules / Calls From:
# comment_service.py, comment_repository_impl.py

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence, Tuple
from uuid import UUID

from app.modules.comments.domain.models.comment import Comment


class CommentRepository(ABC):

    @abstractmethod
    async def create(self, comment: Comment) -> Comment:
        pass

    @abstractmethod
    async def get_by_id(self, comment_id: UUID) -> Optional[Comment]:
        pass

    @abstractmethod
    async def list_for_group(
        self,
        group_id: UUID,
        offset: int,
        limit: int,
        descending: bool = True,
    ) -> Tuple[List[Comment], int]:
        """Top-level comments on the group by creation time, plus the total count."""

    @abstractmethod
    async def list_replies(self, comment_id: UUID, offset: int, limit: int) -> Tuple[List[Comment], int]:
        """Direct replies, oldest first, plus the total count."""

    @abstractmethod
    async def count_replies(self, comment_ids: Sequence[UUID]) -> Dict[UUID, int]:
        """Direct reply count per comment (0 included)."""

    @abstractmethod
    async def delete(self, comment_id: UUID) -> bool:
        pass

    @abstractmethod
    async def delete_subtree(self, comment_id: UUID) -> int:
        """Delete the comment and every reply beneath it; returns rows removed."""
