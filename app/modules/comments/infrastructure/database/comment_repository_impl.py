# 📄 File: app/modules/comments/infrastructure/database/comment_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Saves comments, counts replies and removes whole conversations from the database.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of CommentRepository. Subtree deletion walks the reply
# tree breadth-first and removes every collected id in a single DELETE.
#
# 🔗 Dependencies:
# - SQLAlchemy async ORM, comments domain
#
# 🔄 Connected Modules / Calls From:
# - app.main dependency override for CommentRepository

import logging
from typing import Dict, List, Optional, Sequence, Tuple
from uuid import UUID

from fastapi import Depends
from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.comments.domain.models.comment import Comment, make_target
from app.modules.comments.domain.repositories.comment_repository import CommentRepository
from app.modules.comments.infrastructure.database.models import CommentModel
from app.shared.infrastructure.database.session import get_db_session
from app.shared.utils.helpers import ensure_utc

logger = logging.getLogger(__name__)

GROUP_TARGET = "Group"
COMMENT_TARGET = "Comment"


def model_to_comment(model: CommentModel) -> Comment:
    return Comment(
        comment_id=model.comment_id,
        content=model.content,
        author_id=model.author_id,
        target=make_target(model.target_type, model.target_id),
        group_id=model.group_id,
        created_at=ensure_utc(model.created_at),
    )


class CommentRepositoryImpl(CommentRepository):

    def __init__(self, session: AsyncSession = Depends(get_db_session)):
        self._session = session

    async def create(self, comment: Comment) -> Comment:
        model = CommentModel(
            comment_id=comment.comment_id,
            content=comment.content,
            author_id=comment.author_id,
            target_type=comment.target.kind,
            target_id=comment.target.target_id,
            group_id=comment.group_id,
            created_at=comment.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        return model_to_comment(model)

    async def get_by_id(self, comment_id: UUID) -> Optional[Comment]:
        model = await self._session.get(CommentModel, comment_id)
        return model_to_comment(model) if model else None

    async def list_for_group(
        self,
        group_id: UUID,
        offset: int,
        limit: int,
        descending: bool = True,
    ) -> Tuple[List[Comment], int]:
        return await self._page(GROUP_TARGET, group_id, offset, limit, descending)

    async def list_replies(self, comment_id: UUID, offset: int, limit: int) -> Tuple[List[Comment], int]:
        return await self._page(COMMENT_TARGET, comment_id, offset, limit, descending=False)

    async def _page(
        self,
        target_type: str,
        target_id: UUID,
        offset: int,
        limit: int,
        descending: bool,
    ) -> Tuple[List[Comment], int]:
        where = (CommentModel.target_type == target_type, CommentModel.target_id == target_id)
        total = (await self._session.execute(
            select(func.count()).select_from(CommentModel).where(*where)
        )).scalar_one()

        created = CommentModel.created_at.desc() if descending else CommentModel.created_at.asc()
        stmt = (
            select(CommentModel)
            .where(*where)
            .order_by(created, CommentModel.comment_id)
            .offset(offset)
            .limit(limit)
        )
        rows = (await self._session.execute(stmt)).scalars().all()
        return [model_to_comment(row) for row in rows], total

    async def count_replies(self, comment_ids: Sequence[UUID]) -> Dict[UUID, int]:
        ids = list(comment_ids)
        if not ids:
            return {}
        stmt = (
            select(CommentModel.target_id, func.count())
            .where(CommentModel.target_type == COMMENT_TARGET, CommentModel.target_id.in_(ids))
            .group_by(CommentModel.target_id)
        )
        counts = dict((await self._session.execute(stmt)).all())
        return {comment_id: counts.get(comment_id, 0) for comment_id in ids}

    async def delete(self, comment_id: UUID) -> bool:
        result = await self._session.execute(
            delete(CommentModel).where(CommentModel.comment_id == comment_id)
        )
        return result.rowcount > 0

    async def delete_subtree(self, comment_id: UUID) -> int:
        collected = [comment_id]
        frontier = [comment_id]
        while frontier:
            stmt = select(CommentModel.comment_id).where(
                CommentModel.target_type == COMMENT_TARGET,
                CommentModel.target_id.in_(frontier),
            )
            frontier = list((await self._session.execute(stmt)).scalars().all())
            collected.extend(frontier)

        result = await self._session.execute(
            delete(CommentModel).where(CommentModel.comment_id.in_(collected))
        )
        logger.info(f"Deleted comment thread {comment_id} ({result.rowcount} rows)")
        return result.rowcount
