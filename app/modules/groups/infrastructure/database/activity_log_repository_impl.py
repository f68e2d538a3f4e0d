# 📄 File: app/modules/groups/infrastructure/database/activity_log_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Writes entries into each club's activity diary and looks up when things last happened.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of the append-only ActivityLogRepository.
#
# 🔗 Dependencies:
# - SQLAlchemy async ORM, groups database models
#
# 🔄 Connected Modules / Calls From:
# - app.main dependency override for ActivityLogRepository

from datetime import datetime
from typing import Dict, List, Sequence
from uuid import UUID

from fastapi import Depends
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.groups.domain.models.activity import ActivityAction, ActivityLog
from app.modules.groups.domain.repositories.activity_log_repository import ActivityLogRepository
from app.modules.groups.infrastructure.database.models import ActivityLogModel
from app.shared.infrastructure.database.session import get_db_session
from app.shared.utils.helpers import ensure_utc


class ActivityLogRepositoryImpl(ActivityLogRepository):

    def __init__(self, session: AsyncSession = Depends(get_db_session)):
        self._session = session

    async def append(self, entry: ActivityLog) -> ActivityLog:
        self._session.add(ActivityLogModel(
            log_id=entry.log_id,
            group_id=entry.group_id,
            user_id=entry.user_id,
            action=entry.action.value,
            comment_id=entry.comment_id,
            event_id=entry.event_id,
            timestamp=entry.timestamp,
        ))
        await self._session.flush()
        return entry

    async def latest_timestamps(
        self,
        group_id: UUID,
        user_ids: Sequence[UUID],
        action: ActivityAction,
    ) -> Dict[UUID, datetime]:
        if not user_ids:
            return {}
        stmt = (
            select(ActivityLogModel.user_id, func.max(ActivityLogModel.timestamp))
            .where(
                ActivityLogModel.group_id == group_id,
                ActivityLogModel.action == action.value,
                ActivityLogModel.user_id.in_(list(user_ids)),
            )
            .group_by(ActivityLogModel.user_id)
        )
        return {user_id: ensure_utc(ts) for user_id, ts in (await self._session.execute(stmt)).all()}

    async def list_for_group(self, group_id: UUID, limit: int = 50) -> List[ActivityLog]:
        stmt = (
            select(ActivityLogModel)
            .where(ActivityLogModel.group_id == group_id)
            .order_by(ActivityLogModel.timestamp.desc(), ActivityLogModel.log_id)
            .limit(limit)
        )
        rows = (await self._session.execute(stmt)).scalars().all()
        return [
            ActivityLog(
                log_id=row.log_id,
                group_id=row.group_id,
                user_id=row.user_id,
                action=ActivityAction(row.action),
                comment_id=row.comment_id,
                event_id=row.event_id,
                timestamp=ensure_utc(row.timestamp),
            )
            for row in rows
        ]
