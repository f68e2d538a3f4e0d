# 📄 File: app/modules/groups/infrastructure/database/group_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Saves clubs to the database and reads them back, including their topic tags.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of GroupRepository mapping GroupModel and GroupTopicModel
# rows to the Group domain model.
#
# 🔗 Dependencies:
# - SQLAlchemy async ORM
# - app.modules.groups.domain (interface and model)
#
# 🔄 Connected Modules / Calls From:
# - app.main dependency override for GroupRepository
# - search repository (shared row mapping)

import logging
from typing import Dict, List, Optional, Sequence
from uuid import UUID

from fastapi import Depends
from sqlalchemy import delete, func, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.groups.domain.models.group import Group
from app.modules.groups.domain.repositories.group_repository import GroupRepository
from app.modules.groups.infrastructure.database.models import GroupModel, GroupTopicModel
from app.shared.core.exceptions import ConflictError, NotFoundError
from app.shared.core.value_objects import ImageProvider, ImageRef, Place
from app.shared.infrastructure.database.session import get_db_session
from app.shared.utils.helpers import ensure_utc

logger = logging.getLogger(__name__)


class GroupRepositoryImpl(GroupRepository):
    """
    SQLAlchemy implementation of the GroupRepository interface.
    """

    def __init__(self, session: AsyncSession = Depends(get_db_session)):
        self._session = session

    async def create(self, group: Group) -> Group:
        group_model = GroupModel(group_id=group.group_id, created_at=group.created_at)
        apply_group(group_model, group)
        self._session.add(group_model)

        try:
            await self._session.flush()
        except IntegrityError as e:
            raise ConflictError("A group with this title already exists", "GROUP_TITLE_TAKEN") from e

        await self._replace_topics(group.group_id, group.topics)
        logger.info(f"Created group with ID: {group.group_id}")
        return model_to_group(group_model, group.topics)

    async def get_by_id(self, group_id: UUID) -> Optional[Group]:
        group_model = await self._session.get(GroupModel, group_id)
        return await self._to_domain(group_model) if group_model else None

    async def get_by_unique_url(self, unique_url: str) -> Optional[Group]:
        stmt = select(GroupModel).where(GroupModel.unique_url == unique_url)
        group_model = (await self._session.execute(stmt)).scalar_one_or_none()
        return await self._to_domain(group_model) if group_model else None

    async def get_by_title(self, title: str) -> Optional[Group]:
        stmt = select(GroupModel).where(func.lower(GroupModel.title) == title.lower())
        group_model = (await self._session.execute(stmt)).scalar_one_or_none()
        return await self._to_domain(group_model) if group_model else None

    async def update(self, group: Group) -> Group:
        group_model = await self._session.get(GroupModel, group.group_id)
        if group_model is None:
            raise NotFoundError("Group", str(group.group_id))

        apply_group(group_model, group)
        try:
            await self._replace_topics(group.group_id, group.topics)
            await self._session.flush()
        except IntegrityError as e:
            raise ConflictError("A group with this title already exists", "GROUP_TITLE_TAKEN") from e
        return model_to_group(group_model, group.topics)

    async def delete(self, group_id: UUID) -> bool:
        result = await self._session.execute(delete(GroupModel).where(GroupModel.group_id == group_id))
        return result.rowcount > 0

    async def _replace_topics(self, group_id: UUID, topics: List[str]) -> None:
        await self._session.execute(delete(GroupTopicModel).where(GroupTopicModel.group_id == group_id))
        if topics:
            await self._session.execute(
                insert(GroupTopicModel),
                [{"group_id": group_id, "topic": t, "position": i} for i, t in enumerate(topics)],
            )

    async def _to_domain(self, group_model: GroupModel) -> Group:
        topics = await load_topics(self._session, [group_model.group_id])
        return model_to_group(group_model, topics.get(group_model.group_id, []))


# =============================================================================
# MAPPING (shared with the search repository)
# =============================================================================

async def load_topics(session: AsyncSession, group_ids: Sequence[UUID]) -> Dict[UUID, List[str]]:
    if not group_ids:
        return {}
    stmt = (
        select(GroupTopicModel.group_id, GroupTopicModel.topic)
        .where(GroupTopicModel.group_id.in_(list(group_ids)))
        .order_by(GroupTopicModel.group_id, GroupTopicModel.position)
    )
    topics: Dict[UUID, List[str]] = {}
    for group_id, topic in (await session.execute(stmt)).all():
        topics.setdefault(group_id, []).append(topic)
    return topics


def model_to_group(group_model: GroupModel, topics: List[str]) -> Group:
    banner = None
    if group_model.banner_url:
        banner = ImageRef(
            provider=ImageProvider(group_model.banner_provider),
            key=group_model.banner_key,
            url=group_model.banner_url,
        )

    location = None
    if group_model.location_address or group_model.location_lat is not None or group_model.location_name:
        location = Place(
            place_id=group_model.location_place_id,
            formatted_address=group_model.location_address,
            name=group_model.location_name,
            types=group_model.location_types or [],
            lat=group_model.location_lat,
            lng=group_model.location_lng,
        )

    return Group(
        group_id=group_model.group_id,
        unique_url=group_model.unique_url,
        owner_id=group_model.owner_id,
        title=group_model.title,
        tagline=group_model.tagline,
        description=group_model.description,
        banner=banner,
        location=location,
        topics=list(topics),
        permission_required=group_model.permission_required,
        deactivated=group_model.deactivated,
        created_at=ensure_utc(group_model.created_at),
        updated_at=ensure_utc(group_model.updated_at),
    )


def apply_group(group_model: GroupModel, group: Group) -> None:
    """Copy every mutable field of the entity onto the row."""
    group_model.unique_url = group.unique_url
    group_model.owner_id = group.owner_id
    group_model.title = group.title
    group_model.tagline = group.tagline
    group_model.description = group.description
    group_model.banner_provider = group.banner.provider.value if group.banner else None
    group_model.banner_key = group.banner.key if group.banner else None
    group_model.banner_url = group.banner.url if group.banner else None

    place = group.location
    group_model.location_place_id = place.place_id if place else None
    group_model.location_address = place.formatted_address if place else None
    group_model.location_name = place.name if place else None
    group_model.location_types = list(place.types) if place else None
    group_model.location_lat = place.lat if place else None
    group_model.location_lng = place.lng if place else None

    group_model.permission_required = group.permission_required
    group_model.deactivated = group.deactivated
    group_model.updated_at = group.updated_at
