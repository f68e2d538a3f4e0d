# 📄 File: app/modules/search/infrastructure/database/search_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Looks through the clubs in the database for ones matching the search words, the
# chosen category and, when given, a place and distance.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of SearchRepository. On PostgreSQL, text matching uses
# to_tsvector/plainto_tsquery ranked by ts_rank; other dialects score case-insensitive
# substring hits per field. The geo filter prefilters a bounding box in SQL and applies
# the exact great-circle check in Python, so geo pages are sliced in Python.
#
# 🔗 Dependencies:
# - SQLAlchemy async ORM, groups database models and row mapping
#
# 🔄 Connected Modules / Calls From:
# - app.main dependency override for SearchRepository

from typing import List, Optional, Tuple

from fastapi import Depends
from sqlalchemy import and_, case, exists, func, literal, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

from app.modules.groups.infrastructure.database.group_repository_impl import load_topics, model_to_group
from app.modules.groups.infrastructure.database.models import GroupModel, GroupTopicModel
from app.modules.search.domain.models.search import GeoArea, SearchQuery, SearchResult
from app.modules.search.domain.repositories.search_repository import SearchRepository
from app.shared.infrastructure.database.session import get_db_session
from app.shared.utils.helpers import escape_like, page_window

TEXT_CONFIG = "english"

# Substring score weight per field, for dialects without full-text search
FIELD_WEIGHTS = (
    (GroupModel.title, 4),
    (GroupModel.tagline, 2),
    (GroupModel.description, 1),
    (GroupModel.location_name, 1),
    (GroupModel.location_address, 1),
)


class SearchRepositoryImpl(SearchRepository):

    def __init__(self, session: AsyncSession = Depends(get_db_session)):
        self._session = session

    @property
    def _dialect(self) -> str:
        return self._session.get_bind().dialect.name

    async def search_groups(self, query: SearchQuery) -> SearchResult:
        conditions: List[ColumnElement] = [GroupModel.deactivated.is_(False)]
        relevance: Optional[ColumnElement] = None

        if query.has_text:
            match, relevance = self._text_match(query.text.strip())
            conditions.append(match)
        if query.category:
            conditions.append(_has_topic(query.category))
        if query.area:
            conditions.append(_bounding_box(query.area))

        stmt = select(GroupModel).where(*conditions)
        ordering = [GroupModel.created_at.asc(), GroupModel.group_id]
        if relevance is not None:
            ordering.insert(0, relevance.desc())
        stmt = stmt.order_by(*ordering)

        if query.area:
            rows, total = await self._geo_page(stmt, query)
        else:
            rows, total = await self._sql_page(stmt, query)

        topics = await load_topics(self._session, [row.group_id for row in rows])
        groups = [model_to_group(row, topics.get(row.group_id, [])) for row in rows]
        return SearchResult(groups=groups, total=total)

    def _text_match(self, text: str) -> Tuple[ColumnElement, ColumnElement]:
        if self._dialect == "postgresql":
            document = func.concat_ws(
                " ",
                GroupModel.title,
                GroupModel.tagline,
                GroupModel.description,
                GroupModel.location_name,
                GroupModel.location_address,
            )
            vector = func.to_tsvector(TEXT_CONFIG, document)
            ts_query = func.plainto_tsquery(TEXT_CONFIG, text)
            return vector.op("@@")(ts_query), func.ts_rank(vector, ts_query)

        score: ColumnElement = literal(0)
        for term in text.split():
            pattern = f"%{escape_like(term.lower())}%"
            for column, weight in FIELD_WEIGHTS:
                score = score + case((func.lower(column).like(pattern, escape="\\"), weight), else_=0)
        return score > 0, score

    async def _sql_page(self, stmt, query: SearchQuery) -> Tuple[list, int]:
        total = (await self._session.execute(
            select(func.count()).select_from(stmt.order_by(None).subquery())
        )).scalar_one()
        offset, limit = page_window(query.page, query.limit)
        rows = (await self._session.execute(stmt.offset(offset).limit(limit))).scalars().all()
        return list(rows), total

    async def _geo_page(self, stmt, query: SearchQuery) -> Tuple[list, int]:
        area = query.area
        candidates = (await self._session.execute(stmt)).scalars().all()
        matched = [row for row in candidates if area.contains(row.location_lat, row.location_lng)]
        offset, limit = page_window(query.page, query.limit)
        return matched[offset:offset + limit], len(matched)


def _has_topic(category: str) -> ColumnElement:
    return exists().where(
        GroupTopicModel.group_id == GroupModel.group_id,
        func.lower(GroupTopicModel.topic) == category.lower(),
    )


def _bounding_box(area: GeoArea) -> ColumnElement:
    min_lat, max_lat, lng_range = area.bounding_box()
    conditions = [
        GroupModel.location_lat.is_not(None),
        GroupModel.location_lng.is_not(None),
        GroupModel.location_lat.between(min_lat, max_lat),
    ]
    if lng_range is not None:
        min_lng, max_lng = lng_range
        if min_lng <= max_lng:
            conditions.append(GroupModel.location_lng.between(min_lng, max_lng))
        else:
            conditions.append(or_(GroupModel.location_lng >= min_lng, GroupModel.location_lng <= max_lng))
    return and_(*conditions)
