# 📄 File: app/modules/search/domain/services/search_service.py
# 🧭 Purpose (Layman Explanation):
# Turns what someone typed in the search box into a search for clubs and works out
# how many result pages there are.
# 🧪 Purpose (Technical Summary):
# Domain service validating search parameters (lat/lng must come together) and
# delegating to SearchRepository.
# 🔗 Dependencies:
# SearchRepository, settings
# 🔄 Connected Modules / Calls From:
# search API endpoint

from dataclasses import dataclass
from typing import List, Optional

from fastapi import Depends

from app.modules.groups.domain.models.group import Group
from app.modules.search.domain.models.search import GeoArea, SearchQuery
from app.modules.search.domain.repositories.search_repository import SearchRepository
from app.shared.config.settings import Settings, get_settings
from app.shared.core.exceptions import ValidationError
from app.shared.utils.helpers import total_pages
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class SearchPage:
    groups: List[Group]
    page: int
    total_pages: int
    total: int


class SearchService:

    def __init__(
        self,
        search_repository: SearchRepository = Depends(),
        settings: Settings = Depends(get_settings),
    ):
        self.search_repository = search_repository
        self.settings = settings

    async def search_groups(
        self,
        text: Optional[str] = None,
        category: Optional[str] = None,
        page: int = 1,
        limit: Optional[int] = None,
        lat: Optional[float] = None,
        lng: Optional[float] = None,
        distance: Optional[float] = None,
    ) -> SearchPage:
        """
        Raises:
            ValidationError: If only one of lat/lng is given
        """
        if (lat is None) != (lng is None):
            raise ValidationError("lat and lng must be provided together", field="lat")

        area = None
        if lat is not None:
            area = GeoArea(
                lat=lat,
                lng=lng,
                distance_miles=distance or self.settings.DEFAULT_SEARCH_DISTANCE_MILES,
            )

        query = SearchQuery(
            text=text.strip() if text else None,
            category=category.strip() if category else None,
            page=page,
            limit=limit or self.settings.DEFAULT_PAGE_SIZE,
            area=area,
        )
        result = await self.search_repository.search_groups(query)
        logger.debug(
            "Group search",
            extra={"text": query.text, "category": query.category, "geo": area is not None, "total": result.total},
        )
        return SearchPage(
            groups=result.groups,
            page=query.page,
            total_pages=total_pages(result.total, query.limit),
            total=result.total,
        )
