# 📄 File: app/modules/search/presentation/api/v1/search.py
# 🧭 Purpose (Layman Explanation):
# The web address for finding clubs by words, category and distance.
# 🧪 Purpose (Technical Summary):
# Public FastAPI search endpoint delegating to SearchService.
# 🔄 Connected Modules / Calls From:
# app.api.v1.router (mounted at / and /api/v1)

from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.modules.search.domain.services.search_service import SearchService
from app.modules.search.presentation.api.schemas.search_schemas import SearchResponse
from app.shared.config.settings import get_settings

search_router = APIRouter(tags=["Search"])

_settings = get_settings()


@search_router.get("/search", response_model=SearchResponse)
async def search_groups(
    search: Optional[str] = Query(None, max_length=200),
    category: Optional[str] = Query(None, max_length=60),
    page: int = Query(1, ge=1),
    limit: int = Query(_settings.DEFAULT_PAGE_SIZE, ge=1, le=_settings.MAX_PAGE_SIZE),
    lat: Optional[float] = Query(None, ge=-90, le=90),
    lng: Optional[float] = Query(None, ge=-180, le=180),
    distance: Optional[float] = Query(None, gt=0, description="Radius in miles"),
    search_service: SearchService = Depends(),
) -> SearchResponse:
    """
    Search active groups. Without ``search`` every group matches and results come back
    in the order the groups were created.
    """
    result = await search_service.search_groups(
        text=search,
        category=category,
        page=page,
        limit=limit,
        lat=lat,
        lng=lng,
        distance=distance,
    )
    return SearchResponse.from_page(result)
