# 📄 File: app/modules/search/presentation/api/schemas/search_schemas.py
# 🧪 Purpose (Technical Summary):
# Response schema for group search.

from typing import List

from app.modules.groups.presentation.api.schemas.group_schemas import GroupResponse
from app.modules.search.domain.services.search_service import SearchPage
from app.shared.core.schemas import CamelModel


class SearchResponse(CamelModel):
    groups: List[GroupResponse]
    page: int
    total_pages: int
    total: int

    @classmethod
    def from_page(cls, page: SearchPage) -> "SearchResponse":
        return cls(
            groups=[GroupResponse.from_domain(g) for g in page.groups],
            page=page.page,
            total_pages=page.total_pages,
            total=page.total,
        )
