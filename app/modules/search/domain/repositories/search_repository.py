# 📄 File: app/modules/search/domain/repositories/search_repository.py
# 🧪 Purpose (Technical Summary):
# Abstract repository interface for group search.
# 🔄 Connected Modules / Calls From:
# search_service.py, search_repository_impl.py

from abc import ABC, abstractmethod

from app.modules.search.domain.models.search import SearchQuery, SearchResult


class SearchRepository(ABC):

    @abstractmethod
    async def search_groups(self, query: SearchQuery) -> SearchResult:
        """
        Active groups matching the query, one page of them, plus the total match count.

        Ordering: relevance descending (when there is text), then created_at ascending, then id.
        """
