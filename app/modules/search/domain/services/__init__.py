from .search_service import SearchPage, SearchService

__all__ = ["SearchPage", "SearchService"]
