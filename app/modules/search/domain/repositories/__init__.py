from .search_repository import SearchRepository

__all__ = ["SearchRepository"]
