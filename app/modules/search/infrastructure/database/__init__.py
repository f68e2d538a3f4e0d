from .search_repository_impl import SearchRepositoryImpl

__all__ = ["SearchRepositoryImpl"]
