from .search_schemas import SearchResponse

__all__ = ["SearchResponse"]
