from .search import EARTH_RADIUS_MILES, GeoArea, SearchQuery, SearchResult

__all__ = ["EARTH_RADIUS_MILES", "GeoArea", "SearchQuery", "SearchResult"]
