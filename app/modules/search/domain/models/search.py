# 📄 File: app/modules/search/domain/models/search.py
# 🧭 Purpose (Layman Explanation):
# What someone is looking for when they search for clubs: words, a category, and
# optionally a place and how far from it they are willing to go.
# 🧪 Purpose (Technical Summary):
# Search query and geo area value objects, plus the spherical-cap math used to decide
# whether a group lies within ``distance`` miles of a point.
# 🔗 Dependencies:
# pydantic, math
# 🔄 Connected Modules / Calls From:
# search_service.py, search_repository_impl.py

import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

from app.modules.groups.domain.models.group import Group

EARTH_RADIUS_MILES = 3963.2


class GeoArea(BaseModel):
    """Spherical cap of ``distance_miles`` around (lat, lng)."""
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)
    distance_miles: float = Field(..., gt=0)

    @property
    def radius_radians(self) -> float:
        return self.distance_miles / EARTH_RADIUS_MILES

    def bounding_box(self) -> Tuple[float, float, Optional[Tuple[float, float]]]:
        """
        Coarse prefilter for SQL.

        Returns:
            (min_lat, max_lat, lng_range). ``lng_range`` is None when the cap touches
            a pole; ``min_lng`` can exceed ``max_lng`` when it crosses the antimeridian.
        """
        radius = self.radius_radians
        lat = math.radians(self.lat)
        min_lat = math.degrees(lat - radius)
        max_lat = math.degrees(lat + radius)
        if min_lat <= -90 or max_lat >= 90:
            return max(min_lat, -90.0), min(max_lat, 90.0), None

        delta_lng = math.degrees(math.asin(min(math.sin(radius) / math.cos(lat), 1.0)))
        min_lng = self.lng - delta_lng
        max_lng = self.lng + delta_lng
        if min_lng < -180:
            min_lng += 360
        if max_lng > 180:
            max_lng -= 360
        return min_lat, max_lat, (min_lng, max_lng)

    def contains(self, lat: float, lng: float) -> bool:
        """Exact great-circle check (haversine)."""
        phi1, phi2 = math.radians(self.lat), math.radians(lat)
        d_phi = phi2 - phi1
        d_lambda = math.radians(lng - self.lng)
        a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
        angle = 2 * math.asin(min(1.0, math.sqrt(a)))
        return angle <= self.radius_radians


class SearchQuery(BaseModel):
    text: Optional[str] = None
    category: Optional[str] = None
    page: int = Field(1, ge=1)
    limit: int = Field(10, ge=1)
    area: Optional[GeoArea] = None

    @property
    def has_text(self) -> bool:
        return bool(self.text and self.text.strip())


@dataclass
class SearchResult:
    groups: List[Group]
    total: int
