"""
Group discovery: the geo math on its own, then the /search endpoint.
"""

import pytest

from app.modules.search.domain.models.search import GeoArea

# Roughly 1.6 miles apart, and ~200 miles from Boston
CAMBRIDGE = {"name": "Cambridge", "lat": 42.3736, "lng": -71.1097}
BOSTON = {"name": "Boston", "lat": 42.3601, "lng": -71.0589}
NEW_YORK = {"name": "New York", "lat": 40.7128, "lng": -74.0060}


class TestGeoArea:

    def test_contains_points_inside_radius(self):
        area = GeoArea(lat=BOSTON["lat"], lng=BOSTON["lng"], distance_miles=10)

        assert area.contains(CAMBRIDGE["lat"], CAMBRIDGE["lng"])
        assert not area.contains(NEW_YORK["lat"], NEW_YORK["lng"])

    def test_bounding_box_encloses_area(self):
        area = GeoArea(lat=BOSTON["lat"], lng=BOSTON["lng"], distance_miles=50)

        min_lat, max_lat, lng_range = area.bounding_box()

        assert min_lat < BOSTON["lat"] < max_lat
        assert lng_range[0] < BOSTON["lng"] < lng_range[1]

    def test_bounding_box_wraps_antimeridian(self):
        area = GeoArea(lat=0, lng=179.9, distance_miles=100)

        _, _, (min_lng, max_lng) = area.bounding_box()

        assert min_lng > max_lng
        assert area.contains(0, -179.9)

    def test_bounding_box_near_pole_drops_longitude(self):
        area = GeoArea(lat=89.9, lng=0, distance_miles=100)

        _, max_lat, lng_range = area.bounding_box()

        assert max_lat == 90.0
        assert lng_range is None


@pytest.fixture
async def seeded_groups(signup, create_group):
    owner = await signup()
    return {
        "runners": await create_group(
            owner, title="Charles River Runners", tagline="Morning runs", location=BOSTON, topics=["Running"]
        ),
        "readers": await create_group(
            owner, title="Harvard Square Readers", description="We read and run sometimes",
            location=CAMBRIDGE, topics=["Books"],
        ),
        "chess": await create_group(owner, title="Manhattan Chess", location=NEW_YORK, topics=["Games"]),
    }


class TestSearchEndpoint:

    async def test_no_filters_returns_insertion_order(self, client, seeded_groups):
        response = await client.get("/search")

        assert response.status_code == 200
        ids = [g["id"] for g in response.json()["groups"]]
        assert ids == [seeded_groups["runners"]["id"], seeded_groups["readers"]["id"], seeded_groups["chess"]["id"]]
        assert response.json()["total"] == 3

    async def test_unfiltered_order_is_stable_across_pages(self, client, seeded_groups):
        first = await client.get("/search", params={"limit": 2})
        second = await client.get("/search", params={"limit": 2, "page": 2})

        ids = [g["id"] for g in first.json()["groups"] + second.json()["groups"]]
        assert ids == [seeded_groups["runners"]["id"], seeded_groups["readers"]["id"], seeded_groups["chess"]["id"]]

    async def test_text_matches_rank_title_first(self, client, seeded_groups):
        response = await client.get("/search", params={"search": "runners"})

        ids = [g["id"] for g in response.json()["groups"]]
        assert ids == [seeded_groups["runners"]["id"]]

        broader = await client.get("/search", params={"search": "run"})
        ids = [g["id"] for g in broader.json()["groups"]]
        assert ids == [seeded_groups["runners"]["id"], seeded_groups["readers"]["id"]]

    async def test_category_filter_is_case_insensitive(self, client, seeded_groups):
        response = await client.get("/search", params={"category": "BOOKS"})

        assert [g["id"] for g in response.json()["groups"]] == [seeded_groups["readers"]["id"]]

    async def test_geo_filter(self, client, seeded_groups):
        response = await client.get(
            "/search", params={"lat": BOSTON["lat"], "lng": BOSTON["lng"], "distance": 25}
        )

        ids = {g["id"] for g in response.json()["groups"]}
        assert ids == {seeded_groups["runners"]["id"], seeded_groups["readers"]["id"]}
        assert response.json()["total"] == 2

    async def test_geo_pagination(self, client, seeded_groups):
        response = await client.get(
            "/search", params={"lat": BOSTON["lat"], "lng": BOSTON["lng"], "distance": 25, "limit": 1, "page": 2}
        )

        assert response.json()["totalPages"] == 2
        assert [g["id"] for g in response.json()["groups"]] == [seeded_groups["readers"]["id"]]

    async def test_lat_without_lng(self, client, seeded_groups):
        response = await client.get("/search", params={"lat": 42.0})

        assert response.status_code == 400

    async def test_wildcards_match_literally(self, client, seeded_groups):
        response = await client.get("/search", params={"search": "%"})

        assert response.json()["groups"] == []
