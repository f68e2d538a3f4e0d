"""
Health probes, the welcome route and request id propagation.
"""


async def test_liveness(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


async def test_readiness_checks_database(client):
    response = await client.get("/health/ready")

    assert response.status_code == 200
    assert response.json()["components"]["database"]["status"] == "healthy"


async def test_welcome(client):
    response = await client.get("/")

    assert response.status_code == 200
    assert response.json()["health_check"] == "/health"


async def test_request_id_is_generated(client):
    response = await client.get("/category")

    assert response.headers["X-Request-ID"]


async def test_request_id_is_propagated(client):
    response = await client.get("/category", headers={"X-Request-ID": "trace-123"})

    assert response.headers["X-Request-ID"] == "trace-123"


async def test_unknown_route_uses_error_body(client):
    response = await client.get("/no/such/route")

    assert response.status_code == 404
    assert "error" in response.json()
