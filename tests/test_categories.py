"""
Admin-managed categories.
"""


async def test_admin_creates_and_lists_categories(client, signup, make_admin):
    admin = await signup()
    await make_admin(admin)

    for name in ("music", "Board Games", "art"):
        response = await client.post("/category", json={"name": name}, headers=admin.headers)
        assert response.status_code == 201
        assert response.json()["creatorId"] == admin.id

    listing = await client.get("/category")

    assert [c["name"] for c in listing.json()] == ["art", "Board Games", "music"]


async def test_duplicate_category(client, signup, make_admin):
    admin = await signup()
    await make_admin(admin)
    await client.post("/category", json={"name": "Photography"}, headers=admin.headers)

    response = await client.post("/category", json={"name": "Photography"}, headers=admin.headers)

    assert response.status_code == 409
    assert response.json()["code"] == "CATEGORY_EXISTS"


async def test_non_admin_cannot_manage_categories(client, signup):
    account = await signup()

    response = await client.post("/category", json={"name": "Cooking"}, headers=account.headers)

    assert response.status_code == 403


async def test_delete_category(client, signup, make_admin):
    admin = await signup()
    await make_admin(admin)
    category = (await client.post("/category", json={"name": "Chess"}, headers=admin.headers)).json()

    deleted = await client.delete(f"/category/{category['id']}", headers=admin.headers)
    missing = await client.delete(f"/category/{category['id']}", headers=admin.headers)

    assert deleted.status_code == 200
    assert deleted.json()["name"] == "Chess"
    assert missing.status_code == 404
    assert (await client.get("/category")).json() == []
