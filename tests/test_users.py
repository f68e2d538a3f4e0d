"""
Profile endpoints: reading and editing the caller's profile, public lookups,
user search and profile photos.
"""


class TestProfile:

    async def test_edit_profile_applies_whitelisted_fields(self, client, signup):
        account = await signup()

        response = await client.patch("/edit-users-profile", headers=account.headers, json={
            "fullName": "Grace Hopper",
            "bio": "Compilers and cobol",
            "location": {"city": "Arlington", "lat": 38.88, "lng": -77.1},
        })

        assert response.status_code == 200
        body = response.json()
        assert body["fullName"] == "Grace Hopper"
        assert body["bio"] == "Compilers and cobol"
        assert body["location"]["city"] == "Arlington"

    async def test_edit_profile_rejects_protected_keys(self, client, signup):
        account = await signup()

        response = await client.patch("/edit-users-profile", headers=account.headers, json={
            "isAdmin": True,
        })

        assert response.status_code == 400
        me = await client.get("/me", headers=account.headers)
        assert me.json()["isAdmin"] is False

    async def test_edit_profile_rejects_blank_name(self, client, signup):
        account = await signup()

        response = await client.patch("/edit-users-profile", headers=account.headers, json={
            "fullName": "   ",
        })

        assert response.status_code == 400

    async def test_interests_reference_categories(self, client, signup, make_admin):
        admin = await signup()
        await make_admin(admin)
        category = (await client.post("/category", json={"name": "Outdoors"}, headers=admin.headers)).json()
        account = await signup()

        response = await client.patch("/edit-users-profile", headers=account.headers, json={
            "interests": [category["id"]],
        })

        assert response.status_code == 200
        assert response.json()["interests"] == [category["id"]]

    async def test_profile_photo_upload_replaces_previous(self, client, signup, fake_storage):
        account = await signup()

        first = await client.post("/me/profile-photo", headers=account.headers, json={"image": "aGVsbG8="})
        second = await client.post("/me/profile-photo", headers=account.headers, json={"image": "d29ybGQ="})

        assert first.status_code == second.status_code == 200
        first_key = first.json()["profilePhoto"]["key"]
        assert second.json()["profilePhoto"]["key"] != first_key
        assert fake_storage.deleted == [first_key]


class TestPublicLookups:

    async def test_read_user_by_unique_url_hides_private_fields(self, client, signup):
        account = await signup()

        response = await client.get(f"/users/{account.user['uniqueURL']}")

        assert response.status_code == 200
        assert response.json()["id"] == account.id
        assert "email" not in response.json()

    async def test_read_unknown_user(self, client):
        response = await client.get("/users/nobody-here")

        assert response.status_code == 404
        assert response.json()["code"] == "NOT_FOUND"

    async def test_find_users_matches_name_case_insensitively(self, client, signup):
        await signup("Alan Turing")
        await signup("Alonzo Church")
        await signup("Kurt Godel")

        response = await client.get("/find-users", params={"query": "AL"})

        assert response.status_code == 200
        names = sorted(u["fullName"] for u in response.json()["users"])
        assert names == ["Alan Turing", "Alonzo Church"]
        assert response.json()["totalPages"] == 1

    async def test_find_users_treats_wildcards_literally(self, client, signup):
        await signup("Percent Person")

        response = await client.get("/find-users", params={"query": "%"})

        assert response.status_code == 200
        assert response.json()["users"] == []
