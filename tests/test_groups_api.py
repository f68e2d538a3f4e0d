"""
Group endpoints over HTTP: lifecycle, listings, self-service membership and
moderation.
"""


class TestGroupLifecycle:

    async def test_create_group_makes_owner_a_member(self, client, signup, create_group):
        owner = await signup()

        group = await create_group(owner, title="Night Runners", topics=["Running", "running", " Fitness "])

        assert group["ownerId"] == owner.id
        assert group["uniqueURL"].startswith("night-runners")
        assert group["isPrivate"] is False
        detail = await client.get(f"/groups/{group['uniqueURL']}", headers=owner.headers)
        assert detail.json()["memberCount"] == 1
        assert detail.json()["membershipState"] == "member"
        assert detail.json()["buttonAction"] == "Leave group"

    async def test_legacy_creategroup_path(self, client, signup):
        owner = await signup()

        response = await client.post("/creategroup", json={"title": "Old Path Club"}, headers=owner.headers)

        assert response.status_code == 201

    async def test_duplicate_title_is_rejected(self, client, signup, create_group):
        owner = await signup()
        await create_group(owner, title="Book Club")

        response = await client.post("/group", json={"title": "Book Club"}, headers=owner.headers)

        assert response.status_code == 409

    async def test_anonymous_viewer_sees_join_button(self, client, signup, create_group):
        owner = await signup()
        group = await create_group(owner)

        detail = await client.get(f"/groups/{group['id']}")

        assert detail.status_code == 200
        assert detail.json()["buttonAction"] == "Join group"

    async def test_unknown_group(self, client):
        response = await client.get("/groups/does-not-exist")

        assert response.status_code == 404

    async def test_edit_group_whitelist(self, client, signup, create_group):
        owner = await signup()
        group = await create_group(owner)

        ok = await client.patch(
            f"/group/{group['id']}/edit",
            json={"tagline": "Up before dawn", "isPrivate": True},
            headers=owner.headers,
        )
        forbidden_key = await client.patch(
            f"/group/{group['id']}/edit",
            json={"ownerId": owner.id},
            headers=owner.headers,
        )

        assert ok.status_code == 200
        assert ok.json()["tagline"] == "Up before dawn"
        assert ok.json()["isPrivate"] is True
        assert forbidden_key.status_code == 400

    async def test_member_cannot_edit(self, client, signup, create_group, join_group):
        owner, member = await signup(), await signup()
        group = await create_group(owner)
        await join_group(member, group)

        response = await client.patch(f"/group/{group['id']}/edit", json={"tagline": "x"}, headers=member.headers)

        assert response.status_code == 403

    async def test_change_banner(self, client, signup, create_group, fake_storage):
        owner = await signup()
        group = await create_group(owner, banner="aGVsbG8=")
        old_key = group["banner"]["key"]

        response = await client.patch(
            f"/group/{group['id']}/banner",
            json={"image": "d29ybGQ=", "fileName": "new.png"},
            headers=owner.headers,
        )

        assert response.status_code == 200
        assert response.json()["banner"]["key"] != old_key
        assert old_key in fake_storage.deleted

    async def test_only_owner_deletes_and_only_when_alone(self, client, signup, create_group, join_group):
        owner, member = await signup(), await signup()
        group = await create_group(owner)
        await join_group(member, group)

        denied = await client.delete(f"/group/{group['id']}", headers=member.headers)
        not_empty = await client.delete(f"/group/{group['id']}", headers=owner.headers)
        await client.post(f"/group/{group['id']}/leave", headers=member.headers)
        deleted = await client.delete(f"/group/{group['id']}", headers=owner.headers)

        assert denied.status_code == 403
        assert not_empty.status_code == 409
        assert not_empty.json()["code"] == "GROUP_NOT_EMPTY"
        assert deleted.status_code == 200
        assert (await client.get(f"/groups/{group['id']}")).status_code == 404


class TestSelfServiceMembership:

    async def test_join_and_leave_open_group(self, client, signup, create_group, join_group):
        owner, member = await signup(), await signup()
        group = await create_group(owner)

        joined = await join_group(member, group)
        assert joined["membershipState"] == "member"

        members = await client.get(f"/groups/{group['id']}/members")
        roles = {m["id"]: m["role"] for m in members.json()["members"]}
        assert roles[owner.id] == "owner"
        assert roles[member.id] == "member"

        left = await client.post(f"/group/{group['id']}/leave", headers=member.headers)
        assert left.status_code == 200

    async def test_join_private_group_sends_request(self, client, signup, create_group, join_group):
        owner, requester = await signup(), await signup()
        group = await create_group(owner, isPrivate=True)

        body = await join_group(requester, group)

        assert body["membershipState"] == "requested"
        requests = await client.get(f"/groups/{group['id']}/requests", headers=owner.headers)
        assert [r["id"] for r in requests.json()] == [requester.id]
        assert requests.json()[0]["requestedAt"] is not None

    async def test_requests_list_is_privileged(self, client, signup, create_group, join_group):
        owner, member = await signup(), await signup()
        group = await create_group(owner)
        await join_group(member, group)

        response = await client.get(f"/groups/{group['id']}/requests", headers=member.headers)

        assert response.status_code == 403

    async def test_joining_twice_conflicts(self, client, signup, create_group, join_group):
        owner, member = await signup(), await signup()
        group = await create_group(owner)
        await join_group(member, group)

        response = await client.post(f"/group/{group['id']}/join", headers=member.headers)

        assert response.status_code == 409
        assert response.json()["code"] == "ALREADY_MEMBER"

    async def test_owner_cannot_leave(self, client, signup, create_group):
        owner = await signup()
        group = await create_group(owner)

        response = await client.post(f"/group/{group['id']}/leave", headers=owner.headers)

        assert response.status_code == 409
        assert response.json()["code"] == "OWNER_CANNOT_LEAVE"


class TestModeration:

    async def test_moderation_requires_confirmed_email(self, client, signup, create_group, join_group):
        owner, requester = await signup(), await signup()
        group = await create_group(owner, isPrivate=True)
        await join_group(requester, group)

        response = await client.post(
            f"/group/{group['id']}/accept-request/{requester.id}", headers=owner.headers
        )

        assert response.status_code == 403

    async def test_accept_request(self, client, signup, confirm_email, create_group, join_group):
        owner, requester = await signup(), await signup()
        await confirm_email(owner)
        group = await create_group(owner, isPrivate=True)
        await join_group(requester, group)

        response = await client.post(
            f"/group/{group['id']}/accept-request/{requester.id}", headers=owner.headers
        )

        assert response.status_code == 200
        detail = await client.get(f"/groups/{group['id']}", headers=requester.headers)
        assert detail.json()["membershipState"] == "member"

        activity = await client.get(f"/groups/{group['id']}/activity", headers=owner.headers)
        actions = [entry["action"] for entry in activity.json()]
        assert "request_approved" in actions

    async def test_ban_and_unban(self, client, signup, confirm_email, create_group, join_group):
        owner, member = await signup(), await signup()
        await confirm_email(owner)
        group = await create_group(owner)
        await join_group(member, group)

        banned = await client.post(f"/group/{group['id']}/ban-user/{member.id}", headers=owner.headers)
        assert banned.status_code == 200

        banned_list = await client.get(f"/groups/{group['id']}/banned", headers=owner.headers)
        assert [u["id"] for u in banned_list.json()] == [member.id]

        rejoin = await client.post(f"/group/{group['id']}/join", headers=member.headers)
        assert rejoin.status_code == 403
        assert rejoin.json()["code"] == "USER_BANNED"

        unbanned = await client.post(f"/group/{group['id']}/unban-user/{member.id}", headers=owner.headers)
        assert unbanned.status_code == 200
        detail = await client.get(f"/groups/{group['id']}", headers=member.headers)
        assert detail.json()["membershipState"] == "none"

        rejoined = await client.post(f"/group/{group['id']}/join", headers=member.headers)
        assert rejoined.status_code == 200
        assert rejoined.json()["membershipState"] == "member"

    async def test_moderating_unknown_user(self, client, signup, confirm_email, create_group):
        owner = await signup()
        await confirm_email(owner)
        group = await create_group(owner)
        missing = "00000000-0000-0000-0000-000000000000"

        banned = await client.post(f"/group/{group['id']}/ban-user/{missing}", headers=owner.headers)
        invited = await client.post(f"/group/{group['id']}/add-moderator/{missing}", headers=owner.headers)

        assert banned.status_code == 404
        assert banned.json()["code"] == "NOT_FOUND"
        assert invited.status_code == 404
        banned_list = await client.get(f"/groups/{group['id']}/banned", headers=owner.headers)
        assert banned_list.json() == []

    async def test_moderator_invitation_flow(self, client, signup, confirm_email, create_group, join_group):
        owner, member = await signup(), await signup()
        await confirm_email(owner)
        group = await create_group(owner)
        await join_group(member, group)

        invited = await client.post(f"/group/{group['id']}/add-moderator/{member.id}", headers=owner.headers)
        assert invited.status_code == 200

        pending = await client.get("/me/moderator-invitations", headers=member.headers)
        assert [inv["groupId"] for inv in pending.json()] == [group["id"]]

        accepted = await client.post(
            f"/group/{group['id']}/accept-moderator-invitation", headers=member.headers
        )
        assert accepted.status_code == 200

        members = await client.get(f"/groups/{group['id']}/members")
        roles = {m["id"]: m["role"] for m in members.json()["members"]}
        assert roles[member.id] == "moderator"

    async def test_removal_discards_pending_invitation(
        self, client, signup, confirm_email, create_group, join_group
    ):
        owner, member = await signup(), await signup()
        await confirm_email(owner)
        group = await create_group(owner)
        await join_group(member, group)
        await client.post(f"/group/{group['id']}/add-moderator/{member.id}", headers=owner.headers)
        removed = await client.post(f"/group/{group['id']}/remove-member/{member.id}", headers=owner.headers)
        await join_group(member, group)

        accepted = await client.post(f"/group/{group['id']}/accept-moderator-invitation", headers=member.headers)

        assert removed.status_code == 200
        assert accepted.status_code == 409
        assert accepted.json()["code"] == "NO_PENDING_INVITATION"
