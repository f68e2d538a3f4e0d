"""
Comment threads: posting, replying, listing and the two delete paths.
"""

import pytest


@pytest.fixture
def post_comment(client):
    async def _post(account, group, content="Hello club"):
        response = await client.post(
            f"/group/{group['id']}/comment", json={"content": content}, headers=account.headers
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _post


@pytest.fixture
def post_reply(client):
    async def _reply(account, comment, content="Agreed"):
        response = await client.post(
            f"/comment/{comment['id']}/reply", json={"content": content}, headers=account.headers
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _reply


class TestPosting:

    async def test_member_comments_on_group(self, client, signup, create_group, post_comment):
        owner = await signup()
        group = await create_group(owner)

        comment = await post_comment(owner, group, "  First!  ")

        assert comment["content"] == "First!"
        assert comment["targetType"] == "Group"
        assert comment["targetId"] == group["id"]
        assert comment["groupId"] == group["id"]
        assert comment["author"]["id"] == owner.id

    async def test_non_member_cannot_comment(self, client, signup, create_group):
        owner, outsider = await signup(), await signup()
        group = await create_group(owner)

        response = await client.post(
            f"/group/{group['id']}/comment", json={"content": "hi"}, headers=outsider.headers
        )

        assert response.status_code == 403
        assert response.json()["code"] == "MEMBERSHIP_REQUIRED"

    async def test_blank_comment_is_rejected(self, client, signup, create_group):
        owner = await signup()
        group = await create_group(owner)

        response = await client.post(
            f"/group/{group['id']}/comment", json={"content": "   "}, headers=owner.headers
        )

        assert response.status_code == 400

    async def test_comment_is_logged_as_activity(self, client, signup, create_group, post_comment):
        owner = await signup()
        group = await create_group(owner)

        comment = await post_comment(owner, group)

        activity = await client.get(f"/groups/{group['id']}/activity", headers=owner.headers)
        logged = [e for e in activity.json() if e["action"] == "commented"]
        assert logged[0]["commentId"] == comment["id"]

    async def test_nested_replies_stay_in_group(
        self, client, signup, create_group, join_group, post_comment, post_reply
    ):
        owner, member = await signup(), await signup()
        group = await create_group(owner)
        await join_group(member, group)
        root = await post_comment(owner, group)

        reply = await post_reply(member, root)
        nested = await post_reply(owner, reply)

        assert reply["targetType"] == "Comment"
        assert reply["targetId"] == root["id"]
        assert nested["groupId"] == group["id"]

    async def test_reply_requires_membership(self, client, signup, create_group, post_comment):
        owner, outsider = await signup(), await signup()
        group = await create_group(owner)
        root = await post_comment(owner, group)

        response = await client.post(
            f"/comment/{root['id']}/reply", json={"content": "let me in"}, headers=outsider.headers
        )

        assert response.status_code == 403

    async def test_reply_to_missing_comment(self, client, signup):
        account = await signup()

        response = await client.post(
            "/comment/00000000-0000-0000-0000-000000000000/reply",
            json={"content": "anyone?"},
            headers=account.headers,
        )

        assert response.status_code == 404


class TestListing:

    async def test_group_comments_paginate_newest_first(
        self, client, signup, create_group, post_comment, post_reply
    ):
        owner = await signup()
        group = await create_group(owner)
        first = await post_comment(owner, group, "one")
        await post_comment(owner, group, "two")
        third = await post_comment(owner, group, "three")
        await post_reply(owner, first)

        page_one = await client.get(f"/group/{group['id']}/comments", params={"limit": 2})
        page_two = await client.get(f"/group/{group['id']}/comments", params={"limit": 2, "page": 2})

        assert page_one.json()["total"] == 3
        assert page_one.json()["totalPages"] == 2
        assert page_one.json()["comments"][0]["id"] == third["id"]
        assert [c["id"] for c in page_two.json()["comments"]] == [first["id"]]
        assert page_two.json()["comments"][0]["replyCount"] == 1

    async def test_ascending_order(self, client, signup, create_group, post_comment):
        owner = await signup()
        group = await create_group(owner)
        first = await post_comment(owner, group, "one")
        await post_comment(owner, group, "two")

        response = await client.get(f"/group/{group['id']}/comments", params={"order": "asc"})

        assert response.json()["comments"][0]["id"] == first["id"]

    async def test_unsupported_sort_field(self, client, signup, create_group):
        owner = await signup()
        group = await create_group(owner)

        response = await client.get(f"/group/{group['id']}/comments", params={"sortBy": "content"})

        assert response.status_code == 400

    async def test_unsupported_order(self, client, signup, create_group):
        owner = await signup()
        group = await create_group(owner)

        response = await client.get(f"/group/{group['id']}/comments", params={"order": "sideways"})

        assert response.status_code == 400
        assert response.json()["details"]["field"] == "order"

    async def test_replies_listed_oldest_first(self, client, signup, create_group, post_comment, post_reply):
        owner = await signup()
        group = await create_group(owner)
        root = await post_comment(owner, group)
        early = await post_reply(owner, root, "early")
        late = await post_reply(owner, root, "late")

        response = await client.get(f"/comment/{root['id']}/replies")

        assert [c["id"] for c in response.json()["comments"]] == [early["id"], late["id"]]


class TestDeleting:

    async def test_author_deletes_leaf_comment(self, client, signup, create_group, post_comment):
        owner = await signup()
        group = await create_group(owner)
        comment = await post_comment(owner, group)

        response = await client.delete(f"/comment/{comment['id']}", headers=owner.headers)

        assert response.status_code == 200
        listing = await client.get(f"/group/{group['id']}/comments")
        assert listing.json()["total"] == 0

    async def test_author_cannot_delete_comment_with_replies(
        self, client, signup, create_group, post_comment, post_reply
    ):
        owner = await signup()
        group = await create_group(owner)
        comment = await post_comment(owner, group)
        reply = await post_reply(owner, comment)

        response = await client.delete(f"/comment/{comment['id']}", headers=owner.headers)

        assert response.status_code == 409
        assert response.json()["code"] == "COMMENT_HAS_REPLIES"

        reply_deleted = await client.delete(f"/comment/{reply['id']}", headers=owner.headers)
        parent_deleted = await client.delete(f"/comment/{comment['id']}", headers=owner.headers)

        assert reply_deleted.status_code == 200
        assert parent_deleted.status_code == 200
        listing = await client.get(f"/group/{group['id']}/comments")
        assert listing.json()["total"] == 0
        assert (await client.get(f"/comment/{comment['id']}/replies")).status_code == 404

    async def test_only_author_deletes(self, client, signup, create_group, join_group, post_comment):
        owner, member = await signup(), await signup()
        group = await create_group(owner)
        await join_group(member, group)
        comment = await post_comment(member, group)

        response = await client.delete(f"/comment/{comment['id']}", headers=owner.headers)

        assert response.status_code == 403

    async def test_owner_deletes_whole_thread(
        self, client, signup, create_group, join_group, post_comment, post_reply
    ):
        owner, member = await signup(), await signup()
        group = await create_group(owner)
        await join_group(member, group)
        root = await post_comment(member, group)
        reply = await post_reply(member, root)
        await post_reply(owner, reply)
        survivor = await post_comment(member, group)

        response = await client.delete(f"/admin-delete-comment/{root['id']}", headers=owner.headers)

        assert response.status_code == 200
        assert response.json()["deletedCount"] == 3
        listing = await client.get(f"/group/{group['id']}/comments")
        assert [c["id"] for c in listing.json()["comments"]] == [survivor["id"]]
        assert (await client.get(f"/comment/{reply['id']}/replies")).status_code == 404

    async def test_site_admin_deletes_thread(self, client, signup, make_admin, create_group, post_comment):
        owner, admin = await signup(), await signup()
        await make_admin(admin)
        group = await create_group(owner)
        root = await post_comment(owner, group)

        response = await client.delete(f"/admin-delete-comment/{root['id']}", headers=admin.headers)

        assert response.status_code == 200
        assert response.json()["deletedCount"] == 1

    async def test_member_cannot_delete_thread(self, client, signup, create_group, join_group, post_comment):
        owner, member = await signup(), await signup()
        group = await create_group(owner)
        await join_group(member, group)
        root = await post_comment(owner, group)

        response = await client.delete(f"/admin-delete-comment/{root['id']}", headers=member.headers)

        assert response.status_code == 403
