"""End-to-end tests for comment thread endpoints."""

import pytest

from threads.persistence.mappers import COMMUNITIES, community_to_record
from tests.conftest import make_community
from tests.harness import create_api_fixture

api = create_api_fixture()


async def setup_post(api) -> str:
    await api.backend.collection(COMMUNITIES).create(
        community_to_record(make_community("c1", "physics"))
    )
    api.sign_in("ada_token", "ada@example.com")
    response = await api.client.post(
        "/posts", json={"title": "Thread me", "community_id": "c1"}
    )
    assert response.status_code == 201, response.text
    return response.json()["post"]["post_id"]


async def comment(api, post_id: str, content: str, parent_id: str | None = None):
    response = await api.client.post(
        f"/posts/{post_id}/comments",
        json={"content": content, "parent_id": parent_id},
    )
    assert response.status_code == 201, response.text
    return response.json()


class TestCommentThread:
    """End-to-end tests for reading and writing threads."""

    @pytest.mark.asyncio
    async def test_nested_thread(self, api):
        post_id = await setup_post(api)
        a = await comment(api, post_id, "A")
        b = await comment(api, post_id, "B", a["comment_id"])
        c = await comment(api, post_id, "C", b["comment_id"])
        d = await comment(api, post_id, "D")

        response = await api.client.get(f"/posts/{post_id}/comments")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 4
        assert [n["comment_id"] for n in data["comments"]] == [
            a["comment_id"],
            d["comment_id"],
        ]
        b_node = data["comments"][0]["replies"][0]
        assert b_node["comment_id"] == b["comment_id"]
        assert b_node["replies"][0]["comment_id"] == c["comment_id"]
        assert [b["depth"], c["depth"]] == [1, 2]
        assert d["comment_count"] == 4

    @pytest.mark.asyncio
    async def test_first_read_issues_session_cookie(self, api):
        post_id = await setup_post(api)

        response = await api.client.get(f"/posts/{post_id}/comments")

        assert "thread_session" in response.cookies

    @pytest.mark.asyncio
    async def test_comment_requires_auth(self, api):
        post_id = await setup_post(api)
        api.sign_out()

        response = await api.client.post(
            f"/posts/{post_id}/comments", json={"content": "Hi"}
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_blank_comment(self, api):
        post_id = await setup_post(api)

        response = await api.client.post(
            f"/posts/{post_id}/comments", json={"content": "   "}
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_thread_of_missing_post(self, api):
        response = await api.client.get("/posts/nope/comments")

        assert response.status_code == 404


class TestCollapseAndReplyForm:
    """End-to-end tests for per-session view toggles."""

    @pytest.mark.asyncio
    async def test_collapse_hides_replies_for_session(self, api):
        post_id = await setup_post(api)
        a = await comment(api, post_id, "A")
        await comment(api, post_id, "B", a["comment_id"])
        # Issues the session cookie
        await api.client.get(f"/posts/{post_id}/comments")

        toggled = await api.client.post(
            f"/posts/{post_id}/comments/{a['comment_id']}/collapse"
        )
        collapsed = await api.client.get(f"/posts/{post_id}/comments")
        await api.client.post(f"/posts/{post_id}/comments/{a['comment_id']}/collapse")
        expanded = await api.client.get(f"/posts/{post_id}/comments")

        assert toggled.json()["collapsed"] is True
        root = collapsed.json()["comments"][0]
        assert root["collapsed"] is True
        assert root["replies"] == []
        assert root["hidden_reply_count"] == 1
        assert expanded.json()["comments"][0]["replies"] != []

    @pytest.mark.asyncio
    async def test_reply_closes_reply_form(self, api):
        post_id = await setup_post(api)
        a = await comment(api, post_id, "A")
        await api.client.get(f"/posts/{post_id}/comments")

        opened = await api.client.post(
            f"/posts/{post_id}/comments/{a['comment_id']}/reply-form"
        )
        await comment(api, post_id, "Reply", a["comment_id"])
        thread = await api.client.get(f"/posts/{post_id}/comments")

        assert opened.json()["reply_form_open"] is True
        assert thread.json()["comments"][0]["reply_form_open"] is False

    @pytest.mark.asyncio
    async def test_toggle_unknown_comment(self, api):
        post_id = await setup_post(api)

        response = await api.client.post(f"/posts/{post_id}/comments/nope/collapse")

        assert response.status_code == 404


class TestDeleteComment:
    """End-to-end tests for DELETE /posts/{post_id}/comments/{comment_id}."""

    @pytest.mark.asyncio
    async def test_delete_keeps_replies(self, api):
        post_id = await setup_post(api)
        a = await comment(api, post_id, "A")
        await comment(api, post_id, "B", a["comment_id"])

        response = await api.client.delete(
            f"/posts/{post_id}/comments/{a['comment_id']}"
        )
        thread = await api.client.get(f"/posts/{post_id}/comments")

        assert response.status_code == 200
        root = thread.json()["comments"][0]
        assert root["text"] == "[Comment deleted]"
        assert len(root["replies"]) == 1

    @pytest.mark.asyncio
    async def test_other_user_cannot_delete(self, api):
        post_id = await setup_post(api)
        a = await comment(api, post_id, "A")
        api.sign_in("grace_token", "grace@example.com")

        response = await api.client.delete(
            f"/posts/{post_id}/comments/{a['comment_id']}"
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_delete_twice(self, api):
        post_id = await setup_post(api)
        a = await comment(api, post_id, "A")
        url = f"/posts/{post_id}/comments/{a['comment_id']}"

        await api.client.delete(url)
        response = await api.client.delete(url)

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_vote_on_comment(self, api):
        post_id = await setup_post(api)
        a = await comment(api, post_id, "A")

        vote = await api.client.post(
            f"/comments/{a['comment_id']}/vote", json={"direction": "downvote"}
        )
        thread = await api.client.get(f"/posts/{post_id}/comments")

        assert vote.json()["score"] == -1
        assert thread.json()["comments"][0]["my_vote"] == "downvote"
