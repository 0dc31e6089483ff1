"""End-to-end tests for community and user profile endpoints."""

import pytest

from threads.persistence.mappers import COMMUNITIES, community_to_record
from tests.conftest import make_community
from tests.harness import create_api_fixture

api = create_api_fixture()


async def seed_community(api, member_count: int = 5):
    await api.backend.collection(COMMUNITIES).create(
        community_to_record(make_community("c1", "biology", member_count=member_count))
    )


class TestGetCommunity:
    """End-to-end tests for GET /communities/{community_id}."""

    @pytest.mark.asyncio
    async def test_signed_out(self, api):
        await seed_community(api)

        response = await api.client.get("/communities/c1")

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "biology"
        assert data["member_count"] == 5
        assert data["is_member"] is False

    @pytest.mark.asyncio
    async def test_missing(self, api):
        response = await api.client.get("/communities/nope")

        assert response.status_code == 404


class TestToggleMembership:
    """End-to-end tests for POST /communities/{community_id}/membership."""

    @pytest.mark.asyncio
    async def test_requires_auth(self, api):
        await seed_community(api)

        response = await api.client.post("/communities/c1/membership")

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_join_then_leave(self, api):
        await seed_community(api)
        api.sign_in("tok", "ada@example.com")

        joined = await api.client.post("/communities/c1/membership")
        viewed = await api.client.get("/communities/c1")
        left = await api.client.post("/communities/c1/membership")

        assert joined.status_code == 200
        assert joined.json()["is_member"] is True
        assert joined.json()["member_count"] == 6
        assert viewed.json()["is_member"] is True
        assert left.json()["is_member"] is False
        assert left.json()["member_count"] == 5

    @pytest.mark.asyncio
    async def test_missing_community(self, api):
        api.sign_in("tok", "ada@example.com")

        response = await api.client.post("/communities/nope/membership")

        assert response.status_code == 404


class TestGetUser:
    """End-to-end tests for GET /users/{user_id}."""

    @pytest.mark.asyncio
    async def test_profile_of_signed_in_user(self, api):
        api.sign_in("tok", "ada@example.com", "Ada")
        me = (await api.client.get("/me")).json()
        api.sign_out()

        response = await api.client.get(f"/users/{me['user_id']}")

        assert response.status_code == 200
        data = response.json()
        assert data["username"] == "ada"
        assert data["display_name"] == "Ada"
        assert "email" not in data

    @pytest.mark.asyncio
    async def test_unknown_user(self, api):
        response = await api.client.get("/users/ghost")

        assert response.status_code == 404
