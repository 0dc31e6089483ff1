"""End-to-end tests for health and auth endpoints."""

import pytest

from tests.harness import create_api_fixture

api = create_api_fixture()


class TestHealthEndpoint:
    """End-to-end tests for GET /health."""

    @pytest.mark.asyncio
    async def test_health(self, api):
        response = await api.client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "0.1.0"


class TestMeEndpoint:
    """End-to-end tests for GET /me."""

    @pytest.mark.asyncio
    async def test_signed_out(self, api):
        response = await api.client.get("/me")

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_unknown_token(self, api):
        api.client.cookies.set("auth_token", "expired")

        response = await api.client.get("/me")

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_signed_in(self, api):
        api.sign_in("tok", "ada@example.com", "Ada")

        response = await api.client.get("/me")

        assert response.status_code == 200
        data = response.json()
        assert data["username"] == "ada"
        assert data["display_name"] == "Ada"
        assert data["is_admin"] is False
