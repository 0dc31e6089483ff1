"""Unit tests for HttpBackendClient."""

import json

import httpx
import pytest

from threads.adapter.backend import HttpBackendClient
from threads.adapter.error import BackendError, RecordNotFoundError, StorageError


class Recorder:
    """Mock transport handler that records requests and replays responses."""

    def __init__(self, *responses: httpx.Response) -> None:
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responses.pop(0)


def make_client(recorder: Recorder) -> HttpBackendClient:
    return HttpBackendClient(
        base_url="https://backend.test/",
        project_id="proj_1",
        api_key="secret",
        transport=httpx.MockTransport(recorder),
    )


class TestHttpCollection:
    """Tests for record store calls."""

    @pytest.mark.asyncio
    async def test_list_sends_query_and_auth_headers(self):
        recorder = Recorder(httpx.Response(200, json=[{"id": "post_1"}]))
        client = make_client(recorder)

        records = await client.collection("posts").list(
            where={"communityId": "c1"}, order_by={"createdAt": "desc"}, limit=5
        )

        assert records == [{"id": "post_1"}]
        request = recorder.requests[0]
        assert request.method == "GET"
        assert request.url.path == "/db/posts"
        assert json.loads(request.url.params["where"]) == {"communityId": "c1"}
        assert request.url.params["orderBy"] == "createdAt:desc"
        assert request.url.params["limit"] == "5"
        assert request.headers["Authorization"] == "Bearer secret"
        assert request.headers["X-Project-Id"] == "proj_1"
        await client.aclose()

    @pytest.mark.asyncio
    async def test_get_missing_returns_none(self):
        client = make_client(Recorder(httpx.Response(404)))

        assert await client.collection("posts").get("nope") is None

    @pytest.mark.asyncio
    async def test_create_posts_json(self):
        recorder = Recorder(httpx.Response(201, json={"id": "v1", "voteType": "upvote"}))
        client = make_client(recorder)

        record = await client.collection("votes").create(
            {"id": "v1", "voteType": "upvote"}
        )

        assert record["voteType"] == "upvote"
        assert json.loads(recorder.requests[0].content) == {
            "id": "v1",
            "voteType": "upvote",
        }

    @pytest.mark.asyncio
    async def test_update_missing_record(self):
        client = make_client(Recorder(httpx.Response(404)))

        with pytest.raises(RecordNotFoundError) as exc_info:
            await client.collection("comments").update("c1", {"isDeleted": True})

        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_server_error_raises_backend_error(self):
        client = make_client(Recorder(httpx.Response(500, text="boom")))

        with pytest.raises(BackendError) as exc_info:
            await client.collection("posts").list()

        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_connection_error_raises_backend_error(self):
        def fail(request):
            raise httpx.ConnectError("refused", request=request)

        client = HttpBackendClient(
            base_url="https://backend.test",
            project_id="proj_1",
            api_key="secret",
            transport=httpx.MockTransport(fail),
        )

        with pytest.raises(BackendError):
            await client.collection("posts").get("p1")


class TestUpload:
    """Tests for storage uploads."""

    @pytest.mark.asyncio
    async def test_upload_returns_public_url(self):
        recorder = Recorder(
            httpx.Response(200, json={"publicUrl": "https://cdn.test/posts/1_a.png"})
        )
        client = make_client(recorder)

        url = await client.upload(b"png", "posts/1_a.png")

        assert url == "https://cdn.test/posts/1_a.png"
        request = recorder.requests[0]
        assert request.url.path == "/storage/upload"
        assert b'name="path"' in request.content
        assert b"posts/1_a.png" in request.content

    @pytest.mark.asyncio
    async def test_upload_failure(self):
        client = make_client(Recorder(httpx.Response(413)))

        with pytest.raises(StorageError):
            await client.upload(b"huge", "posts/1_big.mp4")


class TestGetIdentity:
    """Tests for session resolution."""

    @pytest.mark.asyncio
    async def test_resolves_identity(self):
        recorder = Recorder(
            httpx.Response(
                200,
                json={
                    "id": "auth_1",
                    "email": "ada@example.com",
                    "displayName": "Ada",
                    "avatarUrl": None,
                },
            )
        )
        client = make_client(recorder)

        identity = await client.get_identity("tok")

        assert identity.email == "ada@example.com"
        assert identity.display_name == "Ada"
        assert recorder.requests[0].headers["X-Session-Token"] == "tok"

    @pytest.mark.asyncio
    async def test_expired_session(self):
        client = make_client(Recorder(httpx.Response(401)))

        assert await client.get_identity("old") is None

    @pytest.mark.asyncio
    async def test_auth_service_error(self):
        client = make_client(Recorder(httpx.Response(503)))

        with pytest.raises(BackendError):
            await client.get_identity("tok")
