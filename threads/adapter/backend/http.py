"""HTTP backend client.

Talks to the backend's REST API:

    GET    /db/{collection}?where=<json>&orderBy=<field>:<dir>&limit=<n>
    GET    /db/{collection}/{id}
    POST   /db/{collection}
    PATCH  /db/{collection}/{id}
    DELETE /db/{collection}/{id}
    POST   /storage/upload            (multipart: file, path, upsert)
    GET    /auth/me                   (X-Session-Token header)

Requests are authenticated with the project API key as a bearer token.
Failures are logged and raised as ``BackendError``; nothing is retried.
"""

import json
from typing import Any, Mapping

import httpx
import logfire

from threads.adapter.error import BackendError, RecordNotFoundError, StorageError
from threads.domain.value import Identity

from .client import BackendClient, Collection, Record, SortDirection


class HttpCollection(Collection):
    """Collection backed by the REST record store."""

    def __init__(self, name: str, http: httpx.AsyncClient) -> None:
        self.name = name
        self._http = http

    async def _request(
        self, method: str, url: str, **kwargs: Any
    ) -> httpx.Response:
        try:
            return await self._http.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logfire.error(
                "Backend request HTTP error",
                method=method,
                url=url,
                error=str(e),
            )
            raise BackendError(f"HTTP error calling backend: {e}")

    def _raise_for_status(self, response: httpx.Response, operation: str) -> None:
        if response.status_code >= 400:
            logfire.error(
                "Backend request failed",
                collection=self.name,
                operation=operation,
                status_code=response.status_code,
                error=response.text,
            )
            raise BackendError(
                f"Backend {operation} on {self.name} failed: {response.status_code}",
                status_code=response.status_code,
            )

    async def list(
        self,
        where: Mapping[str, Any] | None = None,
        order_by: Mapping[str, SortDirection] | None = None,
        limit: int | None = None,
    ) -> list[Record]:
        """List records through the query endpoint."""
        params: dict[str, str] = {}
        if where:
            params["where"] = json.dumps(dict(where))
        if order_by:
            field, direction = next(iter(order_by.items()))
            params["orderBy"] = f"{field}:{direction}"
        if limit is not None:
            params["limit"] = str(limit)

        response = await self._request("GET", f"/db/{self.name}", params=params)
        self._raise_for_status(response, "list")
        return response.json()

    async def get(self, record_id: str) -> Record | None:
        """Fetch a record by ID."""
        response = await self._request("GET", f"/db/{self.name}/{record_id}")
        if response.status_code == 404:
            return None
        self._raise_for_status(response, "get")
        return response.json()

    async def create(self, record: Mapping[str, Any]) -> Record:
        """Insert a record."""
        response = await self._request("POST", f"/db/{self.name}", json=dict(record))
        self._raise_for_status(response, "create")
        return response.json()

    async def update(self, record_id: str, patch: Mapping[str, Any]) -> Record:
        """Merge fields into a record."""
        response = await self._request(
            "PATCH", f"/db/{self.name}/{record_id}", json=dict(patch)
        )
        if response.status_code == 404:
            raise RecordNotFoundError(self.name, record_id)
        self._raise_for_status(response, "update")
        return response.json()

    async def delete(self, record_id: str) -> None:
        """Delete a record."""
        response = await self._request("DELETE", f"/db/{self.name}/{record_id}")
        if response.status_code == 404:
            raise RecordNotFoundError(self.name, record_id)
        self._raise_for_status(response, "delete")


class HttpBackendClient(BackendClient):
    """Backend client over HTTP, sharing one connection pool."""

    def __init__(
        self,
        base_url: str,
        project_id: str,
        api_key: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize HTTP backend client.

        Args:
            base_url: Backend API root URL
            project_id: Backend project identifier
            api_key: Project API key
            timeout: Request timeout in seconds
            transport: Optional httpx transport (e.g. ``httpx.MockTransport``)
        """
        self.base_url = base_url.rstrip("/")
        self.project_id = project_id
        self._http = httpx.AsyncClient(
            base_url=self.base_url,
            headers={
                "Authorization": f"Bearer {api_key}",
                "X-Project-Id": project_id,
            },
            timeout=timeout,
            transport=transport,
        )

    def collection(self, name: str) -> HttpCollection:
        """Get a handle to a named collection."""
        return HttpCollection(name, self._http)

    async def upload(self, content: bytes, path: str, upsert: bool = True) -> str:
        """Upload a file and return its public URL."""
        with logfire.span("backend.upload", path=path, size=len(content)):
            try:
                response = await self._http.post(
                    "/storage/upload",
                    files={"file": (path.rsplit("/", 1)[-1], content)},
                    data={"path": path, "upsert": "true" if upsert else "false"},
                )
            except httpx.HTTPError as e:
                logfire.error("Storage upload HTTP error", path=path, error=str(e))
                raise StorageError(f"HTTP error during upload: {e}")

            if response.status_code >= 400:
                logfire.error(
                    "Storage upload failed",
                    path=path,
                    status_code=response.status_code,
                    error=response.text,
                )
                raise StorageError(
                    f"Upload failed: {response.status_code}",
                    status_code=response.status_code,
                )

            return response.json()["publicUrl"]

    async def get_identity(self, token: str) -> Identity | None:
        """Resolve a session token through the auth service."""
        try:
            response = await self._http.get(
                "/auth/me", headers={"X-Session-Token": token}
            )
        except httpx.HTTPError as e:
            logfire.error("Auth lookup HTTP error", error=str(e))
            raise BackendError(f"HTTP error resolving session: {e}")

        if response.status_code in (401, 403, 404):
            return None
        if response.status_code != 200:
            logfire.error(
                "Auth lookup failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise BackendError(
                f"Auth lookup failed: {response.status_code}",
                status_code=response.status_code,
            )

        data = response.json()
        return Identity(
            id=data["id"],
            email=data["email"],
            display_name=data.get("displayName"),
            avatar_url=data.get("avatarUrl"),
        )

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._http.aclose()
