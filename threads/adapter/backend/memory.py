"""In-memory backend client for testing and local development."""

import copy
from typing import Any, Mapping

from threads.adapter.error import RecordNotFoundError, StorageError
from threads.domain.value import Identity

from .client import BackendClient, Collection, Record, SortDirection


class InMemoryCollection(Collection):
    """Collection stored in a dict, handing out copies of its records."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._records: dict[str, Record] = {}

    async def list(
        self,
        where: Mapping[str, Any] | None = None,
        order_by: Mapping[str, SortDirection] | None = None,
        limit: int | None = None,
    ) -> list[Record]:
        """List records matching an equality filter."""
        records = [
            record
            for record in self._records.values()
            if not where or all(record.get(k) == v for k, v in where.items())
        ]

        # Single-field ordering; records missing the field sort first
        if order_by:
            field, direction = next(iter(order_by.items()))
            records.sort(
                key=lambda r: (r.get(field) is not None, r.get(field)),
                reverse=direction == "desc",
            )

        if limit is not None:
            records = records[:limit]
        return [copy.deepcopy(record) for record in records]

    async def get(self, record_id: str) -> Record | None:
        """Fetch a record by ID."""
        record = self._records.get(record_id)
        return copy.deepcopy(record) if record is not None else None

    async def create(self, record: Mapping[str, Any]) -> Record:
        """Insert a record keyed by its ``id``."""
        stored = copy.deepcopy(dict(record))
        self._records[stored["id"]] = stored
        return copy.deepcopy(stored)

    async def update(self, record_id: str, patch: Mapping[str, Any]) -> Record:
        """Merge fields into an existing record."""
        record = self._records.get(record_id)
        if record is None:
            raise RecordNotFoundError(self.name, record_id)
        record.update(copy.deepcopy(dict(patch)))
        return copy.deepcopy(record)

    async def delete(self, record_id: str) -> None:
        """Delete a record."""
        if self._records.pop(record_id, None) is None:
            raise RecordNotFoundError(self.name, record_id)


class InMemoryBackendClient(BackendClient):
    """Backend client that keeps collections, files and sessions in memory."""

    def __init__(self, base_url: str = "memory://threads") -> None:
        self.base_url = base_url.rstrip("/")
        self._collections: dict[str, InMemoryCollection] = {}
        self._files: dict[str, bytes] = {}
        self._sessions: dict[str, Identity] = {}

    def collection(self, name: str) -> InMemoryCollection:
        """Get a collection, creating it on first use."""
        if name not in self._collections:
            self._collections[name] = InMemoryCollection(name)
        return self._collections[name]

    async def upload(self, content: bytes, path: str, upsert: bool = True) -> str:
        """Store file bytes under a path and return its URL."""
        if not upsert and path in self._files:
            raise StorageError(f"File already exists: {path}", status_code=409)
        self._files[path] = bytes(content)
        return f"{self.base_url}/storage/{path}"

    def get_file(self, path: str) -> bytes | None:
        """Read back an uploaded file."""
        return self._files.get(path)

    def register_session(self, token: str, identity: Identity) -> None:
        """Make a session token resolve to an identity."""
        self._sessions[token] = identity

    async def get_identity(self, token: str) -> Identity | None:
        """Resolve a registered session token."""
        return self._sessions.get(token)
