"""Backend-as-a-service client interface.

The backend provides a schemaless record store (named collections of
JSON records keyed by ``id``), file storage with public URLs and an auth
service that resolves session tokens to identities.
"""

from abc import ABC, abstractmethod
from typing import Any, Literal, Mapping

from threads.domain.service.auth_service import IdentityProvider
from threads.domain.service.storage import FileStorage
from threads.domain.value import Identity

Record = dict[str, Any]
SortDirection = Literal["asc", "desc"]


class Collection(ABC):
    """A named collection of records."""

    name: str

    @abstractmethod
    async def list(
        self,
        where: Mapping[str, Any] | None = None,
        order_by: Mapping[str, SortDirection] | None = None,
        limit: int | None = None,
    ) -> list[Record]:
        """List records.

        Args:
            where: Equality filter; every key must match
            order_by: Single ``{field: "asc" | "desc"}`` ordering
            limit: Maximum number of records

        Returns:
            Matching records
        """
        pass

    @abstractmethod
    async def get(self, record_id: str) -> Record | None:
        """Fetch a record by ID, or None if it doesn't exist."""
        pass

    @abstractmethod
    async def create(self, record: Mapping[str, Any]) -> Record:
        """Insert a record (must carry its ``id``) and return the stored copy."""
        pass

    @abstractmethod
    async def update(self, record_id: str, patch: Mapping[str, Any]) -> Record:
        """Merge fields into a record.

        Raises:
            RecordNotFoundError: If the record doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, record_id: str) -> None:
        """Delete a record.

        Raises:
            RecordNotFoundError: If the record doesn't exist
        """
        pass


class BackendClient(IdentityProvider, FileStorage, ABC):
    """Client for the backend record store, storage and auth service."""

    @abstractmethod
    def collection(self, name: str) -> Collection:
        """Get a handle to a named collection."""
        pass

    @abstractmethod
    async def upload(self, content: bytes, path: str, upsert: bool = True) -> str:
        """Upload a file to public storage.

        Args:
            content: File bytes
            path: Storage path, e.g. ``posts/1700000000000_cat.png``
            upsert: Overwrite an existing file at the same path

        Returns:
            Public URL of the stored file

        Raises:
            StorageError: If the upload fails
        """
        pass

    @abstractmethod
    async def get_identity(self, token: str) -> Identity | None:
        """Resolve a session token to the signed-in identity."""
        pass

    async def aclose(self) -> None:
        """Release network resources."""
        return None
