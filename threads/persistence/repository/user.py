"""Backend record-store implementation of User repository."""

from typing import List, Optional, Sequence

from threads.adapter.backend import BackendClient
from threads.domain.model import User
from threads.domain.repository import UserRepository
from threads.domain.value import UserId
from threads.persistence.mappers import USERS, record_to_user, user_to_record


class BackendUserRepository(UserRepository):
    """User repository on top of the ``users`` collection."""

    def __init__(self, backend: BackendClient) -> None:
        self.collection = backend.collection(USERS)

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        record = await self.collection.get(user_id)
        return record_to_user(record) if record else None

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email."""
        records = await self.collection.list(where={"email": email}, limit=1)
        return record_to_user(records[0]) if records else None

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find several users, one lookup per distinct ID."""
        users = []
        for user_id in dict.fromkeys(user_ids):
            user = await self.find_by_id(user_id)
            if user is not None:
                users.append(user)
        return users

    async def find_all(self, limit: int = 10) -> List[User]:
        """List users, newest first."""
        records = await self.collection.list(
            order_by={"createdAt": "desc"}, limit=limit
        )
        return [record_to_user(record) for record in records]

    async def create(self, user: User) -> User:
        """Persist a new user."""
        record = await self.collection.create(user_to_record(user))
        return record_to_user(record)
