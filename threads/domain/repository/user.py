"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from threads.domain.model.user import User
from threads.domain.value import UserId


class UserRepository(ABC):
    """Repository for User entity."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email address.

        Args:
            email: Email reported by the backend identity

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find several users at once.

        Args:
            user_ids: User IDs to fetch (duplicates allowed)

        Returns:
            Users that exist, in no particular order
        """
        pass

    @abstractmethod
    async def find_all(self, limit: int = 10) -> List[User]:
        """List users.

        Args:
            limit: Maximum number of users to return

        Returns:
            List of users
        """
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Persist a new user.

        Args:
            user: The user to create

        Returns:
            The stored user
        """
        pass
