"""User domain service."""

from datetime import datetime
from typing import Sequence

import logfire

from threads.domain.error import NotFoundError
from threads.domain.model import User
from threads.domain.repository import UserRepository
from threads.domain.value import Identity, UserId, Username, new_id


class UserService:
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=user_id):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=user_id)
                raise NotFoundError("User", user_id)
            logfire.info("User found", user_id=user_id, username=user.username.root)
            return user

    async def get_users_by_ids(self, user_ids: Sequence[UserId]) -> dict[UserId, User]:
        """Get several users keyed by ID.

        Args:
            user_ids: User IDs (duplicates allowed)

        Returns:
            Mapping of user ID to user; unknown IDs are absent
        """
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return {}
        users = await self.user_repository.find_by_ids(unique_ids)
        return {user.id: user for user in users}

    async def ensure_user(self, identity: Identity) -> User:
        """Get the user record for a signed-in identity, creating it if missing.

        Users are matched by email. A new user gets the local part of the
        email as username, zero karma and no roles.

        Args:
            identity: Identity reported by the backend auth service

        Returns:
            Existing or newly created user
        """
        with logfire.span("user_service.ensure_user", email=identity.email):
            existing = await self.user_repository.find_by_email(identity.email)
            if existing:
                return existing

            username = identity.email.split("@", 1)[0] or identity.id
            user = User(
                id=UserId(new_id("user")),
                username=Username(username),
                email=identity.email,
                display_name=identity.display_name or username,
                avatar_url=identity.avatar_url,
                karma=0,
                is_premium=False,
                is_admin=False,
                is_moderator=False,
                created_at=datetime.now(),
            )
            created = await self.user_repository.create(user)
            logfire.info(
                "User created on first sign-in",
                user_id=created.id,
                username=username,
            )
            return created
