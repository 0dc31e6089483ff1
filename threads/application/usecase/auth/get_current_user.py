"""Get current user use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from threads.domain.service import AuthService, UserService


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str | None  # Session token from the auth cookie


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    user_id: str
    username: str
    email: str
    display_name: str
    avatar_url: str | None
    karma: int
    is_premium: bool
    is_admin: bool
    is_moderator: bool
    created_at: datetime


class GetCurrentUserUseCase:
    """Use case for resolving the signed-in user.

    The first sign-in of an identity provisions its user record.
    """

    def __init__(self, auth_service: AuthService, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            auth_service: Auth domain service
            user_service: User domain service
        """
        self.auth_service = auth_service
        self.user_service = user_service

    async def execute(
        self, request: GetCurrentUserRequest
    ) -> GetCurrentUserResponse | None:
        """Execute get current user flow.

        Steps:
        1. Resolve the session token through the backend auth service
        2. Look up the user by email, creating it on first sign-in

        Args:
            request: Request with session token

        Returns:
            User information, or None when signed out or the token is unknown
        """
        identity = await self.auth_service.resolve_identity(request.token)
        if identity is None:
            return None

        user = await self.user_service.ensure_user(identity)
        logfire.info("Current user resolved", user_id=user.id)

        return GetCurrentUserResponse(
            user_id=user.id,
            username=user.username.root,
            email=user.email,
            display_name=user.display_name,
            avatar_url=user.avatar_url,
            karma=user.karma,
            is_premium=user.is_premium,
            is_admin=user.is_admin,
            is_moderator=user.is_moderator,
            created_at=user.created_at,
        )
