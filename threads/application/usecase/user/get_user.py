"""Get user profile use case."""

from datetime import datetime

from pydantic import BaseModel

from threads.domain.service import UserService
from threads.domain.value import UserId


class GetUserRequest(BaseModel):
    """Get user request."""

    user_id: str


class GetUserResponse(BaseModel):
    """Public user profile."""

    user_id: str
    username: str
    display_name: str
    avatar_url: str | None
    karma: int
    is_premium: bool
    is_moderator: bool
    created_at: datetime


class GetUserUseCase:
    """Use case for getting a user's public profile by ID."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetUserRequest) -> GetUserResponse:
        """Execute get user flow.

        Args:
            request: Request with user ID

        Returns:
            Public profile; the email stays private

        Raises:
            NotFoundError: If the user doesn't exist
        """
        user = await self.user_service.get_by_id(UserId(request.user_id))

        return GetUserResponse(
            user_id=user.id,
            username=user.username.root,
            display_name=user.display_name,
            avatar_url=user.avatar_url,
            karma=user.karma,
            is_premium=user.is_premium,
            is_moderator=user.is_moderator,
            created_at=user.created_at,
        )
