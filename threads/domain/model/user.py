"""User entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from threads.domain.model.common import DomainModel
from threads.domain.value import UserId, Username


class User(DomainModel):
    """User profile record.

    Created on first sign-in from the backend identity; the identity
    itself (credentials, sessions) lives in the backend auth service.
    """

    id: UserId
    username: Username
    email: str
    display_name: str
    avatar_url: Optional[str] = None
    karma: int = 0
    is_premium: bool = False
    is_admin: bool = False
    is_moderator: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
