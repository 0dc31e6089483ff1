"""Domain value objects for Threads.

Value objects are immutable and defined by their values, not identity.
"""

from datetime import datetime, timedelta
from enum import Enum

from pydantic import field_validator

from threads.domain.value.common import RootValueObject, ValueObject


class VoteDirection(str, Enum):
    """Direction of a vote."""

    UP = "upvote"
    DOWN = "downvote"

    @property
    def opposite(self) -> "VoteDirection":
        return VoteDirection.DOWN if self is VoteDirection.UP else VoteDirection.UP


class VotableType(str, Enum):
    """Type of entity that can be voted on."""

    POST = "post"
    COMMENT = "comment"


class PostType(str, Enum):
    """Kind of post content."""

    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"
    LINK = "link"


class PostSortOrder(str, Enum):
    """Sort order for post feeds."""

    HOT = "hot"  # Decaying score over recent posts
    NEW = "new"  # created_at DESC
    TOP = "top"  # upvotes DESC


class Timeframe(str, Enum):
    """Window used by the trending page."""

    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"

    def cutoff(self, now: datetime) -> datetime:
        """Oldest creation time still inside this window."""
        if self is Timeframe.HOUR:
            return now - timedelta(hours=1)
        if self is Timeframe.DAY:
            return now - timedelta(days=1)
        if self is Timeframe.WEEK:
            return now - timedelta(days=7)
        return now - timedelta(days=30)


class Username(RootValueObject[str]):
    """Public username shown as ``u/<username>``."""

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username is not blank and within length limits."""
        if not v.strip() or len(v) > 64:
            raise ValueError("Username must be 1-64 characters")
        return v


class Identity(ValueObject):
    """Signed-in identity as reported by the backend auth service."""

    id: str
    email: str
    display_name: str | None = None
    avatar_url: str | None = None
