"""Community entity and membership."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from threads.domain.model.common import DomainModel
from threads.domain.value import CommunityId, MembershipId, UserId


class Community(DomainModel):
    """Community (``t/<name>``) that posts belong to."""

    id: CommunityId
    name: str = Field(min_length=1, max_length=64)
    display_name: str
    description: str = ""
    icon_url: Optional[str] = None
    member_count: int = Field(default=0, ge=0)
    is_nsfw: bool = False
    creator_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)


class CommunityMembership(DomainModel):
    """A user's membership in a community."""

    id: MembershipId
    user_id: UserId
    community_id: CommunityId
    role: str = "member"
    created_at: datetime = Field(default_factory=datetime.now)
