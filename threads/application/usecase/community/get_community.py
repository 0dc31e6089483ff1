"""Get community use case."""

from datetime import datetime

from pydantic import BaseModel

from threads.domain.error import NotFoundError
from threads.domain.model import Community
from threads.domain.service import CommunityService
from threads.domain.value import CommunityId, UserId


class CommunityView(BaseModel):
    """Community with the viewer's membership."""

    community_id: str
    name: str
    display_name: str
    description: str
    icon_url: str | None
    member_count: int
    is_nsfw: bool
    creator_id: str
    created_at: datetime
    is_member: bool


def to_community_view(community: Community, is_member: bool) -> CommunityView:
    return CommunityView(
        community_id=community.id,
        name=community.name,
        display_name=community.display_name,
        description=community.description,
        icon_url=community.icon_url,
        member_count=community.member_count,
        is_nsfw=community.is_nsfw,
        creator_id=community.creator_id,
        created_at=community.created_at,
        is_member=is_member,
    )


class GetCommunityRequest(BaseModel):
    """Get community request."""

    community_id: str
    user_id: str | None = None  # Current user ID (if authenticated)


class GetCommunityUseCase:
    """Use case for reading one community."""

    def __init__(self, community_service: CommunityService) -> None:
        """Initialize get community use case.

        Args:
            community_service: Community domain service
        """
        self.community_service = community_service

    async def execute(self, request: GetCommunityRequest) -> CommunityView:
        """Execute get community flow.

        Steps:
        1. Load the community
        2. Check the viewer's membership when signed in

        Raises:
            NotFoundError: If the community doesn't exist
        """
        community = await self.community_service.get_by_id(
            CommunityId(request.community_id)
        )
        if community is None:
            raise NotFoundError("Community", request.community_id)

        is_member = False
        if request.user_id:
            is_member = await self.community_service.is_member(
                UserId(request.user_id), community.id
            )
        return to_community_view(community, is_member)
