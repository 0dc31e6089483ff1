"""Toggle community membership use case."""

import logfire
from pydantic import BaseModel

from threads.domain.error import NotFoundError
from threads.domain.service import CommunityService
from threads.domain.value import CommunityId, UserId

from .get_community import CommunityView, to_community_view


class ToggleMembershipRequest(BaseModel):
    """Toggle membership request."""

    community_id: str
    user_id: str  # User ID from authenticated user


class ToggleMembershipUseCase:
    """Use case for joining or leaving a community."""

    def __init__(self, community_service: CommunityService) -> None:
        self.community_service = community_service

    async def execute(self, request: ToggleMembershipRequest) -> CommunityView:
        """Join the community, or leave it when already a member.

        Returns:
            Community with its new member count and the user's membership

        Raises:
            NotFoundError: If the community doesn't exist
        """
        community = await self.community_service.get_by_id(
            CommunityId(request.community_id)
        )
        if community is None:
            raise NotFoundError("Community", request.community_id)

        updated, is_member = await self.community_service.toggle_membership(
            UserId(request.user_id), community
        )
        logfire.info(
            "Community membership toggled",
            community_id=community.id,
            user_id=request.user_id,
            is_member=is_member,
        )
        return to_community_view(updated, is_member)
