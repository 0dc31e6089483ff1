"""Community domain service."""

from datetime import datetime

import logfire

from threads.domain.model.community import Community, CommunityMembership
from threads.domain.repository import CommunityRepository
from threads.domain.value import CommunityId, MembershipId, UserId, new_id

from .base import Service


class CommunityService(Service):
    """Domain service for communities and memberships."""

    def __init__(self, community_repository: CommunityRepository) -> None:
        self.community_repository = community_repository

    async def get_by_id(self, community_id: CommunityId) -> Community | None:
        """Get a community by ID.

        Args:
            community_id: Community ID

        Returns:
            Community if found, None otherwise
        """
        with logfire.span("community_service.get_by_id", community_id=community_id):
            community = await self.community_repository.find_by_id(community_id)
            if community is None:
                logfire.warn("Community not found", community_id=community_id)
            return community

    async def ensure_membership(
        self, user_id: UserId, community: Community
    ) -> tuple[CommunityMembership, bool]:
        """Join a user to a community unless already a member.

        A new membership bumps the community's member counter by one.

        Args:
            user_id: User ID
            community: Community to join

        Returns:
            Tuple of (membership, whether it was created)
        """
        with logfire.span(
            "community_service.ensure_membership",
            user_id=user_id,
            community_id=community.id,
        ):
            existing = await self.community_repository.find_membership(
                user_id, community.id
            )
            if existing:
                return existing, False

            membership = await self.community_repository.add_membership(
                CommunityMembership(
                    id=MembershipId(new_id("membership")),
                    user_id=user_id,
                    community_id=community.id,
                    role="member",
                    created_at=datetime.now(),
                )
            )
            await self.community_repository.set_member_count(
                community.id, community.member_count + 1
            )
            logfire.info(
                "User joined community",
                user_id=user_id,
                community_id=community.id,
            )
            return membership, True

    async def is_member(self, user_id: UserId, community_id: CommunityId) -> bool:
        """Check whether a user belongs to a community."""
        membership = await self.community_repository.find_membership(
            user_id, community_id
        )
        return membership is not None

    async def toggle_membership(
        self, user_id: UserId, community: Community
    ) -> tuple[Community, bool]:
        """Join a community, or leave it when already a member.

        Joining adds one to the member counter and leaving takes one off,
        never going below zero.

        Args:
            user_id: User ID
            community: Community to join or leave

        Returns:
            Tuple of (updated community, whether the user is now a member)
        """
        with logfire.span(
            "community_service.toggle_membership",
            user_id=user_id,
            community_id=community.id,
        ):
            existing = await self.community_repository.find_membership(
                user_id, community.id
            )
            if existing is None:
                await self.ensure_membership(user_id, community)
                updated = await self.community_repository.find_by_id(community.id)
                return updated or community, True

            await self.community_repository.remove_membership(existing)
            updated = await self.community_repository.set_member_count(
                community.id, max(community.member_count - 1, 0)
            )
            logfire.info(
                "User left community",
                user_id=user_id,
                community_id=community.id,
            )
            return updated, False
