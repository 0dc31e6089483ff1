"""Community repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from threads.domain.model.community import Community, CommunityMembership
from threads.domain.value import CommunityId, UserId


class CommunityRepository(ABC):
    """Repository for Community entity and its memberships."""

    @abstractmethod
    async def find_by_id(self, community_id: CommunityId) -> Optional[Community]:
        """Find a community by ID.

        Args:
            community_id: The community's unique identifier

        Returns:
            The community if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, limit: int = 10) -> List[Community]:
        """List communities, largest first.

        Args:
            limit: Maximum number of communities to return

        Returns:
            Communities ordered by member_count descending
        """
        pass

    @abstractmethod
    async def create(self, community: Community) -> Community:
        """Persist a new community."""
        pass

    @abstractmethod
    async def find_membership(
        self, user_id: UserId, community_id: CommunityId
    ) -> Optional[CommunityMembership]:
        """Find a user's membership in a community.

        Args:
            user_id: The user's ID
            community_id: The community's ID

        Returns:
            The membership if found, None otherwise
        """
        pass

    @abstractmethod
    async def add_membership(
        self, membership: CommunityMembership
    ) -> CommunityMembership:
        """Persist a new membership."""
        pass

    @abstractmethod
    async def remove_membership(self, membership: CommunityMembership) -> None:
        """Delete a membership.

        Args:
            membership: Membership to remove
        """
        pass

    @abstractmethod
    async def set_member_count(
        self, community_id: CommunityId, member_count: int
    ) -> Community:
        """Overwrite the denormalized member counter.

        Args:
            community_id: The community ID
            member_count: New counter value

        Returns:
            Updated community
        """
        pass
