"""Backend record-store implementation of Community repository."""

from typing import List, Optional

from threads.adapter.backend import BackendClient
from threads.domain.model import Community, CommunityMembership
from threads.domain.repository import CommunityRepository
from threads.domain.value import CommunityId, UserId
from threads.persistence.mappers import (
    COMMUNITIES,
    COMMUNITY_MEMBERS,
    community_to_record,
    membership_to_record,
    record_to_community,
    record_to_membership,
)


class BackendCommunityRepository(CommunityRepository):
    """Community repository on top of the ``communities`` and
    ``communityMembers`` collections."""

    def __init__(self, backend: BackendClient) -> None:
        self.communities = backend.collection(COMMUNITIES)
        self.members = backend.collection(COMMUNITY_MEMBERS)

    async def find_by_id(self, community_id: CommunityId) -> Optional[Community]:
        """Find a community by ID."""
        record = await self.communities.get(community_id)
        return record_to_community(record) if record else None

    async def find_all(self, limit: int = 10) -> List[Community]:
        """List communities, largest first."""
        records = await self.communities.list(
            order_by={"memberCount": "desc"}, limit=limit
        )
        return [record_to_community(record) for record in records]

    async def create(self, community: Community) -> Community:
        """Persist a new community."""
        record = await self.communities.create(community_to_record(community))
        return record_to_community(record)

    async def find_membership(
        self, user_id: UserId, community_id: CommunityId
    ) -> Optional[CommunityMembership]:
        """Find a user's membership in a community."""
        records = await self.members.list(
            where={"userId": user_id, "communityId": community_id}, limit=1
        )
        return record_to_membership(records[0]) if records else None

    async def add_membership(
        self, membership: CommunityMembership
    ) -> CommunityMembership:
        """Persist a new membership."""
        record = await self.members.create(membership_to_record(membership))
        return record_to_membership(record)

    async def remove_membership(self, membership: CommunityMembership) -> None:
        """Delete a membership record."""
        await self.members.delete(membership.id)

    async def set_member_count(
        self, community_id: CommunityId, member_count: int
    ) -> Community:
        """Overwrite the member counter."""
        record = await self.communities.update(
            community_id, {"memberCount": member_count}
        )
        return record_to_community(record)
