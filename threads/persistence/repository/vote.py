"""Backend record-store implementation of Vote repository."""

from typing import List, Optional, Sequence

from threads.adapter.backend import BackendClient
from threads.domain.model import Vote
from threads.domain.repository import VoteRepository
from threads.domain.value import UserId, VotableType, VoteDirection, VoteId
from threads.persistence.mappers import VOTES, record_to_vote, vote_to_record


class BackendVoteRepository(VoteRepository):
    """Vote repository on top of the ``votes`` collection."""

    def __init__(self, backend: BackendClient) -> None:
        """Initialize repository with a backend client.

        Args:
            backend: Backend client
        """
        self.collection = backend.collection(VOTES)

    async def find_by_user_and_target(
        self,
        user_id: UserId,
        target_type: VotableType,
        target_id: str,
    ) -> Optional[Vote]:
        """Find a user's vote on a specific item."""
        records = await self.collection.list(
            where={
                "userId": user_id,
                "targetId": target_id,
                "targetType": target_type.value,
            },
            limit=1,
        )
        return record_to_vote(records[0]) if records else None

    async def find_by_user_and_targets(
        self,
        user_id: UserId,
        target_type: VotableType,
        target_ids: Sequence[str],
    ) -> List[Vote]:
        """Find a user's votes on several items of one type."""
        if not target_ids:
            return []

        # The store only filters on equality, so narrow by user and type
        # and pick the requested targets here
        wanted = set(target_ids)
        records = await self.collection.list(
            where={"userId": user_id, "targetType": target_type.value}
        )
        return [
            record_to_vote(record)
            for record in records
            if record.get("targetId") in wanted
        ]

    async def create(self, vote: Vote) -> Vote:
        """Persist a new vote."""
        record = await self.collection.create(vote_to_record(vote))
        return record_to_vote(record)

    async def update_direction(
        self, vote_id: VoteId, direction: VoteDirection
    ) -> Optional[Vote]:
        """Change a vote's direction."""
        if await self.collection.get(vote_id) is None:
            return None
        record = await self.collection.update(vote_id, {"voteType": direction.value})
        return record_to_vote(record)

    async def delete(self, vote_id: VoteId) -> None:
        """Delete a vote."""
        await self.collection.delete(vote_id)
