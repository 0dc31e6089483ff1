"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from threads.domain.model.vote import Vote
from threads.domain.value import UserId, VotableType, VoteDirection, VoteId


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_user_and_target(
        self,
        user_id: UserId,
        target_type: VotableType,
        target_id: str,
    ) -> Optional[Vote]:
        """Find a user's vote on a specific item.

        Args:
            user_id: The user's ID
            target_type: Type of item (post or comment)
            target_id: ID of the item

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_and_targets(
        self,
        user_id: UserId,
        target_type: VotableType,
        target_ids: Sequence[str],
    ) -> List[Vote]:
        """Find a user's votes on multiple items (batch query).

        Args:
            user_id: The user's ID
            target_type: Type of items (post or comment)
            target_ids: IDs of the items to check

        Returns:
            Votes by the user on the specified items
        """
        pass

    @abstractmethod
    async def create(self, vote: Vote) -> Vote:
        """Persist a new vote.

        Args:
            vote: The vote to create

        Returns:
            The stored vote
        """
        pass

    @abstractmethod
    async def update_direction(
        self, vote_id: VoteId, direction: VoteDirection
    ) -> Optional[Vote]:
        """Change the direction of an existing vote.

        Args:
            vote_id: The vote ID
            direction: New direction

        Returns:
            Updated vote, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, vote_id: VoteId) -> None:
        """Delete a vote (retraction).

        Args:
            vote_id: The vote ID to delete
        """
        pass
