"""Vote domain service."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Sequence

import logfire

from threads.domain.error import NotFoundError
from threads.domain.model.comment import Comment
from threads.domain.model.post import Post
from threads.domain.model.vote import Vote
from threads.domain.repository import VoteRepository
from threads.domain.value import (
    CommentId,
    PostId,
    UserId,
    VotableType,
    VoteDirection,
    VoteId,
    new_id,
)

from .base import Service
from .comment_service import CommentService
from .post_service import PostService


class VoteAction(str, Enum):
    """What casting a vote did to the user's existing vote."""

    CREATED = "created"
    CHANGED = "changed"
    RETRACTED = "retracted"


@dataclass(frozen=True)
class VoteOutcome:
    """Result of casting a vote.

    Counters are re-read from the target after the vote was applied.
    """

    action: VoteAction
    vote: Vote | None
    upvotes: int
    downvotes: int

    @property
    def score(self) -> int:
        return self.upvotes - self.downvotes


def _deltas(direction: VoteDirection, amount: int) -> tuple[int, int]:
    """Counter deltas (upvotes, downvotes) for adding or removing one vote."""
    if direction == VoteDirection.UP:
        return amount, 0
    return 0, amount


class VoteService(Service):
    """Domain service for vote operations.

    A user holds at most one vote per target. Casting the same direction
    again retracts it, casting the other direction flips it.
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        post_service: PostService,
        comment_service: CommentService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            post_service: Post domain service
            comment_service: Comment domain service
        """
        self.vote_repository = vote_repository
        self.post_service = post_service
        self.comment_service = comment_service

    async def _load_target(
        self, target_type: VotableType, target_id: str
    ) -> Post | Comment | None:
        if target_type == VotableType.POST:
            return await self.post_service.get_post_by_id(PostId(target_id))
        return await self.comment_service.get_comment_by_id(CommentId(target_id))

    async def _adjust(
        self, target_type: VotableType, target_id: str, up: int, down: int
    ) -> None:
        if target_type == VotableType.POST:
            await self.post_service.adjust_votes(PostId(target_id), up, down)
        else:
            await self.comment_service.adjust_votes(CommentId(target_id), up, down)

    async def cast_vote(
        self,
        user_id: UserId,
        target_type: VotableType,
        target_id: str,
        direction: VoteDirection,
    ) -> VoteOutcome:
        """Cast, flip or retract a vote on a post or comment.

        Args:
            user_id: Voting user ID
            target_type: Post or comment
            target_id: ID of the post or comment
            direction: Requested vote direction

        Returns:
            Outcome with the resulting vote (None when retracted) and the
            target's counters after the change

        Raises:
            NotFoundError: If the target doesn't exist
        """
        with logfire.span(
            "vote_service.cast_vote",
            user_id=user_id,
            target_type=target_type.value,
            target_id=target_id,
            direction=direction.value,
        ):
            target = await self._load_target(target_type, target_id)
            if target is None:
                logfire.warn(
                    "Vote on non-existent target",
                    target_type=target_type.value,
                    target_id=target_id,
                )
                raise NotFoundError(target_type.value.capitalize(), target_id)

            existing = await self.vote_repository.find_by_user_and_target(
                user_id, target_type, target_id
            )

            vote: Vote | None
            if existing is None:
                vote = await self.vote_repository.create(
                    Vote(
                        id=VoteId(new_id("vote")),
                        user_id=user_id,
                        target_id=target_id,
                        target_type=target_type,
                        direction=direction,
                        created_at=datetime.now(),
                    )
                )
                await self._adjust(target_type, target_id, *_deltas(direction, 1))
                action = VoteAction.CREATED
            elif existing.direction == direction:
                await self.vote_repository.delete(existing.id)
                await self._adjust(target_type, target_id, *_deltas(direction, -1))
                vote = None
                action = VoteAction.RETRACTED
            else:
                vote = await self.vote_repository.update_direction(
                    existing.id, direction
                )
                up_remove, down_remove = _deltas(existing.direction, -1)
                up_add, down_add = _deltas(direction, 1)
                await self._adjust(
                    target_type,
                    target_id,
                    up_remove + up_add,
                    down_remove + down_add,
                )
                action = VoteAction.CHANGED

            # Reload so the caller sees the stored counters
            refreshed = await self._load_target(target_type, target_id)
            if refreshed is None:
                raise NotFoundError(target_type.value.capitalize(), target_id)

            logfire.info(
                "Vote cast",
                action=action.value,
                target_type=target_type.value,
                target_id=target_id,
                upvotes=refreshed.upvotes,
                downvotes=refreshed.downvotes,
            )
            return VoteOutcome(
                action=action,
                vote=vote,
                upvotes=refreshed.upvotes,
                downvotes=refreshed.downvotes,
            )

    async def get_user_votes(
        self,
        user_id: UserId,
        target_type: VotableType,
        target_ids: Sequence[str],
    ) -> dict[str, VoteDirection]:
        """Get a user's vote directions for several targets.

        Args:
            user_id: User ID
            target_type: Post or comment
            target_ids: Target IDs to check

        Returns:
            Mapping of target ID to direction; unvoted targets are absent
        """
        if not target_ids:
            return {}

        # Batch query to fetch all votes at once (avoid N+1)
        votes = await self.vote_repository.find_by_user_and_targets(
            user_id=user_id, target_type=target_type, target_ids=target_ids
        )
        return {vote.target_id: vote.direction for vote in votes}
