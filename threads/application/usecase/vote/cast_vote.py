"""Cast vote use case."""

from pydantic import BaseModel

from threads.domain.service import VoteAction, VoteService
from threads.domain.value import UserId, VotableType, VoteDirection


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    target_type: VotableType
    target_id: str
    user_id: str  # User ID from authenticated user
    direction: VoteDirection


class CastVoteResponse(BaseModel):
    """Cast vote response.

    Counters are the target's stored values after the vote was applied.
    """

    target_type: VotableType
    target_id: str
    action: VoteAction
    my_vote: VoteDirection | None
    upvotes: int
    downvotes: int
    score: int


class CastVoteUseCase:
    """Use case for voting on a post or comment.

    Same direction twice retracts the vote, the other direction flips it.
    """

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            Vote outcome with refreshed counters

        Raises:
            NotFoundError: If the target doesn't exist
        """
        outcome = await self.vote_service.cast_vote(
            user_id=UserId(request.user_id),
            target_type=request.target_type,
            target_id=request.target_id,
            direction=request.direction,
        )

        return CastVoteResponse(
            target_type=request.target_type,
            target_id=request.target_id,
            action=outcome.action,
            my_vote=outcome.vote.direction if outcome.vote else None,
            upvotes=outcome.upvotes,
            downvotes=outcome.downvotes,
            score=outcome.score,
        )
