"""Vote entity.

Each user holds at most one vote per post or comment. Voting the same
direction again retracts the vote; voting the other direction flips it.
"""

from datetime import datetime

from pydantic import Field

from threads.domain.model.common import DomainModel
from threads.domain.value import UserId, VotableType, VoteDirection, VoteId


class Vote(DomainModel):
    """Vote entity.

    Polymorphic reference to its target through (target_type, target_id).
    """

    id: VoteId
    user_id: UserId
    target_id: str  # PostId or CommentId
    target_type: VotableType
    direction: VoteDirection
    created_at: datetime = Field(default_factory=datetime.now)
