"""Domain value objects for Threads."""

from threads.domain.value.identifiers import (
    CommentId,
    CommunityId,
    MembershipId,
    PostId,
    UserId,
    VoteId,
    new_id,
)
from threads.domain.value.types import (
    Identity,
    PostSortOrder,
    PostType,
    Timeframe,
    Username,
    VotableType,
    VoteDirection,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "VoteId",
    "CommunityId",
    "MembershipId",
    "new_id",
    # Types
    "Identity",
    "PostSortOrder",
    "PostType",
    "Timeframe",
    "Username",
    "VotableType",
    "VoteDirection",
]
