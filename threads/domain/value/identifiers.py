"""Strongly typed identifiers for Threads entities.

Records in the backend store use string identifiers of the form
``<kind>_<hex>``. NewType keeps the different entity IDs apart for the
type checker while staying plain strings at runtime.
"""

from typing import NewType
from uuid import uuid4

UserId = NewType("UserId", str)
PostId = NewType("PostId", str)
CommentId = NewType("CommentId", str)
VoteId = NewType("VoteId", str)
CommunityId = NewType("CommunityId", str)
MembershipId = NewType("MembershipId", str)


def new_id(kind: str) -> str:
    """Generate a fresh record identifier.

    Args:
        kind: Record kind prefix (e.g. "comment", "vote")

    Returns:
        Identifier such as ``comment_9b1d...``
    """
    return f"{kind}_{uuid4().hex}"
