"""Domain model entities for Threads."""

from threads.domain.model.comment import MAX_COMMENT_DEPTH, Comment
from threads.domain.model.community import Community, CommunityMembership
from threads.domain.model.post import Post
from threads.domain.model.user import User
from threads.domain.model.vote import Vote

__all__ = [
    "MAX_COMMENT_DEPTH",
    "Comment",
    "Community",
    "CommunityMembership",
    "Post",
    "User",
    "Vote",
]
