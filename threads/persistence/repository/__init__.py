"""Repository implementations backed by the backend record store."""

from .comment import BackendCommentRepository
from .community import BackendCommunityRepository
from .post import BackendPostRepository
from .user import BackendUserRepository
from .vote import BackendVoteRepository

__all__ = [
    "BackendCommentRepository",
    "BackendCommunityRepository",
    "BackendPostRepository",
    "BackendUserRepository",
    "BackendVoteRepository",
]
