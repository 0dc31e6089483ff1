"""Repository interfaces for the Threads domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer on top of the backend client.
"""

from threads.domain.repository.comment import CommentRepository
from threads.domain.repository.community import CommunityRepository
from threads.domain.repository.post import PostRepository
from threads.domain.repository.user import UserRepository
from threads.domain.repository.vote import VoteRepository

__all__ = [
    "CommentRepository",
    "CommunityRepository",
    "PostRepository",
    "UserRepository",
    "VoteRepository",
]
