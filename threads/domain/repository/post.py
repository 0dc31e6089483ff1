"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from threads.domain.model.post import Post
from threads.domain.value import CommunityId, PostId, PostSortOrder


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        sort: PostSortOrder = PostSortOrder.NEW,
        community_id: Optional[CommunityId] = None,
        limit: int = 20,
    ) -> List[Post]:
        """Find posts ordered by a backend-side sort.

        Only NEW (created_at DESC) and TOP (upvotes DESC) are ordered by the
        backend. HOT ranking happens in the domain over NEW candidates.

        Args:
            sort: NEW or TOP
            community_id: Filter by community (None for all communities)
            limit: Maximum number of posts to return

        Returns:
            List of posts
        """
        pass

    @abstractmethod
    async def create(self, post: Post) -> Post:
        """Persist a new post.

        Args:
            post: The post to create

        Returns:
            The stored post
        """
        pass

    @abstractmethod
    async def set_comment_count(self, post_id: PostId, comment_count: int) -> Post:
        """Overwrite the denormalized comment counter.

        Args:
            post_id: The post ID
            comment_count: New counter value

        Returns:
            Updated post
        """
        pass

    @abstractmethod
    async def adjust_votes(
        self, post_id: PostId, upvotes_delta: int, downvotes_delta: int
    ) -> Optional[Post]:
        """Apply deltas to the stored vote counters.

        Read-modify-write against the backend; counters never go below 0.

        Args:
            post_id: The post ID
            upvotes_delta: Change to apply to upvotes
            downvotes_delta: Change to apply to downvotes

        Returns:
            Updated post, or None if it doesn't exist
        """
        pass
