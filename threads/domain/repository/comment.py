"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from threads.domain.model.comment import Comment
from threads.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post in chronological order.

        Soft-deleted comments are included so that their replies keep
        a resolvable parent.

        Args:
            post_id: The post ID

        Returns:
            Comments ordered by created_at ascending
        """
        pass

    @abstractmethod
    async def create(self, comment: Comment) -> Comment:
        """Persist a new comment.

        Args:
            comment: The comment to create

        Returns:
            The stored comment
        """
        pass

    @abstractmethod
    async def mark_deleted(self, comment_id: CommentId) -> Optional[Comment]:
        """Soft delete a comment by flipping its deleted flag.

        Args:
            comment_id: The comment ID

        Returns:
            Updated comment, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def adjust_votes(
        self, comment_id: CommentId, upvotes_delta: int, downvotes_delta: int
    ) -> Optional[Comment]:
        """Apply deltas to the stored vote counters.

        Read-modify-write against the backend; counters never go below 0.

        Args:
            comment_id: The comment ID
            upvotes_delta: Change to apply to upvotes
            downvotes_delta: Change to apply to downvotes

        Returns:
            Updated comment, or None if it doesn't exist
        """
        pass
