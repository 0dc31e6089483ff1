"""Backend record-store implementation of Comment repository."""

from typing import List, Optional

from threads.adapter.backend import BackendClient
from threads.domain.model import Comment
from threads.domain.repository import CommentRepository
from threads.domain.value import CommentId, PostId
from threads.persistence.mappers import (
    COMMENTS,
    comment_to_record,
    record_to_comment,
)


class BackendCommentRepository(CommentRepository):
    """Comment repository on top of the ``comments`` collection."""

    def __init__(self, backend: BackendClient) -> None:
        """Initialize repository with a backend client.

        Args:
            backend: Backend client
        """
        self.collection = backend.collection(COMMENTS)

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        record = await self.collection.get(comment_id)
        return record_to_comment(record) if record else None

    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post, oldest first."""
        records = await self.collection.list(
            where={"postId": post_id}, order_by={"createdAt": "asc"}
        )
        return [record_to_comment(record) for record in records]

    async def create(self, comment: Comment) -> Comment:
        """Persist a new comment."""
        record = await self.collection.create(comment_to_record(comment))
        return record_to_comment(record)

    async def mark_deleted(self, comment_id: CommentId) -> Optional[Comment]:
        """Flip the comment's deleted flag."""
        if await self.collection.get(comment_id) is None:
            return None
        record = await self.collection.update(comment_id, {"isDeleted": True})
        return record_to_comment(record)

    async def adjust_votes(
        self, comment_id: CommentId, upvotes_delta: int, downvotes_delta: int
    ) -> Optional[Comment]:
        """Apply deltas to the vote counters (read-modify-write)."""
        comment = await self.find_by_id(comment_id)
        if comment is None:
            return None
        record = await self.collection.update(
            comment_id,
            {
                "upvotes": max(comment.upvotes + upvotes_delta, 0),
                "downvotes": max(comment.downvotes + downvotes_delta, 0),
            },
        )
        return record_to_comment(record)
