"""Backend record-store implementation of Post repository."""

from typing import List, Optional

from threads.adapter.backend import BackendClient
from threads.adapter.backend.client import SortDirection
from threads.domain.model import Post
from threads.domain.repository import PostRepository
from threads.domain.value import CommunityId, PostId, PostSortOrder
from threads.persistence.mappers import POSTS, post_to_record, record_to_post


class BackendPostRepository(PostRepository):
    """Post repository on top of the ``posts`` collection."""

    def __init__(self, backend: BackendClient) -> None:
        """Initialize repository with a backend client.

        Args:
            backend: Backend client
        """
        self.collection = backend.collection(POSTS)

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        record = await self.collection.get(post_id)
        return record_to_post(record) if record else None

    async def find_all(
        self,
        sort: PostSortOrder = PostSortOrder.NEW,
        community_id: Optional[CommunityId] = None,
        limit: int = 20,
    ) -> List[Post]:
        """Find posts ordered by the backend."""
        order_by: dict[str, SortDirection]
        if sort == PostSortOrder.TOP:
            order_by = {"upvotes": "desc"}
        else:
            order_by = {"createdAt": "desc"}

        records = await self.collection.list(
            where={"communityId": community_id} if community_id else None,
            order_by=order_by,
            limit=limit,
        )
        return [record_to_post(record) for record in records]

    async def create(self, post: Post) -> Post:
        """Persist a new post."""
        record = await self.collection.create(post_to_record(post))
        return record_to_post(record)

    async def set_comment_count(self, post_id: PostId, comment_count: int) -> Post:
        """Overwrite the comment counter."""
        record = await self.collection.update(post_id, {"commentCount": comment_count})
        return record_to_post(record)

    async def adjust_votes(
        self, post_id: PostId, upvotes_delta: int, downvotes_delta: int
    ) -> Optional[Post]:
        """Apply deltas to the vote counters (read-modify-write)."""
        post = await self.find_by_id(post_id)
        if post is None:
            return None
        record = await self.collection.update(
            post_id,
            {
                "upvotes": max(post.upvotes + upvotes_delta, 0),
                "downvotes": max(post.downvotes + downvotes_delta, 0),
            },
        )
        return record_to_post(record)
