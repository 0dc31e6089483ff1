"""Post domain service."""

from datetime import datetime

import logfire

from threads.domain.model.post import Post
from threads.domain.repository import PostRepository
from threads.domain.value import CommunityId, PostId, PostSortOrder, Timeframe

from .base import Service
from .ranking import rank_hot


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self,
        post_repository: PostRepository,
        gravity: float = 1.5,
        time_offset: float = 2.0,
        candidate_limit: int = 50,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            gravity: Decay exponent for hot ranking
            time_offset: Hours added to post age before decay
            candidate_limit: Number of newest posts ranked for hot/trending
        """
        self.post_repository = post_repository
        self.gravity = gravity
        self.time_offset = time_offset
        self.candidate_limit = candidate_limit

    async def create_post(self, post: Post) -> Post:
        """Persist a new post.

        Args:
            post: Post to create

        Returns:
            Created post
        """
        with logfire.span(
            "post_service.create_post", post_id=post.id, title=post.title
        ):
            saved = await self.post_repository.create(post)
            logfire.info(
                "Post created", post_id=saved.id, community_id=saved.community_id
            )
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=post_id):
            post = await self.post_repository.find_by_id(post_id)

            if post:
                logfire.info("Post found", post_id=post_id, title=post.title)
            else:
                logfire.warn("Post not found", post_id=post_id)

            return post

    async def increment_comment_count(self, post_id: PostId) -> Post:
        """Increment a post's comment count.

        Args:
            post_id: Post ID

        Returns:
            Updated post

        Raises:
            ValueError: If post not found
        """
        with logfire.span("post_service.increment_comment_count", post_id=post_id):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.error(
                    "Post not found for comment count increment", post_id=post_id
                )
                raise ValueError("Post not found")

            saved = await self.post_repository.set_comment_count(
                post_id, post.comment_count + 1
            )
            logfire.info(
                "Comment count incremented",
                post_id=post_id,
                new_count=saved.comment_count,
            )
            return saved

    async def list_feed(
        self,
        sort: PostSortOrder = PostSortOrder.HOT,
        community_id: CommunityId | None = None,
        limit: int = 20,
        now: datetime | None = None,
    ) -> list[Post]:
        """List posts for a feed.

        NEW and TOP are ordered by the backend. HOT ranks the newest
        ``candidate_limit`` posts by decaying score.

        Args:
            sort: Feed sort order
            community_id: Restrict to one community (None for all)
            limit: Maximum number of posts to return
            now: Reference time for hot ranking (defaults to now)

        Returns:
            Posts in feed order
        """
        with logfire.span(
            "post_service.list_feed",
            sort=sort.value,
            community_id=community_id,
            limit=limit,
        ):
            if sort == PostSortOrder.HOT:
                candidates = await self.post_repository.find_all(
                    sort=PostSortOrder.NEW,
                    community_id=community_id,
                    limit=max(self.candidate_limit, limit),
                )
                posts = rank_hot(
                    candidates,
                    now or datetime.now(),
                    gravity=self.gravity,
                    time_offset=self.time_offset,
                )[:limit]
            else:
                posts = await self.post_repository.find_all(
                    sort=sort, community_id=community_id, limit=limit
                )

            logfire.info("Feed listed", sort=sort.value, count=len(posts))
            return posts

    async def list_trending(
        self,
        timeframe: Timeframe = Timeframe.DAY,
        limit: int = 20,
        now: datetime | None = None,
    ) -> list[Post]:
        """List trending posts for a timeframe.

        Keeps the newest ``candidate_limit`` posts created inside the window
        and ranks them by decaying score.

        Args:
            timeframe: Window to consider
            limit: Maximum number of posts to return
            now: Reference time (defaults to now)

        Returns:
            Trending posts, highest score first
        """
        with logfire.span(
            "post_service.list_trending", timeframe=timeframe.value, limit=limit
        ):
            now = now or datetime.now()
            cutoff = timeframe.cutoff(now)
            candidates = await self.post_repository.find_all(
                sort=PostSortOrder.NEW, limit=self.candidate_limit
            )
            recent = [post for post in candidates if post.created_at > cutoff]
            posts = rank_hot(
                recent, now, gravity=self.gravity, time_offset=self.time_offset
            )[:limit]
            logfire.info(
                "Trending listed",
                timeframe=timeframe.value,
                candidates=len(candidates),
                count=len(posts),
            )
            return posts

    async def adjust_votes(
        self, post_id: PostId, upvotes_delta: int, downvotes_delta: int
    ) -> Post | None:
        """Apply vote counter deltas to a post.

        Args:
            post_id: Post ID
            upvotes_delta: Change to upvotes
            downvotes_delta: Change to downvotes

        Returns:
            Updated post, or None if it doesn't exist
        """
        with logfire.span(
            "post_service.adjust_votes",
            post_id=post_id,
            upvotes_delta=upvotes_delta,
            downvotes_delta=downvotes_delta,
        ):
            updated = await self.post_repository.adjust_votes(
                post_id, upvotes_delta, downvotes_delta
            )
            if updated is not None:
                logfire.info(
                    "Post votes adjusted",
                    post_id=post_id,
                    upvotes=updated.upvotes,
                    downvotes=updated.downvotes,
                )
            return updated
