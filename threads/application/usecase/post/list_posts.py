"""List posts use case."""

from datetime import datetime
from typing import Sequence

import logfire
from pydantic import BaseModel, Field

from threads.domain.model import Community, Post, User
from threads.domain.service import (
    CommunityService,
    PostService,
    UserService,
    VoteService,
)
from threads.domain.value import (
    CommunityId,
    PostSortOrder,
    PostType,
    UserId,
    VotableType,
    VoteDirection,
)


class PostListItem(BaseModel):
    """Post list item in response."""

    post_id: str
    title: str
    content: str | None
    post_type: PostType
    image_url: str | None
    video_url: str | None
    link_url: str | None
    author_id: str
    author_username: str | None
    community_id: str
    community_name: str | None
    upvotes: int
    downvotes: int
    score: int
    comment_count: int
    is_pinned: bool
    is_locked: bool
    created_at: datetime
    my_vote: VoteDirection | None


def to_post_item(
    post: Post,
    author: User | None = None,
    community: Community | None = None,
    my_vote: VoteDirection | None = None,
) -> PostListItem:
    """Build a response item from a post and its related records."""
    return PostListItem(
        post_id=post.id,
        title=post.title,
        content=post.content,
        post_type=post.post_type,
        image_url=post.image_url,
        video_url=post.video_url,
        link_url=post.link_url,
        author_id=post.author_id,
        author_username=author.username.root if author else None,
        community_id=post.community_id,
        community_name=community.name if community else None,
        upvotes=post.upvotes,
        downvotes=post.downvotes,
        score=post.score,
        comment_count=post.comment_count,
        is_pinned=post.is_pinned,
        is_locked=post.is_locked,
        created_at=post.created_at,
        my_vote=my_vote,
    )


class PostItemBuilder:
    """Attaches authors, communities and the viewer's votes to posts."""

    def __init__(
        self,
        user_service: UserService,
        community_service: CommunityService,
        vote_service: VoteService,
    ) -> None:
        self.user_service = user_service
        self.community_service = community_service
        self.vote_service = vote_service

    async def build(
        self, posts: Sequence[Post], user_id: str | None = None
    ) -> list[PostListItem]:
        """Build list items, batching lookups per distinct ID."""
        if not posts:
            return []

        authors = await self.user_service.get_users_by_ids(
            [post.author_id for post in posts]
        )

        communities: dict[CommunityId, Community] = {}
        for community_id in dict.fromkeys(post.community_id for post in posts):
            community = await self.community_service.get_by_id(community_id)
            if community is not None:
                communities[community_id] = community

        # Use batch query to avoid N+1 problem
        votes: dict[str, VoteDirection] = {}
        if user_id:
            votes = await self.vote_service.get_user_votes(
                user_id=UserId(user_id),
                target_type=VotableType.POST,
                target_ids=[post.id for post in posts],
            )

        return [
            to_post_item(
                post,
                author=authors.get(post.author_id),
                community=communities.get(post.community_id),
                my_vote=votes.get(post.id),
            )
            for post in posts
        ]


class ListPostsRequest(BaseModel):
    """List posts request."""

    sort: PostSortOrder = PostSortOrder.HOT
    community_id: str | None = None  # Filter by community
    limit: int = Field(default=20, ge=1, le=100)
    user_id: str | None = None  # Current user ID (if authenticated)


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostListItem]
    sort: PostSortOrder
    limit: int


class ListPostsUseCase:
    """Use case for listing a hot, new or top feed."""

    def __init__(
        self, post_service: PostService, post_item_builder: PostItemBuilder
    ) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
            post_item_builder: Builder for response items
        """
        self.post_service = post_service
        self.post_item_builder = post_item_builder

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Args:
            request: List posts request with sort order and filters

        Returns:
            Posts in feed order with the viewer's votes
        """
        with logfire.span(
            "list_posts.execute",
            sort=request.sort.value,
            community_id=request.community_id,
            limit=request.limit,
        ):
            posts = await self.post_service.list_feed(
                sort=request.sort,
                community_id=(
                    CommunityId(request.community_id) if request.community_id else None
                ),
                limit=request.limit,
            )
            items = await self.post_item_builder.build(posts, request.user_id)

            logfire.info("Posts listed", count=len(items))

            return ListPostsResponse(
                posts=items, sort=request.sort, limit=request.limit
            )
