"""Search use case."""

from pydantic import BaseModel

from threads.application.usecase.post.list_posts import PostItemBuilder, PostListItem
from threads.domain.service import SearchService


class CommunityItem(BaseModel):
    """Community search hit."""

    community_id: str
    name: str
    display_name: str
    description: str
    member_count: int


class UserItem(BaseModel):
    """User search hit."""

    user_id: str
    username: str
    display_name: str
    avatar_url: str | None
    karma: int


class SearchRequest(BaseModel):
    """Search request."""

    query: str
    user_id: str | None = None


class SearchResponse(BaseModel):
    """Search response."""

    query: str
    posts: list[PostListItem]
    communities: list[CommunityItem]
    users: list[UserItem]
    total: int


class SearchUseCase:
    """Use case for searching posts, communities and users."""

    def __init__(
        self, search_service: SearchService, post_item_builder: PostItemBuilder
    ) -> None:
        self.search_service = search_service
        self.post_item_builder = post_item_builder

    async def execute(self, request: SearchRequest) -> SearchResponse:
        """Run a case-insensitive substring search."""
        results = await self.search_service.search(request.query)
        posts = await self.post_item_builder.build(results.posts, request.user_id)

        return SearchResponse(
            query=request.query,
            posts=posts,
            communities=[
                CommunityItem(
                    community_id=community.id,
                    name=community.name,
                    display_name=community.display_name,
                    description=community.description,
                    member_count=community.member_count,
                )
                for community in results.communities
            ],
            users=[
                UserItem(
                    user_id=user.id,
                    username=user.username.root,
                    display_name=user.display_name,
                    avatar_url=user.avatar_url,
                    karma=user.karma,
                )
                for user in results.users
            ],
            total=results.total,
        )
