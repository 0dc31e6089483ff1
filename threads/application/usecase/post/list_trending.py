"""List trending posts use case."""

from pydantic import BaseModel, Field

from threads.domain.service import PostService
from threads.domain.value import Timeframe

from .list_posts import PostItemBuilder, PostListItem


class ListTrendingRequest(BaseModel):
    """List trending request."""

    timeframe: Timeframe = Timeframe.DAY
    limit: int = Field(default=20, ge=1, le=100)
    user_id: str | None = None


class ListTrendingResponse(BaseModel):
    """List trending response."""

    posts: list[PostListItem]
    timeframe: Timeframe


class ListTrendingUseCase:
    """Use case for the trending page."""

    def __init__(
        self, post_service: PostService, post_item_builder: PostItemBuilder
    ) -> None:
        self.post_service = post_service
        self.post_item_builder = post_item_builder

    async def execute(self, request: ListTrendingRequest) -> ListTrendingResponse:
        """Rank recent posts inside the timeframe by decaying score."""
        posts = await self.post_service.list_trending(
            timeframe=request.timeframe, limit=request.limit
        )
        items = await self.post_item_builder.build(posts, request.user_id)
        return ListTrendingResponse(posts=items, timeframe=request.timeframe)
