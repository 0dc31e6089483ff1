"""Get post use case."""

from pydantic import BaseModel

from threads.domain.error import NotFoundError
from threads.domain.service import PostService
from threads.domain.value import PostId

from .list_posts import PostItemBuilder, PostListItem


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str
    user_id: str | None = None  # Current user ID (if authenticated)


class GetPostResponse(BaseModel):
    """Get post response."""

    post: PostListItem


class GetPostUseCase:
    """Use case for reading a single post with its author and community."""

    def __init__(
        self, post_service: PostService, post_item_builder: PostItemBuilder
    ) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
            post_item_builder: Builder for response items
        """
        self.post_service = post_service
        self.post_item_builder = post_item_builder

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Execute get post flow.

        Args:
            request: Get post request

        Returns:
            Post with author, community and the viewer's vote

        Raises:
            NotFoundError: If the post doesn't exist
        """
        post = await self.post_service.get_post_by_id(PostId(request.post_id))
        if not post:
            raise NotFoundError("Post", request.post_id)

        [item] = await self.post_item_builder.build([post], request.user_id)
        return GetPostResponse(post=item)
