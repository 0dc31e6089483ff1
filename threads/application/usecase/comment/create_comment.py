"""Create comment use case."""

from datetime import datetime

from pydantic import BaseModel

from threads.application.usecase.base import BaseUseCase
from threads.domain.service import CommentService, PostService
from threads.domain.value import CommentId, PostId, UserId

from .thread_view import ThreadViewStore


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str
    content: str
    author_id: str  # User ID from authenticated user
    parent_id: str | None = None  # Parent comment ID for replies
    session_id: str | None = None  # Thread view session, to close the reply form


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment_id: str
    post_id: str
    content: str
    parent_id: str | None
    depth: int
    created_at: datetime
    comment_count: int


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on a post or replying to another comment."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        thread_view_store: ThreadViewStore,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            thread_view_store: Per-session thread view state
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.thread_view_store = thread_view_store

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Verify post exists via post service
        2. Create comment via comment service (validates parent if replying)
        3. Increment post's comment count
        4. Close the reply form the reply was written in

        Args:
            request: Create comment request

        Returns:
            Create comment response with comment details

        Raises:
            ValueError: If post not found, content blank or parent invalid
        """
        post_id = PostId(request.post_id)

        # Verify post exists
        post = await self.post_service.get_post_by_id(post_id)
        if not post:
            raise ValueError("Post not found")

        parent_id = CommentId(request.parent_id) if request.parent_id else None
        comment = await self.comment_service.create_comment(
            post_id=post_id,
            author_id=UserId(request.author_id),
            content=request.content,
            parent_id=parent_id,
        )

        # Denormalized counter, bumped once per comment
        updated_post = await self.post_service.increment_comment_count(post_id)

        if parent_id and request.session_id:
            state = self.thread_view_store.find(request.session_id)
            if state is not None:
                state.close_reply_form(parent_id)

        return CreateCommentResponse(
            comment_id=comment.id,
            post_id=comment.post_id,
            content=comment.content,
            parent_id=comment.parent_id,
            depth=comment.depth,
            created_at=comment.created_at,
            comment_count=updated_post.comment_count,
        )
