"""Get comment thread use case."""

import logfire
from pydantic import BaseModel

from threads.domain.error import NotFoundError
from threads.domain.service import (
    CommentService,
    PostService,
    UserService,
    VoteService,
)
from threads.domain.value import PostId, UserId, VotableType, VoteDirection

from .thread_view import ThreadNodeView, ThreadViewStore, render_thread


class GetThreadRequest(BaseModel):
    """Get thread request."""

    post_id: str
    user_id: str | None = None  # Current user ID (if authenticated)
    session_id: str | None = None  # Thread view session for collapse state


class GetThreadResponse(BaseModel):
    """Get thread response."""

    post_id: str
    comments: list[ThreadNodeView]
    total: int


class GetThreadUseCase:
    """Use case for reading a post's comments as a rendered thread."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        vote_service: VoteService,
        user_service: UserService,
        thread_view_store: ThreadViewStore,
        max_display_depth: int = 8,
        indent_width: int = 4,
    ) -> None:
        """Initialize get thread use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            vote_service: Vote service for the viewer's votes
            user_service: User service for author usernames
            thread_view_store: Per-session collapse/reply state
            max_display_depth: Level beyond which indentation stops growing
            indent_width: Indentation units per level
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.vote_service = vote_service
        self.user_service = user_service
        self.thread_view_store = thread_view_store
        self.max_display_depth = max_display_depth
        self.indent_width = indent_width

    async def execute(self, request: GetThreadRequest) -> GetThreadResponse:
        """Execute get thread flow.

        Steps:
        1. Load the post's comments oldest first and rebuild the tree
        2. Fetch authors and the viewer's votes in batches
        3. Render with the session's collapse and reply-form state

        Args:
            request: Get thread request

        Returns:
            Rendered thread; ``total`` counts every comment of the post

        Raises:
            NotFoundError: If the post doesn't exist
        """
        post_id = PostId(request.post_id)
        with logfire.span("get_thread.execute", post_id=post_id):
            post = await self.post_service.get_post_by_id(post_id)
            if not post:
                raise NotFoundError("Post", post_id)

            comments, roots = await self.comment_service.get_comment_tree(post_id)

            authors = await self.user_service.get_users_by_ids(
                [comment.author_id for comment in comments]
            )

            votes: dict[str, VoteDirection] = {}
            if request.user_id and comments:
                votes = await self.vote_service.get_user_votes(
                    user_id=UserId(request.user_id),
                    target_type=VotableType.COMMENT,
                    target_ids=[comment.id for comment in comments],
                )

            state = (
                self.thread_view_store.find(request.session_id)
                if request.session_id
                else None
            )

            rendered = render_thread(
                roots,
                state=state,
                votes=votes,
                authors=authors,
                viewer_id=request.user_id,
                max_display_depth=self.max_display_depth,
                indent_width=self.indent_width,
            )

            logfire.info(
                "Thread rendered",
                post_id=post_id,
                total=len(comments),
                roots=len(rendered),
            )

            return GetThreadResponse(
                post_id=post_id,
                comments=rendered,
                total=len(comments),
            )
