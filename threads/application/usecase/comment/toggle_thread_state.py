"""Toggle thread view state use case."""

from enum import Enum

from pydantic import BaseModel

from threads.domain.error import NotFoundError
from threads.domain.service import CommentService
from threads.domain.value import CommentId

from .thread_view import ThreadViewStore


class ThreadToggle(str, Enum):
    """Per-comment flag to flip."""

    COLLAPSED = "collapsed"
    REPLY_FORM = "reply_form"


class ToggleThreadStateRequest(BaseModel):
    """Toggle thread state request."""

    post_id: str
    comment_id: str
    session_id: str
    toggle: ThreadToggle


class ToggleThreadStateResponse(BaseModel):
    """Toggle thread state response."""

    comment_id: str
    collapsed: bool
    reply_form_open: bool


class ToggleThreadStateUseCase:
    """Use case for collapsing a comment or opening its reply form."""

    def __init__(
        self, comment_service: CommentService, thread_view_store: ThreadViewStore
    ) -> None:
        """Initialize toggle thread state use case.

        Args:
            comment_service: Comment domain service
            thread_view_store: Per-session thread view state
        """
        self.comment_service = comment_service
        self.thread_view_store = thread_view_store

    async def execute(
        self, request: ToggleThreadStateRequest
    ) -> ToggleThreadStateResponse:
        """Flip one flag of a comment in the session's view state.

        Raises:
            NotFoundError: If the comment doesn't exist on this post
        """
        comment = await self.comment_service.get_comment_by_id(
            CommentId(request.comment_id)
        )
        if comment is None or comment.post_id != request.post_id:
            raise NotFoundError("Comment", request.comment_id)

        state = self.thread_view_store.get(request.session_id)
        if request.toggle == ThreadToggle.COLLAPSED:
            node = state.toggle_collapsed(comment.id)
        else:
            node = state.toggle_reply_form(comment.id)

        return ToggleThreadStateResponse(
            comment_id=comment.id,
            collapsed=node.collapsed,
            reply_form_open=node.reply_form_open,
        )
