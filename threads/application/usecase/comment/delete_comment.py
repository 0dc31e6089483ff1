"""Delete comment use case."""

from pydantic import BaseModel

from threads.domain.error import NotFoundError
from threads.domain.service import CommentService
from threads.domain.value import CommentId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    post_id: str
    comment_id: str
    user_id: str  # User ID from authenticated user


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: str
    is_deleted: bool


class DeleteCommentUseCase:
    """Use case for soft deleting one's own comment.

    The comment keeps its place in the thread and renders as deleted, so
    the post's comment count is left unchanged.
    """

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment doesn't exist on this post
            NotAuthorizedError: If the user is not the author
            ContentDeletedException: If the comment is already deleted
        """
        comment_id = CommentId(request.comment_id)

        existing = await self.comment_service.get_comment_by_id(comment_id)
        if existing is None or existing.post_id != request.post_id:
            raise NotFoundError("Comment", comment_id)

        comment = await self.comment_service.soft_delete(
            comment_id, UserId(request.user_id)
        )
        return DeleteCommentResponse(
            comment_id=comment.id, is_deleted=comment.is_deleted
        )
