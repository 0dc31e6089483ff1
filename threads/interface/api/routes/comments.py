"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Response, status
from pydantic import BaseModel, Field

from threads.application.usecase.auth import GetCurrentUserUseCase
from threads.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetThreadRequest,
    GetThreadResponse,
    GetThreadUseCase,
    ThreadToggle,
    ToggleThreadStateRequest,
    ToggleThreadStateResponse,
    ToggleThreadStateUseCase,
)
from threads.domain.error import (
    ContentDeletedException,
    NotAuthorizedError,
    NotFoundError,
)
from threads.interface.api.session import (
    current_user_id,
    ensure_thread_session,
    require_user_id,
)

router = APIRouter(prefix="/posts", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str = Field(min_length=1, max_length=10000)
    parent_id: str | None = None  # Parent comment ID for replies


@router.get("/{post_id}/comments", response_model=GetThreadResponse)
async def get_thread(
    post_id: str,
    response: Response,
    get_thread_use_case: FromDishka[GetThreadUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    thread_session: str | None = Cookie(default=None),
) -> GetThreadResponse:
    """Get a post's comments as a nested, rendered thread.

    Collapse and reply-form state come from the ``thread_session`` cookie,
    issued here on first read. If authenticated, includes the viewer's
    vote on each comment.

    Raises:
        HTTPException: If post not found
    """
    user_id = await current_user_id(get_current_user_use_case, auth_token)
    session_id = ensure_thread_session(response, thread_session)

    try:
        return await get_thread_use_case.execute(
            GetThreadRequest(post_id=post_id, user_id=user_id, session_id=session_id)
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )


@router.post(
    "/{post_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    thread_session: str | None = Cookie(default=None),
) -> CreateCommentResponse:
    """Comment on a post or reply to another comment.

    Requires authentication.

    Raises:
        HTTPException: If not authenticated or validation fails
    """
    user_id = await require_user_id(
        get_current_user_use_case, auth_token, "create comments"
    )

    try:
        use_case_request = CreateCommentRequest(
            post_id=post_id,
            content=request.content,
            author_id=user_id,
            parent_id=request.parent_id,
            session_id=thread_session,
        )
        return await create_comment_use_case.execute(use_case_request)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.delete("/{post_id}/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    post_id: str,
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> DeleteCommentResponse:
    """Soft delete a comment.

    Only the comment author can delete. Replies stay in place.

    Raises:
        HTTPException: If not authenticated, not authorized or not found
    """
    user_id = await require_user_id(
        get_current_user_use_case, auth_token, "delete comments"
    )

    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(post_id=post_id, comment_id=comment_id, user_id=user_id)
        )
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized comment delete attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to delete this comment",
        )
    except (NotFoundError, ContentDeletedException) as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )


async def _toggle(
    use_case: ToggleThreadStateUseCase,
    response: Response,
    post_id: str,
    comment_id: str,
    thread_session: str | None,
    toggle: ThreadToggle,
) -> ToggleThreadStateResponse:
    session_id = ensure_thread_session(response, thread_session)
    try:
        return await use_case.execute(
            ToggleThreadStateRequest(
                post_id=post_id,
                comment_id=comment_id,
                session_id=session_id,
                toggle=toggle,
            )
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )


@router.post(
    "/{post_id}/comments/{comment_id}/collapse",
    response_model=ToggleThreadStateResponse,
)
async def toggle_collapse(
    post_id: str,
    comment_id: str,
    response: Response,
    toggle_thread_state_use_case: FromDishka[ToggleThreadStateUseCase],
    thread_session: str | None = Cookie(default=None),
) -> ToggleThreadStateResponse:
    """Collapse or expand a comment's replies for this viewing session."""
    return await _toggle(
        toggle_thread_state_use_case,
        response,
        post_id,
        comment_id,
        thread_session,
        ThreadToggle.COLLAPSED,
    )


@router.post(
    "/{post_id}/comments/{comment_id}/reply-form",
    response_model=ToggleThreadStateResponse,
)
async def toggle_reply_form(
    post_id: str,
    comment_id: str,
    response: Response,
    toggle_thread_state_use_case: FromDishka[ToggleThreadStateUseCase],
    thread_session: str | None = Cookie(default=None),
) -> ToggleThreadStateResponse:
    """Open or close the reply form under a comment for this viewing session."""
    return await _toggle(
        toggle_thread_state_use_case,
        response,
        post_id,
        comment_id,
        thread_session,
        ThreadToggle.REPLY_FORM,
    )
