"""Vote routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel

from threads.application.usecase.auth import GetCurrentUserUseCase
from threads.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
)
from threads.domain.error import NotFoundError
from threads.domain.value import VotableType, VoteDirection
from threads.interface.api.session import require_user_id

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class VoteAPIRequest(BaseModel):
    """API request for voting."""

    direction: VoteDirection


async def _cast(
    use_case: CastVoteUseCase,
    target_type: VotableType,
    target_id: str,
    user_id: str,
    direction: VoteDirection,
) -> CastVoteResponse:
    try:
        return await use_case.execute(
            CastVoteRequest(
                target_type=target_type,
                target_id=target_id,
                user_id=user_id,
                direction=direction,
            )
        )
    except NotFoundError as e:
        logfire.warn("Vote target not found", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )


@router.post("/posts/{post_id}/vote", response_model=CastVoteResponse)
async def vote_on_post(
    post_id: str,
    request: VoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Upvote or downvote a post.

    Voting the same direction again removes the vote.

    Raises:
        HTTPException: If not authenticated or post not found
    """
    user_id = await require_user_id(get_current_user_use_case, auth_token, "vote")
    return await _cast(
        cast_vote_use_case, VotableType.POST, post_id, user_id, request.direction
    )


@router.post("/comments/{comment_id}/vote", response_model=CastVoteResponse)
async def vote_on_comment(
    comment_id: str,
    request: VoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Upvote or downvote a comment.

    Raises:
        HTTPException: If not authenticated or comment not found
    """
    user_id = await require_user_id(get_current_user_use_case, auth_token, "vote")
    return await _cast(
        cast_vote_use_case,
        VotableType.COMMENT,
        comment_id,
        user_id,
        request.direction,
    )
