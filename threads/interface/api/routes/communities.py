"""Community routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status

from threads.application.usecase.auth import GetCurrentUserUseCase
from threads.application.usecase.community import (
    CommunityView,
    GetCommunityRequest,
    GetCommunityUseCase,
    ToggleMembershipRequest,
    ToggleMembershipUseCase,
)
from threads.domain.error import NotFoundError
from threads.interface.api.session import current_user_id, require_user_id

router = APIRouter(prefix="/communities", tags=["communities"], route_class=DishkaRoute)


@router.get("/{community_id}", response_model=CommunityView)
async def get_community(
    community_id: str,
    get_community_use_case: FromDishka[GetCommunityUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> CommunityView:
    """Get a community and whether the viewer is a member.

    Raises:
        HTTPException: If community not found
    """
    user_id = await current_user_id(get_current_user_use_case, auth_token)
    try:
        return await get_community_use_case.execute(
            GetCommunityRequest(community_id=community_id, user_id=user_id)
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )


@router.post("/{community_id}/membership", response_model=CommunityView)
async def toggle_membership(
    community_id: str,
    toggle_membership_use_case: FromDishka[ToggleMembershipUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> CommunityView:
    """Join the community, or leave it when already a member.

    Requires authentication.

    Raises:
        HTTPException: If not authenticated or community not found
    """
    user_id = await require_user_id(
        get_current_user_use_case, auth_token, "join communities"
    )

    try:
        return await toggle_membership_use_case.execute(
            ToggleMembershipRequest(community_id=community_id, user_id=user_id)
        )
    except NotFoundError as e:
        logfire.warn("Membership toggle failed - not found", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
