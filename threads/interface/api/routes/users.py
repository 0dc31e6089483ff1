"""User profile routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status

from threads.application.usecase.user import (
    GetUserRequest,
    GetUserResponse,
    GetUserUseCase,
)
from threads.domain.error import NotFoundError

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.get("/{user_id}", response_model=GetUserResponse)
async def get_user(
    user_id: str,
    get_user_use_case: FromDishka[GetUserUseCase],
) -> GetUserResponse:
    """Get a user's public profile by ID.

    Raises:
        HTTPException: If user not found
    """
    try:
        return await get_user_use_case.execute(GetUserRequest(user_id=user_id))
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User '{user_id}' not found",
        )
