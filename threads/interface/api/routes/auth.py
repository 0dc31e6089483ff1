"""Auth routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status

from threads.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)

router = APIRouter(tags=["auth"], route_class=DishkaRoute)


@router.get("/me", response_model=GetCurrentUserResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> GetCurrentUserResponse:
    """Get the signed-in user, creating the user record on first sign-in.

    Args:
        get_current_user_use_case: Get current user use case from DI
        auth_token: Session token from cookie

    Returns:
        Current user profile

    Raises:
        HTTPException: If not authenticated
    """
    user = None
    if auth_token:
        user = await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=auth_token)
        )
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return user
