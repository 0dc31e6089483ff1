"""Search routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query

from threads.application.usecase.auth import GetCurrentUserUseCase
from threads.application.usecase.search import (
    SearchRequest,
    SearchResponse,
    SearchUseCase,
)
from threads.interface.api.session import current_user_id

router = APIRouter(prefix="/search", tags=["search"], route_class=DishkaRoute)


@router.get("", response_model=SearchResponse)
async def search(
    search_use_case: FromDishka[SearchUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    q: str = Query(default="", max_length=200),
    auth_token: str | None = Cookie(default=None),
) -> SearchResponse:
    """Search posts, communities and users by case-insensitive substring.

    A blank query returns empty results.
    """
    user_id = await current_user_id(get_current_user_use_case, auth_token)
    return await search_use_case.execute(SearchRequest(query=q, user_id=user_id))
