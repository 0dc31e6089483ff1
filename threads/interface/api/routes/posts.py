"""Post routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, status
from pydantic import Base64Bytes, BaseModel, Field

from threads.application.usecase.auth import GetCurrentUserUseCase
from threads.application.usecase.post import (
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    ListTrendingRequest,
    ListTrendingResponse,
    ListTrendingUseCase,
    MediaUpload,
)
from threads.domain.error import NotFoundError
from threads.domain.value import PostSortOrder, PostType, Timeframe
from threads.interface.api.session import current_user_id, require_user_id

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class MediaAPIUpload(BaseModel):
    """Media file sent inline as base64."""

    filename: str = Field(min_length=1, max_length=255)
    data: Base64Bytes


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    title: str = Field(min_length=1, max_length=300)
    community_id: str
    post_type: PostType = PostType.TEXT
    content: str | None = Field(default=None, max_length=40000)
    link_url: str | None = None
    image: MediaAPIUpload | None = None
    video: MediaAPIUpload | None = None


def _to_media(upload: MediaAPIUpload | None) -> MediaUpload | None:
    if upload is None:
        return None
    return MediaUpload(filename=upload.filename, content=upload.data)


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    sort: PostSortOrder = Query(default=PostSortOrder.HOT),
    community_id: str | None = Query(default=None),
    limit: int = Query(default=20, ge=1, le=100),
    auth_token: str | None = Cookie(default=None),
) -> ListPostsResponse:
    """List a hot, new or top feed, optionally for one community.

    If authenticated, includes the viewer's vote on each post.
    """
    user_id = await current_user_id(get_current_user_use_case, auth_token)
    request = ListPostsRequest(
        sort=sort, community_id=community_id, limit=limit, user_id=user_id
    )
    return await list_posts_use_case.execute(request)


@router.get("/trending", response_model=ListTrendingResponse)
async def list_trending(
    list_trending_use_case: FromDishka[ListTrendingUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    timeframe: Timeframe = Query(default=Timeframe.DAY),
    limit: int = Query(default=20, ge=1, le=100),
    auth_token: str | None = Cookie(default=None),
) -> ListTrendingResponse:
    """List trending posts for an hour, day, week or month."""
    user_id = await current_user_id(get_current_user_use_case, auth_token)
    request = ListTrendingRequest(timeframe=timeframe, limit=limit, user_id=user_id)
    return await list_trending_use_case.execute(request)


@router.post(
    "",
    response_model=CreatePostResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> CreatePostResponse:
    """Create a post in a community.

    Requires authentication. The author joins the community if not yet a
    member.

    Raises:
        HTTPException: If not authenticated, community not found or
            validation fails
    """
    user_id = await require_user_id(
        get_current_user_use_case, auth_token, "create posts"
    )

    try:
        use_case_request = CreatePostRequest(
            title=request.title,
            community_id=request.community_id,
            author_id=user_id,
            post_type=request.post_type,
            content=request.content,
            link_url=request.link_url,
            image=_to_media(request.image),
            video=_to_media(request.video),
        )
        return await create_post_use_case.execute(use_case_request)
    except NotFoundError as e:
        logfire.warn("Post creation failed - not found", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.get("/{post_id}", response_model=GetPostResponse)
async def get_post(
    post_id: str,
    get_post_use_case: FromDishka[GetPostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> GetPostResponse:
    """Get a single post with author and community.

    Raises:
        HTTPException: If post not found
    """
    user_id = await current_user_id(get_current_user_use_case, auth_token)
    try:
        return await get_post_use_case.execute(
            GetPostRequest(post_id=post_id, user_id=user_id)
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
