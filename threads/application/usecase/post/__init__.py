"""Post use cases."""

from .create_post import (
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    MediaUpload,
)
from .get_post import GetPostRequest, GetPostResponse, GetPostUseCase
from .list_posts import (
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    PostItemBuilder,
    PostListItem,
)
from .list_trending import (
    ListTrendingRequest,
    ListTrendingResponse,
    ListTrendingUseCase,
)

__all__ = [
    "CreatePostRequest",
    "CreatePostResponse",
    "CreatePostUseCase",
    "GetPostRequest",
    "GetPostResponse",
    "GetPostUseCase",
    "ListPostsRequest",
    "ListPostsResponse",
    "ListPostsUseCase",
    "ListTrendingRequest",
    "ListTrendingResponse",
    "ListTrendingUseCase",
    "MediaUpload",
    "PostItemBuilder",
    "PostListItem",
]
