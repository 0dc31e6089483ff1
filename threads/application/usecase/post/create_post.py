"""Create post use case."""

import time
from datetime import datetime

import logfire
from pydantic import BaseModel

from threads.domain.error import NotFoundError
from threads.domain.model.post import Post
from threads.domain.service import (
    CommunityService,
    FileStorage,
    PostService,
    UserService,
)
from threads.domain.value import CommunityId, PostId, PostType, UserId, new_id

from .list_posts import PostListItem, to_post_item


class MediaUpload(BaseModel):
    """Uploaded media file."""

    filename: str
    content: bytes


class CreatePostRequest(BaseModel):
    """Create post request."""

    title: str
    community_id: str
    author_id: str  # User ID from authenticated user
    post_type: PostType = PostType.TEXT
    content: str | None = None
    link_url: str | None = None
    image: MediaUpload | None = None
    video: MediaUpload | None = None


class CreatePostResponse(BaseModel):
    """Create post response."""

    post: PostListItem
    joined_community: bool


def media_path(upload: MediaUpload, kind: PostType) -> str:
    """Storage path for an upload: ``posts/<ms>_<name>`` (videos in a subfolder)."""
    timestamp = int(time.time() * 1000)
    folder = "posts/videos" if kind == PostType.VIDEO else "posts"
    return f"{folder}/{timestamp}_{upload.filename}"


class CreatePostUseCase:
    """Use case for creating a post in a community."""

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        community_service: CommunityService,
        file_storage: FileStorage,
    ) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
            community_service: Community domain service
            file_storage: Storage for image and video uploads
        """
        self.post_service = post_service
        self.user_service = user_service
        self.community_service = community_service
        self.file_storage = file_storage

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Steps:
        1. Load author and community
        2. Upload image or video, if any, to public storage
        3. Create Post entity (validation happens in domain model)
        4. Join the author to the community if not yet a member

        Args:
            request: Create post request

        Returns:
            Created post and whether the author joined the community

        Raises:
            NotFoundError: If the author or community doesn't exist
            ValueError: If the title is blank or media is missing for the type
        """
        author = await self.user_service.get_by_id(UserId(request.author_id))

        community = await self.community_service.get_by_id(
            CommunityId(request.community_id)
        )
        if community is None:
            raise NotFoundError("Community", request.community_id)

        title = request.title.strip()
        if not title:
            raise ValueError("Post title cannot be empty")

        with logfire.span(
            "create_post.execute",
            title=title,
            community_id=community.id,
            post_type=request.post_type.value,
        ):
            image_url = None
            video_url = None
            if request.post_type == PostType.IMAGE and request.image:
                image_url = await self.file_storage.upload(
                    request.image.content,
                    media_path(request.image, PostType.IMAGE),
                    upsert=True,
                )
            if request.post_type == PostType.VIDEO and request.video:
                video_url = await self.file_storage.upload(
                    request.video.content,
                    media_path(request.video, PostType.VIDEO),
                    upsert=True,
                )

            # Pydantic validation enforces the URL required by the post type
            post = Post(
                id=PostId(new_id("post")),
                title=title,
                content=(request.content or "").strip() or None,
                post_type=request.post_type,
                image_url=image_url,
                video_url=video_url,
                link_url=(
                    request.link_url if request.post_type == PostType.LINK else None
                ),
                author_id=author.id,
                community_id=community.id,
                upvotes=0,
                downvotes=0,
                comment_count=0,
                is_pinned=False,
                is_locked=False,
                created_at=datetime.now(),
            )
            saved = await self.post_service.create_post(post)

            _, joined = await self.community_service.ensure_membership(
                author.id, community
            )

            logfire.info(
                "Post created successfully",
                post_id=saved.id,
                joined_community=joined,
            )

            return CreatePostResponse(
                post=to_post_item(saved, author=author, community=community),
                joined_community=joined,
            )
