"""Post aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from threads.domain.model.common import DomainModel
from threads.domain.value import CommunityId, PostId, PostType, UserId


class Post(DomainModel):
    """Post aggregate root.

    Media posts carry the public URL of their uploaded file; link posts
    carry the target URL. ``comment_count`` is a denormalized counter bumped
    on every new comment, never recomputed from the comment rows.
    """

    id: PostId
    title: str = Field(min_length=1, max_length=300)
    content: Optional[str] = Field(default=None, max_length=40000)
    post_type: PostType = PostType.TEXT
    image_url: Optional[str] = None
    video_url: Optional[str] = None
    link_url: Optional[str] = None
    author_id: UserId
    community_id: CommunityId
    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)
    comment_count: int = Field(default=0, ge=0)
    is_pinned: bool = False
    is_locked: bool = False
    created_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_post_type_content(self) -> "Post":
        """Validate that the media or link URL matches the post type."""
        if self.post_type == PostType.LINK and not self.link_url:
            raise ValueError("URL is required for link posts")
        if self.post_type == PostType.IMAGE and not self.image_url:
            raise ValueError("Image is required for image posts")
        if self.post_type == PostType.VIDEO and not self.video_url:
            raise ValueError("Video is required for video posts")
        return self

    @property
    def score(self) -> int:
        """Net score (may be negative)."""
        return self.upvotes - self.downvotes
