"""Comment entity.

Comments are stored flat with a parent reference. The reply tree is
rebuilt from scratch on every read (see ``threads.domain.service.comment_tree``),
so nothing here links comments to each other directly.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from threads.domain.model.common import DomainModel
from threads.domain.value import CommentId, PostId, UserId

MAX_COMMENT_DEPTH = 10


class Comment(DomainModel):
    """Comment entity.

    Represents a top-level comment on a post or a reply to another comment.

    Threading is managed through:
    - parent_id: Direct parent comment (None for top-level)
    - depth: Nesting level stored at creation time, min(parent.depth + 1, 10)
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    content: str = Field(min_length=1, max_length=10000)
    parent_id: Optional[CommentId] = None
    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)
    depth: int = Field(default=0, ge=0, le=MAX_COMMENT_DEPTH)
    is_deleted: bool = False
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def score(self) -> int:
        """Net score (may be negative)."""
        return self.upvotes - self.downvotes
