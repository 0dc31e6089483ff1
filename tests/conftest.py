"""Test configuration and fixtures."""

from datetime import datetime, timedelta

import logfire
import pytest

from threads.domain.model import Comment, Community, Post, User
from threads.domain.value import (
    CommentId,
    CommunityId,
    PostId,
    UserId,
    Username,
)

# Console-only, nothing leaves the test process
logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2024, 1, 1, 12, 0)


def make_comment(
    comment_id: str,
    parent_id: str | None = None,
    *,
    post_id: str = "post_1",
    author_id: str = "user_1",
    content: str | None = None,
    depth: int = 0,
    minutes: int = 0,
    is_deleted: bool = False,
    upvotes: int = 0,
    downvotes: int = 0,
) -> Comment:
    """Helper to build comments for tree and thread tests.

    ``minutes`` offsets ``created_at`` from a fixed base time, which is what
    orders siblings.
    """
    return Comment(
        id=CommentId(comment_id),
        post_id=PostId(post_id),
        author_id=UserId(author_id),
        parent_id=CommentId(parent_id) if parent_id else None,
        content=content or f"Comment {comment_id}",
        depth=depth,
        upvotes=upvotes,
        downvotes=downvotes,
        is_deleted=is_deleted,
        created_at=BASE_TIME + timedelta(minutes=minutes),
    )


def make_post(
    post_id: str = "post_1",
    *,
    title: str | None = None,
    content: str | None = None,
    author_id: str = "user_1",
    community_id: str = "community_1",
    upvotes: int = 0,
    downvotes: int = 0,
    comment_count: int = 0,
    created_at: datetime | None = None,
) -> Post:
    """Helper to build text posts."""
    return Post(
        id=PostId(post_id),
        title=title or f"Post {post_id}",
        content=content,
        author_id=UserId(author_id),
        community_id=CommunityId(community_id),
        upvotes=upvotes,
        downvotes=downvotes,
        comment_count=comment_count,
        created_at=created_at or BASE_TIME,
    )


def make_user(
    user_id: str = "user_1",
    username: str | None = None,
    *,
    email: str | None = None,
    display_name: str | None = None,
) -> User:
    """Helper to build users."""
    username = username or user_id
    return User(
        id=UserId(user_id),
        username=Username(username),
        email=email or f"{username}@example.com",
        display_name=display_name or username.capitalize(),
        created_at=BASE_TIME,
    )


def make_community(
    community_id: str = "community_1",
    name: str = "science",
    *,
    display_name: str | None = None,
    description: str = "",
    member_count: int = 0,
) -> Community:
    """Helper to build communities."""
    return Community(
        id=CommunityId(community_id),
        name=name,
        display_name=display_name or name.capitalize(),
        description=description,
        member_count=member_count,
        creator_id=UserId("user_admin"),
        created_at=BASE_TIME,
    )


@pytest.fixture
def now() -> datetime:
    return datetime(2024, 1, 2, 12, 0)
