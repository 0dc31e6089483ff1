"""Mappers for converting between backend records and domain models.

Backend records are flat JSON objects with camelCase keys. Timestamps are
stored as ISO-8601 strings and booleans may come back as ``"0"``/``"1"``
from the backend's SQL storage, so both are normalized here.
"""

from datetime import datetime
from typing import Any, Dict

from threads.domain.model import (
    Comment,
    Community,
    CommunityMembership,
    Post,
    User,
    Vote,
)
from threads.domain.value import (
    CommentId,
    CommunityId,
    MembershipId,
    PostId,
    PostType,
    UserId,
    Username,
    VotableType,
    VoteDirection,
    VoteId,
)

# Collection names in the backend record store
USERS = "users"
POSTS = "posts"
COMMENTS = "comments"
VOTES = "votes"
COMMUNITIES = "communities"
COMMUNITY_MEMBERS = "communityMembers"


def to_bool(value: Any) -> bool:
    """Normalize a stored boolean (bool, int or "0"/"1"/"true"/"false")."""
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true")
    return bool(value)


def to_datetime(value: Any) -> datetime:
    """Parse a stored timestamp."""
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value).replace("Z", "+00:00"))


def from_datetime(value: datetime) -> str:
    """Serialize a timestamp for storage."""
    return value.isoformat()


def record_to_comment(record: Dict[str, Any]) -> Comment:
    """Convert backend record to Comment domain model.

    Args:
        record: Backend record

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(record["id"]),
        post_id=PostId(record["postId"]),
        author_id=UserId(record["authorId"]),
        content=record["content"],
        parent_id=CommentId(record["parentId"]) if record.get("parentId") else None,
        upvotes=int(record.get("upvotes") or 0),
        downvotes=int(record.get("downvotes") or 0),
        depth=int(record.get("depth") or 0),
        is_deleted=to_bool(record.get("isDeleted", False)),
        created_at=to_datetime(record["createdAt"]),
    )


def comment_to_record(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to backend record.

    Args:
        comment: Comment domain model

    Returns:
        Record suitable for the ``comments`` collection
    """
    return {
        "id": comment.id,
        "postId": comment.post_id,
        "authorId": comment.author_id,
        "content": comment.content,
        "parentId": comment.parent_id,
        "upvotes": comment.upvotes,
        "downvotes": comment.downvotes,
        "depth": comment.depth,
        "isDeleted": comment.is_deleted,
        "createdAt": from_datetime(comment.created_at),
    }


def record_to_post(record: Dict[str, Any]) -> Post:
    """Convert backend record to Post domain model."""
    return Post(
        id=PostId(record["id"]),
        title=record["title"],
        content=record.get("content") or None,
        post_type=PostType(record.get("postType") or PostType.TEXT.value),
        image_url=record.get("imageUrl") or None,
        video_url=record.get("videoUrl") or None,
        link_url=record.get("linkUrl") or None,
        author_id=UserId(record["authorId"]),
        community_id=CommunityId(record["communityId"]),
        upvotes=int(record.get("upvotes") or 0),
        downvotes=int(record.get("downvotes") or 0),
        comment_count=int(record.get("commentCount") or 0),
        is_pinned=to_bool(record.get("isPinned", False)),
        is_locked=to_bool(record.get("isLocked", False)),
        created_at=to_datetime(record["createdAt"]),
    )


def post_to_record(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to backend record."""
    return {
        "id": post.id,
        "title": post.title,
        "content": post.content,
        "postType": post.post_type.value,
        "imageUrl": post.image_url,
        "videoUrl": post.video_url,
        "linkUrl": post.link_url,
        "authorId": post.author_id,
        "communityId": post.community_id,
        "upvotes": post.upvotes,
        "downvotes": post.downvotes,
        "commentCount": post.comment_count,
        "isPinned": post.is_pinned,
        "isLocked": post.is_locked,
        "createdAt": from_datetime(post.created_at),
    }


def record_to_vote(record: Dict[str, Any]) -> Vote:
    """Convert backend record to Vote domain model."""
    return Vote(
        id=VoteId(record["id"]),
        user_id=UserId(record["userId"]),
        target_id=record["targetId"],
        target_type=VotableType(record["targetType"]),
        direction=VoteDirection(record["voteType"]),
        created_at=to_datetime(record["createdAt"]),
    )


def vote_to_record(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to backend record."""
    return {
        "id": vote.id,
        "userId": vote.user_id,
        "targetId": vote.target_id,
        "targetType": vote.target_type.value,
        "voteType": vote.direction.value,
        "createdAt": from_datetime(vote.created_at),
    }


def record_to_user(record: Dict[str, Any]) -> User:
    """Convert backend record to User domain model."""
    return User(
        id=UserId(record["id"]),
        username=Username(record["username"]),
        email=record["email"],
        display_name=record.get("displayName") or record["username"],
        avatar_url=record.get("avatarUrl") or None,
        karma=int(record.get("karma") or 0),
        is_premium=to_bool(record.get("isPremium", False)),
        is_admin=to_bool(record.get("isAdmin", False)),
        is_moderator=to_bool(record.get("isModerator", False)),
        created_at=to_datetime(record["createdAt"]),
    )


def user_to_record(user: User) -> Dict[str, Any]:
    """Convert User domain model to backend record."""
    return {
        "id": user.id,
        "username": user.username.root,
        "email": user.email,
        "displayName": user.display_name,
        "avatarUrl": user.avatar_url,
        "karma": user.karma,
        "isPremium": user.is_premium,
        "isAdmin": user.is_admin,
        "isModerator": user.is_moderator,
        "createdAt": from_datetime(user.created_at),
    }


def record_to_community(record: Dict[str, Any]) -> Community:
    """Convert backend record to Community domain model."""
    return Community(
        id=CommunityId(record["id"]),
        name=record["name"],
        display_name=record.get("displayName") or record["name"],
        description=record.get("description") or "",
        icon_url=record.get("iconUrl") or None,
        member_count=int(record.get("memberCount") or 0),
        is_nsfw=to_bool(record.get("isNsfw", False)),
        creator_id=UserId(record["creatorId"]),
        created_at=to_datetime(record["createdAt"]),
    )


def community_to_record(community: Community) -> Dict[str, Any]:
    """Convert Community domain model to backend record."""
    return {
        "id": community.id,
        "name": community.name,
        "displayName": community.display_name,
        "description": community.description,
        "iconUrl": community.icon_url,
        "memberCount": community.member_count,
        "isNsfw": community.is_nsfw,
        "creatorId": community.creator_id,
        "createdAt": from_datetime(community.created_at),
    }


def record_to_membership(record: Dict[str, Any]) -> CommunityMembership:
    """Convert backend record to CommunityMembership domain model."""
    return CommunityMembership(
        id=MembershipId(record["id"]),
        user_id=UserId(record["userId"]),
        community_id=CommunityId(record["communityId"]),
        role=record.get("role") or "member",
        created_at=to_datetime(record["createdAt"]),
    )


def membership_to_record(membership: CommunityMembership) -> Dict[str, Any]:
    """Convert CommunityMembership domain model to backend record."""
    return {
        "id": membership.id,
        "userId": membership.user_id,
        "communityId": membership.community_id,
        "role": membership.role,
        "createdAt": from_datetime(membership.created_at),
    }
