"""Domain services."""

from .auth_service import AuthService, IdentityProvider
from .base import Service
from .comment_service import CommentService
from .comment_tree import (
    CommentNode,
    build_comment_tree,
    count_nodes,
    iter_nodes,
    node_levels,
)
from .community_service import CommunityService
from .post_service import PostService
from .ranking import hot_score, rank_hot
from .search_service import SearchResults, SearchService
from .storage import FileStorage
from .user_service import UserService
from .vote_service import VoteAction, VoteOutcome, VoteService

__all__ = [
    "AuthService",
    "CommentNode",
    "CommentService",
    "CommunityService",
    "FileStorage",
    "IdentityProvider",
    "PostService",
    "SearchResults",
    "SearchService",
    "Service",
    "UserService",
    "VoteAction",
    "VoteOutcome",
    "VoteService",
    "build_comment_tree",
    "count_nodes",
    "hot_score",
    "iter_nodes",
    "node_levels",
    "rank_hot",
]
