"""Search domain service.

The backend has no full-text search, so a small set of records is fetched
and filtered with a case-insensitive substring match.
"""

from dataclasses import dataclass, field

import logfire

from threads.domain.model import Community, Post, User
from threads.domain.repository import (
    CommunityRepository,
    PostRepository,
    UserRepository,
)
from threads.domain.value import PostSortOrder

from .base import Service


@dataclass
class SearchResults:
    """Matches grouped by kind."""

    posts: list[Post] = field(default_factory=list)
    communities: list[Community] = field(default_factory=list)
    users: list[User] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.posts) + len(self.communities) + len(self.users)


def _matches(needle: str, *fields: str | None) -> bool:
    return any(value and needle in value.lower() for value in fields)


class SearchService(Service):
    """Domain service for searching posts, communities and users."""

    def __init__(
        self,
        post_repository: PostRepository,
        community_repository: CommunityRepository,
        user_repository: UserRepository,
        post_limit: int = 20,
        community_limit: int = 10,
        user_limit: int = 10,
    ) -> None:
        """Initialize search service.

        Args:
            post_repository: Post repository
            community_repository: Community repository
            user_repository: User repository
            post_limit: Number of newest posts scanned
            community_limit: Number of communities scanned
            user_limit: Number of users scanned
        """
        self.post_repository = post_repository
        self.community_repository = community_repository
        self.user_repository = user_repository
        self.post_limit = post_limit
        self.community_limit = community_limit
        self.user_limit = user_limit

    async def search(self, query: str) -> SearchResults:
        """Search posts, communities and users.

        Args:
            query: Free text; blank queries return no results

        Returns:
            Matching records grouped by kind
        """
        needle = query.strip().lower()
        if not needle:
            return SearchResults()

        with logfire.span("search_service.search", query=needle):
            posts = await self.post_repository.find_all(
                sort=PostSortOrder.NEW, limit=self.post_limit
            )
            communities = await self.community_repository.find_all(
                limit=self.community_limit
            )
            users = await self.user_repository.find_all(limit=self.user_limit)

            results = SearchResults(
                posts=[p for p in posts if _matches(needle, p.title, p.content)],
                communities=[
                    c
                    for c in communities
                    if _matches(needle, c.name, c.display_name, c.description)
                ],
                users=[
                    u
                    for u in users
                    if _matches(needle, u.username.root, u.display_name)
                ],
            )
            logfire.info(
                "Search completed",
                query=needle,
                posts=len(results.posts),
                communities=len(results.communities),
                users=len(results.users),
            )
            return results
