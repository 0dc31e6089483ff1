"""Domain layer DI providers."""

from dishka import Scope, provide

from threads.config import RankingSettings, SearchSettings, ThreadingSettings
from threads.domain.repository import (
    CommentRepository,
    CommunityRepository,
    PostRepository,
    UserRepository,
    VoteRepository,
)
from threads.domain.service import (
    AuthService,
    CommentService,
    CommunityService,
    IdentityProvider,
    PostService,
    SearchService,
    UserService,
    VoteService,
)
from threads.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_auth_service(self, identity_provider: IdentityProvider) -> AuthService:
        """Provide authentication domain service."""
        return AuthService(identity_provider=identity_provider)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        threading_settings: ThreadingSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            max_comment_depth=threading_settings.max_comment_depth,
        )

    @provide
    def get_post_service(
        self, post_repository: PostRepository, ranking_settings: RankingSettings
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository,
            gravity=ranking_settings.gravity,
            time_offset=ranking_settings.time_offset,
            candidate_limit=ranking_settings.candidate_limit,
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        post_service: PostService,
        comment_service: CommentService,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            post_service=post_service,
            comment_service=comment_service,
        )

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_community_service(
        self, community_repository: CommunityRepository
    ) -> CommunityService:
        """Provide community domain service."""
        return CommunityService(community_repository=community_repository)

    @provide
    def get_search_service(
        self,
        post_repository: PostRepository,
        community_repository: CommunityRepository,
        user_repository: UserRepository,
        search_settings: SearchSettings,
    ) -> SearchService:
        """Provide search domain service."""
        return SearchService(
            post_repository=post_repository,
            community_repository=community_repository,
            user_repository=user_repository,
            post_limit=search_settings.post_limit,
            community_limit=search_settings.community_limit,
            user_limit=search_settings.user_limit,
        )
