"""Persistence infrastructure providers."""

from dishka import Scope, provide

from threads.adapter.backend import BackendClient
from threads.domain.repository import (
    CommentRepository,
    CommunityRepository,
    PostRepository,
    UserRepository,
    VoteRepository,
)
from threads.domain.service import FileStorage, IdentityProvider
from threads.persistence.repository import (
    BackendCommentRepository,
    BackendCommunityRepository,
    BackendPostRepository,
    BackendUserRepository,
    BackendVoteRepository,
)
from threads.util.di.base import ProviderBase


class ProdPersistenceProvider(ProviderBase):
    """Repositories on top of whichever backend client is provided.

    Concrete, no mocks needed: swapping the backend component is enough.
    """

    @provide(scope=Scope.APP)
    def get_identity_provider(self, backend: BackendClient) -> IdentityProvider:
        """Provide the backend auth service as identity provider."""
        return backend

    @provide(scope=Scope.APP)
    def get_file_storage(self, backend: BackendClient) -> FileStorage:
        """Provide backend storage for uploads."""
        return backend

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, backend: BackendClient) -> UserRepository:
        """Provide User repository."""
        return BackendUserRepository(backend)

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, backend: BackendClient) -> PostRepository:
        """Provide Post repository."""
        return BackendPostRepository(backend)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, backend: BackendClient) -> CommentRepository:
        """Provide Comment repository."""
        return BackendCommentRepository(backend)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, backend: BackendClient) -> VoteRepository:
        """Provide Vote repository."""
        return BackendVoteRepository(backend)

    @provide(scope=Scope.REQUEST)
    def get_community_repository(
        self, backend: BackendClient
    ) -> CommunityRepository:
        """Provide Community repository."""
        return BackendCommunityRepository(backend)
