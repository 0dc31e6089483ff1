"""Application layer DI providers."""

from dishka import Scope, provide

from threads.application.usecase.auth import GetCurrentUserUseCase
from threads.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetThreadUseCase,
    ThreadViewStore,
    ToggleThreadStateUseCase,
)
from threads.application.usecase.community import (
    GetCommunityUseCase,
    ToggleMembershipUseCase,
)
from threads.application.usecase.post import (
    CreatePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    ListTrendingUseCase,
    PostItemBuilder,
)
from threads.application.usecase.search import SearchUseCase
from threads.application.usecase.user import GetUserUseCase
from threads.application.usecase.vote import CastVoteUseCase
from threads.config import ThreadingSettings
from threads.domain.service import (
    AuthService,
    CommentService,
    CommunityService,
    FileStorage,
    PostService,
    SearchService,
    UserService,
    VoteService,
)
from threads.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Thread view state outlives requests; it is kept per session in memory
    @provide(scope=Scope.APP)
    def get_thread_view_store(
        self, threading_settings: ThreadingSettings
    ) -> ThreadViewStore:
        """Provide the in-memory thread view store."""
        return ThreadViewStore(max_sessions=threading_settings.max_view_sessions)

    @provide(scope=Scope.REQUEST)
    def get_post_item_builder(
        self,
        user_service: UserService,
        community_service: CommunityService,
        vote_service: VoteService,
    ) -> PostItemBuilder:
        """Provide post list item builder."""
        return PostItemBuilder(
            user_service=user_service,
            community_service=community_service,
            vote_service=vote_service,
        )

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, auth_service: AuthService, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(
            auth_service=auth_service, user_service=user_service
        )

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        thread_view_store: ThreadViewStore,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            post_service=post_service,
            thread_view_store=thread_view_store,
        )

    @provide(scope=Scope.REQUEST)
    def get_thread_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        vote_service: VoteService,
        user_service: UserService,
        thread_view_store: ThreadViewStore,
        threading_settings: ThreadingSettings,
    ) -> GetThreadUseCase:
        """Provide get thread use case."""
        return GetThreadUseCase(
            comment_service=comment_service,
            post_service=post_service,
            vote_service=vote_service,
            user_service=user_service,
            thread_view_store=thread_view_store,
            max_display_depth=threading_settings.max_display_depth,
            indent_width=threading_settings.indent_width,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_toggle_thread_state_use_case(
        self, comment_service: CommentService, thread_view_store: ThreadViewStore
    ) -> ToggleThreadStateUseCase:
        """Provide toggle thread state use case."""
        return ToggleThreadStateUseCase(
            comment_service=comment_service, thread_view_store=thread_view_store
        )

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(
        self,
        post_service: PostService,
        user_service: UserService,
        community_service: CommunityService,
        file_storage: FileStorage,
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(
            post_service=post_service,
            user_service=user_service,
            community_service=community_service,
            file_storage=file_storage,
        )

    @provide(scope=Scope.REQUEST)
    def get_post_use_case(
        self, post_service: PostService, post_item_builder: PostItemBuilder
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(
            post_service=post_service, post_item_builder=post_item_builder
        )

    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(
        self, post_service: PostService, post_item_builder: PostItemBuilder
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(
            post_service=post_service, post_item_builder=post_item_builder
        )

    @provide(scope=Scope.REQUEST)
    def get_list_trending_use_case(
        self, post_service: PostService, post_item_builder: PostItemBuilder
    ) -> ListTrendingUseCase:
        """Provide list trending use case."""
        return ListTrendingUseCase(
            post_service=post_service, post_item_builder=post_item_builder
        )

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)

    # Search use cases
    @provide(scope=Scope.REQUEST)
    def get_search_use_case(
        self, search_service: SearchService, post_item_builder: PostItemBuilder
    ) -> SearchUseCase:
        """Provide search use case."""
        return SearchUseCase(
            search_service=search_service, post_item_builder=post_item_builder
        )

    # Community use cases
    @provide(scope=Scope.REQUEST)
    def get_community_use_case(
        self, community_service: CommunityService
    ) -> GetCommunityUseCase:
        """Provide get community use case."""
        return GetCommunityUseCase(community_service=community_service)

    @provide(scope=Scope.REQUEST)
    def get_toggle_membership_use_case(
        self, community_service: CommunityService
    ) -> ToggleMembershipUseCase:
        """Provide toggle membership use case."""
        return ToggleMembershipUseCase(community_service=community_service)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_user_use_case(self, user_service: UserService) -> GetUserUseCase:
        """Provide get user use case."""
        return GetUserUseCase(user_service=user_service)
