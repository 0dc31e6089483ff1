"""Unit tests for the post listing use cases."""

from datetime import datetime, timedelta

import pytest

from threads.application.usecase.post import (
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
    ListTrendingRequest,
    ListTrendingUseCase,
)
from threads.domain.error import NotFoundError
from threads.domain.repository import (
    CommunityRepository,
    PostRepository,
    UserRepository,
)
from threads.domain.service import VoteService
from threads.domain.value import (
    PostSortOrder,
    Timeframe,
    UserId,
    VotableType,
    VoteDirection,
)
from tests.conftest import make_community, make_post, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def seed(env) -> None:
    now = datetime.now()
    post_repo = await env.get(PostRepository)
    await (await env.get(UserRepository)).create(make_user("u1", "ada"))
    await (await env.get(CommunityRepository)).create(make_community("c1", "physics"))
    await post_repo.create(
        make_post("fresh", author_id="u1", community_id="c1", upvotes=4, created_at=now)
    )
    await post_repo.create(
        make_post(
            "old",
            author_id="u1",
            community_id="c1",
            upvotes=90,
            created_at=now - timedelta(days=10),
        )
    )


class TestListPosts:
    """Tests for ListPostsUseCase."""

    @pytest.mark.asyncio
    async def test_top_feed_with_related_records(self, unit_env):
        await seed(unit_env)
        use_case = await unit_env.get(ListPostsUseCase)

        response = await use_case.execute(ListPostsRequest(sort=PostSortOrder.TOP))

        assert [p.post_id for p in response.posts] == ["old", "fresh"]
        assert response.posts[0].author_username == "ada"
        assert response.posts[0].community_name == "physics"
        assert response.sort == PostSortOrder.TOP

    @pytest.mark.asyncio
    async def test_hot_feed_and_viewer_vote(self, unit_env):
        await seed(unit_env)
        vote_service = await unit_env.get(VoteService)
        await vote_service.cast_vote(
            UserId("u1"), VotableType.POST, "fresh", VoteDirection.UP
        )
        use_case = await unit_env.get(ListPostsUseCase)

        response = await use_case.execute(ListPostsRequest(user_id="u1"))

        assert [p.post_id for p in response.posts] == ["fresh", "old"]
        assert response.posts[0].my_vote == VoteDirection.UP
        assert response.posts[0].score == 5
        assert response.posts[1].my_vote is None

    def test_limit_bounds(self):
        with pytest.raises(ValueError):
            ListPostsRequest(limit=0)
        with pytest.raises(ValueError):
            ListPostsRequest(limit=101)


class TestListTrending:
    """Tests for ListTrendingUseCase."""

    @pytest.mark.asyncio
    async def test_week_excludes_older_posts(self, unit_env):
        await seed(unit_env)
        use_case = await unit_env.get(ListTrendingUseCase)

        week = await use_case.execute(ListTrendingRequest(timeframe=Timeframe.WEEK))
        month = await use_case.execute(ListTrendingRequest(timeframe=Timeframe.MONTH))

        assert [p.post_id for p in week.posts] == ["fresh"]
        assert {p.post_id for p in month.posts} == {"fresh", "old"}


class TestGetPost:
    """Tests for GetPostUseCase."""

    @pytest.mark.asyncio
    async def test_get_post(self, unit_env):
        await seed(unit_env)
        use_case = await unit_env.get(GetPostUseCase)

        response = await use_case.execute(GetPostRequest(post_id="fresh"))

        assert response.post.post_id == "fresh"
        assert response.post.upvotes == 4

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env):
        use_case = await unit_env.get(GetPostUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetPostRequest(post_id="nope"))
