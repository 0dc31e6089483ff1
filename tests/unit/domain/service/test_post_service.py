"""Unit tests for PostService."""

from datetime import timedelta

import pytest

from threads.domain.repository import PostRepository
from threads.domain.service import PostService
from threads.domain.value import CommunityId, PostId, PostSortOrder, Timeframe
from tests.conftest import make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def seed(post_repo: PostRepository, *posts) -> None:
    for post in posts:
        await post_repo.create(post)


class TestListFeed:
    """Tests for list_feed method."""

    @pytest.mark.asyncio
    async def test_new_orders_by_creation_time(self, unit_env, now):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        await seed(
            post_repo,
            make_post("old", created_at=now - timedelta(hours=5)),
            make_post("newest", created_at=now),
            make_post("middle", created_at=now - timedelta(hours=1)),
        )

        posts = await post_service.list_feed(sort=PostSortOrder.NEW, now=now)

        assert [p.id for p in posts] == ["newest", "middle", "old"]

    @pytest.mark.asyncio
    async def test_top_orders_by_upvotes(self, unit_env, now):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        await seed(
            post_repo,
            make_post("meh", upvotes=2, created_at=now),
            make_post("best", upvotes=40, created_at=now - timedelta(days=3)),
            make_post("good", upvotes=9, created_at=now),
        )

        posts = await post_service.list_feed(sort=PostSortOrder.TOP, now=now)

        assert [p.id for p in posts] == ["best", "good", "meh"]

    @pytest.mark.asyncio
    async def test_hot_prefers_recent_activity(self, unit_env, now):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        await seed(
            post_repo,
            make_post("stale", upvotes=30, created_at=now - timedelta(days=2)),
            make_post("rising", upvotes=8, created_at=now - timedelta(hours=1)),
            make_post("flop", downvotes=3, created_at=now),
        )

        posts = await post_service.list_feed(sort=PostSortOrder.HOT, now=now)

        assert [p.id for p in posts] == ["rising", "stale", "flop"]

    @pytest.mark.asyncio
    async def test_feed_filters_by_community_and_limit(self, unit_env, now):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        await seed(
            post_repo,
            make_post("a", community_id="c1", created_at=now),
            make_post("b", community_id="c2", created_at=now),
            make_post("c", community_id="c1", created_at=now - timedelta(hours=1)),
            make_post("d", community_id="c1", created_at=now - timedelta(hours=2)),
        )

        posts = await post_service.list_feed(
            sort=PostSortOrder.NEW, community_id=CommunityId("c1"), limit=2, now=now
        )

        assert [p.id for p in posts] == ["a", "c"]


class TestListTrending:
    """Tests for list_trending method."""

    @pytest.mark.asyncio
    async def test_only_posts_inside_timeframe(self, unit_env, now):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        await seed(
            post_repo,
            make_post("today", upvotes=1, created_at=now - timedelta(hours=3)),
            make_post("last_week", upvotes=50, created_at=now - timedelta(days=3)),
        )

        day = await post_service.list_trending(Timeframe.DAY, now=now)
        week = await post_service.list_trending(Timeframe.WEEK, now=now)

        assert [p.id for p in day] == ["today"]
        assert {p.id for p in week} == {"today", "last_week"}


class TestCommentCount:
    """Tests for increment_comment_count method."""

    @pytest.mark.asyncio
    async def test_increment_comment_count(self, unit_env):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        await seed(post_repo, make_post("p", comment_count=4))

        updated = await post_service.increment_comment_count(PostId("p"))

        assert updated.comment_count == 5
        assert (await post_repo.find_by_id(PostId("p"))).comment_count == 5

    @pytest.mark.asyncio
    async def test_increment_missing_post(self, unit_env):
        post_service = await unit_env.get(PostService)

        with pytest.raises(ValueError, match="Post not found"):
            await post_service.increment_comment_count(PostId("nope"))
