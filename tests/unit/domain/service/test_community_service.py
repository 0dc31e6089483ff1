"""Unit tests for CommunityService."""

import pytest

from threads.domain.repository import CommunityRepository
from threads.domain.service import CommunityService
from threads.domain.value import CommunityId, UserId
from tests.conftest import make_community
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestEnsureMembership:
    """Tests for ensure_membership method."""

    @pytest.mark.asyncio
    async def test_join_once_counts_once(self, unit_env):
        community_service = await unit_env.get(CommunityService)
        community_repo = await unit_env.get(CommunityRepository)
        community = await community_repo.create(make_community("c1", member_count=7))

        _, first = await community_service.ensure_membership(UserId("u1"), community)
        refreshed = await community_service.get_by_id(CommunityId("c1"))
        _, second = await community_service.ensure_membership(UserId("u1"), refreshed)

        assert (first, second) == (True, False)
        saved = await community_repo.find_by_id(CommunityId("c1"))
        assert saved.member_count == 8
        assert await community_repo.find_membership(UserId("u1"), CommunityId("c1"))

    @pytest.mark.asyncio
    async def test_get_missing_community(self, unit_env):
        community_service = await unit_env.get(CommunityService)

        assert await community_service.get_by_id(CommunityId("nope")) is None


class TestToggleMembership:
    """Tests for toggle_membership method."""

    @pytest.mark.asyncio
    async def test_join_then_leave_restores_count(self, unit_env):
        community_service = await unit_env.get(CommunityService)
        community_repo = await unit_env.get(CommunityRepository)
        community = await community_repo.create(make_community("c1", member_count=7))

        joined, joined_member = await community_service.toggle_membership(
            UserId("u1"), community
        )
        left, left_member = await community_service.toggle_membership(
            UserId("u1"), joined
        )

        assert (joined_member, joined.member_count) == (True, 8)
        assert (left_member, left.member_count) == (False, 7)
        assert (
            await community_repo.find_membership(UserId("u1"), CommunityId("c1"))
            is None
        )
        is_member = await community_service.is_member(UserId("u1"), CommunityId("c1"))
        assert is_member is False

    @pytest.mark.asyncio
    async def test_leave_never_goes_below_zero(self, unit_env):
        community_service = await unit_env.get(CommunityService)
        community_repo = await unit_env.get(CommunityRepository)
        community = await community_repo.create(make_community("c1", member_count=0))
        await community_service.ensure_membership(UserId("u1"), community)
        stale = await community_repo.set_member_count(CommunityId("c1"), 0)

        updated, is_member = await community_service.toggle_membership(
            UserId("u1"), stale
        )

        assert is_member is False
        assert updated.member_count == 0
