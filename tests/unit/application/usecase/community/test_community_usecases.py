"""Unit tests for community use cases."""

import pytest

from threads.application.usecase.community import (
    GetCommunityRequest,
    GetCommunityUseCase,
    ToggleMembershipRequest,
    ToggleMembershipUseCase,
)
from threads.domain.error import NotFoundError
from threads.domain.repository import CommunityRepository
from threads.domain.value import CommunityId
from tests.conftest import make_community
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetCommunity:
    """Tests for GetCommunityUseCase."""

    @pytest.mark.asyncio
    async def test_signed_out_viewer_is_not_member(self, unit_env):
        await (await unit_env.get(CommunityRepository)).create(
            make_community("c1", "physics", member_count=3)
        )
        use_case = await unit_env.get(GetCommunityUseCase)

        view = await use_case.execute(GetCommunityRequest(community_id="c1"))

        assert view.name == "physics"
        assert view.member_count == 3
        assert view.is_member is False

    @pytest.mark.asyncio
    async def test_missing_community(self, unit_env):
        use_case = await unit_env.get(GetCommunityUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetCommunityRequest(community_id="nope"))


class TestToggleMembership:
    """Tests for ToggleMembershipUseCase."""

    @pytest.mark.asyncio
    async def test_join_and_leave(self, unit_env):
        community_repo = await unit_env.get(CommunityRepository)
        await community_repo.create(make_community("c1", member_count=3))
        toggle = await unit_env.get(ToggleMembershipUseCase)
        get_community = await unit_env.get(GetCommunityUseCase)

        joined = await toggle.execute(
            ToggleMembershipRequest(community_id="c1", user_id="u1")
        )
        seen = await get_community.execute(
            GetCommunityRequest(community_id="c1", user_id="u1")
        )
        left = await toggle.execute(
            ToggleMembershipRequest(community_id="c1", user_id="u1")
        )

        assert (joined.is_member, joined.member_count) == (True, 4)
        assert seen.is_member is True
        assert (left.is_member, left.member_count) == (False, 3)
        assert (await community_repo.find_by_id(CommunityId("c1"))).member_count == 3

    @pytest.mark.asyncio
    async def test_missing_community(self, unit_env):
        toggle = await unit_env.get(ToggleMembershipUseCase)

        with pytest.raises(NotFoundError):
            await toggle.execute(
                ToggleMembershipRequest(community_id="nope", user_id="u1")
            )
