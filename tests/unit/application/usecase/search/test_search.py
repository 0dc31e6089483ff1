"""Unit tests for SearchUseCase."""

import pytest

from threads.application.usecase.search import SearchRequest, SearchUseCase
from threads.domain.repository import (
    CommunityRepository,
    PostRepository,
    UserRepository,
)
from tests.conftest import make_community, make_post, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestSearchUseCase:
    """Tests for SearchUseCase."""

    @pytest.mark.asyncio
    async def test_groups_hits_by_kind(self, unit_env):
        await (await unit_env.get(UserRepository)).create(make_user("u1", "neuro_ada"))
        await (await unit_env.get(CommunityRepository)).create(
            make_community("c1", "neuroscience", member_count=12)
        )
        await (await unit_env.get(PostRepository)).create(
            make_post("p1", title="Neuron imaging", author_id="u1", community_id="c1")
        )
        use_case = await unit_env.get(SearchUseCase)

        response = await use_case.execute(SearchRequest(query="NEURO"))

        assert response.query == "NEURO"
        assert [p.post_id for p in response.posts] == ["p1"]
        assert response.posts[0].community_name == "neuroscience"
        assert response.communities[0].member_count == 12
        assert response.users[0].username == "neuro_ada"
        assert response.total == 3

    @pytest.mark.asyncio
    async def test_blank_query(self, unit_env):
        use_case = await unit_env.get(SearchUseCase)

        response = await use_case.execute(SearchRequest(query=""))

        assert response.total == 0
        assert response.posts == []
