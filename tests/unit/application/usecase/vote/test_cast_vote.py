"""Unit tests for CastVoteUseCase."""

import pytest

from threads.application.usecase.vote import CastVoteRequest, CastVoteUseCase
from threads.domain.error import NotFoundError
from threads.domain.repository import CommentRepository, PostRepository
from threads.domain.service import VoteAction
from threads.domain.value import VotableType, VoteDirection
from tests.conftest import make_comment, make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def vote(target_type, target_id, direction, user_id="voter"):
    return CastVoteRequest(
        target_type=target_type,
        target_id=target_id,
        user_id=user_id,
        direction=direction,
    )


class TestCastVoteUseCase:
    """Tests for CastVoteUseCase."""

    @pytest.mark.asyncio
    async def test_upvote_then_retract(self, unit_env):
        use_case = await unit_env.get(CastVoteUseCase)
        await (await unit_env.get(PostRepository)).create(make_post("p"))

        first = await use_case.execute(vote(VotableType.POST, "p", VoteDirection.UP))
        second = await use_case.execute(vote(VotableType.POST, "p", VoteDirection.UP))

        assert first.action == VoteAction.CREATED
        assert first.my_vote == VoteDirection.UP
        assert first.score == 1
        assert second.action == VoteAction.RETRACTED
        assert second.my_vote is None
        assert second.score == 0

    @pytest.mark.asyncio
    async def test_flip_comment_vote(self, unit_env):
        use_case = await unit_env.get(CastVoteUseCase)
        await (await unit_env.get(CommentRepository)).create(make_comment("c"))

        await use_case.execute(vote(VotableType.COMMENT, "c", VoteDirection.UP))
        flipped = await use_case.execute(
            vote(VotableType.COMMENT, "c", VoteDirection.DOWN)
        )

        assert flipped.action == VoteAction.CHANGED
        assert flipped.my_vote == VoteDirection.DOWN
        assert (flipped.upvotes, flipped.downvotes, flipped.score) == (0, 1, -1)

    @pytest.mark.asyncio
    async def test_missing_target(self, unit_env):
        use_case = await unit_env.get(CastVoteUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(vote(VotableType.COMMENT, "nope", VoteDirection.UP))
