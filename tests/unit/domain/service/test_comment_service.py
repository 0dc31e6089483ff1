"""Unit tests for CommentService."""

import pytest

from threads.domain.error import (
    ContentDeletedException,
    NotAuthorizedError,
    NotFoundError,
)
from threads.domain.repository import CommentRepository
from threads.domain.service import CommentService
from threads.domain.value import CommentId, PostId, UserId
from tests.conftest import make_comment
from tests.harness import create_env_fixture

# Unit test fixture - in-memory backend
unit_env = create_env_fixture()

POST_ID = PostId("post_1")
AUTHOR_ID = UserId("user_1")


class TestCreateComment:
    """Tests for create_comment method."""

    @pytest.mark.asyncio
    async def test_create_comment_top_level_with_depth_zero(self, unit_env):
        """Top-level comment should have depth 0."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)

        result = await comment_service.create_comment(
            post_id=POST_ID, author_id=AUTHOR_ID, content="  First!  "
        )

        assert result.depth == 0
        assert result.parent_id is None
        assert result.content == "First!"
        assert result.id.startswith("comment_")

        saved = await comment_repo.find_by_id(result.id)
        assert saved is not None
        assert saved.depth == 0

    @pytest.mark.asyncio
    async def test_create_comment_reply_increments_depth(self, unit_env):
        """Reply comment should be one level below its parent."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.create(make_comment("root", minutes=0))
        await comment_repo.create(make_comment("mid", "root", depth=1, minutes=1))
        await comment_repo.create(make_comment("parent", "mid", depth=2, minutes=2))

        result = await comment_service.create_comment(
            post_id=POST_ID,
            author_id=AUTHOR_ID,
            content="Reply",
            parent_id=CommentId("parent"),
        )

        assert result.depth == 3
        assert result.parent_id == "parent"

    @pytest.mark.asyncio
    async def test_reply_depth_is_capped(self, unit_env):
        """Replies under the deepest level stay at the cap."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        parent_id = None
        for level in range(11):
            comment_id = f"c{level}"
            await comment_repo.create(
                make_comment(comment_id, parent_id, depth=level, minutes=level)
            )
            parent_id = comment_id

        result = await comment_service.create_comment(
            post_id=POST_ID,
            author_id=AUTHOR_ID,
            content="Even deeper",
            parent_id=CommentId("c10"),
        )

        assert result.depth == 10

    @pytest.mark.asyncio
    async def test_reply_depth_follows_tree_level_of_orphan_parent(self, unit_env):
        """A parent whose own parent is gone sits at the root, so its reply
        is at depth 1 whatever depth the parent has stored."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.create(make_comment("orphan", "gone", depth=3))

        result = await comment_service.create_comment(
            post_id=POST_ID,
            author_id=AUTHOR_ID,
            content="Reply to orphan",
            parent_id=CommentId("orphan"),
        )

        assert result.depth == 1

    @pytest.mark.asyncio
    async def test_blank_content_rejected(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(ValueError, match="empty"):
            await comment_service.create_comment(
                post_id=POST_ID, author_id=AUTHOR_ID, content="   \n "
            )

    @pytest.mark.asyncio
    async def test_missing_parent_rejected(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(ValueError, match="Parent comment not found"):
            await comment_service.create_comment(
                post_id=POST_ID,
                author_id=AUTHOR_ID,
                content="Reply",
                parent_id=CommentId("nope"),
            )

    @pytest.mark.asyncio
    async def test_parent_on_other_post_rejected(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.create(make_comment("elsewhere", post_id="post_2"))

        with pytest.raises(ValueError, match="does not belong"):
            await comment_service.create_comment(
                post_id=POST_ID,
                author_id=AUTHOR_ID,
                content="Reply",
                parent_id=CommentId("elsewhere"),
            )


class TestGetCommentTree:
    """Tests for get_comment_tree method."""

    @pytest.mark.asyncio
    async def test_tree_only_contains_post_comments(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.create(make_comment("b", "a", minutes=1))
        await comment_repo.create(make_comment("a", minutes=0))
        await comment_repo.create(make_comment("other", post_id="post_2"))

        comments, roots = await comment_service.get_comment_tree(POST_ID)

        assert [c.id for c in comments] == ["a", "b"]
        assert [r.id for r in roots] == ["a"]
        assert [r.id for r in roots[0].replies] == ["b"]


class TestSoftDelete:
    """Tests for soft_delete method."""

    @pytest.mark.asyncio
    async def test_author_can_delete(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.create(make_comment("a", content="Secret"))

        deleted = await comment_service.soft_delete(CommentId("a"), AUTHOR_ID)

        assert deleted.is_deleted is True
        saved = await comment_repo.find_by_id(CommentId("a"))
        assert saved.is_deleted is True
        # Row stays so replies keep their parent
        assert saved.content == "Secret"

    @pytest.mark.asyncio
    async def test_other_user_cannot_delete(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.create(make_comment("a"))

        with pytest.raises(NotAuthorizedError):
            await comment_service.soft_delete(CommentId("a"), UserId("user_2"))

    @pytest.mark.asyncio
    async def test_delete_twice_raises(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.create(make_comment("a", is_deleted=True))

        with pytest.raises(ContentDeletedException):
            await comment_service.soft_delete(CommentId("a"), AUTHOR_ID)

    @pytest.mark.asyncio
    async def test_delete_missing_comment(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.soft_delete(CommentId("nope"), AUTHOR_ID)
