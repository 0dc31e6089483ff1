"""Comment domain service."""

from datetime import datetime

import logfire

from threads.domain.error import ContentDeletedException, NotAuthorizedError, NotFoundError
from threads.domain.model.comment import MAX_COMMENT_DEPTH, Comment
from threads.domain.repository import CommentRepository
from threads.domain.value import CommentId, PostId, UserId, new_id

from .base import Service
from .comment_tree import CommentNode, build_comment_tree, node_levels


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        max_comment_depth: int = MAX_COMMENT_DEPTH,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            max_comment_depth: Cap for the stored depth of new replies
        """
        self.comment_repository = comment_repository
        self.max_comment_depth = min(max_comment_depth, MAX_COMMENT_DEPTH)

    async def create_comment(
        self,
        post_id: PostId,
        author_id: UserId,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a post or a reply to another comment.

        Args:
            post_id: Post ID
            author_id: Author user ID
            content: Comment text (surrounding whitespace is stripped)
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            ValueError: If the content is blank or the parent is invalid
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=post_id,
            author_id=author_id,
            parent_id=parent_id,
        ):
            content = content.strip()
            if not content:
                raise ValueError("Comment content cannot be empty")

            # If replying, verify parent and derive depth from its tree level
            depth = 0
            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.error(
                        "Parent comment not found",
                        parent_id=parent_id,
                        post_id=post_id,
                    )
                    raise ValueError("Parent comment not found")
                if parent.post_id != post_id:
                    logfire.error(
                        "Parent comment does not belong to post",
                        parent_id=parent_id,
                        parent_post_id=parent.post_id,
                        target_post_id=post_id,
                    )
                    raise ValueError("Parent comment does not belong to this post")
                depth = min(
                    await self._tree_level(post_id, parent_id) + 1,
                    self.max_comment_depth,
                )

            comment = Comment(
                id=CommentId(new_id("comment")),
                post_id=post_id,
                author_id=author_id,
                content=content,
                parent_id=parent_id,
                upvotes=0,
                downvotes=0,
                depth=depth,
                is_deleted=False,
                created_at=datetime.now(),
            )

            saved = await self.comment_repository.create(comment)
            logfire.info(
                "Comment created",
                comment_id=saved.id,
                post_id=post_id,
                depth=depth,
            )
            return saved

    async def _tree_level(self, post_id: PostId, comment_id: CommentId) -> int:
        """Level of a comment in the post's rebuilt reply tree, 0 for roots.

        A parent promoted to root (missing or cyclic ancestors) sits at level
        0 whatever its stored depth says.
        """
        comments = await self.comment_repository.find_by_post(post_id)
        return node_levels(build_comment_tree(comments)).get(comment_id, 0)

    async def get_comments_for_post(self, post_id: PostId) -> list[Comment]:
        """Get all comments for a post, oldest first.

        Args:
            post_id: Post ID

        Returns:
            Flat list of comments in chronological order
        """
        with logfire.span("comment_service.get_comments_for_post", post_id=post_id):
            comments = await self.comment_repository.find_by_post(post_id)
            logfire.info(
                "Comments retrieved for post", post_id=post_id, count=len(comments)
            )
            return comments

    async def get_comment_tree(
        self, post_id: PostId
    ) -> tuple[list[Comment], list[CommentNode]]:
        """Load a post's comments and rebuild the reply tree.

        Args:
            post_id: Post ID

        Returns:
            Tuple of (flat comments, root nodes)
        """
        comments = await self.get_comments_for_post(post_id)
        return comments, build_comment_tree(comments)

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span("comment_service.get_comment_by_id", comment_id=comment_id):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                logfire.warn("Comment not found", comment_id=comment_id)
            return comment

    async def soft_delete(self, comment_id: CommentId, user_id: UserId) -> Comment:
        """Soft delete a comment owned by the user.

        The comment stays in the post's comment set so its replies keep a
        resolvable parent; it renders as deleted.

        Args:
            comment_id: Comment ID
            user_id: User requesting the deletion

        Returns:
            Updated comment

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the user is not the author
            ContentDeletedException: If the comment is already deleted
        """
        with logfire.span(
            "comment_service.soft_delete", comment_id=comment_id, user_id=user_id
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                raise NotFoundError("Comment", comment_id)
            if comment.author_id != user_id:
                logfire.warn(
                    "Unauthorized comment delete attempt",
                    comment_id=comment_id,
                    user_id=user_id,
                )
                raise NotAuthorizedError("comment", comment_id, user_id)
            if comment.is_deleted:
                raise ContentDeletedException("comment", comment_id)

            updated = await self.comment_repository.mark_deleted(comment_id)
            if updated is None:
                raise NotFoundError("Comment", comment_id)
            logfire.info("Comment deleted", comment_id=comment_id)
            return updated

    async def adjust_votes(
        self, comment_id: CommentId, upvotes_delta: int, downvotes_delta: int
    ) -> Comment | None:
        """Apply vote counter deltas to a comment.

        Args:
            comment_id: Comment ID
            upvotes_delta: Change to upvotes
            downvotes_delta: Change to downvotes

        Returns:
            Updated comment, or None if it doesn't exist
        """
        with logfire.span(
            "comment_service.adjust_votes",
            comment_id=comment_id,
            upvotes_delta=upvotes_delta,
            downvotes_delta=downvotes_delta,
        ):
            updated = await self.comment_repository.adjust_votes(
                comment_id, upvotes_delta, downvotes_delta
            )
            if updated is not None:
                logfire.info(
                    "Comment votes adjusted",
                    comment_id=comment_id,
                    upvotes=updated.upvotes,
                    downvotes=updated.downvotes,
                )
            return updated
