"""Threaded comment rendering.

Turns a comment tree into nested view nodes for one viewer: indentation,
collapse, reply form and vote state. Collapse and reply-form flags live in
a per-session ``ThreadViewState`` keyed by comment ID, never on the
comments themselves, and are not persisted.
"""

from collections import OrderedDict
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Mapping

from pydantic import BaseModel

from threads.domain.model import User
from threads.domain.service.comment_tree import CommentNode, count_nodes
from threads.domain.value import VoteDirection

DELETED_COMMENT_TEXT = "[Comment deleted]"


@dataclass
class NodeViewState:
    """UI flags for one comment; the two flags toggle independently."""

    collapsed: bool = False
    reply_form_open: bool = False


class ThreadViewState:
    """Collapse and reply-form flags for one viewing session."""

    def __init__(self) -> None:
        self._nodes: dict[str, NodeViewState] = {}

    def get(self, comment_id: str) -> NodeViewState:
        """Current flags for a comment (defaults when never toggled)."""
        return self._nodes.get(comment_id) or NodeViewState()

    def _node(self, comment_id: str) -> NodeViewState:
        return self._nodes.setdefault(comment_id, NodeViewState())

    def toggle_collapsed(self, comment_id: str) -> NodeViewState:
        node = self._node(comment_id)
        node.collapsed = not node.collapsed
        return node

    def toggle_reply_form(self, comment_id: str) -> NodeViewState:
        node = self._node(comment_id)
        node.reply_form_open = not node.reply_form_open
        return node

    def close_reply_form(self, comment_id: str) -> None:
        if comment_id in self._nodes:
            self._nodes[comment_id].reply_form_open = False


class ThreadViewStore:
    """In-memory view state per session ID.

    Lives for the process lifetime; state is lost on restart. Only sessions
    that toggled something are kept, and the least recently used session is
    evicted once ``max_sessions`` is reached.
    """

    def __init__(self, max_sessions: int = 10000) -> None:
        self.max_sessions = max_sessions
        self._sessions: OrderedDict[str, ThreadViewState] = OrderedDict()

    def find(self, session_id: str) -> ThreadViewState | None:
        """View state for a session, or None if it never toggled anything."""
        state = self._sessions.get(session_id)
        if state is not None:
            self._sessions.move_to_end(session_id)
        return state

    def get(self, session_id: str) -> ThreadViewState:
        """View state for a session, created on first access."""
        state = self.find(session_id)
        if state is None:
            state = self._sessions[session_id] = ThreadViewState()
            while len(self._sessions) > self.max_sessions:
                self._sessions.popitem(last=False)
        return state

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)


class ThreadNodeView(BaseModel):
    """A rendered comment with its visible replies."""

    comment_id: str
    parent_id: str | None
    author_id: str
    author_username: str | None
    text: str
    is_deleted: bool
    depth: int  # stored depth
    level: int  # position in the rendered tree, 0 for roots
    indent: int
    upvotes: int
    downvotes: int
    score: int
    my_vote: VoteDirection | None
    created_at: datetime
    collapsible: bool
    collapsed: bool
    show_actions: bool
    reply_form_open: bool
    can_delete: bool
    hidden_reply_count: int
    replies: list["ThreadNodeView"]


def render_thread(
    roots: Iterable[CommentNode],
    state: ThreadViewState | None = None,
    votes: Mapping[str, VoteDirection] | None = None,
    authors: Mapping[str, User] | None = None,
    viewer_id: str | None = None,
    max_display_depth: int = 8,
    indent_width: int = 4,
) -> list[ThreadNodeView]:
    """Render a comment tree for one viewer.

    Indentation grows with tree level up to ``max_display_depth`` and stays
    flat below it, while nesting is still kept. Collapse only applies to
    comments that have replies: the comment text stays visible, its
    replies and action row are hidden.

    Args:
        roots: Root nodes from ``build_comment_tree``
        state: Session view state (None renders everything expanded)
        votes: Viewer's vote direction per comment ID
        authors: Users keyed by ID, for usernames
        viewer_id: Signed-in user ID, for delete permission
        max_display_depth: Level beyond which indentation stops growing
        indent_width: Indentation units per level

    Returns:
        Rendered root nodes
    """
    state = state or ThreadViewState()
    votes = votes or {}
    authors = authors or {}

    def render(node: CommentNode, level: int) -> ThreadNodeView:
        comment = node.comment
        flags = state.get(comment.id)
        collapsible = bool(node.replies)
        collapsed = collapsible and flags.collapsed
        author = authors.get(comment.author_id)

        return ThreadNodeView(
            comment_id=comment.id,
            parent_id=comment.parent_id,
            author_id=comment.author_id,
            author_username=author.username.root if author else None,
            text=DELETED_COMMENT_TEXT if comment.is_deleted else comment.content,
            is_deleted=comment.is_deleted,
            depth=comment.depth,
            level=level,
            indent=min(level, max_display_depth) * indent_width,
            upvotes=comment.upvotes,
            downvotes=comment.downvotes,
            score=comment.score,
            my_vote=votes.get(comment.id),
            created_at=comment.created_at,
            collapsible=collapsible,
            collapsed=collapsed,
            show_actions=not collapsed,
            reply_form_open=flags.reply_form_open,
            can_delete=(
                viewer_id is not None
                and comment.author_id == viewer_id
                and not comment.is_deleted
            ),
            hidden_reply_count=count_nodes(node.replies) if collapsed else 0,
            replies=[] if collapsed else [render(r, level + 1) for r in node.replies],
        )

    return [render(root, 0) for root in roots]
