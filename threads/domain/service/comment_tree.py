"""Comment tree reconstruction.

Comments are stored flat with a parent reference and rebuilt into a
reply tree on every read. Nodes wrap the immutable ``Comment`` models, so
building a tree never mutates the comments it was given.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from threads.domain.model.comment import Comment
from threads.domain.value import CommentId


@dataclass(eq=False)
class CommentNode:
    """Node in a post's comment tree.

    Represents a comment and its direct replies in chronological order.
    """

    comment: Comment
    replies: list["CommentNode"] = field(default_factory=list)

    @property
    def id(self) -> CommentId:
        return self.comment.id


def build_comment_tree(comments: Iterable[Comment]) -> list[CommentNode]:
    """Build the reply tree for one post's comments.

    Algorithm:
    1. Map every comment ID to a fresh node with an empty replies list
    2. Walk the comments again in input order; attach each comment to its
       parent's replies when the parent is present, otherwise to the roots

    Because the second pass follows input order, siblings keep the order
    the comments arrived in (chronological when the input is sorted by
    created_at). A comment whose parent is missing from the input is
    promoted to a root instead of being dropped. Stored ``depth`` values are
    left untouched.

    Args:
        comments: Flat comments of a single post, oldest first

    Returns:
        Root nodes in input order, each carrying its replies recursively
    """
    ordered = list(comments)
    nodes: dict[CommentId, CommentNode] = {
        comment.id: CommentNode(comment=comment) for comment in ordered
    }

    roots: list[CommentNode] = []
    for comment in ordered:
        node = nodes[comment.id]
        parent = nodes.get(comment.parent_id) if comment.parent_id else None
        if parent is not None:
            parent.replies.append(node)
        else:
            roots.append(node)

    _promote_cycles(ordered, nodes, roots)
    return roots


def _promote_cycles(
    ordered: list[Comment],
    nodes: dict[CommentId, CommentNode],
    roots: list[CommentNode],
) -> None:
    """Re-root comments caught in parent cycles.

    Corrupt parent references (a comment replying to itself, or A -> B -> A)
    leave nodes unreachable from any root. For each cycle, the member that
    comes first in input order is detached from its parent and promoted;
    comments hanging off the cycle stay under their parents. Roots keep
    input order.
    """
    reachable = {node.id for node in iter_nodes(roots)}
    if len(reachable) == len(nodes):
        return

    position = {comment.id: index for index, comment in enumerate(ordered)}
    for comment in ordered:
        if comment.id in reachable:
            continue

        # Follow parents until one repeats; the repeated tail is the cycle
        chain: list[CommentId] = []
        current = comment.id
        while current not in chain:
            chain.append(current)
            current = nodes[current].comment.parent_id  # type: ignore[assignment]
        cycle = chain[chain.index(current) :]

        head = nodes[min(cycle, key=position.__getitem__)]
        nodes[head.comment.parent_id].replies.remove(head)  # type: ignore[index]
        roots.append(head)
        reachable.update(n.id for n in iter_nodes([head]))

    roots.sort(key=lambda node: position[node.id])


def iter_nodes(roots: Iterable[CommentNode]) -> Iterator[CommentNode]:
    """Yield every node of the tree in pre-order (parent before replies)."""
    stack = list(reversed(list(roots)))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.replies))


def count_nodes(roots: Iterable[CommentNode]) -> int:
    """Count all nodes in the tree, roots included."""
    return sum(1 for _ in iter_nodes(roots))


def node_levels(roots: Iterable[CommentNode]) -> dict[CommentId, int]:
    """Map every comment ID to its level in the tree, 0 for roots."""
    levels: dict[CommentId, int] = {}
    stack = [(node, 0) for node in roots]
    while stack:
        node, level = stack.pop()
        levels[node.id] = level
        stack.extend((reply, level + 1) for reply in node.replies)
    return levels
