"""Immutable comment tree updates.

Every update walks the whole thread and returns a brand-new tree. The node
whose id matches the target gets the operation's transform; every other node
has the operation's flag forced back to its default. That reset is what keeps
at most one reply box open across the whole thread.
"""

from collections.abc import Callable, Iterator
from typing import Any

from threadview.domain.error import EmptyReplyTextError
from threadview.domain.model.comment import CommentNode, CommentTree
from threadview.domain.value import CommentId, new_comment_id

# Called with the matched node and its already-rebuilt children
MatchTransform = Callable[[CommentNode, CommentTree], CommentNode]


def _rebuild(
    tree: CommentTree,
    target_id: CommentId,
    on_match: MatchTransform,
    reset: dict[str, Any],
) -> CommentTree:
    rebuilt = []
    for node in tree:
        # Ids are unique, so below a match this only applies the reset
        children = _rebuild(node.children, target_id, on_match, reset)
        if node.id == target_id:
            rebuilt.append(on_match(node, children))
        else:
            rebuilt.append(node.model_copy(update={**reset, "children": children}))
    return tuple(rebuilt)


def toggle_reply(tree: CommentTree, target_id: CommentId) -> CommentTree:
    """Open or close the reply box of one comment.

    All other reply boxes are closed in the same pass. Cancelling a reply is
    the same call made while the box is open.

    Args:
        tree: Current thread
        target_id: Comment whose reply box is toggled

    Returns:
        New thread with the target's reply box flipped
    """

    def flip(node: CommentNode, children: CommentTree) -> CommentNode:
        return node.model_copy(
            update={
                "is_reply_box_open": not node.is_reply_box_open,
                "children": children,
            }
        )

    return _rebuild(tree, target_id, flip, {"is_reply_box_open": False})


def toggle_collapse(tree: CommentTree, target_id: CommentId) -> CommentTree:
    """Collapse or expand the replies of one comment.

    Every other comment is expanded in the same pass, so at most one subtree
    is collapsed at a time.

    Args:
        tree: Current thread
        target_id: Comment whose replies are collapsed or expanded

    Returns:
        New thread with the target's collapse state flipped
    """

    def flip(node: CommentNode, children: CommentTree) -> CommentNode:
        return node.model_copy(
            update={"is_collapsed": not node.is_collapsed, "children": children}
        )

    return _rebuild(tree, target_id, flip, {"is_collapsed": False})


def insert_reply(
    tree: CommentTree,
    target_id: CommentId,
    text: str,
    generate_id: Callable[[], CommentId] = new_comment_id,
) -> CommentTree:
    """Append a new reply under one comment.

    The new reply is a leaf that can itself be replied to. Submitting closes
    the target's reply box, and any other open box.

    Args:
        tree: Current thread
        target_id: Comment being replied to
        text: Reply text, must be non-empty
        generate_id: Source of fresh comment IDs

    Returns:
        New thread containing the reply as the target's last child

    Raises:
        EmptyReplyTextError: If text is empty
    """
    if not text:
        raise EmptyReplyTextError(target_id)

    def append(node: CommentNode, children: CommentTree) -> CommentNode:
        reply = CommentNode(id=generate_id(), text=text)
        return node.model_copy(
            update={"is_reply_box_open": False, "children": (*children, reply)}
        )

    return _rebuild(tree, target_id, append, {"is_reply_box_open": False})


def iter_nodes(tree: CommentTree) -> Iterator[CommentNode]:
    """Yield every comment in display order (depth-first, pre-order)."""
    for node in tree:
        yield node
        yield from iter_nodes(node.children)


def find_node(tree: CommentTree, target_id: CommentId) -> CommentNode | None:
    """Find a comment anywhere in the thread by ID."""
    return next((node for node in iter_nodes(tree) if node.id == target_id), None)


def count_nodes(tree: CommentTree) -> int:
    """Count all comments in the thread, including collapsed ones."""
    return sum(1 for _ in iter_nodes(tree))


def collect_ids(tree: CommentTree) -> list[CommentId]:
    """List all comment IDs in display order."""
    return [node.id for node in iter_nodes(tree)]
