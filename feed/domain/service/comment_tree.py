"""Reply tree construction.

Comments are stored flat, each pointing at an optional parent. This module
turns the flat comments of one post back into an ordered forest of
CommentNode trees. It is a pure function of its input: it does no I/O, keeps
no state between calls, and never raises on inconsistent data. Comments that
cannot be placed under a parent are shown as top-level comments instead of
being dropped.

Algorithm:
1. Wrap every comment in a node, keyed by id, keeping first-seen order
2. Resolve each node's parent; missing parents and self-replies make roots
3. Optionally walk ancestor chains once to find parent cycles and demote
   every comment on a cycle to a root
4. Link nodes in input order, so roots and siblings keep insertion order
"""

from collections.abc import Iterable, Iterator, Sequence
from typing import Optional

import logfire

from feed.domain.model.comment import Comment, CommentNode
from feed.domain.value import CommentId

_VISITING = 1
_SETTLED = 2


def build_comment_tree(
    comments: Iterable[Comment], detect_cycles: bool = True
) -> list[CommentNode]:
    """Build the reply forest for the flat comments of one post.

    Args:
        comments: Comments in insertion order
        detect_cycles: Demote comments on a parent cycle to roots. When
            False, cycle members stay linked to each other and none of them
            is reachable from the returned roots.

    Returns:
        Root nodes in input order, with children populated recursively
    """
    nodes: dict[CommentId, CommentNode] = {}
    for comment in comments:
        if comment.id in nodes:
            # Last record wins, at the position the id was first seen
            logfire.warn("Duplicate comment id in input", comment_id=comment.id)
        nodes[comment.id] = CommentNode(comment=comment)

    parents = _resolve_parents(nodes)
    if detect_cycles:
        _break_cycles(parents)

    roots: list[CommentNode] = []
    for comment_id, node in nodes.items():
        parent_id = parents[comment_id]
        if parent_id is None:
            roots.append(node)
        else:
            nodes[parent_id].children.append(node)

    return roots


def _resolve_parents(
    nodes: dict[CommentId, CommentNode],
) -> dict[CommentId, Optional[CommentId]]:
    """Map each comment id to the id of the node it should hang under."""
    parents: dict[CommentId, Optional[CommentId]] = {}
    for comment_id, node in nodes.items():
        parent_id = node.parent_id
        if parent_id is None:
            parents[comment_id] = None
        elif parent_id == comment_id:
            logfire.warn(
                "Comment replies to itself, placing at top level",
                comment_id=comment_id,
            )
            parents[comment_id] = None
        elif parent_id not in nodes:
            logfire.debug(
                "Parent comment not in set, placing at top level",
                comment_id=comment_id,
                parent_id=parent_id,
            )
            parents[comment_id] = None
        else:
            parents[comment_id] = parent_id
    return parents


def _break_cycles(parents: dict[CommentId, Optional[CommentId]]) -> None:
    """Cut the parent link of every comment that lies on a parent cycle.

    Each comment is visited once overall: a walk stops at the first comment
    already settled by an earlier walk. Comments that merely hang off a
    cycle keep their parent.
    """
    state: dict[CommentId, int] = {}
    for start in parents:
        path: list[CommentId] = []
        current = start
        while current is not None and current not in state:
            state[current] = _VISITING
            path.append(current)
            current = parents[current]

        # Reaching a comment of the current walk again closes a cycle
        if current is not None and state[current] == _VISITING:
            cycle = path[path.index(current):]
            logfire.warn(
                "Reply cycle detected, placing members at top level",
                comment_ids=list(cycle),
            )
            for comment_id in cycle:
                parents[comment_id] = None

        for comment_id in path:
            state[comment_id] = _SETTLED


def walk(forest: Sequence[CommentNode]) -> Iterator[tuple[CommentNode, int]]:
    """Yield ``(node, depth)`` pairs depth first, in display order.

    Iterative, so reply chains deeper than the recursion limit are fine.
    """
    stack = [(node, 0) for node in reversed(forest)]
    while stack:
        node, depth = stack.pop()
        yield node, depth
        stack.extend((child, depth + 1) for child in reversed(node.children))


def count_nodes(forest: Sequence[CommentNode]) -> int:
    """Count every node in the forest, descendants included."""
    return sum(1 for _ in walk(forest))
