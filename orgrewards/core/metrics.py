"""
Tree metrics engine.

Single post-order pass over the tree computing, for every node reachable
from the root, the descendants' cumulative value, the earned rank and the
highest rank found in its subtree. The walk uses an explicit stack, so deep
chains do not hit the recursion limit.
"""

from decimal import Decimal

from loguru import logger

from orgrewards.constants import get_rank_for
from orgrewards.core.models import NodeMetrics, OrgNode, OrgTree


class _Frame:
    """Traversal state of one node while its children are processed."""

    __slots__ = ("node_id", "node", "level", "next_child", "children_total", "branch_ranks")

    def __init__(self, node_id: str, node: OrgNode, level: int) -> None:
        self.node_id = node_id
        self.node = node
        self.level = level
        self.next_child = 0
        self.children_total = Decimal("0")
        self.branch_ranks: list[int] = []


def _finish(frame: _Frame) -> NodeMetrics:
    tier = get_rank_for(frame.children_total, frame.branch_ranks)
    rank_level = tier.level if tier else 0

    return NodeMetrics(
        level=frame.level,
        children_total_value=frame.children_total,
        total_with_self=frame.node.value + frame.children_total,
        rank=tier.name if tier else None,
        max_rank_in_subtree=max([rank_level, *frame.branch_ranks]),
    )


def compute_metrics(tree: OrgTree) -> dict[str, NodeMetrics]:
    """
    Compute metrics for every node reachable from the root.

    A child id with no matching node contributes nothing (zero value, no
    rank) and is skipped with a warning instead of failing the whole tree.

    Args:
        tree: Organization tree

    Returns:
        NodeMetrics by node id; empty if the tree has no root

    Example:
        >>> metrics = compute_metrics(tree)
        >>> metrics[tree.root_node_id].rank
        'S1'
    """
    root = tree.root
    if root is None:
        if tree.root_node_id is not None:
            logger.warning(f"Root node {tree.root_node_id} not found in tree {tree.id}")
        return {}

    result: dict[str, NodeMetrics] = {}
    stack = [_Frame(tree.root_node_id, root, 0)]

    while stack:
        frame = stack[-1]

        if frame.next_child < len(frame.node.children):
            child_id = frame.node.children[frame.next_child]
            frame.next_child += 1

            child = tree.nodes.get(child_id)
            if child is None:
                logger.warning(
                    f"Dangling child {child_id} under node {frame.node_id}, counted as zero"
                )
                frame.branch_ranks.append(0)
                continue

            stack.append(_Frame(child_id, child, frame.level + 1))
            continue

        stack.pop()
        metrics = _finish(frame)
        result[frame.node_id] = metrics

        if stack:
            parent = stack[-1]
            parent.children_total += metrics.total_with_self
            parent.branch_ranks.append(metrics.max_rank_in_subtree)

    logger.debug(
        f"Computed metrics for {len(result)} of {len(tree.nodes)} nodes in tree {tree.id}"
    )
    return result
