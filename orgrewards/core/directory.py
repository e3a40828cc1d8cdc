"""Node directory: search members and list them with their metrics."""

from orgrewards.core.metrics import compute_metrics
from orgrewards.core.models import DirectoryEntry, OrgNode, OrgTree


def search_nodes(tree: OrgTree, query: str = "") -> list[OrgNode]:
    """
    Find nodes whose name or recommender contains the query.

    Matching is case-insensitive; a blank query returns every node in
    tree order.
    """
    if not query.strip():
        return list(tree.nodes.values())

    needle = query.lower()
    return [
        node for node in tree.nodes.values()
        if needle in node.name.lower() or needle in node.recommender.lower()
    ]


def build_directory(tree: OrgTree, query: str = "") -> list[DirectoryEntry]:
    """
    List matching nodes together with their metrics.

    Args:
        tree: Organization tree
        query: Optional search text

    Returns:
        DirectoryEntry per matching node; metrics is None for nodes
        not reachable from the root
    """
    metrics = compute_metrics(tree)
    return [
        DirectoryEntry(node=node, metrics=metrics.get(node.id))
        for node in search_nodes(tree, query)
    ]
