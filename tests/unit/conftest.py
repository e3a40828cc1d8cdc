"""
Shared fixtures for unit tests.

This module provides common fixtures used across multiple test modules:
- Tree factory building OrgTree from flat node rows
- Small sample trees
"""

from decimal import Decimal
from typing import Callable

import pytest

from orgrewards import OrgNode, OrgTree


# (id, parent_id, name, recommender, value)
NodeRow = tuple[str, str | None, str, str, int | float | str]


def _build_tree(rows: list[NodeRow]) -> OrgTree:
    nodes: dict[str, OrgNode] = {}
    root_id = None
    for node_id, parent_id, name, recommender, value in rows:
        nodes[node_id] = OrgNode(
            id=node_id,
            name=name,
            recommender=recommender,
            value=value,
            parent_id=parent_id,
        )
        if parent_id is None:
            root_id = node_id
        else:
            nodes[parent_id].children.append(node_id)
    return OrgTree(id="test", title="Test", root_node_id=root_id, nodes=nodes)


@pytest.fixture
def tree_factory() -> Callable[[list[NodeRow]], OrgTree]:
    """
    Build a tree from rows of (id, parent_id, name, recommender, value).

    Parents must be listed before their children.
    """
    return _build_tree


@pytest.fixture
def two_leaf_tree() -> OrgTree:
    """Root (0) with two children of 3,000 each."""
    return _build_tree([
        ("root", None, "Root", "", 0),
        ("a", "root", "A", "", 3000),
        ("b", "root", "B", "", 3000),
    ])


@pytest.fixture
def four_level_tree() -> OrgTree:
    """
    Four levels, uneven values.

    root(100) -> a(200) -> c(300) -> e(400)
              -> b(500) -> d(600)
                        -> f(700)
    """
    return _build_tree([
        ("root", None, "Root", "", 100),
        ("a", "root", "A", "", 200),
        ("b", "root", "B", "", 500),
        ("c", "a", "C", "", 300),
        ("d", "b", "D", "", 600),
        ("f", "b", "F", "", 700),
        ("e", "c", "E", "", 400),
    ])


@pytest.fixture
def rate() -> Decimal:
    return Decimal("0.007")
