"""
Tree editing operations.

Every function returns a new OrgTree and leaves its input untouched, so
callers recompute metrics and rewards from the returned tree.
"""

import random
import time
from uuid import uuid4

from loguru import logger

from orgrewards.constants import (
    DEFAULT_MEMBER_NAME,
    DEFAULT_ROOT_NAME,
    DEFAULT_ROOT_RECOMMENDER,
)
from orgrewards.core.models import OrgNode, OrgTree
from orgrewards.exceptions import NodeNotFoundError, RootNodeError
from orgrewards.utils.numbers import Number


EDITABLE_FIELDS = frozenset({"name", "recommender", "value"})


def _get_node(tree: OrgTree, node_id: str) -> OrgNode:
    node = tree.nodes.get(node_id)
    if node is None:
        raise NodeNotFoundError(node_id)
    return node


def create_project(
    title: str,
    root_name: str = DEFAULT_ROOT_NAME,
    root_recommender: str = DEFAULT_ROOT_RECOMMENDER,
) -> OrgTree:
    """
    Create a project holding a single root node.

    Args:
        title: Project title
        root_name: Display name of the root node
        root_recommender: Recommender text of the root node

    Returns:
        New OrgTree
    """
    root_id = str(uuid4())
    root = OrgNode(id=root_id, name=root_name, recommender=root_recommender)

    tree = OrgTree(
        title=title,
        root_node_id=root_id,
        nodes={root_id: root},
        created_at=int(time.time() * 1000),
    )
    logger.info(f"Created project {tree.id} ({title!r})")
    return tree


def rename_project(tree: OrgTree, title: str) -> OrgTree:
    return tree.model_copy(update={"title": title}, deep=True)


def add_child(
    tree: OrgTree,
    parent_id: str,
    name: str = DEFAULT_MEMBER_NAME,
    recommender: str | None = None,
    value: Number = 0,
) -> tuple[OrgTree, str]:
    """
    Append a new child under a node.

    Args:
        tree: Organization tree
        parent_id: Id of the parent node
        name: Display name of the new node
        recommender: Recommender text; defaults to a random "ID-<n>" tag
        value: Own value of the new node

    Returns:
        Tuple of (new tree, id of the added node)

    Raises:
        NodeNotFoundError: If parent_id is not in the tree
    """
    _get_node(tree, parent_id)

    if recommender is None:
        recommender = f"ID-{random.randint(0, 999)}"

    new_tree = tree.model_copy(deep=True)
    child_id = str(uuid4())
    new_tree.nodes[child_id] = OrgNode(
        id=child_id,
        name=name,
        recommender=recommender,
        value=value,
        parent_id=parent_id,
    )
    new_tree.nodes[parent_id].children.append(child_id)

    logger.debug(f"Added node {child_id} under {parent_id} in tree {tree.id}")
    return new_tree, child_id


def update_node(tree: OrgTree, node_id: str, **changes: object) -> OrgTree:
    """
    Change name, recommender or value of a node.

    Raises:
        NodeNotFoundError: If node_id is not in the tree
        ValueError: If a change targets a field other than name, recommender, value
    """
    _get_node(tree, node_id)

    unknown = set(changes) - EDITABLE_FIELDS
    if unknown:
        raise ValueError(f"Fields cannot be edited: {', '.join(sorted(unknown))}")

    new_tree = tree.model_copy(deep=True)
    node = new_tree.nodes[node_id]
    for field, value in changes.items():
        setattr(node, field, value)

    return new_tree


def delete_node(tree: OrgTree, node_id: str) -> OrgTree:
    """
    Delete a node together with its whole subtree.

    A non-root node without a parent is not part of the tree and is left
    in place; the returned tree is an unchanged copy.

    Raises:
        NodeNotFoundError: If node_id is not in the tree
        RootNodeError: If node_id is the root
    """
    node = _get_node(tree, node_id)

    if node_id == tree.root_node_id:
        raise RootNodeError(f"Root node {node_id} cannot be deleted")

    if node.parent_id is None:
        logger.warning(f"Node {node_id} has no parent in tree {tree.id}, nothing deleted")
        return tree.model_copy(deep=True)

    new_tree = tree.model_copy(deep=True)

    removed = 0
    pending = [node_id]
    while pending:
        current = new_tree.nodes.pop(pending.pop(), None)
        if current is None:
            continue
        removed += 1
        pending.extend(current.children)

    parent = new_tree.nodes.get(node.parent_id)
    if parent is not None:
        parent.children = [child for child in parent.children if child != node_id]

    logger.debug(f"Deleted {removed} nodes starting at {node_id} in tree {tree.id}")
    return new_tree
