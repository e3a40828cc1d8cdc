"""
Exceptions raised by the tree editing layer.

Metric and reward computation never raise for structural problems; only
explicit edits against a missing node or the root do.
"""


class OrgTreeError(Exception):
    """Base class for organization tree errors."""
    pass


class NodeNotFoundError(OrgTreeError, KeyError):
    """Raised when an edit references a node id that is not in the tree."""

    def __init__(self, node_id: str) -> None:
        super().__init__(node_id)
        self.node_id = node_id

    def __str__(self) -> str:
        return f"Node not found: {self.node_id}"


class RootNodeError(OrgTreeError):
    """Raised when an edit is not allowed on the root node."""
    pass
