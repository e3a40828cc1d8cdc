"""
Organization tree rewards.

Standalone package computing subtree totals, S1-S8 ranks and
mining/referral/community rewards for a recruitment tree.

Example:
    >>> from orgrewards import OrgTree, OrgNode, compute_metrics, compute_rewards
    >>>
    >>> tree = OrgTree(
    ...     root_node_id="root",
    ...     nodes={
    ...         "root": OrgNode(id="root", name="Alice", children=["a", "b"]),
    ...         "a": OrgNode(id="a", name="Bob", recommender="alice", value=3000, parent_id="root"),
    ...         "b": OrgNode(id="b", name="Carol", value=3000, parent_id="root"),
    ...     },
    ... )
    >>> metrics = compute_metrics(tree)
    >>> metrics["root"].rank
    'S1'
    >>> report = compute_rewards(tree, metrics, "0.007")
    >>> print(f"Total rewards: {report.grand_total}")
    Total rewards: 48.30000
"""

from orgrewards.constants import (
    DEFAULT_MINING_RATE,
    MINING_RATE_PRESETS,
    RANK_TIERS,
    get_rank_by_level,
    get_rank_by_name,
    get_rank_for,
)
from orgrewards.core.directory import build_directory, search_nodes
from orgrewards.core.metrics import compute_metrics
from orgrewards.core.models import (
    DirectoryEntry,
    NodeMetrics,
    OrgNode,
    OrgTree,
    RankTier,
    RewardEntry,
    RewardReport,
)
from orgrewards.core.rewards import RewardCalculator, build_report, compute_rewards
from orgrewards.core.tree import (
    add_child,
    create_project,
    delete_node,
    rename_project,
    update_node,
)
from orgrewards.exceptions import NodeNotFoundError, OrgTreeError, RootNodeError
from orgrewards.utils import (
    format_currency,
    format_percentage,
    format_rank,
    format_reward_report,
)


__version__ = "1.0.0"
__all__ = [
    # Core
    "compute_metrics",
    "compute_rewards",
    "build_report",
    "RewardCalculator",
    # Models
    "OrgNode",
    "OrgTree",
    "RankTier",
    "NodeMetrics",
    "RewardEntry",
    "RewardReport",
    "DirectoryEntry",
    # Constants
    "RANK_TIERS",
    "MINING_RATE_PRESETS",
    "DEFAULT_MINING_RATE",
    "get_rank_by_level",
    "get_rank_by_name",
    "get_rank_for",
    # Tree editing
    "create_project",
    "rename_project",
    "add_child",
    "update_node",
    "delete_node",
    "search_nodes",
    "build_directory",
    # Errors
    "OrgTreeError",
    "NodeNotFoundError",
    "RootNodeError",
    # Formatters
    "format_currency",
    "format_percentage",
    "format_rank",
    "format_reward_report",
]
