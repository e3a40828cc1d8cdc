"""
Core data models.

Metrics, rewards and tree editing live in their own modules
(``orgrewards.core.metrics``, ``.rewards``, ``.tree``, ``.directory``)
and are re-exported from the top-level package.
"""

from orgrewards.core.models import (
    DirectoryEntry,
    NodeMetrics,
    OrgNode,
    OrgTree,
    RankTier,
    RewardEntry,
    RewardReport,
)

__all__ = [
    "OrgNode",
    "OrgTree",
    "RankTier",
    "NodeMetrics",
    "RewardEntry",
    "RewardReport",
    "DirectoryEntry",
]
