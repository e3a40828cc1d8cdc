"""
Reward calculator.

Turns tree metrics into per-node reward payouts. This module contains
standalone calculation logic with no persistence or presentation concerns.
"""

from collections import defaultdict
from decimal import Decimal

from loguru import logger

from orgrewards.constants import COMMUNITY_RATE, MINING_RATE_PRESETS, REFERRAL_RATE
from orgrewards.core.metrics import compute_metrics
from orgrewards.core.models import NodeMetrics, OrgTree, RewardEntry, RewardReport
from orgrewards.utils.numbers import Number, normalize_name, to_decimal


class RewardCalculator:
    """
    Reward calculator for mining, referral and community rewards.

    The mining rate is fixed per instance; create a new calculator when the
    rate changes. Nothing is cached between calls to ``calculate``.
    """

    def __init__(self, mining_rate: Number) -> None:
        """
        Initialize reward calculator.

        Args:
            mining_rate: Fraction of own value paid as mining reward (e.g. 0.007)
        """
        self.mining_rate = to_decimal(mining_rate)

        if self.mining_rate not in MINING_RATE_PRESETS:
            logger.warning(
                f"Mining rate {self.mining_rate} is not one of the presets "
                f"{', '.join(str(rate) for rate in MINING_RATE_PRESETS)}"
            )

    def calculate_mining_reward(self, value: Decimal) -> Decimal:
        """
        Calculate mining reward for a node's own value.

        Formula: value * mining_rate

        Example:
            >>> RewardCalculator("0.007").calculate_mining_reward(Decimal("100000"))
            Decimal('700.000')
        """
        return value * self.mining_rate

    def calculate_referral_reward(self, recruits_mining: Decimal) -> Decimal:
        """
        Calculate referral reward from the recruits' summed mining rewards.

        Formula: recruits_mining * 10%
        """
        return recruits_mining * REFERRAL_RATE

    def calculate_community_reward(self, metrics: NodeMetrics | None) -> Decimal:
        """
        Calculate community reward for a ranked node.

        Formula: children_total_value * mining_rate * 10% * rank_level

        Args:
            metrics: Node metrics, None for nodes unreachable from the root

        Returns:
            Community reward; zero when the node holds no rank
        """
        if metrics is None or metrics.rank is None:
            return Decimal("0")

        return (
            metrics.children_total_value
            * self.mining_rate
            * COMMUNITY_RATE
            * metrics.rank_level
        )

    def calculate(self, tree: OrgTree, metrics: dict[str, NodeMetrics]) -> RewardReport:
        """
        Calculate rewards for every node of the tree.

        A node recruits every other node whose recommender text, trimmed and
        lowercased, equals its own trimmed and lowercased name.

        Args:
            tree: Organization tree
            metrics: Output of compute_metrics for the same tree

        Returns:
            RewardReport with entries ordered by level, root first
        """
        mining = {
            node_id: self.calculate_mining_reward(node.value)
            for node_id, node in tree.nodes.items()
        }

        # Mining rewards grouped by the name each node gives as recommender
        mining_by_recommender: dict[str, Decimal] = defaultdict(Decimal)
        for node_id, node in tree.nodes.items():
            mining_by_recommender[normalize_name(node.recommender)] += mining[node_id]

        entries: list[RewardEntry] = []
        for node_id, node in tree.nodes.items():
            node_metrics = metrics.get(node_id)
            name_key = normalize_name(node.name)

            recruits_mining = mining_by_recommender.get(name_key, Decimal("0"))
            if normalize_name(node.recommender) == name_key:
                # A node never recruits itself
                recruits_mining -= mining[node_id]

            referral = self.calculate_referral_reward(recruits_mining)
            community = self.calculate_community_reward(node_metrics)

            entries.append(
                RewardEntry(
                    node_id=node_id,
                    recommender=node.recommender,
                    name=node.name,
                    level=node_metrics.level if node_metrics else 0,
                    rank=node_metrics.rank if node_metrics else None,
                    mining=mining[node_id],
                    referral=referral,
                    community=community,
                    total=mining[node_id] + referral + community,
                )
            )

        entries.sort(key=lambda entry: entry.level)
        grand_total = sum((entry.total for entry in entries), Decimal("0"))

        logger.debug(
            f"Calculated rewards for {len(entries)} nodes at rate {self.mining_rate}: "
            f"grand total {grand_total}"
        )

        return RewardReport(
            entries=tuple(entries),
            grand_total=grand_total,
            mining_rate=self.mining_rate,
        )


def compute_rewards(
    tree: OrgTree,
    metrics: dict[str, NodeMetrics],
    mining_rate: Number,
) -> RewardReport:
    """Calculate the reward report for a tree at the given mining rate."""
    return RewardCalculator(mining_rate).calculate(tree, metrics)


def build_report(tree: OrgTree, mining_rate: Number | None = None) -> RewardReport:
    """
    Compute metrics and rewards in one call.

    Args:
        tree: Organization tree
        mining_rate: Mining rate; defaults to the configured rate

    Returns:
        RewardReport
    """
    if mining_rate is None:
        from orgrewards.config.settings import settings

        mining_rate = settings.mining_rate

    return compute_rewards(tree, compute_metrics(tree), mining_rate)
