"""
Default constants for rank and reward calculation.

Contains the S1-S8 rank tier table and the reward rates.
"""

from decimal import Decimal

from orgrewards.core.models import RankTier


# Mining rates offered by the report screen (0.7%, 0.8%, 0.9% of own value)
MINING_RATE_PRESETS: tuple[Decimal, ...] = (
    Decimal("0.007"),
    Decimal("0.008"),
    Decimal("0.009"),
)
DEFAULT_MINING_RATE = MINING_RATE_PRESETS[0]

# 10% of each recruit's mining reward
REFERRAL_RATE = Decimal("0.10")

# Community bonus: children total x mining rate x 10% x rank level
COMMUNITY_RATE = Decimal("0.10")

# Defaults for nodes created by the tree editor
DEFAULT_ROOT_NAME = "대표이사"
DEFAULT_ROOT_RECOMMENDER = "CEO-01"
DEFAULT_MEMBER_NAME = "새 팀원"

# Ordered lowest to highest; evaluated highest first
RANK_TIERS: list[RankTier] = [
    RankTier(name="S1", level=1, min_children_total=Decimal("5000")),
    RankTier(name="S2", level=2, min_children_total=Decimal("15000"), required_branch_rank=1),
    RankTier(name="S3", level=3, min_children_total=Decimal("50000"), required_branch_rank=2),
    RankTier(name="S4", level=4, min_children_total=Decimal("150000"), required_branch_rank=3),
    RankTier(name="S5", level=5, min_children_total=Decimal("500000"), required_branch_rank=4),
    RankTier(name="S6", level=6, min_children_total=Decimal("1500000"), required_branch_rank=5),
    RankTier(name="S7", level=7, min_children_total=Decimal("5000000"), required_branch_rank=6),
    RankTier(name="S8", level=8, min_children_total=Decimal("15000000"), required_branch_rank=7),
]


def get_rank_by_level(level: int) -> RankTier | None:
    """
    Get rank tier by its numeric level.

    Args:
        level: Rank level (1-8)

    Returns:
        RankTier or None if not found

    Example:
        >>> get_rank_by_level(3).min_children_total
        Decimal('50000')
    """
    for tier in RANK_TIERS:
        if tier.level == level:
            return tier
    return None


def get_rank_by_name(name: str | None) -> RankTier | None:
    """Get rank tier by name ("S1".."S8"), case-insensitive."""
    if not name:
        return None
    wanted = name.strip().upper()
    for tier in RANK_TIERS:
        if tier.name == wanted:
            return tier
    return None


def get_rank_for(children_total: Decimal, branch_ranks: list[int]) -> RankTier | None:
    """
    Get the highest rank tier a node qualifies for.

    Tiers are checked from S8 downward and the first satisfied one wins.

    Args:
        children_total: Sum of all descendants' values
        branch_ranks: max_rank_in_subtree of each direct child

    Returns:
        Highest satisfied RankTier, or None

    Example:
        >>> get_rank_for(Decimal("20000"), [1, 1]).name
        'S2'
        >>> get_rank_for(Decimal("20000"), [1, 0]).name
        'S1'
    """
    for tier in reversed(RANK_TIERS):
        if tier.is_satisfied_by(children_total, branch_ranks):
            return tier
    return None
