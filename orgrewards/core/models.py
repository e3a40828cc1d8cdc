"""Pydantic models for the organization tree and its derived metrics."""

from decimal import Decimal
from typing import TYPE_CHECKING
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

from orgrewards.utils.numbers import to_decimal


if TYPE_CHECKING:
    from orgrewards.types import ProjectDict, RewardReportDict


class OrgNode(BaseModel):
    """Single member of the organization tree.

    ``recommender`` is free text naming the member who recruited this one.
    It is matched against other nodes' ``name`` by text, never by id.
    """

    model_config = ConfigDict(
        frozen=False,
        validate_assignment=True,
        populate_by_name=True,
    )

    id: str = Field(..., description="Opaque unique node key")
    name: str = Field(default="", description="Display name")
    recommender: str = Field(
        default="",
        alias="employeeId",
        description="Free-text name of the recruiting member",
    )
    value: Decimal = Field(default=Decimal("0"), description="Own monetary value")
    children: list[str] = Field(default_factory=list, description="Ordered child ids")
    parent_id: str | None = Field(
        default=None, alias="parentId", description="Parent id, None for the root"
    )

    @field_validator("value", mode="before")
    @classmethod
    def coerce_value(cls, v: object) -> object:
        """Treat unset values as zero and normalize numbers to Decimal."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return Decimal("0")
        if isinstance(v, (int, float, Decimal)) and not isinstance(v, bool):
            return to_decimal(v)
        return v

    @field_validator("name", "recommender", mode="before")
    @classmethod
    def coerce_text(cls, v: object) -> object:
        if v is None:
            return ""
        return v


class OrgTree(BaseModel):
    """Organization project: node arena keyed by id plus the root id."""

    model_config = ConfigDict(
        frozen=False,
        validate_assignment=True,
        populate_by_name=True,
    )

    id: str = Field(default_factory=lambda: str(uuid4()), description="Project id")
    title: str = Field(default="", description="Project title")
    root_node_id: str | None = Field(
        default=None, alias="rootNodeId", description="Id of the root node"
    )
    nodes: dict[str, OrgNode] = Field(default_factory=dict, description="Nodes by id")
    created_at: int = Field(
        default=0, alias="createdAt", description="Creation time, ms since epoch"
    )

    @property
    def root(self) -> OrgNode | None:
        if self.root_node_id is None:
            return None
        return self.nodes.get(self.root_node_id)

    @classmethod
    def from_dict(cls, data: "ProjectDict") -> "OrgTree":
        """Load a project from its stored camelCase shape."""
        return cls.model_validate(data)

    def to_dict(self) -> "ProjectDict":
        """Export the project in its stored camelCase shape."""
        data = self.model_dump(by_alias=True)
        for node in data["nodes"].values():
            node["value"] = float(node["value"])
        return data


class RankTier(BaseModel):
    """Rank tier configuration.

    A tier is earned when the descendants' cumulative value reaches
    ``min_children_total`` and, for tiers above S1, at least
    ``min_qualifying_branches`` direct children reached ``required_branch_rank``
    somewhere in their subtree.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Tier name (S1..S8)")
    level: int = Field(..., ge=1, le=8, description="Numeric tier, also the community multiplier")
    min_children_total: Decimal = Field(..., ge=0, description="Minimum descendants' value")
    required_branch_rank: int | None = Field(
        default=None, ge=1, description="Rank level a qualifying branch must reach"
    )
    min_qualifying_branches: int = Field(
        default=2, ge=0, description="Qualifying branches needed"
    )

    def is_satisfied_by(self, children_total: Decimal, branch_ranks: list[int]) -> bool:
        """Check both tier conditions against a node's computed inputs."""
        if children_total < self.min_children_total:
            return False
        if self.required_branch_rank is None:
            return True
        qualifying = sum(1 for rank in branch_ranks if rank >= self.required_branch_rank)
        return qualifying >= self.min_qualifying_branches


class NodeMetrics(BaseModel):
    """Derived per-node metrics. Recomputed from scratch, never patched."""

    model_config = ConfigDict(frozen=True)

    level: int = Field(..., ge=0, description="Distance from the root")
    children_total_value: Decimal = Field(..., description="Sum of all descendants' values")
    total_with_self: Decimal = Field(..., description="Own value plus descendants' values")
    rank: str | None = Field(default=None, description="Earned rank tier name")
    max_rank_in_subtree: int = Field(
        default=0, ge=0, le=8, description="Highest rank level in this subtree"
    )

    @property
    def rank_level(self) -> int:
        return int(self.rank[1:]) if self.rank else 0


class RewardEntry(BaseModel):
    """Reward breakdown for one node."""

    model_config = ConfigDict(frozen=True)

    node_id: str
    recommender: str
    name: str
    level: int = Field(..., ge=0)
    rank: str | None = None
    mining: Decimal = Field(..., description="Own value x mining rate")
    referral: Decimal = Field(..., description="Share of recruits' mining rewards")
    community: Decimal = Field(..., description="Rank bonus on descendants' value")
    total: Decimal = Field(..., description="mining + referral + community")


class RewardReport(BaseModel):
    """Reward entries ordered by level, with the grand total."""

    model_config = ConfigDict(frozen=True)

    entries: tuple[RewardEntry, ...] = Field(default_factory=tuple)
    grand_total: Decimal = Field(default=Decimal("0"))
    mining_rate: Decimal = Field(..., description="Rate the report was computed at")

    def by_node_id(self) -> dict[str, RewardEntry]:
        return {entry.node_id: entry for entry in self.entries}

    def to_dict(self) -> "RewardReportDict":
        """Export the report with amounts as floats, unrounded."""
        return {
            "entries": [
                {
                    "node_id": entry.node_id,
                    "recommender": entry.recommender,
                    "name": entry.name,
                    "level": entry.level,
                    "rank": entry.rank,
                    "mining": float(entry.mining),
                    "referral": float(entry.referral),
                    "community": float(entry.community),
                    "total": float(entry.total),
                }
                for entry in self.entries
            ],
            "grand_total": float(self.grand_total),
            "mining_rate": float(self.mining_rate),
        }


class DirectoryEntry(BaseModel):
    """Node listed in the directory together with its metrics."""

    model_config = ConfigDict(frozen=True)

    node: OrgNode
    metrics: NodeMetrics | None = Field(
        default=None, description="None when the node is not reachable from the root"
    )
