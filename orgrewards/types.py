"""
Type definitions for orgrewards.

TypedDict shapes of stored projects and exported reports. Stored projects
use the camelCase keys of the chart editor's saved data.
"""

from typing import Optional, TypedDict


class OrgNodeDict(TypedDict):
    """
    Stored node.

    Attributes:
        id: Node id
        name: Display name
        employeeId: Recommender text (name of the recruiting member)
        value: Own monetary value
        children: Ordered child ids
        parentId: Parent id, None for the root
    """
    id: str
    name: str
    employeeId: str
    value: float
    children: list[str]
    parentId: Optional[str]


class ProjectDict(TypedDict):
    """
    Stored project.

    Attributes:
        id: Project id
        title: Project title
        rootNodeId: Root node id
        nodes: Nodes by id
        createdAt: Creation time in ms since epoch
    """
    id: str
    title: str
    rootNodeId: Optional[str]
    nodes: dict[str, OrgNodeDict]
    createdAt: int


class RewardEntryDict(TypedDict):
    node_id: str
    recommender: str
    name: str
    level: int
    rank: Optional[str]
    mining: float
    referral: float
    community: float
    total: float


class RewardReportDict(TypedDict):
    entries: list[RewardEntryDict]
    grand_total: float
    mining_rate: float
