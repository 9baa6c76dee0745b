"""Data model for banded DAG diagrams."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Orientation(Enum):
    """Axis along which a node's band stacks grow.

    VERTICAL stacks grow from the bottom (primary) and top (secondary)
    edges; HORIZONTAL stacks grow from the left and right edges.
    """

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


@dataclass(frozen=True)
class Band:
    """A proportion-weighted fill stacked inside a node's disk."""

    proportion: float
    fill: str

    def __post_init__(self) -> None:
        if not 0.0 <= self.proportion <= 1.0:
            raise ValueError(
                f"Band proportion must be within [0, 1], got {self.proportion}"
            )


@dataclass
class BandStacks:
    """Two independent band stacks growing from opposite edges of a disk."""

    primary: list[Band] = field(default_factory=list)
    secondary: list[Band] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.primary and not self.secondary


@dataclass
class HatchDef:
    """A named diagonal hatch fill: stripes over a background color."""

    id: str
    background: str
    stripe: str
    rotation: float = 45.0


@dataclass
class Node:
    """A circular node at a caller-supplied position."""

    id: str
    label: str
    x: float | None = None
    y: float | None = None
    color: str = ""
    bands: BandStacks = field(default_factory=BandStacks)
    orientation: Orientation | None = None  # None = use the graph default
    solid: bool = False
    opacity: float = 1.0

    @property
    def has_position(self) -> bool:
        return self.x is not None and self.y is not None


@dataclass
class DagEdge:
    """A directed edge whose stroke width encodes ``strength``.

    A strength of exactly 0 is valid and means the edge is not drawn.
    Blocked edges are drawn muted and dashed with a cancellation mark.
    """

    source: str
    target: str
    strength: float = 1.0
    blocked: bool = False

    def __post_init__(self) -> None:
        if not 0.0 <= self.strength <= 1.0:
            raise ValueError(
                f"Edge strength must be within [0, 1], got {self.strength}"
            )


@dataclass
class DagGraph:
    """Complete diagram definition."""

    title: str = ""
    node_radius: float = 40.0
    orientation: Orientation = Orientation.VERTICAL
    nodes: dict[str, Node] = field(default_factory=dict)
    edges: list[DagEdge] = field(default_factory=list)
    hatches: dict[str, HatchDef] = field(default_factory=dict)

    def add_node(self, node: Node) -> None:
        self.nodes[node.id] = node

    def ensure_node(self, node_id: str) -> Node:
        """Return the node with ``node_id``, creating a bare one if needed."""
        node = self.nodes.get(node_id)
        if node is None:
            node = Node(id=node_id, label=node_id)
            self.add_node(node)
        return node

    def add_edge(self, edge: DagEdge) -> None:
        self.edges.append(edge)

    def add_hatch(self, hatch: HatchDef) -> None:
        self.hatches[hatch.id] = hatch

    def node_orientation(self, node_id: str) -> Orientation:
        node = self.nodes[node_id]
        return node.orientation or self.orientation

    def blocked_edges(self) -> list[DagEdge]:
        return [e for e in self.edges if e.blocked]

    def unplaced_nodes(self) -> list[str]:
        """Return IDs of nodes that have no position yet."""
        return [nid for nid, n in self.nodes.items() if not n.has_position]
