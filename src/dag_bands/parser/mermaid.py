"""Parser for Mermaid-style graph definitions with %%dag directives.

Uses a simple line-by-line approach, like Mermaid itself: node and edge
lines define the graph, %%dag directives attach positions, colors and band
stacks to nodes. Directives may appear before or after the nodes they
refer to; unknown nodes are created on first mention.

Example::

    %%dag title: Confounding
    %%dag radius: 40
    %%dag hatch: conf | #d39a2d | #9b332b | 45
    graph LR
        X[Treatment]
        X --> Y
        Z -.->|0.5| Y
    %%dag pos: X | 100, 200
    %%dag bands: Y | up | 0.3 x, 0.7 conf
"""

from __future__ import annotations

import logging
import re

from dag_bands.parser.model import (
    Band,
    DagEdge,
    DagGraph,
    HatchDef,
    Node,
    Orientation,
)

logger = logging.getLogger(__name__)

_PRIMARY_STACKS = ("up", "left", "primary")
_SECONDARY_STACKS = ("down", "right", "secondary")


def parse_dag_mermaid(text: str) -> DagGraph:
    """Parse a Mermaid graph definition with %%dag directives."""
    graph = DagGraph()

    for lineno, line in enumerate(text.strip().split("\n"), start=1):
        stripped = line.strip()
        if not stripped:
            continue

        try:
            if stripped.startswith("%%dag"):
                _parse_directive(stripped, graph)
                continue

            # Skip regular comments and graph declaration
            if stripped.startswith("%%") or stripped.startswith("graph "):
                continue

            # Try edge first (contains arrow)
            if "-->" in stripped or "-.->" in stripped:
                _parse_edge(stripped, graph)
                continue

            _parse_node(stripped, graph)
        except ValueError as e:
            raise ValueError(f"Line {lineno}: {e}") from e

    return graph


# Regex patterns for node shapes; all render as circles
_NODE_PATTERNS = [
    # circle: node_id((label))
    re.compile(r"^([a-zA-Z_][a-zA-Z0-9_]*)\(\((.+?)\)\)$"),
    # square bracket: node_id[label]
    re.compile(r"^([a-zA-Z_][a-zA-Z0-9_]*)\[(.+?)\]$"),
    # round bracket: node_id(label)
    re.compile(r"^([a-zA-Z_][a-zA-Z0-9_]*)\((.+?)\)$"),
    # bare id
    re.compile(r"^([a-zA-Z_][a-zA-Z0-9_]*)$"),
]

# Edge pattern: source -->|strength| target, source -.-> target
_EDGE_PATTERN = re.compile(
    r"^([a-zA-Z_][a-zA-Z0-9_]*)\s*"  # source
    r"(-->|-\.->)"  # arrow: solid = active, dotted = blocked
    r"(?:\|([^|]*)\|)?\s*"  # optional |strength|
    r"([a-zA-Z_][a-zA-Z0-9_]*)$"  # target
)


def _parse_float(value: str, what: str) -> float:
    try:
        return float(value.strip())
    except ValueError:
        raise ValueError(f"Invalid {what}: '{value.strip()}'") from None


def _parse_directive(line: str, graph: DagGraph) -> None:
    """Parse a %%dag directive line."""
    content = line[len("%%dag") :].strip()

    if content.startswith("title:"):
        graph.title = content[len("title:") :].strip()
    elif content.startswith("radius:"):
        radius = _parse_float(content[len("radius:") :], "radius")
        if not radius >= 0:
            raise ValueError(f"Node radius must be non-negative, got {radius}")
        graph.node_radius = radius
    elif content.startswith("orientation:"):
        graph.orientation = _parse_orientation(content[len("orientation:") :])
    elif content.startswith("hatch:"):
        parts = _fields(content, "hatch", 3, "<id> | <background> | <stripe> [| <rotation>]")
        rotation = _parse_float(parts[3], "hatch rotation") if len(parts) > 3 else 45.0
        graph.add_hatch(HatchDef(
            id=parts[0],
            background=parts[1],
            stripe=parts[2],
            rotation=rotation,
        ))
    elif content.startswith("pos:"):
        parts = _fields(content, "pos", 2, "<id> | <x>, <y>")
        coords = parts[1].split(",")
        if len(coords) != 2:
            raise ValueError(f"Position must be 'x, y', got '{parts[1]}'")
        node = graph.ensure_node(parts[0])
        node.x = _parse_float(coords[0], "x coordinate")
        node.y = _parse_float(coords[1], "y coordinate")
    elif content.startswith("color:"):
        parts = _fields(content, "color", 2, "<id> | <color>")
        graph.ensure_node(parts[0]).color = parts[1]
    elif content.startswith("orient:"):
        parts = _fields(content, "orient", 2, "<id> | vertical|horizontal")
        graph.ensure_node(parts[0]).orientation = _parse_orientation(parts[1])
    elif content.startswith("solid:"):
        parts = _fields(content, "solid", 1, "<id> [| <opacity>]")
        node = graph.ensure_node(parts[0])
        node.solid = True
        if len(parts) >= 2 and parts[1]:
            opacity = _parse_float(parts[1], "opacity")
            if not 0.0 <= opacity <= 1.0:
                raise ValueError(f"Opacity must be within [0, 1], got {opacity}")
            node.opacity = opacity
    elif content.startswith("bands:"):
        parts = _fields(content, "bands", 3, "<id> | <stack> | <prop> <fill>, ...")
        _parse_bands(parts, graph)
    else:
        logger.debug("Ignoring unknown directive: %s", line)


def _fields(content: str, name: str, count: int, usage: str) -> list[str]:
    """Split a ``name: a | b | ...`` directive into at least ``count`` fields."""
    parts = [p.strip() for p in content[len(name) + 1 :].split("|")]
    if len(parts) < count or not parts[0]:
        raise ValueError(f"'{name}:' expects '{usage}', got '{content}'")
    return parts


def _parse_orientation(value: str) -> Orientation:
    value = value.strip().lower()
    try:
        return Orientation(value)
    except ValueError:
        raise ValueError(
            f"Unknown orientation '{value}' (expected 'vertical' or 'horizontal')"
        ) from None


def _parse_bands(parts: list[str], graph: DagGraph) -> None:
    """Add bands from the fields ``<id>``, ``<stack>``, ``<prop> <fill>, ...``.

    Appends to the node's existing stack so long stacks can be split over
    several directives.
    """
    node = graph.ensure_node(parts[0])
    stack_name = parts[1].lower()
    if stack_name in _PRIMARY_STACKS:
        stack = node.bands.primary
    elif stack_name in _SECONDARY_STACKS:
        stack = node.bands.secondary
    else:
        raise ValueError(
            f"Unknown band stack '{stack_name}' "
            f"(expected one of {', '.join(_PRIMARY_STACKS + _SECONDARY_STACKS)})"
        )

    for item in parts[2].split(","):
        tokens = item.split()
        if not tokens:
            continue
        if len(tokens) != 2:
            raise ValueError(f"Band must be '<proportion> <fill>', got '{item.strip()}'")
        stack.append(Band(
            proportion=_parse_float(tokens[0], "band proportion"),
            fill=tokens[1],
        ))


def _parse_node(line: str, graph: DagGraph) -> None:
    """Parse a node definition line."""
    for pattern in _NODE_PATTERNS:
        m = pattern.match(line)
        if m:
            node_id = m.group(1)
            label = m.group(2).strip() if m.lastindex >= 2 else node_id
            if node_id not in graph.nodes:
                graph.add_node(Node(id=node_id, label=label))
            else:
                # Update label if node was auto-created from an edge or directive
                graph.nodes[node_id].label = label
            return
    logger.debug("Ignoring unrecognised line: %s", line)


def _parse_edge(line: str, graph: DagGraph) -> None:
    """Parse an edge line; ``-.->`` marks the edge as blocked."""
    m = _EDGE_PATTERN.match(line)
    if not m:
        logger.debug("Ignoring malformed edge: %s", line)
        return

    source = m.group(1)
    blocked = m.group(2) == "-.->"
    label = m.group(3).strip() if m.group(3) else ""
    target = m.group(4)

    strength = _parse_float(label, "edge strength") if label else 1.0

    graph.ensure_node(source)
    graph.ensure_node(target)
    graph.add_edge(DagEdge(source=source, target=target,
                           strength=strength, blocked=blocked))
