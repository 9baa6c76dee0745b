"""SVG generation for banded DAG diagrams using drawsvg."""

from __future__ import annotations

import logging
import math

import drawsvg as draw

from dag_bands.geometry.bands import Disk
from dag_bands.parser.model import DagGraph
from dag_bands.render.constants import CANVAS_PADDING, TITLE_SPACE, TITLE_Y_OFFSET
from dag_bands.render.defs import arrow_markers, hatch_patterns
from dag_bands.render.edges import draw_edge
from dag_bands.render.nodes import draw_label, draw_node, draw_solid_node
from dag_bands.render.style import Theme

logger = logging.getLogger(__name__)


def render_svg(
    graph: DagGraph,
    theme: Theme,
    width: int | None = None,
    height: int | None = None,
    padding: float = CANVAS_PADDING,
) -> str:
    """Render a DAG diagram to an SVG string.

    Node positions must already be set; nodes without one raise ValueError.
    """
    if not graph.nodes:
        return '<svg xmlns="http://www.w3.org/2000/svg"></svg>'

    unplaced = graph.unplaced_nodes()
    if unplaced:
        raise ValueError(
            f"Nodes without a position: {', '.join(sorted(unplaced))}. "
            "Set one with '%%dag pos: <id> | <x>, <y>'."
        )

    r = graph.node_radius
    if not r >= 0:
        raise ValueError(f"Node radius must be non-negative, got {r}")

    xs = [n.x for n in graph.nodes.values()]
    ys = [n.y for n in graph.nodes.values()]
    # Canvas spans every disk plus padding; the title gets a strip above it
    left = min(xs) - r - padding
    top = min(ys) - r - padding - (TITLE_SPACE if graph.title else 0.0)
    right = max(xs) + r + padding
    bottom = max(ys) + r + padding

    svg_width = width or math.ceil(right - left)
    svg_height = height or math.ceil(bottom - top)

    d = draw.Drawing(svg_width, svg_height, origin=(left, top))

    if theme.background_color != "none":
        d.append(draw.Rectangle(left, top, svg_width, svg_height,
                                fill=theme.background_color))

    if graph.title:
        d.append(draw.Text(
            graph.title,
            theme.title_font_size,
            left + padding, top + TITLE_Y_OFFSET,
            fill=theme.title_color,
            font_family=theme.label_font_family,
            font_weight="bold",
        ))

    # Draw edges behind nodes
    _render_edges(d, graph, theme)
    _render_nodes(d, graph, theme)
    _render_labels(d, graph, theme)

    logger.debug("Rendered %d nodes and %d edges at %dx%d",
                 len(graph.nodes), len(graph.edges), svg_width, svg_height)
    return d.as_svg()


def _render_edges(
    d: draw.Drawing | draw.Group,
    graph: DagGraph,
    theme: Theme,
) -> None:
    markers = arrow_markers(theme)
    for edge in graph.edges:
        src = graph.nodes[edge.source]
        tgt = graph.nodes[edge.target]
        draw_edge(d, (src.x, src.y), (tgt.x, tgt.y), edge,
                  graph.node_radius, theme, markers)


def _render_nodes(
    d: draw.Drawing | draw.Group,
    graph: DagGraph,
    theme: Theme,
) -> None:
    """Render solid nodes as plain circles and all others with band stacks."""
    patterns = hatch_patterns(graph.hatches)
    for node in graph.nodes.values():
        disk = Disk(node.x, node.y, graph.node_radius)
        if node.solid:
            draw_solid_node(d, disk, node.color, theme,
                            opacity=node.opacity, patterns=patterns)
        else:
            draw_node(
                d, disk, node.bands, theme,
                orientation=graph.node_orientation(node.id),
                base_color=node.color,
                patterns=patterns,
            )


def _render_labels(
    d: draw.Drawing | draw.Group,
    graph: DagGraph,
    theme: Theme,
) -> None:
    for node in graph.nodes.values():
        if node.label:
            draw_label(d, node.x, node.y, node.label, theme)
