"""Edge drawing: weighted arrows with a blocked/active style."""

from __future__ import annotations

import logging

import drawsvg as draw

from dag_bands.geometry.constants import BLOCKED_BAR_HALF_LENGTH
from dag_bands.geometry.lines import edge_segment, perpendicular_bar
from dag_bands.parser.model import DagEdge
from dag_bands.render.constants import EDGE_STROKE_BASE, EDGE_STROKE_SCALE
from dag_bands.render.style import Theme

logger = logging.getLogger(__name__)


def edge_stroke_width(strength: float) -> float:
    """Stroke width grows linearly with edge strength."""
    return EDGE_STROKE_BASE + strength * EDGE_STROKE_SCALE


def draw_edge(
    scene: draw.Drawing | draw.Group,
    start: tuple[float, float],
    end: tuple[float, float],
    edge: DagEdge,
    node_radius: float,
    theme: Theme,
    markers: dict[str, draw.Marker] | None = None,
) -> None:
    """Render ``edge`` as an arrow between two node centers.

    Zero-strength edges draw nothing. Blocked edges are dashed and muted,
    with a perpendicular bar across the midpoint of the visible line.
    """
    if edge.strength == 0:
        logger.debug("Edge %s -> %s has zero strength; not drawn",
                     edge.source, edge.target)
        return

    line = edge_segment(start, end, node_radius)
    if edge.blocked:
        style = dict(
            stroke=theme.edge_blocked_color,
            stroke_dasharray=theme.edge_blocked_dash,
            opacity=theme.edge_blocked_opacity,
        )
    else:
        style = dict(
            stroke=theme.edge_active_color,
            opacity=theme.edge_active_opacity,
        )
    if markers:
        style["marker_end"] = markers["blocked" if edge.blocked else "active"]

    scene.append(draw.Line(
        line.x1, line.y1,
        line.x2, line.y2,
        stroke_width=edge_stroke_width(edge.strength),
        **style,
    ))

    if edge.blocked:
        bar = perpendicular_bar(line, BLOCKED_BAR_HALF_LENGTH)
        scene.append(draw.Line(
            bar.x1, bar.y1,
            bar.x2, bar.y2,
            stroke=theme.blocked_bar_color,
            stroke_width=theme.blocked_bar_width,
            stroke_linecap="round",
        ))
