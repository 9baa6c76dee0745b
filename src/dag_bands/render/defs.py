"""Reusable SVG definitions: arrow markers, circular clips, hatch fills.

drawsvg collects these into ``<defs>`` automatically when an element that
references them is appended to a drawing.
"""

from __future__ import annotations

import drawsvg as draw

from dag_bands.parser.model import HatchDef
from dag_bands.render.constants import (
    ARROW_MARKER_SIZE,
    ARROW_VIEWBOX,
    HATCH_STRIPE_WIDTH,
    HATCH_TILE_SIZE,
)
from dag_bands.render.style import Theme


def arrow_marker(fill: str) -> draw.Marker:
    """Triangular arrowhead whose base sits on the line end.

    Sized in user space so it does not grow with the stroke width.
    """
    half = ARROW_VIEWBOX / 2
    marker = draw.Marker(
        0, -half, ARROW_VIEWBOX, half,
        scale=ARROW_MARKER_SIZE / ARROW_VIEWBOX,
        orient="auto-start-reverse",
        markerUnits="userSpaceOnUse",
    )
    marker.append(draw.Lines(
        0, -half,
        ARROW_VIEWBOX, 0,
        0, half,
        close=True,
        fill=fill,
    ))
    return marker


def arrow_markers(theme: Theme) -> dict[str, draw.Marker]:
    """Arrowheads for active and blocked edges, keyed by state."""
    return {
        "active": arrow_marker(theme.edge_active_color),
        "blocked": arrow_marker(theme.edge_blocked_color),
    }


def circle_clip(cx: float, cy: float, r: float) -> draw.ClipPath:
    clip = draw.ClipPath()
    clip.append(draw.Circle(cx, cy, r))
    return clip


def hatch_pattern(
    background: str,
    stripe: str,
    rotation: float = 45.0,
) -> draw.Pattern:
    """Diagonal stripes of ``stripe`` over ``background``."""
    size = HATCH_TILE_SIZE
    pattern = draw.Pattern(
        size, size,
        patternTransform=f"rotate({rotation:g})",
    )
    pattern.append(draw.Rectangle(0, 0, size, size, fill=background))
    pattern.append(draw.Line(
        0, 0, 0, size,
        stroke=stripe,
        stroke_width=HATCH_STRIPE_WIDTH,
    ))
    return pattern


def hatch_patterns(hatches: dict[str, HatchDef]) -> dict[str, draw.Pattern]:
    """Build one pattern per hatch definition, keyed by hatch ID."""
    return {
        hid: hatch_pattern(h.background, h.stripe, h.rotation)
        for hid, h in hatches.items()
    }
