"""Node drawing: banded disks, solid disks and labels."""

from __future__ import annotations

import logging

import drawsvg as draw

from dag_bands.geometry.bands import Disk, band_rects
from dag_bands.parser.model import BandStacks, Orientation
from dag_bands.render.constants import PALETTE
from dag_bands.render.defs import circle_clip
from dag_bands.render.style import Theme

logger = logging.getLogger(__name__)


def resolve_fill(
    fill: str,
    patterns: dict[str, draw.Pattern] | None = None,
) -> str | draw.Pattern:
    """Map a fill token to a hatch pattern, a palette color, or itself."""
    if patterns and fill in patterns:
        return patterns[fill]
    return PALETTE.get(fill, fill)


def draw_node(
    scene: draw.Drawing | draw.Group,
    disk: Disk,
    stacks: BandStacks,
    theme: Theme,
    orientation: Orientation = Orientation.VERTICAL,
    base_color: str = "",
    patterns: dict[str, draw.Pattern] | None = None,
) -> None:
    """Render a node as a circle filled with area-proportional bands.

    The base fill and band rectangles go into one group clipped to the
    disk; the outline circle is appended after it, unclipped.
    """
    cx, cy, r = disk.cx, disk.cy, disk.r
    group = draw.Group(clip_path=circle_clip(cx, cy, r))

    group.append(draw.Rectangle(
        cx - r, cy - r,
        disk.diameter, disk.diameter,
        fill=resolve_fill(base_color or theme.node_fallback_fill, patterns),
    ))

    rects = band_rects(disk, stacks, orientation)
    for rect in rects:
        group.append(draw.Rectangle(
            rect.x, rect.y,
            rect.width, rect.height,
            fill=resolve_fill(rect.fill, patterns),
        ))
    logger.debug("Node at (%g, %g): %d band rectangles", cx, cy, len(rects))
    scene.append(group)

    scene.append(draw.Circle(
        cx, cy, r,
        fill="none",
        stroke=theme.node_stroke,
        stroke_width=theme.node_stroke_width,
    ))


def draw_solid_node(
    scene: draw.Drawing | draw.Group,
    disk: Disk,
    color: str,
    theme: Theme,
    opacity: float = 1.0,
    patterns: dict[str, draw.Pattern] | None = None,
) -> None:
    """Render a node as a single filled circle with no bands."""
    scene.append(draw.Circle(
        disk.cx, disk.cy, disk.r,
        fill=resolve_fill(color or theme.node_fallback_fill, patterns),
        stroke=theme.node_stroke,
        stroke_width=theme.node_stroke_width,
        opacity=opacity,
    ))


def draw_label(
    scene: draw.Drawing | draw.Group,
    x: float,
    y: float,
    text: str,
    theme: Theme,
) -> None:
    """Render a bold label centered on (x, y)."""
    scene.append(draw.Text(
        text,
        theme.label_font_size,
        x, y,
        fill=theme.label_color,
        font_family=theme.label_font_family,
        font_weight="bold",
        text_anchor="middle",
        dominant_baseline="central",
    ))
