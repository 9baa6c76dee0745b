"""Render constants used across render modules.

Theme-dependent values remain in style.py; geometric padding lives in
geometry/constants.py.
"""

# ---------------------------------------------------------------------------
# Canvas
# ---------------------------------------------------------------------------
CANVAS_PADDING: float = 40.0
"""Default padding around the outermost node boundaries."""

TITLE_Y_OFFSET: float = 30.0
"""Y position of the title baseline."""

TITLE_SPACE: float = 40.0
"""Extra height reserved above the nodes when a title is present."""

# ---------------------------------------------------------------------------
# Edges
# ---------------------------------------------------------------------------
EDGE_STROKE_BASE: float = 2.0
"""Stroke width of the weakest drawn edge."""

EDGE_STROKE_SCALE: float = 5.0
"""Additional stroke width per unit of edge strength."""

# ---------------------------------------------------------------------------
# Arrow markers
# ---------------------------------------------------------------------------
ARROW_VIEWBOX: float = 12.0
"""Side of the arrowhead's square view box."""

ARROW_MARKER_SIZE: float = 18.0
"""Rendered arrowhead size in user units (independent of stroke width)."""

# ---------------------------------------------------------------------------
# Hatch patterns
# ---------------------------------------------------------------------------
HATCH_TILE_SIZE: float = 6.0
"""Side of the repeating hatch tile."""

HATCH_STRIPE_WIDTH: float = 2.5
"""Stroke width of the hatch stripe."""

# ---------------------------------------------------------------------------
# Named colors
# ---------------------------------------------------------------------------
PALETTE: dict[str, str] = {
    "x": "#9b332b",
    "y": "#262d42",
    "z": "#d39a2d",
    "z0": "#6b7c3f",
    "apparent": "#b64f32",
}
"""Color names accepted wherever a node or band fill is expected."""
