"""Numeric constants for the geometry layer.

Rendering-only values (colors, stroke widths) live in render/constants.py
and the Theme.
"""

# ---------------------------------------------------------------------------
# Area partition
# ---------------------------------------------------------------------------
BISECTION_ITERATIONS: int = 30
"""Bisection steps when inverting the area function (error ~ 2r / 2**30)."""

# ---------------------------------------------------------------------------
# Band stacking
# ---------------------------------------------------------------------------
MIN_BAND_PROPORTION: float = 0.001
"""Bands at or below this proportion are ignored entirely."""

MIN_BAND_SIZE: float = 0.5
"""Band rectangles thinner than this (in user units) are not emitted."""

# ---------------------------------------------------------------------------
# Edges
# ---------------------------------------------------------------------------
EDGE_GAP: float = 6.0
"""Gap between a node's boundary and the start/end of its edge line."""

ARROW_LENGTH: float = 18.0
"""Length of the arrowhead marker; the line stops this far before the tip."""

BLOCKED_BAR_HALF_LENGTH: float = 20.0
"""Half length of the perpendicular mark drawn across blocked edges."""
