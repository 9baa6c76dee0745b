"""Theme and style constants for DAG rendering."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Theme:
    """Visual theme for a banded DAG diagram."""

    name: str
    background_color: str
    node_fallback_fill: str
    node_stroke: str
    node_stroke_width: float
    label_color: str
    label_font_family: str
    label_font_size: float
    title_color: str
    title_font_size: float
    # Edges
    edge_active_color: str = "#666666"
    edge_active_opacity: float = 0.85
    edge_blocked_color: str = "#cccccc"
    edge_blocked_opacity: float = 0.4
    edge_blocked_dash: str = "8 6"
    # Cancellation mark across blocked edges
    blocked_bar_color: str = "#E74C3C"
    blocked_bar_width: float = 3.5
