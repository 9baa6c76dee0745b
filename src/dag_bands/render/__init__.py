"""SVG rendering for banded DAG diagrams."""

from dag_bands.render.edges import draw_edge, edge_stroke_width
from dag_bands.render.nodes import draw_label, draw_node, draw_solid_node
from dag_bands.render.svg import render_svg

__all__ = [
    "draw_edge",
    "draw_label",
    "draw_node",
    "draw_solid_node",
    "edge_stroke_width",
    "render_svg",
]
