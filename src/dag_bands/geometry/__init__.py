"""Geometry layer: area partition, band layout and edge lines.

Public API:
- area_fraction / area_to_height: forward and inverse disk partition
- band_rects: band rectangles for a node's two stacks
- shorten_line / perpendicular_bar / edge_segment: edge geometry
"""

from dag_bands.geometry.bands import BandRect, Disk, band_extents, band_rects
from dag_bands.geometry.lines import (
    LineSegment,
    edge_segment,
    perpendicular_bar,
    shorten_line,
)
from dag_bands.geometry.partition import (
    area_fraction,
    area_fraction_derivative,
    area_to_height,
)

__all__ = [
    "BandRect",
    "Disk",
    "LineSegment",
    "area_fraction",
    "area_fraction_derivative",
    "area_to_height",
    "band_extents",
    "band_rects",
    "edge_segment",
    "perpendicular_bar",
    "shorten_line",
]
