"""Straight-line geometry for diagram edges."""

from __future__ import annotations

import math
from dataclasses import dataclass

from dag_bands.geometry.constants import ARROW_LENGTH, EDGE_GAP


@dataclass(frozen=True)
class LineSegment:
    x1: float
    y1: float
    x2: float
    y2: float

    @property
    def length(self) -> float:
        return math.hypot(self.x2 - self.x1, self.y2 - self.y1)

    @property
    def midpoint(self) -> tuple[float, float]:
        return ((self.x1 + self.x2) / 2, (self.y1 + self.y2) / 2)


def _length(dx: float, dy: float) -> float:
    length = math.hypot(dx, dy)
    if length == 0:
        raise ValueError("Cannot compute direction of a zero-length segment")
    return length


def shorten_line(
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    pad_start: float,
    pad_end: float | None = None,
) -> LineSegment:
    """Move both endpoints inward along the line.

    The start moves toward the end by ``pad_start`` and the end moves toward
    the start by ``pad_end`` (defaults to ``pad_start``). The direction is
    preserved; pads larger than the segment produce a reversed segment.
    """
    if pad_end is None:
        pad_end = pad_start
    dx = x2 - x1
    dy = y2 - y1
    length = _length(dx, dy)
    return LineSegment(
        x1 + dx * (pad_start / length),
        y1 + dy * (pad_start / length),
        x2 - dx * (pad_end / length),
        y2 - dy * (pad_end / length),
    )


def perpendicular_bar(segment: LineSegment, half_length: float) -> LineSegment:
    """A bar of ``2 * half_length`` crossing ``segment`` at its midpoint.

    The bar runs along the segment direction rotated by 90 degrees,
    ``(-dy, dx) / len``.
    """
    dx = segment.x2 - segment.x1
    dy = segment.y2 - segment.y1
    length = _length(dx, dy)
    px = -dy / length
    py = dx / length
    mid_x, mid_y = segment.midpoint
    return LineSegment(
        mid_x - px * half_length,
        mid_y - py * half_length,
        mid_x + px * half_length,
        mid_y + py * half_length,
    )


def edge_segment(
    start: tuple[float, float],
    end: tuple[float, float],
    node_radius: float,
    gap: float = EDGE_GAP,
    arrow_length: float = ARROW_LENGTH,
) -> LineSegment:
    """Visible part of an edge between two node centers.

    Stops ``gap`` short of the source boundary and ``gap + arrow_length``
    short of the target boundary, leaving room for the arrowhead marker.
    """
    return shorten_line(
        start[0], start[1],
        end[0], end[1],
        node_radius + gap,
        node_radius + gap + arrow_length,
    )
