"""Layout of area-proportional band rectangles inside a node's disk.

Each band stack is folded in order with an accumulator of
``(cumulative_fraction, previous_extent)``. Extents are distances from the
stack's starting edge, obtained from the area partition so that the part of
each rectangle falling inside the circle has exactly the band's share of the
disk's area. The rectangles are meant to be drawn inside a circular clip.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from dag_bands.geometry.constants import MIN_BAND_PROPORTION, MIN_BAND_SIZE
from dag_bands.geometry.partition import area_to_height
from dag_bands.parser.model import Band, BandStacks, Orientation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Disk:
    """A node's circular boundary."""

    cx: float
    cy: float
    r: float

    def __post_init__(self) -> None:
        if not self.r >= 0:
            raise ValueError(f"Disk radius must be non-negative, got {self.r}")

    @property
    def diameter(self) -> float:
        return 2 * self.r


@dataclass(frozen=True)
class BandRect:
    """An axis-aligned rectangle to be filled and clipped to a disk."""

    x: float
    y: float
    width: float
    height: float
    fill: str


def band_extents(
    bands: Sequence[Band],
    r: float,
    min_proportion: float = MIN_BAND_PROPORTION,
) -> Iterator[tuple[Band, float, float]]:
    """Yield ``(band, start, end)`` extents for one stack.

    Cumulative proportions above 1 saturate at the far edge of the disk.
    Bands at or below ``min_proportion`` are skipped and do not advance the
    accumulator.
    """
    cumulative = 0.0
    prev = 0.0
    for band in bands:
        if band.proportion <= min_proportion:
            logger.debug("Skipping negligible band %r", band)
            continue
        cumulative += band.proportion
        if cumulative > 1.0:
            logger.debug(
                "Band stack exceeds the disk (cumulative %.4f); saturating",
                cumulative,
            )
        extent = area_to_height(min(cumulative, 1.0), r)
        yield band, prev, extent
        prev = extent


def band_rects(
    disk: Disk,
    stacks: BandStacks,
    orientation: Orientation = Orientation.VERTICAL,
    min_size: float = MIN_BAND_SIZE,
) -> list[BandRect]:
    """Rectangles for both stacks, primary first.

    Vertical: primary grows up from the bottom edge, secondary down from the
    top, both spanning the full width. Horizontal: primary grows right from
    the left edge, secondary left from the right edge, both spanning the full
    height. The two stacks are independent and may overlap.
    """
    cx, cy, r = disk.cx, disk.cy, disk.r
    diam = disk.diameter
    horiz = orientation is Orientation.HORIZONTAL
    rects: list[BandRect] = []

    for band, start, end in band_extents(stacks.primary, r):
        size = end - start
        if size <= min_size:
            continue
        if horiz:
            rects.append(BandRect(cx - r + start, cy - r, size, diam, band.fill))
        else:
            rects.append(BandRect(cx - r, cy + r - end, diam, size, band.fill))

    for band, start, end in band_extents(stacks.secondary, r):
        size = end - start
        if size <= min_size:
            continue
        if horiz:
            rects.append(BandRect(cx + r - end, cy - r, size, diam, band.fill))
        else:
            rects.append(BandRect(cx - r, cy - r + start, diam, size, band.fill))

    return rects
