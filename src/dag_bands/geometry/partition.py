"""Area-accurate partitioning of a disk by a straight cut.

For a disk of radius ``r`` and a cut parallel to one axis at distance ``h``
from the disk's edge, the enclosed circular segment covers::

    A(h) / (pi r^2) = 0.5 + (asin(u) + u * sqrt(1 - u^2)) / pi,   u = h/r - 1

``area_fraction`` evaluates this directly. It has no closed-form inverse, so
``area_to_height`` solves for ``h`` by bisection over ``[0, 2r]``. Both
saturate at the ends of their ranges rather than raising.
"""

from __future__ import annotations

import math

from dag_bands.geometry.constants import BISECTION_ITERATIONS


def _check_radius(r: float) -> None:
    if not r >= 0:
        raise ValueError(f"Disk radius must be non-negative, got {r}")


def area_fraction(h: float, r: float) -> float:
    """Fraction of the disk's area within distance ``h`` of one edge."""
    _check_radius(r)
    if h <= 0:
        return 0.0
    if h >= 2 * r:
        return 1.0
    u = h / r - 1
    return 0.5 + (math.asin(u) + u * math.sqrt(1 - u * u)) / math.pi


def area_fraction_derivative(h: float, r: float) -> float:
    """Derivative of :func:`area_fraction` with respect to ``h``.

    Equal to the chord length at the cut divided by the disk area. Zero
    outside the open interval ``(0, 2r)``.
    """
    _check_radius(r)
    if h <= 0 or h >= 2 * r:
        return 0.0
    u = h / r - 1
    return 2 * math.sqrt(1 - u * u) / (math.pi * r)


def area_to_height(
    fraction: float,
    r: float,
    iterations: int = BISECTION_ITERATIONS,
) -> float:
    """Distance from the edge at which a cut encloses ``fraction`` of the disk.

    Fractions at or below 0 map to 0 and fractions at or above 1 map to
    ``2r``; values past 1 (an overfull band stack) are truncated here.
    """
    _check_radius(r)
    if fraction <= 0:
        return 0.0
    if fraction >= 1:
        return 2 * r
    lo, hi = 0.0, 2 * r
    for _ in range(iterations):
        mid = (lo + hi) / 2
        if area_fraction(mid, r) < fraction:
            lo = mid
        else:
            hi = mid
    return (lo + hi) / 2
