"""
Finite-segment containment check.
"""

from __future__ import annotations


def _in_range(a: float, b: float, v: float) -> bool:
    return min(a, b) <= v <= max(a, b)


def within_segment_bounds(
    x1: float, y1: float, x2: float, y2: float, xi: float, yi: float
) -> bool:
    """
    Check if (xi, yi) lies inside the closed bounding box of (x1, y1)-(x2, y2).

    The point is expected to already satisfy the segment's line equation,
    in which case this is equivalent to lying on the finite segment.
    """
    return _in_range(x1, x2, xi) and _in_range(y1, y2, yi)
