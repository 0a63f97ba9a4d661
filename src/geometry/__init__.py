"""
Planar geometry helpers for track/line crossing detection.

Lines are represented implicitly (alpha*x + beta*y = 1); intersections are
computed on infinite lines and restricted to segments by a bounding-box check.
"""

from .errors import GeometryError, DegenerateLineError, DegenerateSegmentError
from .line import LINE_CONSTANT, ImplicitLine, line_from_points, intersect, intersect_lines
from .containment import within_segment_bounds

__all__ = [
    "GeometryError",
    "DegenerateLineError",
    "DegenerateSegmentError",
    "LINE_CONSTANT",
    "ImplicitLine",
    "line_from_points",
    "intersect",
    "intersect_lines",
    "within_segment_bounds",
]
