"""
Exceptions raised by the geometry and interpolation helpers.
"""

from __future__ import annotations


class GeometryError(ValueError):
    """Base class for geometric failures."""


class DegenerateLineError(GeometryError):
    """
    Raised when two points do not define a representable line.

    Lines are stored as (alpha, beta) with alpha*x + beta*y = 1, so the
    defining points must be distinct and not collinear with the origin.
    """


class DegenerateSegmentError(GeometryError):
    """Raised when a segment has no extent on the axis being interpolated."""
