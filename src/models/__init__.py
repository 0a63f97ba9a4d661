"""
Typed models for the track crossing application.

Use the adapter functions to convert from plain (time, x, y) tuples and
config dictionaries.
"""

from .track_point import TrackPoint, PointLike, iter_track_points
from .crossing_event import CrossingEvent
from .config import (
    Config,
    ReferenceLineConfig,
    TrackConfig,
    OutputConfig,
    OUTPUT_FORMATS,
)

__all__ = [
    # Track
    "TrackPoint",
    "PointLike",
    "iter_track_points",
    # Crossing
    "CrossingEvent",
    # Config
    "Config",
    "ReferenceLineConfig",
    "TrackConfig",
    "OutputConfig",
    "OUTPUT_FORMATS",
]
