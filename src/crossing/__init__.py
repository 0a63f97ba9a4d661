"""
Crossing detection for recorded tracks.

Available entry points:
- find_crossings: One-shot scan of a track against a line given by two points
- TrackScanner: Reusable scanner bound to a validated reference line
- interpolate_time / interpolate_position: Linear interpolation between samples
"""

from .interpolate import interpolate_position, interpolate_time, interpolate_time_on_axis
from .scanner import TrackScanner, build_reference_line, find_crossings

__all__ = [
    "TrackScanner",
    "build_reference_line",
    "find_crossings",
    "interpolate_time",
    "interpolate_time_on_axis",
    "interpolate_position",
]
