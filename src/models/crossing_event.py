"""
CrossingEvent model for track/reference-line crossings.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple


@dataclass(frozen=True)
class CrossingEvent:
    """
    Emitted when a track segment crosses the reference line.

    x and y hold the coordinates of the segment's starting sample, not the
    intersection point; the intersection is kept in crossing_x/crossing_y.

    Attributes:
        time: Interpolated crossing instant (millisecond resolution).
        x: X coordinate of the segment start sample.
        y: Y coordinate of the segment start sample.
        crossing_x: X coordinate of the computed intersection.
        crossing_y: Y coordinate of the computed intersection.
        segment_index: Index in the track of the segment start sample.
    """
    time: datetime
    x: float
    y: float
    crossing_x: Optional[float] = None
    crossing_y: Optional[float] = None
    segment_index: Optional[int] = None

    def as_tuple(self) -> Tuple[datetime, float, float]:
        """(time, x, y) view, matching the TrackPoint shape."""
        return (self.time, self.x, self.y)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "time": self.time.isoformat(timespec="milliseconds"),
            "x": self.x,
            "y": self.y,
            "crossing_x": self.crossing_x,
            "crossing_y": self.crossing_y,
            "segment_index": self.segment_index,
        }
