"""
TrackPoint model for timestamped track samples.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Iterator, Tuple, Union


@dataclass(frozen=True)
class TrackPoint:
    """
    A single sample of a recorded track.

    Attributes:
        time: Timezone-aware instant of the sample.
        x: Planar x coordinate (e.g. longitude).
        y: Planar y coordinate (e.g. latitude).
    """
    time: datetime
    x: float
    y: float

    @classmethod
    def from_tuple(cls, row: Tuple[datetime, float, float]) -> "TrackPoint":
        """Adapter: Create from a (time, x, y) tuple."""
        t, x, y = row
        return cls(time=t, x=float(x), y=float(y))

    def as_tuple(self) -> Tuple[datetime, float, float]:
        return (self.time, self.x, self.y)


PointLike = Union[TrackPoint, Tuple[datetime, float, float]]


def iter_track_points(rows: Iterable[PointLike]) -> Iterator[TrackPoint]:
    """
    Adapter: Lazily convert (time, x, y) tuples into TrackPoints.

    TrackPoints are passed through unchanged.
    """
    for row in rows:
        if isinstance(row, TrackPoint):
            yield row
        else:
            yield TrackPoint.from_tuple(row)
