"""
Single-pass scanner detecting where a track crosses a reference line.

Each pair of consecutive samples is a straight segment. A segment counts as
a crossing when its line intersects the reference line at a point inside the
segment's bounding box; the crossing time is interpolated on the segment's
dominant axis.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional

from geometry.containment import within_segment_bounds
from geometry.errors import DegenerateLineError
from geometry.line import ImplicitLine, intersect, line_from_points
from models.crossing_event import CrossingEvent
from models.track_point import PointLike, TrackPoint, iter_track_points
from .interpolate import interpolate_time


def build_reference_line(x1: float, y1: float, x2: float, y2: float) -> ImplicitLine:
    """
    Validate and build the reference line once, before any scanning.

    Raises:
        DegenerateLineError: If the endpoints coincide or are collinear
            with the origin.
    """
    if (x1, y1) == (x2, y2):
        raise DegenerateLineError(
            f"Reference line endpoints are identical: ({x1}, {y1})"
        )
    try:
        return line_from_points(x1, y1, x2, y2)
    except DegenerateLineError as e:
        raise DegenerateLineError(
            f"Invalid reference line ({x1}, {y1}) -> ({x2}, {y2}): {e}"
        ) from None


def _segment_crossing(
    prev: TrackPoint, curr: TrackPoint, reference: ImplicitLine, index: int
) -> Optional[CrossingEvent]:
    """Crossing event for the segment prev -> curr, or None if it does not cross."""
    if prev.x == curr.x and prev.y == curr.y:
        logging.debug(f"Segment {index}: zero length, skipped")
        return None

    try:
        point = intersect(prev.x, prev.y, curr.x, curr.y, reference)
    except DegenerateLineError:
        logging.debug(f"Segment {index}: collinear with origin, skipped")
        return None
    if point is None:
        logging.debug(f"Segment {index}: parallel to reference line")
        return None

    xi, yi = point
    if not within_segment_bounds(prev.x, prev.y, curr.x, curr.y, xi, yi):
        return None

    t = interpolate_time(prev.x, prev.y, prev.time, curr.x, curr.y, curr.time, xi, yi)
    return CrossingEvent(
        time=t,
        x=prev.x,
        y=prev.y,
        crossing_x=xi,
        crossing_y=yi,
        segment_index=index,
    )


class TrackScanner:
    """
    Scans tracks against a fixed reference line.

    The reference line is built and validated on construction, so a
    malformed line fails before any track is read. The scanner holds no
    per-scan state and can be reused for several tracks.

    Example:
        scanner = TrackScanner.from_points(0.308861, 46.586296, 0.309045, 46.586480)
        events = scanner.scan(points)
    """

    def __init__(self, reference: ImplicitLine):
        self._reference = reference

    @classmethod
    def from_points(cls, x1: float, y1: float, x2: float, y2: float) -> "TrackScanner":
        return cls(build_reference_line(x1, y1, x2, y2))

    @property
    def reference(self) -> ImplicitLine:
        return self._reference

    def iter_crossings(self, points: Iterable[PointLike]) -> Iterator[CrossingEvent]:
        """
        Lazily yield crossing events in track order.

        The input is consumed once, forward only; only the previous sample
        is retained.
        """
        it = iter_track_points(points)
        prev = next(it, None)
        if prev is None:
            return

        segments = 0
        crossings = 0
        for curr in it:
            event = _segment_crossing(prev, curr, self._reference, segments)
            segments += 1
            if event is not None:
                crossings += 1
                logging.info(
                    f"Crossing at {event.time.isoformat()} "
                    f"(segment {event.segment_index}, x={event.crossing_x:.6f}, y={event.crossing_y:.6f})"
                )
                yield event
            prev = curr

        logging.debug(f"Scan complete: segments={segments} crossings={crossings}")

    def scan(self, points: Iterable[PointLike]) -> List[CrossingEvent]:
        """Scan a track and return all crossing events in encounter order."""
        return list(self.iter_crossings(points))


def find_crossings(
    x1: float, y1: float, x2: float, y2: float, points: Iterable[PointLike]
) -> List[CrossingEvent]:
    """
    Find all crossings between a track and the line through (x1, y1)-(x2, y2).

    Args:
        x1, y1, x2, y2: Reference line defining points.
        points: Iterable of TrackPoint or (time, x, y) tuples in
            non-decreasing time order.

    Returns:
        List of CrossingEvent in encounter order (possibly empty).

    Raises:
        DegenerateLineError: If the reference line is malformed.
    """
    return TrackScanner.from_points(x1, y1, x2, y2).scan(points)
