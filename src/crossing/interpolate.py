"""
Linear interpolation of crossing times and positions between two samples.

For a coordinate moving linearly from pos1 at t1 to pos2 at t2:

    pos(t) = (pos2 - pos1) / (t2 - t1) * (t - t1) + pos1
    t      = (pos - pos1) / (pos2 - pos1) * (t2 - t1) + t1
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Tuple

from geometry.errors import DegenerateSegmentError


_MILLISECOND = timedelta(milliseconds=1)


def _as_utc(t: datetime) -> datetime:
    """
    Aware instants are moved to UTC so that subtraction gives elapsed time.

    Two datetimes sharing a tzinfo subtract on wall-clock time, which is
    wrong across a daylight-saving change.
    """
    if t.tzinfo is None:
        return t
    return t.astimezone(timezone.utc)


def interpolate_time_on_axis(
    pos1: float, t1: datetime, pos2: float, t2: datetime, pos_i: float
) -> datetime:
    """
    Interpolate the instant at which one coordinate reaches pos_i.

    The offset from t1 is rounded to the nearest millisecond.

    Raises:
        DegenerateSegmentError: If pos1 == pos2.
    """
    if pos1 == pos2:
        raise DegenerateSegmentError(
            f"Cannot interpolate time on an axis with no displacement (pos={pos1})"
        )
    u1 = _as_utc(t1)
    dt_ms = (_as_utc(t2) - u1) / _MILLISECOND
    offset_ms = round(dt_ms * (pos_i - pos1) / (pos2 - pos1))
    ti = u1 + timedelta(milliseconds=offset_ms)
    if t1.tzinfo is None:
        return ti
    return ti.astimezone(t1.tzinfo)


def interpolate_time(
    x1: float, y1: float, t1: datetime,
    x2: float, y2: float, t2: datetime,
    xi: float, yi: float,
) -> datetime:
    """
    Interpolate the crossing instant of (xi, yi) between two samples.

    Uses the axis with the larger displacement (x on ties) so the division
    is never by a near-zero extent when the track runs parallel to an axis.
    """
    if abs(x2 - x1) >= abs(y2 - y1):
        return interpolate_time_on_axis(x1, t1, x2, t2, xi)
    return interpolate_time_on_axis(y1, t1, y2, t2, yi)


def interpolate_position(
    x1: float, y1: float, t1: datetime,
    x2: float, y2: float, t2: datetime,
    t: datetime,
) -> Tuple[float, float]:
    """
    Interpolate the position at instant t between (x1, y1)@t1 and (x2, y2)@t2.

    No clamping is applied: instants outside [t1, t2] extrapolate.

    Raises:
        DegenerateSegmentError: If t1 == t2.
    """
    u1 = _as_utc(t1)
    u2 = _as_utc(t2)
    if u1 == u2:
        raise DegenerateSegmentError(f"Cannot interpolate position over a zero duration at {t1}")
    frac = (_as_utc(t) - u1) / (u2 - u1)
    x = (x2 - x1) * frac + x1
    y = (y2 - y1) * frac + y1
    return x, y
