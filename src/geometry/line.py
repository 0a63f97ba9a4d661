"""
Implicit line representation and line/line intersection.

A line through two points is stored as coefficients (alpha, beta) such that

    alpha * x + beta * y = LINE_CONSTANT

holds for both points. Both the line construction and the intersection
reduce to a 2x2 system M . v = [LINE_CONSTANT, LINE_CONSTANT].
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np

from .errors import DegenerateLineError


# Right-hand side of the implicit equation. Lines through the origin
# cannot be represented with a non-zero constant.
LINE_CONSTANT = 1.0

_RHS = np.array([LINE_CONSTANT, LINE_CONSTANT])

# Rows whose sine of angle is below this many machine epsilons are parallel.
_SINGULAR_TOLERANCE = 4 * np.finfo(float).eps


class SingularSystemError(np.linalg.LinAlgError):
    """The 2x2 system has no unique solution."""


def solve_unit_system(rows: Sequence[Sequence[float]]) -> Tuple[float, float]:
    """
    Solve [[a, b], [c, d]] . [u, v] = [LINE_CONSTANT, LINE_CONSTANT].

    Raises:
        SingularSystemError: If the two rows are parallel (or one is zero).
    """
    m = np.asarray(rows, dtype=float)
    det = m[0, 0] * m[1, 1] - m[0, 1] * m[1, 0]
    scale = np.linalg.norm(m[0]) * np.linalg.norm(m[1])
    if scale == 0.0 or abs(det) <= _SINGULAR_TOLERANCE * scale:
        raise SingularSystemError(f"Singular system: det={det!r}")
    u, v = np.linalg.solve(m, _RHS)
    return float(u), float(v)


@dataclass(frozen=True)
class ImplicitLine:
    """
    Line coefficients satisfying alpha*x + beta*y = LINE_CONSTANT.

    Attributes:
        alpha: Coefficient of x.
        beta: Coefficient of y.
    """
    alpha: float
    beta: float

    def evaluate(self, x: float, y: float) -> float:
        """Left-hand side of the implicit equation at (x, y)."""
        return self.alpha * x + self.beta * y

    def as_row(self) -> Tuple[float, float]:
        return (self.alpha, self.beta)


def line_from_points(x1: float, y1: float, x2: float, y2: float) -> ImplicitLine:
    """
    Compute the implicit coefficients of the line through (x1, y1) and (x2, y2).

    Raises:
        DegenerateLineError: If the points coincide, one of them is the
            origin, or both are collinear with the origin.
    """
    try:
        alpha, beta = solve_unit_system([[x1, y1], [x2, y2]])
    except SingularSystemError:
        raise DegenerateLineError(
            f"Points ({x1}, {y1}) and ({x2}, {y2}) do not define a line "
            f"of the form alpha*x + beta*y = {LINE_CONSTANT}"
        ) from None
    return ImplicitLine(alpha=alpha, beta=beta)


def intersect_lines(a: ImplicitLine, b: ImplicitLine) -> Optional[Tuple[float, float]]:
    """Intersection of two infinite lines, or None if they are parallel."""
    try:
        return solve_unit_system([a.as_row(), b.as_row()])
    except SingularSystemError:
        return None


def intersect(
    x1: float, y1: float, x2: float, y2: float, reference: ImplicitLine
) -> Optional[Tuple[float, float]]:
    """
    Intersect the line through a segment's endpoints with a reference line.

    The segment is treated as an infinite line here; use
    geometry.containment.within_segment_bounds to restrict to the segment.

    Returns:
        (xi, yi) of the intersection, or None if the lines are parallel.

    Raises:
        DegenerateLineError: If the segment's own line is not representable.
    """
    return intersect_lines(line_from_points(x1, y1, x2, y2), reference)
