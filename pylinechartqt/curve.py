"""Smooth cubic Bezier interpolation through a sequence of points.

Control points start out on the straight segment between neighbours and are
then bent at every interior point so that the incoming and outgoing tangents
line up. The functions are pure; there is no interpolator object to share.
"""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from .errors import NotEnoughPointsError
from .models import CurveSegment, Point

# Fraction of a segment used to place the temporary control points.
SMOOTHING = 0.3


def _as_array(points: Sequence[Point]) -> np.ndarray:
    return np.array([(p.x, p.y) for p in points], dtype=np.float64).reshape(-1, 2)


def control_points(points: Sequence[Point]) -> np.ndarray:
    """Compute control points for every segment.

    Args:
        points: At least two points in drawing order.

    Returns:
        Array of shape (n-1, 2, 2): ``[segment, (cp1, cp2), (x, y)]``.

    Raises:
        NotEnoughPointsError: If fewer than two points are given.
    """
    if len(points) < 2:
        raise NotEnoughPointsError(
            f"A curve needs at least 2 points, got {len(points)}"
        )
    pts = _as_array(points)
    a = pts[:-1]
    b = pts[1:]
    delta = b - a

    # Temporary control points keep every segment straight.
    tmp_cp1 = a + SMOOTHING * delta
    tmp_cp2 = b - SMOOTHING * delta

    cp1 = tmp_cp1.copy()
    cp2 = tmp_cp2.copy()

    # Reflect the neighbouring temporary controls through each interior point
    # and average with the opposite side. Only temporary values are read.
    centre = pts[1:-1]
    m = tmp_cp2[:-1]
    n = tmp_cp1[1:]
    cp1[1:] = ((2.0 * centre - m) + n) / 2.0
    cp2[:-1] = ((2.0 * centre - n) + m) / 2.0

    return np.stack([cp1, cp2], axis=1)


def interpolate(points: Sequence[Point]) -> List[CurveSegment]:
    """Curve segments passing through every point.

    Segment ``i - 1`` describes the edge between ``points[i - 1]`` and
    ``points[i]``. The first control point of the first segment and the second
    control point of the last segment are left unsmoothed.

    Raises:
        NotEnoughPointsError: If fewer than two points are given.
    """
    cps = control_points(points)
    return [
        CurveSegment(
            control_point1=Point(float(c[0, 0]), float(c[0, 1])),
            control_point2=Point(float(c[1, 0]), float(c[1, 1])),
        )
        for c in cps
    ]


def evaluate_segment(
    start: Point, segment: CurveSegment, end: Point, t: float
) -> Point:
    """Point on the cubic Bezier ``start -> end`` at parameter ``t`` in [0, 1]."""
    u = 1.0 - t
    c1 = segment.control_point1
    c2 = segment.control_point2
    w0 = u * u * u
    w1 = 3.0 * u * u * t
    w2 = 3.0 * u * t * t
    w3 = t * t * t
    return Point(
        w0 * start.x + w1 * c1.x + w2 * c2.x + w3 * end.x,
        w0 * start.y + w1 * c1.y + w2 * c2.y + w3 * end.y,
    )
