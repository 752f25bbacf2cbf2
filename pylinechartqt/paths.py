"""Line and fill-mask path construction."""

from __future__ import annotations

from typing import List, Optional, Sequence

from .models import (
    ChartPath,
    ClosePath,
    CubicTo,
    CurveSegment,
    DrawingRegion,
    LineTo,
    MoveTo,
    PathCommand,
    Point,
)


def build_line_path(
    points: Sequence[Point],
    segments: Optional[Sequence[CurveSegment]] = None,
) -> Optional[ChartPath]:
    """Path through ``points``: a polyline, or Bezier curves when segments are given.

    Args:
        points: Mapped points in drawing order.
        segments: Curve segments from ``curve.interpolate``; one per edge.

    Returns:
        The path, or None when fewer than two points are given.

    Raises:
        ValueError: If the number of segments does not match the edges.
    """
    if len(points) < 2:
        return None

    commands: List[PathCommand] = [MoveTo(points[0])]
    if segments is None:
        commands.extend(LineTo(p) for p in points[1:])
    else:
        if len(segments) != len(points) - 1:
            raise ValueError(
                f"Expected {len(points) - 1} curve segments, got {len(segments)}"
            )
        for i in range(1, len(points)):
            seg = segments[i - 1]
            commands.append(CubicTo(seg.control_point1, seg.control_point2, points[i]))
    return ChartPath(tuple(commands))


def build_fill_path(
    points: Sequence[Point],
    region: DrawingRegion,
    segments: Optional[Sequence[CurveSegment]] = None,
) -> Optional[ChartPath]:
    """Closed region between the line and the region's baseline.

    Used as a clip mask for the gradient fill. Returns None for no points.
    """
    if not points:
        return None

    first = points[0]
    last = points[-1]
    start = Point(first.x, region.height)

    path = ChartPath((MoveTo(start), LineTo(first)))
    line = build_line_path(points, segments)
    if line is not None:
        path = path.extend(line)
    return ChartPath(
        path.commands
        + (
            LineTo(Point(last.x, region.height)),
            LineTo(start),
            ClosePath(),
        )
    )
