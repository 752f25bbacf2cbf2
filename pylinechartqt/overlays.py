"""Overlay primitives derived from mapped points.

Every function here is a pure transformation of (points, region, style) into
drawing primitives. Overlays are rebuilt from scratch on every render.
"""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple

from .models import (
    GRID_LABEL_COUNT,
    ChartLayer,
    ChartStyle,
    DotPrimitive,
    DrawingRegion,
    GridLinePrimitive,
    Point,
    TextPrimitive,
)

# Relative heights of the horizontal grid lines, top to bottom.
GRID_FRACTIONS: Tuple[float, ...] = tuple(
    i / (GRID_LABEL_COUNT - 1) for i in range(GRID_LABEL_COUNT)
)


def dot_markers(points: Sequence[Point], style: ChartStyle) -> Tuple[DotPrimitive, ...]:
    """A two-layer concentric marker centred on every point."""
    return tuple(
        DotPrimitive(
            center=p,
            outer_diameter=style.dot_outer_diameter,
            inner_diameter=style.dot_inner_diameter,
            color=style.dot_color,
            inner_color=style.dot_inner_color,
        )
        for p in points
    )


def vertical_grid(
    points: Sequence[Point], region: DrawingRegion, style: ChartStyle
) -> Tuple[GridLinePrimitive, ...]:
    """A full-height line through every point's x."""
    return tuple(
        GridLinePrimitive(
            start=Point(p.x, 0.0),
            end=Point(p.x, region.height),
            color=style.grid_color,
            width=style.grid_line_width,
        )
        for p in points
    )


def horizontal_grid(
    region_height: float, width: float, style: ChartStyle
) -> Tuple[GridLinePrimitive, ...]:
    """Five lines across the viewport; the interior three are dashed."""
    lines: List[GridLinePrimitive] = []
    for fraction in GRID_FRACTIONS:
        y = fraction * region_height
        dashed = 0.0 < fraction < 1.0
        lines.append(
            GridLinePrimitive(
                start=Point(0.0, y),
                end=Point(width, y),
                color=style.grid_color,
                width=style.grid_line_width,
                dash_pattern=tuple(style.grid_dash_pattern) if dashed else None,
                layer=ChartLayer.GRID,
            )
        )
    return tuple(lines)


def grid_label_values(low: float, high: float) -> List[int]:
    """Ascending label values for the grid fractions of the domain [low, high]."""
    return [int(math.floor(low + f * (high - low))) for f in GRID_FRACTIONS]


def format_grid_labels(low: float, high: float) -> Tuple[str, ...]:
    return tuple(str(v) for v in grid_label_values(low, high))


def grid_labels(
    labels: Sequence[str], region_height: float, style: ChartStyle
) -> Tuple[TextPrimitive, ...]:
    """Place an ascending label set on the grid lines.

    The top line carries the highest label, so the set reads reversed from
    top to bottom.
    """
    if len(labels) != len(GRID_FRACTIONS):
        raise ValueError(
            f"Expected {len(GRID_FRACTIONS)} grid labels, got {len(labels)}"
        )
    dx, dy = style.grid_label_offset
    return tuple(
        TextPrimitive(
            position=Point(dx, fraction * region_height + dy),
            text=text,
            font_size=style.grid_label_font_size,
            color=style.label_color,
            layer=ChartLayer.GRID,
        )
        for fraction, text in zip(GRID_FRACTIONS, reversed(list(labels)))
    )


def value_labels(
    points: Sequence[Point], values: Sequence[int], style: ChartStyle
) -> Tuple[TextPrimitive, ...]:
    """The raw sample value below-right of each point."""
    dx, dy = style.value_label_offset
    return tuple(
        TextPrimitive(
            position=Point(p.x + dx, p.y + dy),
            text=str(v),
            font_size=style.value_label_font_size,
            color=style.label_color,
        )
        for p, v in zip(points, values)
    )
