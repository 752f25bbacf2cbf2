"""Data models for the line chart pipeline.

Provides frozen dataclasses for chart configuration, style, mapped geometry
and the drawing primitives handed to the host for compositing.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, Optional, Tuple, Union

from .errors import InvalidConfigurationError

# Color type: color names, "#RRGGBB", "#AARRGGBB", (r, g, b) / (r, g, b, a)
# tuples or QColor objects. Any keeps PySide6 out of the core's imports.
Color = Union[str, Tuple[int, int, int], Tuple[int, int, int, int], Any]

GRID_LABEL_COUNT = 5


@dataclass(frozen=True)
class Point:
    """A mapped screen coordinate. y grows downward."""

    x: float
    y: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class CurveSegment:
    """Control points of the cubic Bezier between points i-1 and i."""

    control_point1: Point
    control_point2: Point


@dataclass(frozen=True)
class DrawingRegion:
    """Plotting area, excluding the top/bottom margins reserved for labels."""

    width: float
    height: float

    @property
    def is_drawable(self) -> bool:
        return self.height > 0


@dataclass(frozen=True)
class ChartConfiguration:
    """Overlay toggles for one chart.

    Attributes:
        draw_curve: Smoothed Bezier line instead of a straight polyline.
        draw_line_shadow: Drop shadow under the main line.
        draw_dots: Concentric dot marker on every point.
        draw_horizontal_grid: Five horizontal grid lines with labels.
        draw_vertical_grid: One vertical grid line per point.
        draw_value_labels: Sample value next to every point.
        grid_labels: Fixed ascending label set for the horizontal grid.
            ``None`` derives the labels from the data range.
    """

    draw_curve: bool = False
    draw_line_shadow: bool = False
    draw_dots: bool = False
    draw_horizontal_grid: bool = False
    draw_vertical_grid: bool = False
    draw_value_labels: bool = False
    grid_labels: Optional[Tuple[str, ...]] = None

    def __post_init__(self) -> None:
        if self.grid_labels is None:
            return
        labels = tuple(str(label) for label in self.grid_labels)
        if len(labels) != GRID_LABEL_COUNT:
            raise InvalidConfigurationError(
                f"grid_labels must have exactly {GRID_LABEL_COUNT} entries, "
                f"got {len(labels)}"
            )
        object.__setattr__(self, "grid_labels", labels)

    @classmethod
    def all_enabled(cls, draw_curve: bool = False) -> "ChartConfiguration":
        """Every overlay switched on."""
        return cls(
            draw_curve=draw_curve,
            draw_line_shadow=True,
            draw_dots=True,
            draw_horizontal_grid=True,
            draw_vertical_grid=True,
            draw_value_labels=True,
        )


@dataclass(frozen=True)
class LineShadow:
    """Drop shadow drawn under the main line."""

    color: Color = "#000000"
    radius: float = 3.0
    opacity: float = 1.0
    offset: Tuple[float, float] = (0.0, 2.0)


@dataclass(frozen=True)
class ChartStyle:
    """Layout and appearance constants."""

    spacing: float = 60.0  # Horizontal gap between consecutive samples
    top_space: float = 40.0
    bottom_space: float = 40.0
    dot_outer_diameter: float = 12.0
    dot_inner_diameter: float = 6.0
    line_color: Color = "#ffff00"
    line_width: float = 1.0
    dot_color: Color = "#ffff00"
    dot_inner_color: Color = "#ffffff"
    grid_color: Color = (0, 0, 0, 77)  # Black at 0.3 alpha
    grid_line_width: float = 0.5
    grid_dash_pattern: Tuple[float, ...] = (4.0, 4.0)
    gradient_colors: Tuple[Color, Color] = ("#ffa500", "#ffffff")
    shadow: LineShadow = LineShadow()
    label_color: Color = "#000000"
    grid_label_font_size: float = 12.0
    grid_label_offset: Tuple[float, float] = (4.0, 0.0)
    value_label_font_size: float = 20.0
    value_label_offset: Tuple[float, float] = (8.0, 17.0)
    background_color: Color = "#ffffff"
    scroll_delay_ms: int = 500

    def __post_init__(self) -> None:
        if self.spacing <= 0:
            raise InvalidConfigurationError(
                f"spacing must be positive, got {self.spacing}"
            )
        if self.dot_inner_diameter > self.dot_outer_diameter:
            raise InvalidConfigurationError(
                "dot_inner_diameter must not exceed dot_outer_diameter"
            )

    @property
    def left_margin(self) -> float:
        """Leading margin before the first sample: half the spacing."""
        return self.spacing / 2.0

    @property
    def vertical_margin(self) -> float:
        return self.top_space + self.bottom_space


# ----------------------------------------------------------------------------
# Paths
# ----------------------------------------------------------------------------


@dataclass(frozen=True)
class MoveTo:
    point: Point


@dataclass(frozen=True)
class LineTo:
    point: Point


@dataclass(frozen=True)
class CubicTo:
    control1: Point
    control2: Point
    point: Point


@dataclass(frozen=True)
class ClosePath:
    pass


PathCommand = Union[MoveTo, LineTo, CubicTo, ClosePath]


@dataclass(frozen=True)
class ChartPath:
    """An immutable sequence of path commands starting with a MoveTo."""

    commands: Tuple[PathCommand, ...] = ()

    @property
    def start(self) -> Optional[Point]:
        if not self.commands:
            return None
        first = self.commands[0]
        return None if isinstance(first, ClosePath) else first.point

    @property
    def end(self) -> Optional[Point]:
        """Current point after the last command (ClosePath returns to start)."""
        current: Optional[Point] = None
        subpath_start: Optional[Point] = None
        for command in self.commands:
            if isinstance(command, ClosePath):
                current = subpath_start
            else:
                current = command.point
                if isinstance(command, MoveTo):
                    subpath_start = current
        return current

    @property
    def is_closed(self) -> bool:
        return bool(self.commands) and isinstance(self.commands[-1], ClosePath)

    def points(self) -> Tuple[Point, ...]:
        """On-curve points in drawing order (control points excluded)."""
        return tuple(
            c.point for c in self.commands if not isinstance(c, ClosePath)
        )

    def extend(self, other: "ChartPath") -> "ChartPath":
        """Continue this path with ``other``, dropping its leading MoveTo."""
        tail = other.commands
        if tail and isinstance(tail[0], MoveTo):
            tail = tail[1:]
        return ChartPath(self.commands + tail)

    def __len__(self) -> int:
        return len(self.commands)


# ----------------------------------------------------------------------------
# Drawing primitives
# ----------------------------------------------------------------------------


class ChartLayer(str, Enum):
    """Where the host composes a primitive.

    DATA primitives scroll with the content; GRID primitives stay pinned to
    the viewport. Both are offset vertically by ``ChartStyle.top_space``.
    """

    DATA = "data"
    GRID = "grid"


@dataclass(frozen=True)
class LinePrimitive:
    path: ChartPath
    color: Color
    width: float
    shadow: Optional[LineShadow] = None
    layer: ChartLayer = ChartLayer.DATA


@dataclass(frozen=True)
class FillPrimitive:
    """Closed mask path clipping a vertical gradient from ``top`` to ``bottom``."""

    path: ChartPath
    gradient_colors: Tuple[Color, Color]
    top: float
    bottom: float
    layer: ChartLayer = ChartLayer.DATA


@dataclass(frozen=True)
class DotPrimitive:
    center: Point
    outer_diameter: float
    inner_diameter: float
    color: Color
    inner_color: Color
    layer: ChartLayer = ChartLayer.DATA


@dataclass(frozen=True)
class GridLinePrimitive:
    start: Point
    end: Point
    color: Color
    width: float
    dash_pattern: Optional[Tuple[float, ...]] = None  # None for a solid line
    layer: ChartLayer = ChartLayer.DATA

    @property
    def is_dashed(self) -> bool:
        return bool(self.dash_pattern)


@dataclass(frozen=True)
class TextPrimitive:
    """Text anchored at its top-left corner."""

    position: Point
    text: str
    font_size: float
    color: Color
    layer: ChartLayer = ChartLayer.DATA


@dataclass(frozen=True)
class RenderResult:
    """Everything one render pass produced. Never mutated after creation."""

    region: DrawingRegion
    points: Tuple[Point, ...] = ()
    line: Optional[LinePrimitive] = None
    fill: Optional[FillPrimitive] = None
    dots: Tuple[DotPrimitive, ...] = ()
    vertical_grid: Tuple[GridLinePrimitive, ...] = ()
    horizontal_grid: Tuple[GridLinePrimitive, ...] = ()
    grid_labels: Tuple[TextPrimitive, ...] = ()
    value_labels: Tuple[TextPrimitive, ...] = ()
    data_width: float = 0.0
    content_width: float = 0.0
    values: Tuple[int, ...] = ()

    @classmethod
    def empty(cls, region: DrawingRegion, content_width: float = 0.0) -> "RenderResult":
        return cls(region=region, content_width=content_width)

    @property
    def is_empty(self) -> bool:
        return not self.points

    def primitives(self) -> Iterator[Any]:
        """All primitives in paint order."""
        if self.fill is not None:
            yield self.fill
        yield from self.horizontal_grid
        yield from self.grid_labels
        yield from self.vertical_grid
        if self.line is not None:
            yield self.line
        yield from self.dots
        yield from self.value_labels

    def layer_primitives(self, layer: ChartLayer) -> Tuple[Any, ...]:
        return tuple(p for p in self.primitives() if p.layer is layer)
